"""Rectangular and square text patterns."""

from collections.abc import Iterable


def _join_rows(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def normal_rectangle(height: int, width: int) -> str:
    """Return a solid rectangle of ``*`` characters."""
    return _join_rows("*" * width for _ in range(height))


def hollow_rectangle(height: int, width: int) -> str:
    """Return a rectangle outline of ``*`` characters filled with spaces."""

    def row(i: int) -> str:
        return "".join(
            "*" if i in (0, height - 1) or j in (0, width - 1) else " "
            for j in range(width)
        )

    return _join_rows(row(i) for i in range(height))


def square_with_layer_numbers(layers: int) -> str:
    """Return a square of concentric numbered layers.

    The outermost layer carries the number ``layers`` and the centre carries 1.
    Every number is followed by a space.
    """
    side = 2 * layers - 1
    centre = layers - 1

    def row(i: int) -> str:
        return "".join(
            f"{max(abs(i - centre), abs(j - centre)) + 1} " for j in range(side)
        )

    return _join_rows(row(i) for i in range(side))