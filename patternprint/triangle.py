"""Centred, joined and hollow triangle text patterns."""

from collections.abc import Iterable


def _join_rows(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def _centred_row(width: int, mid: int, swing: int, fill: str) -> str:
    return "".join(fill if abs(j - mid) <= swing else " " for j in range(width))


def triangle(height: int) -> str:
    """Return an upright centred triangle of ``*``, padded with spaces."""
    width = 2 * height + 2
    return _join_rows(_centred_row(width, height, i, "*") for i in range(height))


def inverted_triangle(height: int) -> str:
    """Return an upside-down centred triangle of ``*``, padded with spaces."""
    width = 2 * height + 2
    return _join_rows(
        _centred_row(width, height, height - 1 - i, "*") for i in range(height)
    )


def two_joint_triangles(height: int) -> str:
    """Return a diamond of ``x``: a triangle joined to its mirror image."""
    width = 2 * height + 1
    swings = [*range(height), *range(height - 1, -1, -1)]
    return _join_rows(_centred_row(width, height, s, "x") for s in swings)


def rotated_triangle(height: int) -> str:
    """Return a triangle lying on its side, starting with an empty row."""
    return _join_rows(
        "*" * (i if i <= height else 2 * height - i) for i in range(2 * height)
    )


def triangle_with_letters(height: int) -> str:
    """Return a centred triangle whose rows read A, ABA, ABCBA and so on."""
    width = 2 * height + 1

    def row(swing: int) -> str:
        return "".join(
            chr(ord("A") + swing - abs(j - height)) if abs(j - height) <= swing else " "
            for j in range(width)
        )

    return _join_rows(row(i) for i in range(height))


def hollow_joint_triangles(height: int) -> str:
    """Return two ``*`` triangles meeting at their bases with a hollow diamond."""

    def row(i: int) -> str:
        outer = abs(height - i)
        gap = 2 * i if i < height else 2 * i - 4 * outer
        return "*" * outer + " " * gap + "*" * (2 * height - outer - gap)

    return _join_rows(row(i) for i in range(2 * height + 1) if i != height)


def hollow_joint_triangles_at_tip(height: int) -> str:
    """Return two ``*`` triangles meeting at their tips, the gap filled with ``a``."""
    rows = []
    gap, stars = 2 * height - 2, 2
    for i in range(1, 2 * height):
        side = "*" * (stars // 2)
        rows.append(side + "a" * gap + side)
        if i < height:
            gap, stars = gap - 2, stars + 2
        else:
            gap, stars = gap + 2, stars - 2
    return _join_rows(rows)