"""Right-angled triangle text patterns."""

import string
from collections.abc import Iterable
from itertools import count, cycle

_LETTERS = string.ascii_uppercase


def _join_rows(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def _spaced_letters(length: int) -> str:
    return "".join(f"{_LETTERS[j % len(_LETTERS)]} " for j in range(length))


def normal_right_triangle(height: int) -> str:
    """Return a right triangle of ``x`` characters growing one per row."""
    return _join_rows("x" * (i + 1) for i in range(height))


def column_numbered_right_triangle(height: int) -> str:
    """Return a right triangle whose cells hold their column number."""
    return _join_rows(
        "".join(str(j) for j in range(1, i + 2)) for i in range(height)
    )


def row_numbered_right_triangle(height: int) -> str:
    """Return a right triangle whose cells hold their row number."""
    return _join_rows(str(i + 1) * (i + 1) for i in range(height))


def inverted_right_triangle(height: int) -> str:
    """Return a right triangle of ``*`` shrinking one per row."""
    return _join_rows("*" * (height - i) for i in range(height))


def inverted_column_numbered_right_triangle(height: int) -> str:
    """Return a shrinking right triangle whose cells hold their column number."""
    return _join_rows(
        "".join(str(j) for j in range(1, height - i + 1)) for i in range(height)
    )


def binary_right_triangle(height: int) -> str:
    """Return a right triangle of alternating 1 and 0 digits, starting at 1."""
    digits = cycle("10")
    return _join_rows(
        "".join(next(digits) for _ in range(i + 1)) for i in range(height)
    )


def facing_right_triangles(height: int) -> str:
    """Return two numbered right triangles facing each other across a gap."""

    def row(i: int) -> str:
        left = "".join(str(n) for n in range(1, i + 2))
        gap = " " * (2 * height - 2 * (i + 1))
        return left + gap + left[::-1]

    return _join_rows(row(i) for i in range(height))


def triangle_with_numbered_elements(height: int) -> str:
    """Return a right triangle numbered consecutively from 1, space separated."""
    numbers = count(1)
    return _join_rows(
        "".join(f"{next(numbers)} " for _ in range(i + 1)) for i in range(height)
    )


def triangle_with_letter_elements(height: int) -> str:
    """Return a right triangle whose rows spell the alphabet from ``A``."""
    return _join_rows(_spaced_letters(i + 1) for i in range(height))


def inverted_triangle_with_letter_elements(height: int) -> str:
    """Return a shrinking right triangle whose rows spell the alphabet."""
    return _join_rows(_spaced_letters(height - i) for i in range(height))


def triangle_with_row_letter_elements(height: int) -> str:
    """Return a right triangle whose rows repeat the row's letter."""
    return _join_rows(chr(ord("A") + i) * (i + 1) for i in range(height))


def hypotenuse_lettered_right_triangle(height: int) -> str:
    """Return a right triangle whose rows end with the same last letter."""
    last = ord("A") + height - 1

    def row(i: int) -> str:
        return "".join(f"{chr(last - i + j)} " for j in range(i + 1))

    return _join_rows(row(i) for i in range(height))