"""Command-line entry point that prints a chosen pattern."""

import argparse
import re
import sys
from collections.abc import Callable
from functools import partial

from patternprint import rectangular, right_triangle, triangle

_SIZE = 4

PATTERNS: dict[int, Callable[[], str]] = {
    1: partial(rectangular.normal_rectangle, _SIZE, _SIZE),
    2: partial(rectangular.hollow_rectangle, _SIZE, _SIZE),
    3: partial(rectangular.square_with_layer_numbers, _SIZE),
    4: partial(triangle.triangle, _SIZE),
    5: partial(triangle.inverted_triangle, _SIZE),
    6: partial(triangle.two_joint_triangles, _SIZE),
    7: partial(triangle.rotated_triangle, _SIZE),
    8: partial(triangle.triangle_with_letters, _SIZE),
    9: partial(triangle.hollow_joint_triangles, _SIZE),
    10: partial(triangle.hollow_joint_triangles_at_tip, _SIZE),
    11: partial(right_triangle.normal_right_triangle, _SIZE),
    12: partial(right_triangle.column_numbered_right_triangle, _SIZE),
    13: partial(right_triangle.row_numbered_right_triangle, _SIZE),
    14: partial(right_triangle.inverted_right_triangle, _SIZE),
    15: partial(right_triangle.inverted_column_numbered_right_triangle, _SIZE),
    16: partial(right_triangle.binary_right_triangle, _SIZE),
    17: partial(right_triangle.facing_right_triangles, _SIZE),
    18: partial(right_triangle.triangle_with_numbered_elements, _SIZE),
    19: partial(right_triangle.triangle_with_letter_elements, _SIZE),
    20: partial(right_triangle.inverted_triangle_with_letter_elements, _SIZE),
    21: partial(right_triangle.triangle_with_row_letter_elements, _SIZE),
    22: partial(right_triangle.hypotenuse_lettered_right_triangle, _SIZE),
}

SHOW_ALL_ABOVE = 100
INVALID_INPUT = "INVALID INPUT"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def render_pattern(choice: int) -> str:
    """Return the text for pattern ``choice``, framed by blank lines."""
    pattern = PATTERNS.get(choice)
    if pattern is None:
        return INVALID_INPUT
    return f"\n{pattern()}\n"


def _parse_code(text: str) -> int:
    """Read a leading integer from ``text``; anything unreadable is 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _read_code_text() -> str:
    for line in sys.stdin:
        if line.strip():
            return line
    return ""


def main(argv: list[str] | None = None) -> int:
    """Ask for a pattern code and print the matching pattern."""
    parser = argparse.ArgumentParser(
        prog="patternprint", description="Print text patterns by code."
    )
    parser.add_argument(
        "code",
        nargs="?",
        help=f"pattern code 1-{len(PATTERNS)}, or above {SHOW_ALL_ABOVE} for all",
    )
    args = parser.parse_args(argv)

    sys.stdout.write("Welcome to Pattern Printing Program\n")
    sys.stdout.write("Please Enter the pattern code you want to print\n")
    sys.stdout.flush()

    text = args.code if args.code is not None else _read_code_text()
    choice = _parse_code(text)

    if choice > SHOW_ALL_ABOVE:
        output = "".join(render_pattern(code) for code in PATTERNS)
    else:
        output = render_pattern(choice)
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())