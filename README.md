# patternprint

A small collection of text patterns that can be printed to the console. These
are rectangles, pyramids, right triangles and diamonds, drawn with stars,
digits or letters.

## Installation

```
pip install .
```

## Command line

```
patternprint
```

The program prints a greeting and asks for a pattern code. It then reads the
first non-blank line from standard input. The code can also be passed as an
argument instead:

```
patternprint 8
```

The program reads a leading integer from the code. If no integer can be read,
the code counts as 0. A code from 1 to 22 prints that pattern at size 4, with a
blank line before and after it. A code above 100 prints all 22 patterns in
order. Any other code prints `INVALID INPUT`.

| Code | Pattern                                            |
|------|----------------------------------------------------|
| 1    | Solid rectangle of `*`                             |
| 2    | Hollow rectangle of `*`                            |
| 3    | Square of concentric layer numbers                 |
| 4    | Centred pyramid of `*`                             |
| 5    | Inverted centred pyramid of `*`                    |
| 6    | Diamond of `x` (a pyramid joined to its mirror)    |
| 7    | Triangle lying on its side                         |
| 8    | Lettered pyramid: A, ABA, ABCBA, ...               |
| 9    | Two `*` triangles meeting at their bases, hollow   |
| 10   | Two `*` triangles meeting at their tips, gap of `a`|
| 11   | Right triangle of `x`                              |
| 12   | Right triangle numbered by column                  |
| 13   | Right triangle numbered by row                     |
| 14   | Inverted right triangle of `*`                     |
| 15   | Inverted right triangle numbered by column         |
| 16   | Alternating 1/0 right triangle                     |
| 17   | Two numbered right triangles facing each other     |
| 18   | Consecutively numbered right triangle              |
| 19   | Lettered right triangle                            |
| 20   | Inverted lettered right triangle                   |
| 21   | Right triangle lettered by row                     |
| 22   | Right triangle whose rows end on the same letter   |

## Library use

Each pattern is a function that returns the pattern as a string. The string
has one line per row and a newline after each row:

```python
from patternprint.rectangular import hollow_rectangle
from patternprint.triangle import triangle
from patternprint.right_triangle import binary_right_triangle

print(hollow_rectangle(4, 6), end="")
print(triangle(3), end="")
print(binary_right_triangle(4), end="")
```

`patternprint.cli.render_pattern(choice)` returns the text that the command
prints for one pattern code. `patternprint.cli.PATTERNS` maps each code to
its pattern at size 4.

The modules are:

- `patternprint.rectangular`: `normal_rectangle`, `hollow_rectangle`,
  `square_with_layer_numbers`
- `patternprint.triangle`: `triangle`, `inverted_triangle`,
  `two_joint_triangles`, `rotated_triangle`, `triangle_with_letters`,
  `hollow_joint_triangles`, `hollow_joint_triangles_at_tip`
- `patternprint.right_triangle`: `normal_right_triangle`,
  `column_numbered_right_triangle`, `row_numbered_right_triangle`,
  `inverted_right_triangle`, `inverted_column_numbered_right_triangle`,
  `binary_right_triangle`, `facing_right_triangles`,
  `triangle_with_numbered_elements`, `triangle_with_letter_elements`,
  `inverted_triangle_with_letter_elements`,
  `triangle_with_row_letter_elements`, `hypotenuse_lettered_right_triangle`
- `patternprint.cli`: `main`, `render_pattern`

## Running the tests

```
pip install ".[test]"
pytest
```