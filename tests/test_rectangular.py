import pytest

from patternprint.rectangular import (
    hollow_rectangle,
    normal_rectangle,
    square_with_layer_numbers,
)


@pytest.mark.parametrize("height,width", [(1, 1), (4, 4), (3, 7), (5, 2)])
def test_normal_rectangle_rows_are_full(height, width):
    lines = normal_rectangle(height, width).splitlines()
    assert len(lines) == height
    assert all(line == "*" * width for line in lines)


def test_normal_rectangle_empty_when_no_height():
    assert normal_rectangle(0, 5) == ""


def test_normal_rectangle_ends_with_newline():
    assert normal_rectangle(3, 3).endswith("\n")


@pytest.mark.parametrize("height,width", [(4, 4), (5, 3), (6, 8)])
def test_hollow_rectangle_outline(height, width):
    lines = hollow_rectangle(height, width).splitlines()
    assert len(lines) == height
    assert lines[0] == "*" * width
    assert lines[-1] == "*" * width
    for inner in lines[1:-1]:
        assert inner[0] == "*" and inner[-1] == "*"
        assert inner[1:-1] == " " * (width - 2)


@pytest.mark.parametrize("width", [1, 2, 6])
def test_hollow_rectangle_of_two_rows_is_solid(width):
    assert hollow_rectangle(2, width) == normal_rectangle(2, width)


def test_square_with_layer_numbers_two_layers():
    assert square_with_layer_numbers(2) == "2 2 2 \n2 1 2 \n2 2 2 \n"


def test_square_with_layer_numbers_single_layer():
    assert square_with_layer_numbers(1) == "1 \n"


@pytest.mark.parametrize("layers", [2, 3, 4, 5])
def test_square_with_layer_numbers_shape(layers):
    grid = [
        [int(cell) for cell in line.split()]
        for line in square_with_layer_numbers(layers).splitlines()
    ]
    side = 2 * layers - 1
    assert len(grid) == side
    assert all(len(row) == side for row in grid)
    assert grid == grid[::-1]
    assert all(row == row[::-1] for row in grid)
    assert grid[layers - 1][layers - 1] == 1
    assert grid[0] == [layers] * side
    assert [row[0] for row in grid] == [layers] * side


@pytest.mark.parametrize("layers", [0, -3])
def test_square_with_layer_numbers_empty(layers):
    assert square_with_layer_numbers(layers) == ""