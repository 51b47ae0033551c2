"""Treetop tree house: visible trees and scenic scores in a height grid."""

from aocsolve.parsing import digits, split

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_grid(text):
    """Return the tree heights as a rectangular list of rows."""
    grid = [digits(line) for line in split(text, "\n")]
    if not grid:
        raise ValueError("grid is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows differ in length")
    return grid


def _inside(grid, row, col):
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def _line_of_sight(grid, row, col, d_row, d_col):
    r, c = row + d_row, col + d_col
    while _inside(grid, r, c):
        yield grid[r][c]
        r, c = r + d_row, c + d_col


def visible(grid, row, col):
    """True if the tree can be seen from outside the grid in some direction."""
    height = grid[row][col]
    return any(
        all(h < height for h in _line_of_sight(grid, row, col, d_row, d_col))
        for d_row, d_col in _DIRECTIONS
    )


def count_visible(grid):
    """Number of trees visible from outside the grid."""
    return sum(
        visible(grid, r, c) for r, row in enumerate(grid) for c in range(len(row))
    )


def scenic_score(grid, row, col):
    """Product of the viewing distances in the four directions."""
    height = grid[row][col]
    score = 1
    for d_row, d_col in _DIRECTIONS:
        distance = 0
        for h in _line_of_sight(grid, row, col, d_row, d_col):
            distance += 1
            if h >= height:
                break
        score *= distance
    return score


def max_score(grid):
    """Highest scenic score of any tree."""
    return max(
        (scenic_score(grid, r, c) for r, row in enumerate(grid) for c in range(len(row))),
        default=0,
    )


def part1(text):
    """Trees visible from outside the grid."""
    return count_visible(parse_grid(text))


def part2(text):
    """Highest scenic score."""
    return max_score(parse_grid(text))