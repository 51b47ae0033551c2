"""Smoke basin: low points and basins in a height map."""

from math import prod

from aocsolve.parsing import digits, split

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def parse_grid(text):
    """Return the height map as a list of rows of digits."""
    return [digits(line) for line in split(text, "\n")]


def _neighbours(grid, row, col):
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def low_points(grid):
    """Positions (row, col) lower than every adjacent location."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
        if all(height < grid[nr][nc] for nr, nc in _neighbours(grid, r, c))
    ]


def _basin_size(grid, start):
    seen = set()
    pending = [start]
    while pending:
        r, c = pending.pop()
        if (r, c) in seen or grid[r][c] == 9:
            continue
        seen.add((r, c))
        pending.extend(_neighbours(grid, r, c))
    return len(seen)


def basin_sizes(grid):
    """Size of the basin around each low point, in low-point order."""
    return [_basin_size(grid, point) for point in low_points(grid)]


def part1(text):
    """Sum of the risk levels (height plus one) of all low points."""
    grid = parse_grid(text)
    return sum(grid[r][c] + 1 for r, c in low_points(grid))


def part2(text):
    """Product of the sizes of the three largest basins."""
    sizes = sorted(basin_sizes(parse_grid(text)))
    if len(sizes) < 3:
        raise ValueError(f"need at least three basins, found {len(sizes)}")
    return prod(sizes[-3:])