"""Dumbo octopus: energy levels that build up and flash across a grid."""

from aocsolve.parsing import digits, split

_AROUND = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc)


def parse_grid(text):
    """Return the energy levels as a list of rows of digits."""
    return [digits(line) for line in split(text, "\n")]


def _neighbours(grid, row, col):
    for d_row, d_col in _AROUND:
        r, c = row + d_row, col + d_col
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def _step(energy):
    """Advance ``energy`` in place by one step; return the number of flashes."""
    for row in energy:
        row[:] = [level + 1 for level in row]

    flashed = set()
    pending = [(r, c) for r, row in enumerate(energy) for c, level in enumerate(row) if level > 9]
    while pending:
        cell = pending.pop()
        if cell in flashed:
            continue
        flashed.add(cell)
        r, c = cell
        energy[r][c] = 0
        for nr, nc in _neighbours(energy, r, c):
            if (nr, nc) in flashed:
                continue
            energy[nr][nc] += 1
            if energy[nr][nc] > 9:
                pending.append((nr, nc))
    return len(flashed)


def simulate(grid, steps=100, stop_when_synchronized=False):
    """Total flashes over ``steps`` steps.

    With ``stop_when_synchronized`` the number of the first step after which
    every octopus has flashed is returned instead, if that happens in time.
    The given grid is left unchanged.
    """
    energy = [list(row) for row in grid]
    total = 0
    for step in range(1, steps + 1):
        total += _step(energy)
        if stop_when_synchronized and all(level == 0 for row in energy for level in row):
            return step
    return total


def part1(text, steps=100):
    """Total flashes after ``steps`` steps."""
    return simulate(parse_grid(text), steps)


def part2(text):
    """First step on which every octopus flashes at once."""
    return simulate(parse_grid(text), 100000, True)