"""Transparent origami: fold a sheet of dots along lines."""

from aocsolve.parsing import split, split_pair


def parse(text):
    """Return the dot positions as (x, y) and the folds as (axis, line)."""
    sections = split(text, "\n\n")
    if len(sections) != 2:
        raise ValueError("expected a block of dots and a block of folds")
    dot_block, fold_block = sections

    points = [
        tuple(int(n) for n in split_pair(line, ",")) for line in split(dot_block, "\n")
    ]

    folds = []
    for line in split(fold_block, "\n"):
        pieces = split(line, "fold along ")
        if len(pieces) != 1:
            raise ValueError(f"malformed fold: {line!r}")
        fields = split(pieces[0], "=")
        if len(fields) != 2 or len(fields[0]) != 1:
            raise ValueError(f"malformed fold: {line!r}")
        folds.append((fields[0], int(fields[1])))

    return points, folds


def _fold_rows(rows, line):
    if line < len(rows) // 2:
        raise ValueError(f"fold at {line} leaves the larger part outside the paper")
    width = len(rows[0]) if rows else 0
    kept = [list(row) for row in rows[:line]]
    kept.extend([False] * width for _ in range(line - len(kept)))
    for y in range(line + 1, len(rows)):
        target = 2 * line - y
        kept[target] = [a or b for a, b in zip(kept[target], rows[y])]
    return kept


def _transpose(grid):
    return [list(column) for column in zip(*grid)]


def fold_paper(points, folds, num_folds=1):
    """Apply the first ``num_folds`` folds (all of them if 0) and return the grid.

    The grid is a list of rows of booleans, ``grid[y][x]`` true for a dot.
    """
    if not points:
        raise ValueError("there are no dots on the paper")
    width = max(x for x, _ in points) + 1
    height = max(y for _, y in points) + 1
    grid = [[False] * width for _ in range(height)]
    for x, y in points:
        grid[y][x] = True

    count = num_folds or len(folds)
    if count > len(folds):
        raise ValueError(f"asked for {count} folds but only {len(folds)} are given")

    for axis, line in folds[:count]:
        if axis == "y":
            grid = _fold_rows(grid, line)
        elif axis == "x":
            if not grid or not grid[0]:
                raise ValueError("cannot fold an empty sheet")
            grid = _transpose(_fold_rows(_transpose(grid), line))
        else:
            raise ValueError(f"unknown fold axis: {axis!r}")
    return grid


def render(grid):
    """Draw the grid with '#' for dots and '.' for empty spots."""
    return "\n".join("".join("#" if dot else "." for dot in row) for row in grid)


def part1(text):
    """Number of dots visible after the first fold."""
    points, folds = parse(text)
    return sum(map(sum, fold_paper(points, folds, 1)))


def part2(text):
    """The sheet after all folds, drawn as text."""
    points, folds = parse(text)
    return render(fold_paper(points, folds, 0))