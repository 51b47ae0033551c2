"""Hydrothermal vent lines: count points covered by two or more lines."""

from collections import Counter

from aocsolve.parsing import split, split_pair


def parse(text):
    """Return the vent lines as ((x1, y1), (x2, y2)) tuples."""
    segments = []
    for line in split(text, "\n"):
        ends = split(line, " -> ")
        if len(ends) != 2:
            raise ValueError(f"malformed line: {line!r}")
        start, end = (tuple(int(n) for n in split_pair(end, ",")) for end in ends)
        segments.append((start, end))
    return segments


def _points(start, end, diagonals):
    (x1, y1), (x2, y2) = start, end
    x_lo, x_hi = sorted((x1, x2))
    y_lo, y_hi = sorted((y1, y2))

    if x1 == x2:
        yield from ((x1, y) for y in range(y_lo, y_hi + 1))
    elif y1 == y2:
        yield from ((x, y1) for x in range(x_lo, x_hi + 1))
    elif diagonals:
        length = min(x_hi - x_lo, y_hi - y_lo) + 1
        if (x1 > x2) == (y1 > y2):
            yield from ((x_lo + i, y_lo + i) for i in range(length))
        else:
            yield from ((x_lo + i, y_hi - i) for i in range(length))


def count_overlaps(segments, diagonals=False):
    """Number of points covered by at least two lines.

    Diagonal lines are only drawn when ``diagonals`` is true.
    """
    coverage = Counter()
    for start, end in segments:
        coverage.update(_points(start, end, diagonals))
    return sum(1 for hits in coverage.values() if hits > 1)


def part1(text):
    """Overlaps counting horizontal and vertical lines only."""
    return count_overlaps(parse(text), diagonals=False)


def part2(text):
    """Overlaps counting diagonal lines as well."""
    return count_overlaps(parse(text), diagonals=True)