"""Sonar sweep: count how often the sea floor depth increases."""


def parse_depths(text):
    """Return the whitespace-separated depth readings as ints."""
    return [int(token) for token in text.split()]


def _count_increases(depths, gap):
    # Comparing sliding-window sums of width ``gap`` reduces to comparing
    # the readings ``gap`` apart, since the shared middle cancels out.
    return sum(later > earlier for earlier, later in zip(depths, depths[gap:]))


def part1(text):
    """Number of readings larger than the one before."""
    return _count_increases(parse_depths(text), 1)


def part2(text):
    """Number of three-reading window sums larger than the window before."""
    return _count_increases(parse_depths(text), 3)