"""Lanternfish: count a population of fish that spawn on a timer."""

from aocsolve.parsing import split

_RESET = 6
_NEWBORN = 8


def parse(text):
    """Return the comma-separated fish timers as ints."""
    return [int(token) for token in split(text, ",")]


def simulate(timers, days=80, max_fish_life=8):
    """Number of fish after ``days`` days."""
    counts = dict.fromkeys(range(max_fish_life + 1), 0)
    for timer in timers:
        counts[timer] = counts.get(timer, 0) + 1

    for _ in range(days):
        spawning = counts.get(0, 0)
        for timer in range(1, _NEWBORN + 1):
            counts[timer - 1] = counts.get(timer, 0)
        counts[_NEWBORN] = spawning
        counts[_RESET] = counts.get(_RESET, 0) + spawning

    return sum(counts.values())


def part1(text):
    """Fish after 80 days."""
    return simulate(parse(text), 80)


def part2(text):
    """Fish after 256 days."""
    return simulate(parse(text), 256)