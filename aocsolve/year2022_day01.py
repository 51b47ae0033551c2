"""Calorie counting: which elves carry the most food."""

from aocsolve.parsing import split


def calories(text):
    """Total calories carried by each elf, in input order."""
    return [
        sum(int(line) for line in split(group, "\n")) for group in split(text, "\n\n")
    ]


def part1(text):
    """Calories carried by the best-stocked elf."""
    totals = calories(text)
    if not totals:
        raise ValueError("no elves in the input")
    return max(totals)


def part2(text):
    """Calories carried by the three best-stocked elves together."""
    totals = calories(text)
    if len(totals) < 3:
        raise ValueError(f"need at least three elves, found {len(totals)}")
    return sum(sorted(totals, reverse=True)[:3])