"""Rucksack reorganisation: priorities of misplaced and badge items."""

from aocsolve.parsing import split


def priority(item):
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    code = ord(item)
    if code > ord("Z"):
        return 1 + code - ord("a")
    return 27 + code - ord("A")


def _common_priority(*groups):
    common = set(groups[0]).intersection(*groups[1:])
    if len(common) != 1:
        raise ValueError(f"expected exactly one shared item, found {sorted(common)}")
    return priority(common.pop())


def _sacks(text):
    return split(text, "\n")


def part1(text):
    """Sum of priorities of the item found in both halves of each rucksack."""
    total = 0
    for sack in _sacks(text):
        if len(sack) % 2:
            raise ValueError(f"rucksack has an odd number of items: {sack!r}")
        half = len(sack) // 2
        total += _common_priority(sack[:half], sack[half:])
    return total


def part2(text):
    """Sum of priorities of the badge shared by each group of three."""
    sacks = _sacks(text)
    if len(sacks) % 3:
        raise ValueError("number of rucksacks is not a multiple of three")
    groups = zip(*[iter(sacks)] * 3)
    return sum(_common_priority(*group) for group in groups)