"""The treachery of whales: align crab submarines using the least fuel."""

from aocsolve.parsing import split


def parse(text):
    """Return the comma-separated crab positions as ints."""
    return [int(token) for token in split(text, ",")]


def _cost(distance, increasing_cost):
    if increasing_cost:
        return distance * (distance + 1) // 2
    return distance


def min_fuel(crabs, increasing_cost=False):
    """Least fuel needed to move every crab to one position.

    Positions from 0 up to the furthest crab are tried. Each step costs one
    unit, or with ``increasing_cost`` each further step costs one more.
    """
    if not crabs:
        raise ValueError("there are no crabs")
    return min(
        sum(_cost(abs(crab - position), increasing_cost) for crab in crabs)
        for position in range(max(crabs) + 1)
    )


def part1(text):
    """Least fuel at a constant cost per step."""
    return min_fuel(parse(text), False)


def part2(text):
    """Least fuel when each step costs more than the last."""
    return min_fuel(parse(text), True)