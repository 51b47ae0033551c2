"""Dive: follow submarine steering commands."""


def parse_commands(text):
    """Return the commands as (direction, amount) pairs."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every command needs a direction and an amount")
    return [(direction, int(amount)) for direction, amount in zip(tokens[::2], tokens[1::2])]


def part1(text):
    """Depth times horizontal position, with up and down changing depth."""
    depth = horizontal = 0
    for direction, amount in parse_commands(text):
        if direction == "forward":
            horizontal += amount
        elif direction == "down":
            depth += amount
        elif direction == "up":
            depth -= amount
    return depth * horizontal


def part2(text):
    """Depth times horizontal position, with up and down changing the aim."""
    depth = horizontal = aim = 0
    for direction, amount in parse_commands(text):
        if direction == "forward":
            horizontal += amount
            depth += amount * aim
        elif direction == "down":
            aim += amount
        elif direction == "up":
            aim -= amount
    return depth * horizontal