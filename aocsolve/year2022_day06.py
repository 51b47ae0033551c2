"""Find start-of-packet and start-of-message markers in a datastream."""


def find_unique(data, count):
    """Index just past the first window of ``count`` distinct characters.

    Windows ending at positions ``count`` to ``len(data) - 1`` are checked;
    -1 means none of them is made of distinct characters.
    """
    if count > len(data):
        raise ValueError(f"window of {count} is longer than the data")
    return next(
        (end for end in range(count, len(data)) if len(set(data[end - count : end])) == count),
        -1,
    )


def part1(text):
    """Position of the start-of-packet marker."""
    return find_unique(text, 4)


def part2(text):
    """Position of the start-of-message marker."""
    return find_unique(text, 14)