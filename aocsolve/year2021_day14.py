"""Polymer growth by pair insertion, tracked as pair counts."""

from collections import Counter

from aocsolve.parsing import split


def parse(text):
    """Return the polymer template and the insertion rules."""
    sections = split(text, "\n\n")
    if len(sections) != 2:
        raise ValueError("expected a template and a block of rules")
    template, rule_block = sections

    rules = {}
    for line in split(rule_block, "\n"):
        fields = split(line, " -> ")
        if len(fields) != 2 or len(fields[1]) != 1:
            raise ValueError(f"malformed rule: {line!r}")
        pair, insert = fields
        rules[pair] = insert
    return template, rules


def polymerize(template, rules, steps=10):
    """Apply the rules ``steps`` times and return the resulting pair counts.

    Pairs that have no rule do not survive a step.
    """
    pairs = Counter(a + b for a, b in zip(template, template[1:]))
    for _ in range(steps):
        grown = Counter()
        for pair, count in pairs.items():
            insert = rules.get(pair)
            if insert is None:
                continue
            grown[pair[0] + insert] += count
            grown[insert + pair[1]] += count
        pairs = grown
    return dict(pairs)


def _spread(pairs):
    if not pairs:
        raise ValueError("polymer has no pairs left")

    histogram = Counter()
    for pair, count in pairs.items():
        histogram[pair[1]] += count
    last = max(pairs)
    histogram[last[0]] += pairs[last]

    return max(histogram.values()) - min(histogram.values())


def part1(text, steps=10):
    """Most common element count minus least common after ``steps`` steps."""
    template, rules = parse(text)
    return _spread(polymerize(template, rules, steps))


def part2(text):
    """The same measure after forty steps."""
    return part1(text, 40)