"""Camp cleanup: count section-assignment pairs that overlap."""

from aocsolve.parsing import split, split_pair


def _range(text):
    low, high = (int(n) for n in split_pair(text, "-"))
    if low > high:
        raise ValueError(f"range runs backwards: {text!r}")
    return low, high


def parse(text):
    """Return the assignment pairs as ((low, high), (low, high)) tuples."""
    pairs = []
    for line in split(text, "\n"):
        left, right = split_pair(line, ",")
        pairs.append((_range(left), _range(right)))
    return pairs


def count_overlaps(pairs, full_overlap):
    """Count pairs where one range contains the other, or where they meet at all."""
    count = 0
    for (l_lo, l_hi), (r_lo, r_hi) in pairs:
        if l_lo > l_hi or r_lo > r_hi:
            raise ValueError("range runs backwards")
        if full_overlap:
            hit = (l_lo <= r_lo and r_hi <= l_hi) or (r_lo <= l_lo and l_hi <= r_hi)
        else:
            hit = max(l_lo, r_lo) <= min(l_hi, r_hi)
        count += hit
    return count


def part1(text):
    """Pairs in which one range fully contains the other."""
    return count_overlaps(parse(text), True)


def part2(text):
    """Pairs whose ranges overlap at all."""
    return count_overlaps(parse(text), False)