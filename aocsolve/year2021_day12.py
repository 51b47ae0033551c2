"""Passage pathing: count routes through a cave system."""

from aocsolve.parsing import split, split_pair


def parse_edges(text):
    """Return an undirected adjacency map from cave name to neighbour set."""
    edges = {}
    for line in split(text, "\n"):
        first, second = split_pair(line, "-")
        edges.setdefault(first, set()).add(second)
        edges.setdefault(second, set()).add(first)
    return edges


def _is_small(name):
    return all(ch.islower() for ch in name)


def count_paths(edges, visit_small_twice=False):
    """Number of paths from ``start`` to ``end``.

    Small (lower-case) caves may be visited once; with ``visit_small_twice``
    a single small cave per path may be visited a second time. ``start`` is
    never re-entered.
    """

    def walk(cave, visited, twice_used):
        if cave == "end":
            return 1
        total = 0
        for nxt in edges.get(cave, ()):
            if nxt == "start":
                continue
            small = _is_small(nxt)
            repeat = small and nxt in visited
            if repeat and (not visit_small_twice or twice_used):
                continue
            total += walk(
                nxt,
                visited | {nxt} if small else visited,
                twice_used or repeat,
            )
        return total

    return walk("start", frozenset({"start"}), False)


def part1(text):
    """Paths visiting each small cave at most once."""
    return count_paths(parse_edges(text), False)


def part2(text):
    """Paths that may visit one small cave twice."""
    return count_paths(parse_edges(text), True)