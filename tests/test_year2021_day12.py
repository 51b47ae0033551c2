import pytest

from aocsolve.year2021_day12 import count_paths, parse_edges, part1, part2

SMALL = "start-A\nstart-b\nA-c\nA-b\nb-d\nA-end\nb-end\n"

LARGER = (
    "dc-end\nHN-start\nstart-kj\ndc-start\ndc-HN\nLN-dc\n"
    "HN-end\nkj-sa\nkj-HN\nkj-dc\n"
)


def test_parse_edges_is_symmetric():
    edges = parse_edges(SMALL)
    for cave, neighbours in edges.items():
        for other in neighbours:
            assert cave in edges[other]
    assert edges["start"] == {"A", "b"}


def test_parse_edges_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_edges("a-b-c\n")


def test_example_part1():
    assert part1(SMALL) == 10


def test_example_part2():
    assert part2(SMALL) == 36


def test_count_paths_matches_parts():
    edges = parse_edges(LARGER)
    assert count_paths(edges, False) == part1(LARGER)
    assert count_paths(edges, True) == part2(LARGER)


def test_second_visit_never_loses_paths():
    assert part2(LARGER) > part1(LARGER)
    assert part2(SMALL) > part1(SMALL)


def test_direct_route_is_the_only_path():
    assert part1("start-end\n") == part2("start-end\n") == 1


def test_missing_start_gives_no_paths():
    assert count_paths(parse_edges("a-end\n")) == count_paths({})