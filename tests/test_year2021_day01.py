import pytest

from aocsolve.year2021_day01 import parse_depths, part1, part2

EXAMPLE = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


def test_parse_depths_reads_every_number():
    depths = parse_depths(EXAMPLE)
    assert depths[0] == 199
    assert depths[-1] == 263
    assert len(depths) == len(EXAMPLE.split())


def test_parse_depths_rejects_garbage():
    with pytest.raises(ValueError):
        parse_depths("12\nabc\n")


def test_example_part1():
    assert part1(EXAMPLE) == 7


def test_example_part2():
    assert part2(EXAMPLE) == 5


@pytest.mark.parametrize("length", [4, 5, 10])
def test_strictly_increasing_counts_every_step(length):
    text = "\n".join(str(n * 3) for n in range(length))
    assert part1(text) == length - 1
    assert part2(text) == length - 3


def test_strictly_decreasing_never_increases():
    text = "\n".join(str(n) for n in range(20, 0, -1))
    assert part1(text) == part2(text) == 0


def test_short_input_has_no_windows():
    assert part2("1 2 3") == part2("")
    assert part1("5") == part1("")