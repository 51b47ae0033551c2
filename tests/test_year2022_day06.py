import pytest

from aocsolve.year2022_day06 import find_unique, part1, part2

EXAMPLE = "mjqjpqmgbljsphjdztnvjfqwrcgsmlb\n"


def test_example_part1():
    assert part1(EXAMPLE) == 7


def test_second_example_part1():
    assert part1("bvwbjplbgvbhsrlpgdmjqwftvncz\n") == 5


@pytest.mark.parametrize("count", [4, 14])
def test_window_before_result_is_distinct(count):
    end = find_unique(EXAMPLE, count)
    assert len(set(EXAMPLE[end - count : end])) == count


@pytest.mark.parametrize("count", [4, 14])
def test_no_earlier_window_is_distinct(count):
    end = find_unique(EXAMPLE, count)
    assert all(len(set(EXAMPLE[i - count : i])) < count for i in range(count, end))


def test_no_marker_returns_minus_one():
    assert find_unique("aaaaaaaa", 4) == -1


def test_final_window_is_not_checked():
    assert find_unique("abcd", 4) == -1


def test_window_longer_than_data_raises():
    with pytest.raises(ValueError):
        find_unique("abc", 4)