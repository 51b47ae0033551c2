import string

import pytest

from aocsolve.year2022_day03 import part1, part2, priority

EXAMPLE = (
    "vJrwpWtwJgWrhcsFMMfFFhFp\n"
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
    "PmmdzqPrVvPwwTWBwg\n"
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
    "ttgJtRGJQctTZtZT\n"
    "CrZsJsPPZsGzwwsLwLmpwMDw\n"
)


def test_priorities_are_consecutive_from_one():
    letters = string.ascii_lowercase + string.ascii_uppercase
    assert [priority(ch) for ch in letters] == list(range(1, len(letters) + 1))


def test_example_part1():
    assert part1(EXAMPLE) == 157


def test_example_part2():
    assert part2(EXAMPLE) == 70


def test_single_sack_scores_its_shared_item():
    assert part1("abca\n") == priority("a")
    assert part1("xYzY\n") == priority("Y")


def test_odd_sack_is_rejected():
    with pytest.raises(ValueError):
        part1("abc\n")


def test_sack_without_shared_item_is_rejected():
    with pytest.raises(ValueError):
        part1("abcd\n")


def test_sack_with_two_shared_items_is_rejected():
    with pytest.raises(ValueError):
        part1("abab\n")


def test_group_badge():
    assert part2("aXb\ncXd\neXf\n") == priority("X")


def test_incomplete_group_is_rejected():
    with pytest.raises(ValueError):
        part2("ab\ncd\n")