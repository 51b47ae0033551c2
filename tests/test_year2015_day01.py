import pytest

from aocsolve.year2015_day01 import deliver, part1, part2


def test_all_up_reaches_number_of_moves():
    text = "(" * 7
    assert part1(text) == len(text)


def test_all_down_goes_below_ground():
    text = ")" * 4
    assert part1(text) == -len(text)


@pytest.mark.parametrize("left, right", [("(())", "()()"), ("(((", "))((((("), ("())", "))(")])
def test_floor_is_additive_over_concatenation(left, right):
    assert part1(left + right) == part1(left) + part1(right)


def test_balanced_moves_end_where_they_started():
    assert part1("(())") == part1("()()") == part1("")


def test_trailing_newline_is_ignored():
    assert part1("(()(\n") == part1("(()(")


def test_first_basement_move():
    assert part2(")") == 1


def test_basement_position_after_balanced_prefix():
    text = "()())"
    assert part2(text) == len(text)


def test_target_never_reached_returns_final_floor():
    text = "(("
    assert deliver(text, -1) == len(text)


def test_target_zero_means_no_target():
    assert deliver("(()", 0) == part1("(()")


def test_unexpected_character_raises():
    with pytest.raises(ValueError):
        deliver("(x)")