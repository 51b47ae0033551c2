import pytest

from aocsolve.year2021_day10 import completion_score, part1, part2, syntax_error_score

EXAMPLE = """[({(<(())[]>[[{[]{<()<>>
[(()[<>])]({[<{<<[]>>(
{([(<{}[<>[]}>{[]{[(<()>
(((({<>}<{<{<>}{[]{[]{}
[[<[([]))<([[{}[[()]]]
[{[{({}]{}}([{[{{{}}([]
{<[[]]>}<{[{[{[]{()[[[]
[<(<(<(<{}))><([]{[]{()
<{([([[(<>()){}]>(<<{{
<{([{{}}[<[[[<>{}]]]>[]]
"""


@pytest.mark.parametrize(
    "line, expected",
    [("(]", 57), ("{()()()>", 25137), (")", 3), ("<([]}", 1197)],
)
def test_syntax_error_score_of_corrupted_lines(line, expected):
    assert syntax_error_score(line) == expected


@pytest.mark.parametrize("line", ["", "()", "[<>({}){}[([])<>]]", "((("])
def test_syntax_error_score_of_legal_lines_is_zero(line):
    assert syntax_error_score(line) == 0


def test_completion_score_is_none_for_corrupted_line():
    assert completion_score("(]") is None


def test_completion_score_of_complete_line():
    assert completion_score("()[]") == 0


@pytest.mark.parametrize("opener, expected", [("(", 1), ("[", 2), ("{", 3), ("<", 4)])
def test_completion_score_single_opener(opener, expected):
    assert completion_score(opener) == expected


def test_completion_score_outer_opener_counts_last():
    inner = "{[<"
    assert completion_score("(" + inner) == completion_score(inner) * 5 + completion_score("(")


def test_part1_is_sum_of_line_scores():
    lines = ["(]", "{()()()>", "(((", "<([]}"]
    assert part1("\n".join(lines)) == sum(syntax_error_score(line) for line in lines)


def test_part1_example():
    assert part1(EXAMPLE) == 26397


def test_part2_example():
    assert part2(EXAMPLE) == 288957


def test_part2_ignores_corrupted_lines():
    assert part2("(]\n[") == completion_score("[")


def test_part2_without_incomplete_lines_raises():
    with pytest.raises(ValueError):
        part2("(]\n{>")