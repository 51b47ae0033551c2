import pytest

from aocsolve.parsing import digits, split, split_pair


def test_split():
    assert split("hello world", " ") == ["hello", "world"]


def test_split_default_args():
    assert split("hello world") == split("hello world", " ")


def test_split_to_pair():
    assert split_pair("hello world") == ("hello", "world")


def test_split_skips_repeated_delimiters():
    assert split("  a   b  ") == ["a", "b"]


def test_split_multi_character_delimiter():
    assert split("\n\nfirst\nline\n\nsecond\n", "\n\n") == ["first\nline", "second\n"]


def test_split_arrow_delimiter():
    assert split("CH -> B", " -> ") == ["CH", "B"]


def test_split_empty_text():
    assert split("") == []


def test_split_only_delimiters():
    assert split(",,,", ",") == []


def test_split_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        split("abc", "")


def test_split_pair_custom_delimiter():
    assert split_pair("start-end", "-") == ("start", "end")


def test_split_pair_wrong_count():
    with pytest.raises(ValueError):
        split_pair("one two three")


def test_digits():
    assert digits("123") == [1, 2, 3]


def test_digits_empty():
    assert digits("") == []


def test_digits_rejects_non_digits():
    with pytest.raises(ValueError):
        digits("12a")