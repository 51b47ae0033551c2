"""Navigation subsystem syntax checking: corrupted and incomplete chunks."""

from statistics import median_low

from aocsolve.parsing import split

_CLOSERS = {")": "(", "]": "[", "}": "{", ">": "<"}
_ERROR_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {"(": 1, "[": 2, "{": 3, "<": 4}


def _check(line):
    """Return (first illegal closer or None, stack of still-open chunks)."""
    stack = []
    for ch in line:
        if ch in _COMPLETION_SCORES:
            stack.append(ch)
        elif ch in _CLOSERS:
            if stack and stack[-1] == _CLOSERS[ch]:
                stack.pop()
            else:
                return ch, stack
    return None, stack


def syntax_error_score(line):
    """Score of the first illegal closing character, or 0 if there is none."""
    illegal, _ = _check(line)
    return 0 if illegal is None else _ERROR_SCORES[illegal]


def completion_score(line):
    """Score of the characters that close ``line``; None if it is corrupted."""
    illegal, stack = _check(line)
    if illegal is not None:
        return None
    total = 0
    for opener in reversed(stack):
        total = total * 5 + _COMPLETION_SCORES[opener]
    return total


def part1(text):
    """Total syntax error score of the corrupted lines."""
    return sum(syntax_error_score(line) for line in split(text, "\n"))


def part2(text):
    """Middle completion score of the lines that are not corrupted."""
    scores = [s for s in map(completion_score, split(text, "\n")) if s is not None]
    if not scores:
        raise ValueError("no line can be completed")
    return median_low(scores) if len(scores) % 2 else sorted(scores)[len(scores) // 2]