"""Rock, paper, scissors strategy guide scoring."""

from aocsolve.parsing import split

_SHAPE_SCORES = {"X": 1, "Y": 2, "Z": 3}
_WINS = {("X", "C"), ("Y", "A"), ("Z", "B")}
_TO_LOSE = {"A": "Z", "B": "X", "C": "Y"}
_TO_WIN = {"A": "Y", "B": "Z", "C": "X"}
_OFFSET = ord("X") - ord("A")


def parse(text):
    """Return the rounds as (opponent, second column) pairs."""
    turns = []
    for line in split(text, "\n"):
        fields = split(line)
        if len(fields) != 2 or any(len(field) != 1 for field in fields):
            raise ValueError(f"malformed round: {line!r}")
        opponent, mine = fields
        turns.append((opponent, mine))
    return turns


def score(turns):
    """Total score when the second column is the shape played."""
    total = 0
    for opponent, mine in turns:
        if mine not in _SHAPE_SCORES:
            raise ValueError(f"unknown shape: {mine!r}")
        total += _SHAPE_SCORES[mine]
        if ord(mine) - _OFFSET == ord(opponent):
            total += 3
        elif (mine, opponent) in _WINS:
            total += 6
    return total


def choose_moves(turns):
    """Turn wanted outcomes (X lose, Y draw, Z win) into shapes to play."""
    chosen = []
    for opponent, outcome in turns:
        if outcome == "Y":
            move = chr(ord(opponent) + _OFFSET)
        elif outcome == "X":
            move = _TO_LOSE.get(opponent, outcome)
        elif outcome == "Z":
            move = _TO_WIN.get(opponent, outcome)
        else:
            move = outcome
        chosen.append((opponent, move))
    return chosen


def part1(text):
    """Score following the guide as shapes."""
    return score(parse(text))


def part2(text):
    """Score following the guide as outcomes."""
    return score(choose_moves(parse(text)))