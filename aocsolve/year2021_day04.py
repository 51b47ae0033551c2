"""Bingo against a squid: find the first and the last winning board."""

from dataclasses import dataclass

from aocsolve.parsing import split


@dataclass(frozen=True)
class BingoBoard:
    """A square bingo board of numbers."""

    rows: tuple

    @classmethod
    def from_text(cls, text):
        """Build a board from whitespace-separated rows of numbers."""
        return cls(tuple(tuple(int(n) for n in split(line)) for line in split(text, "\n")))

    def check_win(self, moves):
        """Return True if any full row or column has been drawn."""
        marked = set(moves)
        lines = (*self.rows, *zip(*self.rows))
        return any(all(n in marked for n in line) for line in lines)

    def sum_unmarked(self, moves):
        """Sum of the numbers on the board that have not been drawn."""
        marked = set(moves)
        return sum(n for row in self.rows for n in row if n not in marked)

    def __str__(self):
        return "\n".join(" ".join(str(n) for n in row) for row in self.rows)


def parse(text):
    """Return the drawn numbers and the boards."""
    sections = split(text, "\n\n")
    if not sections:
        raise ValueError("input is empty")
    moves = [int(n) for n in split(sections[0], ",")]
    if not moves:
        raise ValueError("no numbers are drawn")
    boards = [BingoBoard.from_text(section) for section in sections[1:]]
    return moves, boards


def part1(text):
    """Score of the first board to win."""
    moves, boards = parse(text)
    for count in range(1, len(moves)):
        drawn = moves[:count]
        for board in boards:
            if board.check_win(drawn):
                return board.sum_unmarked(drawn) * drawn[-1]
    return 0


def part2(text):
    """Score of the last board to win."""
    moves, boards = parse(text)
    count = next(
        (
            n
            for n in range(1, len(moves))
            if all(board.check_win(moves[:n]) for board in boards)
        ),
        max(1, len(moves)),
    )

    before = moves[: count - 1]
    drawn = moves[:count]
    for board in boards:
        if not board.check_win(before):
            return board.sum_unmarked(drawn) * drawn[-1]
    return 0