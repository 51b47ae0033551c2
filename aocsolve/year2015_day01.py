"""Not quite Lisp: follow parentheses up and down the floors of a building."""


def deliver(text, target_floor=0):
    """Follow the moves in ``text`` and return the final floor.

    With a non-zero ``target_floor`` the 1-based position of the first move
    that reaches that floor is returned instead. If it is never reached, the
    final floor is returned.
    """
    floor = 0
    for position, move in enumerate(text, start=1):
        if move == "(":
            floor += 1
        elif move == ")":
            floor -= 1
        else:
            raise ValueError(f"unexpected character: {move!r}")

        if target_floor and floor == target_floor:
            return position
    return floor


def part1(text):
    """Floor reached after all moves."""
    return deliver(text.strip())


def part2(text):
    """Position of the first move that enters the basement."""
    return deliver(text.strip(), -1)