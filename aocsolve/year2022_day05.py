"""Crate stacks rearranged by a crane, one crate or many at a time."""

from aocsolve.parsing import split


def parse(text):
    """Return the stacks (bottom first) and the (count, from, to) moves."""
    sections = split(text, "\n\n")
    if len(sections) != 2:
        raise ValueError("expected a drawing of stacks and a list of moves")
    drawing, moves = sections

    stack_lines = split(drawing, "\n")
    if len(stack_lines) < 2:
        raise ValueError("stack drawing needs crates and a row of labels")
    crate_lines = stack_lines[:-1]
    bottom = crate_lines[-1]
    num_stacks = sum(1 for ch in bottom if ch.isalpha())

    stacks = [[] for _ in range(num_stacks)]
    for line in reversed(crate_lines):
        for i, stack in enumerate(stacks):
            idx = i * 4 + 1
            if idx < len(line) and line[idx].isalpha():
                stack.append(line[idx])

    procedure = []
    for line in split(moves, "\n"):
        fields = split(line)
        if len(fields) != 6:
            raise ValueError(f"malformed move: {line!r}")
        procedure.append((int(fields[1]), int(fields[3]), int(fields[5])))

    return stacks, procedure


def top_of_stacks(text, move_together=False):
    """Crates on top of each stack after all moves.

    With ``move_together`` the moved crates keep their order; otherwise
    they are moved one at a time and end up reversed.
    """
    stacks, procedure = parse(text)

    for count, source, target in procedure:
        src, dst = source - 1, target - 1
        if src == dst:
            raise ValueError(f"move from stack {source} to itself")
        if not (0 <= src < len(stacks) and 0 <= dst < len(stacks)):
            raise ValueError(f"no such stack in move {count} from {source} to {target}")
        if count > len(stacks[src]):
            raise ValueError(f"stack {source} holds fewer than {count} crates")

        if count == 0:
            continue
        moved = stacks[src][-count:]
        del stacks[src][-count:]
        stacks[dst].extend(moved if move_together else reversed(moved))

    if any(not stack for stack in stacks):
        raise ValueError("a stack ended up empty")
    return "".join(stack[-1] for stack in stacks)


def part1(text):
    """Top crates when the crane moves one crate at a time."""
    return top_of_stacks(text, False)


def part2(text):
    """Top crates when the crane moves several crates at once."""
    return top_of_stacks(text, True)