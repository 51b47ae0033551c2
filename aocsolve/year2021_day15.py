"""Chiton: lowest-risk path through a cave with A* search."""

import heapq
from math import inf

from aocsolve.parsing import digits, split


def parse_grid(text):
    """Return the risk levels as a list of rows of digits."""
    return [digits(line) for line in split(text, "\n")]


def _reconstruct(came_from, current):
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def a_star(start, finish, heuristic, weight, neighbors):
    """Cheapest path from ``start`` to ``finish`` as a list of points, or None.

    ``heuristic(point, goal)`` estimates the remaining cost,
    ``weight(from_point, to_point)`` gives the cost of a move and
    ``neighbors(point)`` lists the points reachable in one move. Among points
    with equal estimates the smallest is expanded first.
    """
    came_from = {}
    g_score = {start: 0}
    f_score = {start: heuristic(start, finish)}
    open_set = {start}
    heap = [(f_score[start], start)]

    while heap:
        score, current = heapq.heappop(heap)
        if current not in open_set or score != f_score[current]:
            continue
        open_set.discard(current)

        if current == finish:
            return _reconstruct(came_from, current)

        for neighbor in neighbors(current):
            tentative = g_score[current] + weight(current, neighbor)
            if tentative < g_score.get(neighbor, inf):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + heuristic(neighbor, finish)
                open_set.add(neighbor)
                heapq.heappush(heap, (f_score[neighbor], neighbor))
    return None


def _manhattan(current, goal):
    (x1, y1), (x2, y2) = current, goal
    return abs(x1 - x2) + abs(y1 - y2)


def lowest_risk(grid):
    """Total risk of the safest path from the top left to the bottom right.

    The risk of the starting position is not counted.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    last_x, last_y = len(grid) - 1, len(grid[0]) - 1

    def weight(_from, to):
        x, y = to
        return grid[x][y]

    def neighbors(point):
        x, y = point
        if x:
            yield x - 1, y
        if y:
            yield x, y - 1
        if x < last_x:
            yield x + 1, y
        if y < last_y:
            yield x, y + 1

    path = a_star((0, 0), (last_x, last_y), _manhattan, weight, neighbors)
    if not path:
        return 0
    return sum(grid[x][y] for x, y in path[1:])


def expand_grid(grid, multiplier=5):
    """Tile the grid ``multiplier`` times each way, raising risk per tile.

    Each tile step adds one to the risk; values above 9 wrap round to 1.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    rows, cols = len(grid), len(grid[0])

    def risk(x, y):
        total = grid[x % rows][y % cols] + x // rows + y // cols
        return (total - 1) % 9 + 1 if total > 9 else total

    return [[risk(x, y) for y in range(cols * multiplier)] for x in range(rows * multiplier)]


def part1(text):
    """Lowest total risk across the cave as given."""
    return lowest_risk(parse_grid(text))


def part2(text, multiplier=5):
    """Lowest total risk across the enlarged cave."""
    return lowest_risk(expand_grid(parse_grid(text), multiplier))