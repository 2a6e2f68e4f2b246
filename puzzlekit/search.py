"""Search puzzles: a frog hopping over lilies, alpha-beta minimax and a maze path."""

import math
from collections import deque

_WATER = "."
_LILY = "#"
_OPEN = "0"

# Frog jumps as (row, column) steps, tried in this order.
_FROG_JUMPS = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
    (2, 0), (-2, 0), (0, 2), (0, -2),
)

_MAZE_MOVES = (
    ((-1, 0), "UP"),
    ((1, 0), "DOWN"),
    ((0, -1), "LEFT"),
    ((0, 1), "RIGHT"),
)


class _AllLiliesVisited(Exception):
    pass


def longest_frog_path(grid, x, y):
    """Most lilies the frog can visit in one hop sequence starting at column x, row y."""
    cells = [list(row) for row in grid]
    if not 0 <= y < len(cells) or not 0 <= x < len(cells[y]):
        raise ValueError("the start lies outside the pond")
    total = sum(row.count(_LILY) for row in cells)
    best = 0

    def jump(row, col, visited):
        nonlocal best
        best = max(best, visited)
        if best == total:
            raise _AllLiliesVisited
        cells[row][col] = _WATER
        for drow, dcol in _FROG_JUMPS:
            nrow, ncol = row + drow, col + dcol
            if (
                0 <= nrow < len(cells)
                and 0 <= ncol < len(cells[nrow])
                and cells[nrow][ncol] == _LILY
            ):
                jump(nrow, ncol, visited + 1)
        cells[row][col] = _LILY

    try:
        jump(y, x, 1)
    except _AllLiliesVisited:
        pass
    return best


def minimax(depth, branching, leaves):
    """Best value for the maximising player and the number of nodes alpha-beta visits."""
    leaves = list(leaves)
    if depth < 0 or branching < 1:
        raise ValueError("depth must be non-negative and branching positive")
    if len(leaves) != branching ** depth:
        raise ValueError(f"expected {branching ** depth} leaves, got {len(leaves)}")

    visited = 0
    leaf = 0

    def search(level, alpha, beta, maximize):
        nonlocal visited, leaf
        visited += 1
        if level == depth:
            value = leaves[leaf]
            leaf += 1
            return value
        value = -math.inf if maximize else math.inf
        for child in range(branching):
            result = search(level + 1, alpha, beta, not maximize)
            if maximize:
                value = max(value, result)
                cut = value >= beta
            else:
                value = min(value, result)
                cut = value <= alpha
            if cut:
                leaf += (branching - child - 1) * branching ** (depth - level - 1)
                break
            if maximize:
                alpha = max(alpha, value)
            else:
                beta = min(beta, value)
        return value

    best = search(0, -math.inf, math.inf, True)
    return best, visited


def maze_directions(maze, start, finish):
    """Moves along a shortest path of '0' cells from start to finish, each (x, y)."""
    rows = list(maze)

    def inside(row, col):
        return 0 <= row < len(rows) and 0 <= col < len(rows[row])

    (start_x, start_y), (finish_x, finish_y) = start, finish
    source, target = (start_y, start_x), (finish_y, finish_x)
    if not inside(*source) or not inside(*target):
        raise ValueError("start and finish must lie inside the maze")
    if source == target:
        return []

    came_from = {source: None}
    queue = deque([source])
    while queue:
        row, col = queue.popleft()
        for (drow, dcol), name in _MAZE_MOVES:
            following = (row + drow, col + dcol)
            if following in came_from or not inside(*following):
                continue
            if rows[following[0]][following[1]] != _OPEN:
                continue
            came_from[following] = ((row, col), name)
            if following == target:
                moves = []
                cell = target
                while came_from[cell] is not None:
                    cell, move = came_from[cell]
                    moves.append(move)
                moves.reverse()
                return moves
            queue.append(following)
    raise ValueError("the finish cannot be reached")