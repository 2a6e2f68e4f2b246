"""Shortest path through a hexagonal maze with keys, doors and slides."""

from collections import deque

# Tried in this order; it decides between equally short paths.
_DIRECTIONS = (
    ("DL", (1, -1)),
    ("DR", (1, 1)),
    ("L", (0, -2)),
    ("R", (0, 2)),
    ("UL", (-1, -1)),
    ("UR", (-1, 1)),
)
_WALL = "#"
_SLIDE = "_"
_START = "S"
_EXIT = "E"


def _is_door(symbol):
    return "A" <= symbol <= "D"


def _is_key(symbol):
    return "a" <= symbol <= "d"


def _blocked(symbol, keys):
    if symbol == _WALL:
        return True
    return _is_door(symbol) and not keys & (1 << (ord(symbol) - ord("A")))


class HexMaze:
    """A hex maze given as rows, odd rows shifted half a cell to the right."""

    def __init__(self, rows):
        rows = [row.strip() for row in rows]
        if not rows:
            raise ValueError("the maze has no rows")
        width = 2 * max(len(row) for row in rows) + 1
        self._cells = [[" "] * width for _ in rows]
        self._start = None
        for r, row in enumerate(rows):
            for j, symbol in enumerate(row):
                c = r % 2 + 2 * j
                self._cells[r][c] = symbol
                if symbol == _START:
                    self._start = (r, c)
        if self._start is None:
            raise ValueError("the maze has no start")

    def _symbol(self, row, col):
        if 0 <= row < len(self._cells) and 0 <= col < len(self._cells[row]):
            return self._cells[row][col]
        return _WALL

    def _step(self, row, col, keys, delta):
        drow, dcol = delta
        row, col = row + drow, col + dcol
        symbol = self._symbol(row, col)
        if _blocked(symbol, keys):
            return None
        if symbol == _SLIDE:
            nrow, ncol = row + drow, col + dcol
            while self._symbol(nrow, ncol) == _SLIDE:
                row, col = nrow, ncol
                nrow, ncol = nrow + drow, ncol + dcol
            following = self._symbol(nrow, ncol)
            if not _blocked(following, keys):
                row, col, symbol = nrow, ncol, following
        if _is_key(symbol):
            keys |= 1 << (ord(symbol) - ord("a"))
        return (row, col), keys, symbol

    def shortest_path(self):
        """Direction names of a shortest path from S to E."""
        start = (self._start, 0)
        came_from = {start: None}
        queue = deque([start])
        while queue:
            state = queue.popleft()
            (row, col), keys = state
            for name, delta in _DIRECTIONS:
                moved = self._step(row, col, keys, delta)
                if moved is None:
                    continue
                coord, new_keys, symbol = moved
                following = (coord, new_keys)
                if following in came_from:
                    continue
                came_from[following] = (state, name)
                if symbol == _EXIT:
                    return self._unwind(came_from, following)
                queue.append(following)
        raise ValueError("the exit cannot be reached")

    @staticmethod
    def _unwind(came_from, state):
        path = []
        while came_from[state] is not None:
            state, name = came_from[state]
            path.append(name)
        path.reverse()
        return path


def solve_hex_maze(rows):
    """Shortest path as space separated direction names."""
    return " ".join(HexMaze(rows).shortest_path())