"""Tile a floor by mirroring a quarter pattern right and down."""

_FLOOR_RIGHT = {
    "(": ")", ")": "(", "{": "}", "}": "{", "[": "]", "]": "[",
    "<": ">", ">": "<", "/": "\\", "\\": "/",
}
_FLOOR_DOWN = {
    "^": "v", "v": "^", "A": "V", "V": "A", "w": "m", "m": "w",
    "W": "M", "M": "W", "u": "n", "n": "u", "/": "\\", "\\": "/",
}
_DIFFERENT_RIGHT = {"b": "d", "d": "b", "p": "q", "q": "p", "\\": "/", "/": "\\"}
_DIFFERENT_DOWN = {"b": "p", "p": "b", "d": "q", "q": "d", "\\": "/", "/": "\\"}


def _tile(pattern, right, down, shared_centre):
    quarter = list(pattern)
    n = len(quarter)
    if n == 0:
        raise ValueError("the pattern must not be empty")
    size = 2 * n - 1 if shared_centre else 2 * n
    last = size - 1

    grid = [list((row + " " * size)[:size]) for row in quarter]
    grid += [[" "] * size for _ in range(size - n)]
    for i in range(n):
        for j in range(n):
            grid[i][last - j] = right.get(grid[i][j], grid[i][j])
            grid[last - i][j] = down.get(grid[i][j], grid[i][j])
            flipped = right.get(grid[i][j], grid[i][j])
            grid[last - i][last - j] = down.get(flipped, flipped)

    grout = list("-" * (2 * size + 3))
    grout[0] = grout[size + 1] = grout[2 * size + 2] = "+"
    grout = "".join(grout)
    rows = ["".join(row) for row in grid]

    lines = []
    for _ in range(2):
        lines.append(grout)
        lines.extend(f"|{row}|{row}|" for row in rows)
    lines.append(grout)
    return lines


def tile_floor(pattern):
    """Tile whose quarters share the middle row and column."""
    return _tile(pattern, _FLOOR_RIGHT, _FLOOR_DOWN, shared_centre=True)


def tile_floor_differently(pattern):
    """Tile built from four separate mirrored quarters."""
    return _tile(pattern, _DIFFERENT_RIGHT, _DIFFERENT_DOWN, shared_centre=False)