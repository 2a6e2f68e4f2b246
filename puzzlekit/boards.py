"""Grid puzzles: queen reach on a chessboard, word search and path description."""

_BOARD_SIZE = 8
_QUEEN = "Q"
_EMPTY = "."
_QUEEN_STEPS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)

# (dx, dy) in the order the search tries them.
_WORD_DIRECTIONS = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
)

# Right, down, left, up as (row, column) steps.
_PATH_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_PATH_CELL = "#"


def queen_control(color, board):
    """Count the squares the queen attacks or may move to on an 8x8 board."""
    rows = list(board)
    if len(rows) != _BOARD_SIZE or any(len(row) != _BOARD_SIZE for row in rows):
        raise ValueError("the board must be 8 rows of 8 cells")
    if not color:
        raise ValueError("a colour is required")

    queens = [
        (i, j)
        for i, row in enumerate(rows)
        for j, cell in enumerate(row)
        if cell == _QUEEN
    ]
    if not queens:
        raise ValueError("there is no queen on the board")
    qi, qj = queens[-1]
    own = color[0]

    controlled = 0
    for di, dj in _QUEEN_STEPS:
        i, j = qi + di, qj + dj
        while 0 <= i < _BOARD_SIZE and 0 <= j < _BOARD_SIZE:
            cell = rows[i][j]
            if cell != _EMPTY:
                if cell not in (_QUEEN, own):
                    controlled += 1
                break
            controlled += 1
            i += di
            j += dj
    return controlled


def _fits(start, step, length, size):
    if step == 1:
        return start + length <= size
    if step == -1:
        return start + 1 - length >= 0
    return True


def _place_word(grid, result, word):
    size = len(grid)
    for y in range(size):
        for x in range(size):
            if grid[y][x] != word[0]:
                continue
            for dx, dy in _WORD_DIRECTIONS:
                if not (_fits(x, dx, len(word), size) and _fits(y, dy, len(word), size)):
                    continue
                cells = [(y + k * dy, x + k * dx) for k in range(len(word))]
                if all(grid[cy][cx] == letter for (cy, cx), letter in zip(cells, word)):
                    for (cy, cx), letter in zip(cells, word):
                        result[cy][cx] = letter
                    return True
    return False


def word_search(grid, words):
    """Keep only the letters of the grid that belong to the found words."""
    rows = list(grid)
    size = len(rows)
    result = [[" "] * size for _ in range(size)]
    for word in words:
        word = word.upper()
        if word:
            _place_word(rows, result, word)
    return ["".join(row) for row in result]


def describe_path(rows):
    """Describe a '#' path entered from the top-left going right, e.g. '3R2L4'."""
    field = list(rows)
    width = len(field[0]) if field else 0

    def cell(row, col):
        if 0 <= row < len(field) and 0 <= col < width:
            return field[row][col]
        return " "

    row, col = 0, -1
    direction = 0
    steps = 0
    parts = []
    moved = True
    while moved:
        moved = False
        for turn in (-1, 0, 1):
            candidate = (direction + turn) % len(_PATH_DIRECTIONS)
            drow, dcol = _PATH_DIRECTIONS[candidate]
            if cell(row + drow, col + dcol) != _PATH_CELL:
                continue
            row, col = row + drow, col + dcol
            if turn == 0:
                steps += 1
            else:
                direction = candidate
                parts.append(f"{steps}{'L' if turn == -1 else 'R'}")
                steps = 1
            moved = True
            break
    parts.append(str(steps))
    return "".join(parts)