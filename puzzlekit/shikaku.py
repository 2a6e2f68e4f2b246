"""Count and find solutions of Shikaku puzzles."""

_EMPTY = "-"


def _next_letter(letter):
    return "a" if letter == "Z" else chr(ord(letter) + 1)


class ShikakuSolver:
    """Splits a grid of numbers into rectangles whose areas match the numbers."""

    def __init__(self, grid):
        rows = [[int(value) for value in row] for row in grid]
        if not rows or not rows[0]:
            raise ValueError("the grid is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("the grid must be rectangular")
        self._grid = rows
        self.height = len(rows)
        self.width = width
        self._solution = []
        self._count = 0
        self._first = []

    def _first_empty(self, row, col):
        for r in range(row, self.height):
            for c in range(col if r == row else 0, self.width):
                if self._solution[r][c] == _EMPTY:
                    return r, c
        return None

    def _fits(self, top, bottom, left, right):
        if right >= self.width:
            return False
        numbers = 0
        for r in range(top, bottom + 1):
            for c in range(left, right + 1):
                if self._solution[r][c] != _EMPTY:
                    return False
                if self._grid[r][c]:
                    numbers += 1
                    if numbers > 1:
                        return False
        return True

    def _fill(self, top, bottom, left, width, letter):
        for r in range(top, bottom + 1):
            self._solution[r][left:left + width] = [letter] * width

    def _try_rectangles(self, top, left, row, col, size, letter):
        for bottom in range(row, self.height):
            rect_height = bottom - top + 1
            if rect_height > size:
                break
            if size % rect_height:
                continue
            rect_width = size // rect_height
            if rect_width < col - left + 1:
                break
            if self._fits(top, bottom, left, left + rect_width - 1):
                self._fill(top, bottom, left, rect_width, letter)
                self._search(top, left, _next_letter(letter))
                self._fill(top, bottom, left, rect_width, _EMPTY)

    def _search(self, row, col, letter):
        cell = self._first_empty(row, col)
        if cell is None:
            self._count += 1
            if self._count == 1:
                self._first = ["".join(line) for line in self._solution]
            return
        top, left = cell
        border = self.width
        for r in range(top, self.height):
            if border <= left:
                break
            for c in range(left, border):
                if self._solution[r][c] != _EMPTY:
                    border = c
                    break
                size = self._grid[r][c]
                if size:
                    self._try_rectangles(top, left, r, c, size, letter)
                    border = c
                    break

    def solve(self):
        """Number of solutions and the first one found, as rows of letters."""
        self._solution = [[_EMPTY] * self.width for _ in range(self.height)]
        self._count = 0
        self._first = []
        self._search(0, 0, "A")
        return self._count, list(self._first)


def solve_shikaku(grid):
    """Solution count followed by the rows of the first solution."""
    count, rows = ShikakuSolver(grid).solve()
    return [str(count), *rows]