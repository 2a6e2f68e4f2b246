"""A small Logo turtle that draws with characters."""

import re

_HEADINGS = ((0, -1), (1, 0), (0, 1), (-1, 0))  # up, right, down, left
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _number(text):
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"expected a number in {text!r}")
    return int(match.group(1))


def _char_at(command, index):
    if len(command) <= index:
        raise ValueError(f"missing character argument in {command!r}")
    return command[index]


class Logo:
    """Turtle state and the picture drawn so far."""

    def __init__(self):
        self._cells = {}
        self._background = " "
        self._pen = "#"
        self._pen_down = True
        self._x = self._y = 0
        self._heading = 0
        self._min_x = self._max_x = 0
        self._min_y = self._max_y = 0

    def _clear(self, background):
        self._background = background
        self._cells.clear()

    def _move(self, distance):
        if distance < 0:
            raise ValueError("distance must not be negative")
        dx, dy = _HEADINGS[self._heading]
        for _ in range(distance):
            if self._pen_down:
                self._cells[(self._x, self._y)] = self._pen
            self._x += dx
            self._y += dy
        self._min_x = min(self._min_x, self._x)
        self._max_x = max(self._max_x, self._x)
        self._min_y = min(self._min_y, self._y)
        self._max_y = max(self._max_y, self._y)

    def _rotate(self, angle):
        quarters = abs(angle) // 90
        self._heading = (self._heading + (quarters if angle >= 0 else -quarters)) % 4

    def process(self, command):
        """Run one command: CS, FD, RT, LT, PU, PD or SETPC; others are ignored."""
        name = command.partition(" ")[0].upper()
        if name == "CS":
            self._clear(_char_at(command, 3))
        elif name == "FD":
            self._move(_number(command[3:]))
        elif name == "RT":
            self._rotate(_number(command[3:]))
        elif name == "LT":
            self._rotate(-_number(command[3:]))
        elif name == "PU":
            self._pen_down = False
        elif name == "PD":
            self._pen_down = True
        elif name == "SETPC":
            self._pen = _char_at(command, 6)

    def render(self):
        """The picture trimmed of blank rows, common indent and trailing background."""
        blank = self._background
        rows = [
            "".join(
                self._cells.get((x, y), blank)
                for x in range(self._min_x, self._max_x + 1)
            )
            for y in range(self._min_y, self._max_y + 1)
        ]
        while rows and not rows[-1].strip(blank):
            rows.pop()
        while rows and not rows[0].strip(blank):
            rows.pop(0)
        if not rows:
            return []

        indent = min(len(row) - len(row.lstrip(blank)) for row in rows if row.strip(blank))
        return [row.rstrip(blank)[indent:] if row.strip(blank) else "" for row in rows]


def draw(lines):
    """Run lines of ';' separated commands and return the picture."""
    logo = Logo()
    for line in lines:
        for command in line.split(";"):
            logo.process(command)
    return logo.render()