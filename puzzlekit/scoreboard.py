"""Two-digit seven-segment scoreboard read from ASCII art."""

_SEGMENT_OFFSETS = {"a": 20, "b": 36, "c": 40, "d": 54, "e": 70, "f": 74, "g": 88}
_DIGIT_SHIFT = 8

# Lit state of segments a..g for each recognised digit; anything else reads as 9.
_PATTERNS = {
    (True, True, True, False, True, True, True): "0",
    (False, False, True, False, False, True, False): "1",
    (True, False, True, True, True, False, True): "2",
    (True, False, True, True, False, True, True): "3",
    (False, True, True, True, False, True, False): "4",
    (True, True, False, True, False, True, True): "5",
    (True, True, False, True, True, True, True): "6",
    (True, False, True, False, False, True, False): "7",
    (True, True, True, True, True, True, True): "8",
}
_MIN_LENGTH = max(_SEGMENT_OFFSETS.values()) + _DIGIT_SHIFT + 1


class Scoreboard:
    """A scoreboard whose cells can be switched on and off."""

    def __init__(self, rows):
        self._data = list("".join(rows))
        if len(self._data) < _MIN_LENGTH:
            raise ValueError("scoreboard picture is too small")

    def modify_with(self, rows, char):
        """Set every cell that is not blank in the overlay to char."""
        overlay = "".join(rows)
        for index, cell in enumerate(overlay[:len(self._data)]):
            if cell != " ":
                self._data[index] = char

    def _digit(self, position):
        shift = position * _DIGIT_SHIFT
        lit = tuple(self._data[offset + shift] != " " for offset in _SEGMENT_OFFSETS.values())
        return _PATTERNS.get(lit, "9")

    def score(self):
        """The two digits currently shown."""
        return self._digit(0) + self._digit(1)


def final_score(initial, removed, added):
    """Score after clearing one set of cells and lighting another."""
    board = Scoreboard(initial)
    board.modify_with(removed, " ")
    board.modify_with(added, "x")
    return board.score()