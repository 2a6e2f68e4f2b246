import pytest

from puzzlekit.scoreboard import Scoreboard, final_score

OFFSETS = {"a": 20, "b": 36, "c": 40, "d": 54, "e": 70, "f": 74, "g": 88}
SEGMENTS = {
    "0": "abcefg",
    "1": "cf",
    "2": "acdeg",
    "3": "acdfg",
    "4": "bcdf",
    "5": "abdfg",
    "6": "abdefg",
    "7": "acf",
    "8": "abcdefg",
    "9": "abcdfg",
}


def panel(left="", right=""):
    cells = [" "] * 112
    for segment in left:
        cells[OFFSETS[segment]] = "x"
    for segment in right:
        cells[OFFSETS[segment] + 8] = "x"
    text = "".join(cells)
    return [text[i:i + 16] for i in range(0, 112, 16)]


@pytest.mark.parametrize("digit", sorted(SEGMENTS))
def test_reads_each_digit(digit):
    board = Scoreboard(panel(SEGMENTS[digit], SEGMENTS["1"]))
    assert board.score() == digit + "1"


@pytest.mark.parametrize("digit", sorted(SEGMENTS))
def test_reads_right_digit(digit):
    board = Scoreboard(panel(SEGMENTS["7"], SEGMENTS[digit]))
    assert board.score() == "7" + digit


def test_modify_removes_segment():
    board = Scoreboard(panel(SEGMENTS["8"], SEGMENTS["8"]))
    board.modify_with(panel("d"), " ")
    assert board.score() == "08"


def test_modify_adds_segment():
    board = Scoreboard(panel(SEGMENTS["5"], SEGMENTS["3"]))
    board.modify_with(panel("c"), "x")
    assert board.score() == "93"


def test_final_score():
    initial = panel(SEGMENTS["6"], SEGMENTS["4"])
    removed = panel("e", "b")
    added = panel("c", "a")
    assert final_score(initial, removed, added) == SEGMENTS_TO_DIGIT["abcdfg"] + SEGMENTS_TO_DIGIT["acdf"]


SEGMENTS_TO_DIGIT = {segs: digit for digit, segs in SEGMENTS.items()} | {"acdf": "9"}


def test_too_small_picture():
    with pytest.raises(ValueError):
        Scoreboard(["x" * 16] * 3)