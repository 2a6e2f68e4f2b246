import pytest

from puzzlekit.games import find_father, pair_possible, rps_best_start, wordle_colors

BEATEN_BY = {"Paper": "Rock", "Scissors": "Paper", "Rock": "Scissors"}


def test_all_rock_opponents():
    assert rps_best_start(["Rock", "Rock", "Rock"]) == ("Paper", 0)


@pytest.mark.parametrize(
    "opponents",
    [
        ["Rock", "Paper", "Scissors"],
        ["Scissors", "Scissors", "Rock", "Paper", "Scissors"],
        ["Paper"],
    ],
)
def test_best_move_beats_starting_opponent(opponents):
    move, position = rps_best_start(opponents)
    assert 0 <= position < len(opponents)
    assert BEATEN_BY[move] == opponents[position]


def test_rps_needs_opponents():
    with pytest.raises(ValueError):
        rps_best_start([])


def test_wordle_exact_match():
    assert wordle_colors("CRANE", "CRANE") == "#####"


def test_wordle_no_common_letters():
    assert wordle_colors("CRANE", "BUMPY") == "XXXXX"


def test_wordle_all_letters_misplaced():
    assert wordle_colors("ABCDE", "BCDEA") == "OOOOO"


def test_wordle_repeated_guess_letter_counted_once():
    assert wordle_colors("ABCDE", "AAAAA") == "#XXXX"


def test_wordle_hint_never_exceeds_answer_letters():
    hint = wordle_colors("LLAMA", "ALLAY")
    assert len(hint) == 5
    assert set(hint) <= {"#", "O", "X"}
    assert hint.count("X") >= 1


def test_wordle_length_mismatch():
    with pytest.raises(ValueError):
        wordle_colors("CRANE", "CRAN")


def test_pair_possible_either_order():
    assert pair_possible("Aa", "Bb", "AB")
    assert pair_possible("Aa", "Bb", "BA")
    assert not pair_possible("Aa", "Bb", "CC")


def test_find_father_returns_first_match():
    mother = ["Aa", "Cc"]
    child = ["AB", "cD"]
    candidates = [("Tom", ["Xx", "DD"]), ("Sam", ["Bb", "dD"]), ("Ned", ["BB", "DD"])]
    assert find_father(mother, child, candidates) == "Sam"


def test_find_father_without_match():
    assert find_father(["Aa"], ["AB"], [("Tom", ["Cc"])]) is None


def test_find_father_pair_count_mismatch():
    with pytest.raises(ValueError):
        find_father(["Aa", "Bb"], ["AB", "Bb"], [("Tom", ["Bb"])])