"""Small game puzzles: rock-paper-scissors streaks, Wordle hints, paternity tests."""

from collections import Counter

_WINNER_AGAINST = {"R": "Paper", "P": "Scissors"}
_DEFAULT_WINNER = "Rock"


def _winning_move(move):
    return _WINNER_AGAINST.get(move[:1], _DEFAULT_WINNER)


def rps_best_start(opponents):
    """Move and starting position that win the longest run around the circle."""
    players = list(opponents)
    if not players:
        raise ValueError("there must be at least one opponent")

    max_wins = 0
    best_move, best_position = None, 0
    for start, opponent in enumerate(players):
        my_move = _winning_move(opponent)
        beats_me = _winning_move(my_move)
        wins = 1
        for other in players[start + 1:] + players[:start]:
            if other == opponent:
                wins += 1
            elif other == beats_me:
                break
        if wins > max_wins:
            max_wins = wins
            best_move, best_position = my_move, start
    return best_move, best_position


def wordle_colors(answer, attempt):
    """Hint string: '#' right place, 'O' wrong place, 'X' absent."""
    if len(answer) != len(attempt):
        raise ValueError("the attempt must be as long as the answer")
    remaining = Counter(answer)
    hint = [None] * len(attempt)
    for index, (expected, guessed) in enumerate(zip(answer, attempt)):
        if expected == guessed:
            remaining[guessed] -= 1
            hint[index] = "#"
    for index, guessed in enumerate(attempt):
        if hint[index] is not None:
            continue
        if remaining[guessed] > 0:
            remaining[guessed] -= 1
            hint[index] = "O"
        else:
            hint[index] = "X"
    return "".join(hint)


def pair_possible(mother, father, child):
    """Whether the child's chromosome pair can come from these parents."""
    if child[0] in mother[:2] and child[1] in father[:2]:
        return True
    return child[1] in mother[:2] and child[0] in father[:2]


def find_father(mother, child, candidates):
    """Name of the first candidate compatible with every pair, or None."""
    for name, father in candidates:
        if all(
            pair_possible(m, f, c)
            for m, f, c in zip(mother, father, child, strict=True)
        ):
            return name
    return None