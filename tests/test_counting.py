from itertools import product

import pytest

from puzzlekit.counting import (
    bust_probability,
    coins_needed,
    crazy_list_next,
    duo_combinations,
    partitions,
    rabbit_population,
)


def test_bust_probability_bounds():
    assert bust_probability("", 11) == 100
    assert bust_probability("", 1) == 0


def test_bust_probability_all_aces_seen():
    assert bust_probability("A.A.A.A", 2) == 0


def test_bust_probability_ignores_distractions():
    assert bust_probability("hello.A.world.KQ", 5) == bust_probability("A.KQ", 5)


def test_bust_probability_monotonic():
    values = [bust_probability("2.3", t) for t in range(1, 12)]
    assert values == sorted(values)


def test_coins_needed_example():
    assert coins_needed(12, [3, 1], [1, 10]) == 4


def test_coins_needed_impossible():
    assert coins_needed(100, [1, 1], [1, 2]) == -1


def test_coins_needed_zero_value():
    assert coins_needed(0, [2], [5]) == 0


def test_coins_needed_mismatched_lists():
    with pytest.raises(ValueError):
        coins_needed(5, [1, 2], [1])


def test_crazy_list_constant():
    assert crazy_list_next([5, 5]) == 5


def test_crazy_list_shift_invariant():
    seq = [2, 5, 11, 23]
    assert crazy_list_next([v + 10 for v in seq]) == crazy_list_next(seq) + 10


def test_crazy_list_scale_invariant():
    seq = [1, 2, 4, 8]
    assert crazy_list_next([v * 3 for v in seq]) == 3 * crazy_list_next(seq)


def test_crazy_list_too_short():
    with pytest.raises(ValueError):
        crazy_list_next([1, 2])


def test_duo_two_symbols_cover_everything():
    result = duo_combinations(["a", "b"])
    assert sorted(result) == sorted("".join(p) for p in product("ab", repeat=2))


def test_duo_words_distinct_and_adjacent():
    symbols = ["x", "y", "z"]
    result = duo_combinations(symbols)
    assert len(result) == len(set(result))
    assert result[0] == "x" * 3
    for word in result:
        assert len(word) == 3
        used = sorted(set(word))
        assert len(used) <= 2
        if len(used) == 2:
            assert symbols.index(used[1]) - symbols.index(used[0]) == 1


def test_rabbit_no_years():
    assert rabbit_population(5, 0, 1, 3) == 5


def test_rabbit_growth():
    assert rabbit_population(1, 3, 1, 10) == 4


def test_rabbit_linear_in_first():
    assert rabbit_population(3, 6, 2, 4) == 3 * rabbit_population(1, 6, 2, 4)


def test_partitions_of_four():
    assert list(partitions(4)) == [(4,), (3, 1), (2, 2), (2, 1, 1), (1, 1, 1, 1)]


def test_partitions_invariants():
    parts = list(partitions(7))
    assert len(parts) == len(set(parts))
    for part in parts:
        assert sum(part) == 7
        assert list(part) == sorted(part, reverse=True)
    assert parts == sorted(parts, reverse=True)


def test_partitions_of_zero():
    assert list(partitions(0)) == [()]