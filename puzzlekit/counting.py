"""Counting puzzles: cards, coins, sequences, combinations and partitions."""

import math

_VALID_CARDS = set("23456789KQJTA")


def bust_probability(observations, threshold):
    """Percentage chance that the next card is below the bust threshold."""
    remaining = [0] + [4] * 9 + [16]
    remains = 52
    for segment in observations.split("."):
        if not set(segment) <= _VALID_CARDS:
            continue
        for card in segment:
            if card.isdigit():
                remaining[int(card)] -= 1
            else:
                remaining[1 if card == "A" else 10] -= 1
        remains -= len(segment)

    possible = sum(remaining[1:threshold])
    percent = possible * 100.0 / remains
    return int(math.copysign(math.floor(abs(percent) + 0.5), percent))


def coins_needed(value, counts, values):
    """Fewest coins, cheapest first, to reach a value; -1 if impossible."""
    remaining = value
    needed = 0
    for coin, count in sorted(zip(values, counts, strict=True)):
        if coin * count >= remaining:
            needed += -(-remaining // coin)
            remaining = 0
            break
        needed += count
        remaining -= coin * count
    return -1 if remaining else needed


def _trunc_div(numerator, denominator):
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def crazy_list_next(values):
    """Next element of a list whose differences grow by a constant factor."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    first, second = values[0], values[1]
    first_diff = second - first
    if first_diff == 0:
        return second
    if len(values) < 3:
        raise ValueError("at least three values are needed")

    last = values[2]
    last_diff = last - second
    factor = _trunc_div(last_diff, first_diff)
    for value in values[3:]:
        last_diff = value - last
        last = value
    return last + last_diff * factor


def duo_combinations(symbols):
    """All words over each pair of neighbouring symbols, without repeats."""
    total = len(symbols)
    result = []
    for i in range(total - 1):
        for value in range(min(i, 1), 1 << total):
            result.append(
                "".join(
                    symbols[i + 1] if value & (1 << bit) else symbols[i]
                    for bit in reversed(range(total))
                )
            )
    return result


def rabbit_population(first, years, min_age, max_age):
    """Rabbit count after some years, with fertile ages between the bounds."""
    newly_born = [0] * (years + max_age + 1)
    newly_born[max_age] = first
    current = max_age + 1
    too_old = current - max_age - 1
    young_enough = current - min_age
    for year in range(years):
        previous = 0 if year == 0 else newly_born[current - 1]
        newly_born[current] = previous - newly_born[too_old] + newly_born[young_enough]
        current += 1
        too_old += 1
        young_enough += 1
    return newly_born[-1]


def partitions(n):
    """Yield the partitions of n as non-increasing tuples, largest first."""

    def build(remaining, largest, prefix):
        if remaining == 0:
            yield prefix
            return
        for part in range(min(remaining, largest), 0, -1):
            yield from build(remaining - part, part, prefix + (part,))

    yield from build(n, n, ())