"""Sequence puzzles: rides, reservations, digits, ducks, trains, skylines."""

import math
from bisect import bisect_right, insort


def _ride_plan(places, groups):
    count = len(groups)
    plan = []
    for start in range(count):
        seated = 0
        taken = 0
        while taken < count and seated + groups[(start + taken) % count] <= places:
            seated += groups[(start + taken) % count]
            taken += 1
        plan.append((seated, (start + taken) % count))
    return plan


def roller_coaster_earnings(places, rides, groups):
    """People carried over all rides, one dirham each."""
    groups = list(groups)
    if not groups:
        raise ValueError("there must be at least one group")
    plan = _ride_plan(places, groups)

    earned = 0
    position = 0
    ride = 0
    seen = {}
    while ride < rides:
        if seen is not None and position in seen:
            first_ride, first_earned = seen[position]
            cycle = ride - first_ride
            cycles = (rides - ride) // cycle
            earned += cycles * (earned - first_earned)
            ride += cycles * cycle
            seen = None
            continue
        if seen is not None:
            seen[position] = (ride, earned)
        seated, position = plan[position]
        earned += seated
        ride += 1
    return earned


def max_calculations(reservations):
    """Most non-overlapping (start, duration) reservations that can run."""
    ordered = sorted(tuple(reservation) for reservation in reservations)
    if not ordered:
        return 0
    next_free = math.inf
    result = 1
    for start, duration in ordered:
        if start >= next_free:
            result += 1
            next_free = start + duration
        else:
            next_free = min(next_free, start + duration)
    return result


def greatest_number(chars):
    """Largest number that the given digits, '.' and '-' can spell."""
    digits = []
    dot = minus = False
    for char in chars:
        if char.isspace():
            continue
        if char == ".":
            dot = True
        elif char == "-":
            minus = True
        elif char.isdigit():
            digits.append(char)
        else:
            raise ValueError(f"unexpected character {char!r}")
    if not digits:
        raise ValueError("no digits given")

    digits.sort(reverse=True)
    if digits[0] == "0" and digits[-1] == "0":
        return "0"
    if dot:
        digits.insert(len(digits) - 1, ".")
    if minus:
        return "-" + "".join(reversed(digits))
    if dot and digits[-1] == "0":
        del digits[-2:]
    return "".join(digits)


def hungry_duck(grid):
    """Most food on a path from top-left to bottom-right moving right or down."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("the grid is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("the grid must be rectangular")
    best = [0] * (width + 1)
    for row in rows:
        for column, food in enumerate(row, start=1):
            best[column] = max(best[column], best[column - 1]) + food
    return best[-1]


def _extend(entries, weight, sign):
    probe = (sign * weight, 0)
    index = bisect_right(entries, probe)
    if index == len(entries):
        length = 0
        if entries:
            entries.pop()
    else:
        length = sign * entries[index][1] + 1
        if index > 0:
            del entries[index - 1]
    entry = (sign * weight, sign * length)
    position = bisect_right(entries, entry)
    if position == 0 or entries[position - 1] != entry:
        insort(entries, entry)
    return length


def longest_train(weights):
    """Longest train built by adding each car in turn to the front or back, or not at all."""
    lighter = []
    heavier = []
    longest = 0
    for weight in reversed(list(weights)):
        longest = max(
            longest,
            _extend(lighter, weight, 1) + _extend(heavier, weight, -1) + 1,
        )
    return longest


def _sort_counting(values):
    if len(values) <= 1:
        return values, 0
    middle = len(values) // 2
    left, left_count = _sort_counting(values[:middle])
    right, right_count = _sort_counting(values[middle:])
    merged = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            inversions += len(left) - i
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(m, a, x, n):
    """Inversions in the sequence x_k = a * x_(k-1) mod m, k = 1..n."""
    values = []
    for _ in range(n):
        x = a * x % m
        values.append(x)
    return _sort_counting(values)[1]


_SKYLINE_WIDTH = 5001


def skyline_lines(buildings):
    """Number of straight lines in the outline of (height, x1, x2) buildings."""
    buildings = [tuple(building) for building in buildings]
    size = max([_SKYLINE_WIDTH, *(x2 for _, _, x2 in buildings)])
    heights = [0] * size
    for height, x1, x2 in buildings:
        for x in range(x1, x2):
            heights[x] = max(heights[x], height)

    changes = 0
    previous = 0
    for height in heights:
        if height != previous:
            previous = height
            changes += 1
    return 2 * changes - 1


def recurring_decimal(n):
    """Decimal expansion of 1/n with the repeating part in parentheses."""
    if n < 2:
        raise ValueError("n must be at least 2")
    history = {}
    digits = []
    value = 1
    while value and value not in history:
        history[value] = len(digits)
        value *= 10
        digits.append(str(value // n))
        value %= n
    text = "".join(digits)
    if value:
        start = history[value]
        return f"0.{text[:start]}({text[start:]})"
    return f"0.{text}"