"""Unit conversions, beer glasses, halving numbers and spelling alphabets."""

import math

_DISTANCE_UNITS = (
    ("miles", 8), ("furlongs", 10), ("chains", 22),
    ("yards", 3), ("feet", 12), ("inches", 0),
)
_TIME_UNITS = (
    ("fortnight", 2), ("week", 7), ("day", 24),
    ("hour", 60), ("minute", 60), ("second", 0),
)

_YEAR_1908 = (
    "Authority", "Bills", "Capture", "Destroy", "Englishmen", "Fractious", "Galloping",
    "High", "Invariably", "Juggling", "Knights", "Loose", "Managing", "Never", "Owners",
    "Play", "Queen", "Remarks", "Support", "The", "Unless", "Vindictive", "When",
    "Xpeditiously", "Your", "Zigzag",
)
_YEAR_1917 = (
    "Apples", "Butter", "Charlie", "Duff", "Edward", "Freddy", "George", "Harry", "Ink",
    "Johnnie", "King", "London", "Monkey", "Nuts", "Orange", "Pudding", "Queenie",
    "Robert", "Sugar", "Tommy", "Uncle", "Vinegar", "Willie", "Xerxes", "Yellow", "Zebra",
)
_YEAR_1927 = (
    "Amsterdam", "Baltimore", "Casablanca", "Denmark", "Edison", "Florida", "Gallipoli",
    "Havana", "Italia", "Jerusalem", "Kilogramme", "Liverpool", "Madagascar", "New-York",
    "Oslo", "Paris", "Quebec", "Roma", "Santiago", "Tripoli", "Uppsala", "Valencia",
    "Washington", "Xanthippe", "Yokohama", "Zurich",
)
_YEAR_1956 = (
    "Alfa", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot", "Golf", "Hotel", "India",
    "Juliett", "Kilo", "Lima", "Mike", "November", "Oscar", "Papa", "Quebec", "Romeo",
    "Sierra", "Tango", "Uniform", "Victor", "Whiskey", "X-ray", "Yankee", "Zulu",
)
_ALPHABETS = (_YEAR_1908, _YEAR_1917, _YEAR_1927, _YEAR_1956)
_AMBIGUOUS = {"Charlie", "Quebec"}


def _conversion(source, target, table):
    names = [name for name, _ in table]
    try:
        start, end = names.index(source), names.index(target)
    except ValueError:
        raise ValueError(f"unknown unit in {source!r} -> {target!r}") from None
    multiply = start <= end
    low, high = sorted((start, end))
    return math.prod(factor for _, factor in table[low:high]), multiply


def convert_speed(value, distance_from, time_from, distance_to, time_to):
    """Convert a speed between distance-per-time units."""
    distance, multiply = _conversion(distance_from, distance_to, _DISTANCE_UNITS)
    value = value * distance if multiply else value / distance
    time, multiply = _conversion(time_from, time_to, _TIME_UNITS)
    return value / time if multiply else value * time


def speed_query(line):
    """Answer '<v> <dist> per <time> X X <dist> per <time>' with one decimal."""
    tokens = line.split()
    if len(tokens) < 9:
        raise ValueError(f"malformed query: {line!r}")
    value = float(tokens[0])
    result = convert_speed(value, tokens[1], tokens[3], tokens[6], tokens[8])
    return f"{result:.1f} {tokens[6]} per {tokens[8]}"


def beer_height(bottom_radius, top_radius, height, volume):
    """Height of the beer in a truncated-cone glass, found by bisection."""

    def glass_volume(level):
        r = bottom_radius
        big_r = r + level / height * (top_radius - bottom_radius)
        return level * math.pi * (r * r + r * big_r + big_r * big_r) / 3

    low, high = 0.0, float(height)
    while high - low > 0.01:
        middle = (low + high) / 2
        if glass_volume(middle) > volume:
            high = middle
        else:
            low = middle
    return low


def halve_number_text(text):
    """Halve the number written in text, leaving separators and 'x' slots."""
    chars = list(text)
    index = next((i for i, c in enumerate(chars) if c not in ",.x"), len(chars))
    carry = False
    if index < len(chars) and chars[index] == "1":
        chars[index] = "x"
        carry = True
        index += 1

    while index < len(chars) and chars[index] != "x":
        if chars[index].isdigit():
            value = int(chars[index]) + 10 * carry
            carry = bool(value % 2)
            chars[index] = str(value // 2)
        index += 1

    if carry and index < len(chars):
        chars[index] = "5"
    return "".join(chars)


def _alphabet_index(word):
    for index, alphabet in enumerate(_ALPHABETS[:-1]):
        if word in alphabet:
            return index
    return len(_ALPHABETS) - 1


def _next_alphabet(words):
    seen = None
    for word in words:
        if word in _AMBIGUOUS:
            if seen is None:
                seen = word
            elif seen != word:
                return _ALPHABETS[0]
        else:
            return _ALPHABETS[(_alphabet_index(word) + 1) % len(_ALPHABETS)]
    raise ValueError("cannot tell which alphabet the words belong to")


def nato_update(words):
    """Spell the words in the next, more recent spelling alphabet."""
    alphabet = _next_alphabet(words)
    return [alphabet[ord(word[0]) - ord("A")] for word in words]