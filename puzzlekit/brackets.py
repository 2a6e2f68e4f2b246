"""Bracket puzzles: flipping brackets to balance and balanced bit runs."""

import math
from functools import cache

_KIND = {
    "(": "(", ")": "(",
    "<": "<", ">": "<",
    "{": "{", "}": "{",
    "[": "[", "]": "[",
}
_OPENING = set("([{<")


def _brackets(expression):
    return "".join(char for char in expression if char in _KIND)


@cache
def _flips(text):
    if not text:
        return 0
    stack = []
    best = math.inf
    for index, char in enumerate(text):
        kind = _KIND[char]
        if stack and stack[-1] == kind:
            stack.pop()
        else:
            stack.append(kind)
        if not stack:
            flips = (
                (0 if text[0] in _OPENING else 1)
                + (1 if text[index] in _OPENING else 0)
                + _flips(text[1:index])
                + _flips(text[index + 1:])
            )
            best = min(best, flips)
            # The bracket may also open a new pair, as in (<<<<)(>>>>).
            stack.extend((kind, kind))
    return best


def is_valid(expression):
    """Whether flipping brackets can balance the expression at all."""
    stack = []
    for char in _brackets(expression):
        kind = _KIND[char]
        if stack and stack[-1] == kind:
            stack.pop()
        else:
            stack.append(kind)
    return not stack


def minimal_flips(expression):
    """Fewest brackets to turn around so that the expression is balanced."""
    result = _flips(_brackets(expression))
    if result == math.inf:
        raise ValueError("the expression cannot be balanced")
    return result


def solve_brackets(expression):
    """Fewest flips, or -1 when no flipping balances the expression."""
    return minimal_flips(expression) if is_valid(expression) else -1


def longest_balanced_run(bits):
    """Most consecutive balanced substrings of a string of 0s and 1s."""
    size = len(bits)
    achieved = [False] * (size + 1)
    zeros = bits.count("0")
    ones = size - zeros
    longest = 0
    for start, bit in enumerate(bits):
        if min(zeros, ones) <= longest:
            break
        if achieved[start]:
            continue
        balance = 0
        current = 0
        for end in range(start, size):
            balance += 1 if bits[end] == "1" else -1
            if balance == 0:
                current += 1
                achieved[end + 1] = True
        longest = max(longest, current)
        if bit == "0":
            zeros -= 1
        else:
            ones -= 1
    return longest