"""Balanced ternary numbers written with the digits 1, 0 and T."""


def to_decimal(trits):
    """Integer value of a balanced ternary string."""
    value = 0
    weight = 1
    for trit in reversed(trits):
        if trit == "1":
            value += weight
        elif trit != "0":
            value -= weight
        weight *= 3
    return value


def to_ternary(n):
    """Balanced ternary representation of an integer."""
    letters = "0T1" if n < 0 else "01T"
    n = abs(n)
    trits = []
    while True:
        trits.append(letters[n % 3])
        n = (n + 1) // 3
        if not n:
            break
    return "".join(reversed(trits))


def evaluate(left, op, right):
    """Apply +, -, *, << or >> (written '<' and '>') to two balanced ternary numbers."""
    left_value = to_decimal(left)
    right_value = to_decimal(right)
    symbol = op[:1]
    if symbol == "+":
        return to_ternary(left_value + right_value)
    if symbol == "-":
        return to_ternary(left_value - right_value)
    if symbol == "*":
        return to_ternary(left_value * right_value)
    if symbol == ">":
        if right_value < 0 or right_value >= len(left):
            return "0"
        return left[:len(left) - right_value]
    if symbol == "<":
        if right_value < 0:
            raise ValueError("cannot shift by a negative amount")
        return left + "0" * right_value
    raise ValueError(f"unknown operator {op!r}")