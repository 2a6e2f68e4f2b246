"""Whether blocks of widths one, two and three can build a full rectangle."""


def blocks_possible(ones, twos, threes):
    """True if all the blocks fill a rectangle at least two rows high."""
    total = ones + 2 * twos + 3 * threes
    min_width = 3 if threes else (2 if twos else 1)
    max_width = total // 2
    odd_rows = ones + threes

    for width in range(min_width, max_width + 1):
        if total % width:
            continue
        height = total // width
        if height * (width // 3) < threes:
            continue
        if height * (width // 2) < twos:
            continue
        if width % 2 and height > odd_rows:
            continue
        return True
    return False