"""Text-art puzzles: key fingerprints, bookcases, frames, signs and block fonts."""

from math import lcm

_BISHOP_WIDTH = 17
_BISHOP_HEIGHT = 9
_BISHOP_START = (8, 4)
_BISHOP_SYMBOLS = " .o+=*BOX@%&#/^"
_BISHOP_HEADER = "+---[CODINGAME]---+"
_BISHOP_FOOTER = "+-----------------+"

_ATARI_GLYPHS = (
    0x1818243C42420000, 0x7844784444780000, 0x3844808044380000, 0x7844444444780000,
    0x7C407840407C0000, 0x7C40784040400000, 0x3844809C44380000, 0x42427E4242420000,
    0x3E080808083E0000, 0x1C04040444380000, 0x4448507048440000, 0x40404040407E0000,
    0x4163554941410000, 0x4262524A46420000, 0x1C222222221C0000, 0x7844784040400000,
    0x1C222222221C0200, 0x7844785048440000, 0x1C22100C221C0000, 0x7F08080808080000,
    0x42424242423C0000, 0x8142422424180000, 0x4141495563410000, 0x4224181824420000,
    0x4122140808080000, 0x7E040810207E0000,
)
_ATARI_BITS = str.maketrans({"0": " ", "1": "X"})


def drunken_bishop(fingerprint):
    """Draw the random-art picture for a colon separated hex fingerprint."""
    visits = [[0] * _BISHOP_WIDTH for _ in range(_BISHOP_HEIGHT)]
    x, y = _BISHOP_START
    for group in fingerprint.split(":"):
        byte = int(group.strip(), 16) & 0xFF
        for shift in range(0, 8, 2):
            pair = (byte >> shift) & 0b11
            y = min(y + 1, _BISHOP_HEIGHT - 1) if pair & 0b10 else max(y - 1, 0)
            x = min(x + 1, _BISHOP_WIDTH - 1) if pair & 0b01 else max(x - 1, 0)
            visits[y][x] += 1

    lines = [_BISHOP_HEADER]
    for row_index, row in enumerate(visits):
        cells = []
        for col_index, count in enumerate(row):
            if (col_index, row_index) == (x, y):
                cells.append("E")
            elif (col_index, row_index) == _BISHOP_START:
                cells.append("S")
            else:
                cells.append(_BISHOP_SYMBOLS[count % len(_BISHOP_SYMBOLS)])
        lines.append("|" + "".join(cells) + "|")
    lines.append(_BISHOP_FOOTER)
    return lines


def bookcase(height, width, shelves):
    """Draw a bookcase of the given size split into the given number of shelves."""
    if shelves <= 0:
        raise ValueError("a bookcase needs at least one shelf")
    shelf_height, big_shelves = divmod(height - 1, shelves)
    if shelf_height < 1:
        raise ValueError("too many shelves for this height")

    sides = "|" + " " * (width - 2) + "|"
    bottom = "|" + "_" * (width - 2) + "|"
    lines = ["/" * (width // 2) + "^" * (width % 2) + "\\" * (width // 2)]
    sizes = [shelf_height] * (shelves - big_shelves) + [shelf_height + 1] * big_shelves
    for size in sizes:
        lines.extend([sides] * (size - 1))
        lines.append(bottom)
    return lines


def picture_frame(wife, husband):
    """Frame built from two names repeated along its edges."""
    if not wife or not husband:
        raise ValueError("names must not be empty")
    width = lcm(len(wife), len(husband))
    lines = [wife * (width // len(wife))]
    lines.extend(
        husband[i % len(husband)] + " " * (width - 2) + wife[i % len(wife)]
        for i in range(width)
    )
    lines.append(husband * (width // len(husband)))
    return lines


def turn_sign(direction, arrows, height, width, spacing, indent):
    """Draw a chevron sign pointing left or right."""
    layer = (">" if direction == "right" else "<") * width
    line = (" " * spacing).join([layer] * max(arrows, 1))

    step = indent
    current = 0
    if direction == "left":
        current = height // 2 * step
        step = -step

    lines = []
    for row in range(height):
        lines.append(" " * current + line)
        if row == height // 2:
            step = -step
        current += step
    return lines


def atari_text(word):
    """Render an upper-case word in the 8x8 Atari font, trimming blank rows."""
    glyphs = []
    for letter in word:
        if not ("A" <= letter <= "Z"):
            raise ValueError(f"unsupported character {letter!r}")
        bits = format(_ATARI_GLYPHS[ord(letter) - ord("A")], "064b")
        glyphs.append(bits.translate(_ATARI_BITS))

    lines = []
    for row in range(8):
        line = "".join(glyph[row * 8:row * 8 + 8] for glyph in glyphs)
        if "X" in line:
            lines.append(line.rstrip(" "))
    return lines