"""Repair words typed on a keyboard whose keys stick or skip."""

import re
from collections import Counter

_WORD = re.compile(r"\w+", re.ASCII)


def _is_duplication(shorter, longer):
    duplications = 0
    i = j = 0
    while i < len(shorter) and j < len(longer):
        if shorter[i] != longer[j]:
            if i > 0:
                i -= 1
            duplications += 1
            if shorter[i] != longer[j] or duplications > 1:
                return False
        i += 1
        j += 1
    if duplications == 0:
        return bool(shorter) and shorter[-1] == longer[-1]
    return True


def _is_character_missing(longer, shorter):
    missing = 0
    i = j = 0
    while i < len(longer) and j < len(shorter):
        if longer[i] != shorter[j]:
            i += 1
            missing += 1
            if missing > 1 or i >= len(longer) or longer[i] != shorter[j]:
                return False
        i += 1
        j += 1
    return True


def are_similar(first, second):
    """Whether second is first with one letter doubled or one letter dropped."""
    if len(first) + 1 == len(second):
        return _is_duplication(first, second)
    if len(first) - 1 == len(second):
        return _is_character_missing(first, second)
    return False


def fix_sticky_text(text):
    """Replace rarer mistyped words by the more frequent word they resemble."""
    counts = Counter(_WORD.findall(text))
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    for index, (word, count) in enumerate(ranked):
        for other, other_count in ranked[index + 1:]:
            if count > other_count and are_similar(word, other):
                text = re.sub(
                    rf"\b{re.escape(other)}\b",
                    lambda _match, replacement=word: replacement,
                    text,
                    flags=re.ASCII,
                )
    return text