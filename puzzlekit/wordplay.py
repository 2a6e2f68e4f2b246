"""Word puzzles: restoring spaces in a sentence and the frog exchange."""

from bisect import bisect_left
from collections import Counter

_UNSOLVABLE = "Unsolvable"

_FROG_RULES = (
    ("m s f f", "m f s f"),
    ("m s f m", "s m f m"),
    ("m s f", "m f s"),
    ("m f s", "s f m"),
    ("s m f", "f m s"),
    ("f m s", "f s m"),
    ("s f m", "f s m"),
)


class _Ambiguous(Exception):
    pass


def fix_spaces(sentence, words):
    """Split sentence into the given words; 'Unsolvable' if there are several ways."""
    available = Counter(words)
    vocabulary = sorted(available)
    chosen = []
    found = []

    def search(position):
        start = bisect_left(vocabulary, sentence[position:position + 1])
        for word in vocabulary[start:]:
            piece = sentence[position:position + len(word)]
            if word > piece:
                break
            if not available[word] or word != piece:
                continue
            available[word] -= 1
            chosen.append(word)
            if position + len(word) == len(sentence):
                if found:
                    raise _Ambiguous
                found.extend(chosen)
            else:
                search(position + len(word))
            chosen.pop()
            available[word] += 1

    try:
        search(0)
    except _Ambiguous:
        return _UNSOLVABLE
    return " ".join(found)


def frog_exchange(start):
    """Every position of the frogs, from start until no rule applies."""
    states = [start]
    mirrored = start.startswith("f")
    current = start[::-1] if mirrored else start
    while True:
        for pattern, replacement in _FROG_RULES:
            if pattern in current:
                current = current.replace(pattern, replacement, 1)
                states.append(current[::-1] if mirrored else current)
                break
        else:
            return states