"""Blend two names into tabloid couple names."""

_NONE = "NONE"


class _Smoosher:
    def __init__(self, first, second):
        self.first = first
        self.second = second
        self.overlap = 1
        self.results = set()

    def smoosh(self, head, tail):
        pos1 = 0
        while pos1 <= len(head) - self.overlap:
            pos2 = tail.find(head[pos1:pos1 + self.overlap], 1)
            while pos2 != -1:
                current = self.overlap
                while (
                    pos2 + current < len(tail)
                    and pos1 + current < len(head)
                    and tail[pos2 + current] == head[pos1 + current]
                ):
                    current += 1

                blend = tail[:pos2] + head[pos1:]
                if (
                    len(blend) >= min(len(head), len(tail))
                    and not self.first.startswith(blend)
                    and not self.second.startswith(blend)
                ):
                    if current > self.overlap:
                        self.overlap = current
                        self.results.clear()
                    self.results.add(blend)
                pos2 = tail.find(head[pos1:pos1 + self.overlap], pos2 + 1)
            pos1 += 1


def couple_names(name1, name2):
    """Sorted lower-case blends with the longest overlap, or ['NONE']."""
    first, second = name1.lower(), name2.lower()
    smoosher = _Smoosher(first, second)
    smoosher.smoosh(first, second)
    smoosher.smoosh(second, first)
    return sorted(smoosher.results) or [_NONE]


def format_couple(name1, name2):
    """One answer line: '<name1> plus <name2> = <Blend> <Blend>...'."""
    blends = " ".join(blend[:1].upper() + blend[1:] for blend in couple_names(name1, name2))
    return f"{name1} plus {name2} = {blends}"