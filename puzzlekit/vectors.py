"""Named points in any number of dimensions and the vectors between them."""

from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class Point:
    """A named point with integer coordinates."""

    name: str
    coords: tuple

    @classmethod
    def parse(cls, text, dimensions):
        """Read a point written as 'NAME(x,y,...)'."""
        name, bracket, rest = text.partition("(")
        if not bracket:
            raise ValueError(f"missing '(' in {text!r}")
        values = rest.strip().rstrip(")").split(",")
        if len(values) < dimensions:
            raise ValueError(f"expected {dimensions} coordinates in {text!r}")
        try:
            coords = tuple(int(value) for value in values[:dimensions])
        except ValueError:
            raise ValueError(f"bad coordinate in {text!r}") from None
        return cls(name.strip(), coords)

    def distance(self, other):
        """Squared Euclidean distance."""
        return sum((a - b) ** 2 for a, b in zip(self.coords, other.coords, strict=True))

    def vector_to(self, other):
        """The vector from this point to other, written 'AB(dx,dy,...)'."""
        deltas = ",".join(str(b - a) for a, b in zip(self.coords, other.coords, strict=True))
        return f"{self.name}{other.name}({deltas})"


def extreme_vectors(points):
    """Vectors of the closest and the farthest pair, earliest pair on ties."""
    pairs = list(combinations(points, 2))
    if not pairs:
        raise ValueError("at least two points are needed")
    shortest = min(pairs, key=lambda pair: pair[0].distance(pair[1]))
    longest = max(pairs, key=lambda pair: pair[0].distance(pair[1]))
    return shortest[0].vector_to(shortest[1]), longest[0].vector_to(longest[1])