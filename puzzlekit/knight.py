"""Locate a bomb on a grid from warmer/colder answers, one axis at a time."""

import math
from dataclasses import dataclass, field

WARMER = "WARMER"
COLDER = "COLDER"
SAME = "SAME"


@dataclass
class Axis:
    """Search state along one axis: current jump and the bomb's possible range."""

    size: int
    position: int
    low: int = field(init=False, default=0)
    high: int = field(init=False)
    maximum: int = field(init=False)
    new_position: int = field(init=False)

    def __post_init__(self):
        if self.size < 1:
            raise ValueError("the axis must have at least one cell")
        if not 0 <= self.position < self.size:
            raise ValueError("the start lies outside the grid")
        self.maximum = self.size - 1
        self.high = self.maximum
        self.new_position = self.position

    @property
    def solved(self):
        return self.low == self.high

    def next_jump(self):
        """Coordinate for the next jump along this axis."""
        middle = (self.low + self.high) / 2
        destination = int(middle + (middle - self.position))
        if destination < 0 or destination > self.maximum:
            destination = self.low + (self.high - self.low) * 3 // 5
        elif destination == self.position:
            destination += -2 if self.position < self.maximum - self.position else 2
            destination = min(max(destination, self.low), self.high)
        return destination

    def record(self, answer):
        """Narrow the range from the answer to the jump to new_position."""
        middle = (self.new_position + self.position) / 2
        if answer == SAME:
            self.low = self.high = int(middle)
        elif (answer == COLDER and self.new_position > self.position) or (
            answer == WARMER and self.new_position < self.position
        ):
            self.high = min(self.high, math.ceil(middle - 1))
        elif answer in (COLDER, WARMER):
            self.low = max(self.low, math.floor(middle + 1))
        else:
            raise ValueError(f"unexpected answer {answer!r}")
        self.position = self.new_position


def find_bomb(width, height, start_x, start_y, oracle):
    """Bomb position; oracle(x, y) answers each jump with WARMER, COLDER or SAME."""
    x = Axis(width, start_x)
    y = Axis(height, start_y)
    for axis in (x, y):
        while not axis.solved:
            axis.new_position = axis.next_jump()
            axis.record(oracle(x.new_position, y.new_position))
    return x.low, y.low