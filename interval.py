from math import inf
from typing import List, Union

import numpy as np

Number = Union[int, float]


class Interval:
    """Real interval with optionally open ends.

    Used as the sampling domain of a plot and as the bracket around an
    approximate root.
    """

    a: float
    b: float
    left_open: bool
    right_open: bool

    @staticmethod
    def point(p: Number):
        return Interval(p, p, False, False)

    @staticmethod
    def closed(l: Number, r: Number):
        return Interval(l, r, False, False)

    @staticmethod
    def left_open(l: Number, r: Number):
        return Interval(l, r, True, False)

    def __init__(self, l: Number, r: Number, lo: bool = False, ro: bool = False):
        self.a = float(l)
        self.b = float(r)
        self.left_open = lo
        self.right_open = ro

    def is_empty(self):
        return self.a > self.b or (
            self.a == self.b and (self.left_open or self.right_open)
        )

    def left(self):
        return self.a

    def right(self):
        return self.b

    def contains(self, x: Number) -> bool:
        if self.is_empty():
            return False
        above = x > self.a if self.left_open else x >= self.a
        below = x < self.b if self.right_open else x <= self.b
        return above and below

    def linspace(self, n: int) -> List[float]:
        """n evenly spaced points from left to right, both ends included."""
        if self.is_empty() or self.a == -inf or self.b == inf:
            raise ValueError(f"Cannot sample interval {self}")
        return np.linspace(self.a, self.b, n).tolist()

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.a, self.b, self.left_open, self.right_open) == (
            other.a, other.b, other.left_open, other.right_open
        )

    def __repr__(self):
        return f"Interval({self})"

    def __str__(self):
        s = "(" if self.left_open else "["

        if self.a == -inf:
            s += "-∞"
        else:
            s += str(self.a)
        s += ", "
        if self.b == inf:
            s += "∞"
        else:
            s += str(self.b)

        s += ")" if self.right_open else "]"

        return s
