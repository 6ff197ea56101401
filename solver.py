"""
Real Root Isolation Module

Brackets the real roots of a Polynomial with a fixed-step sign sweep.
The sweep walks away from the origin and stops once the polynomial and
every one of its derivatives share a strict sign, at which point the
function can only move further away from zero.
"""
from __future__ import annotations
from typing import List, Tuple
import logging
import math

from interval import Interval
from polynomial import Polynomial

logger = logging.getLogger(__name__)

DEFAULT_STEP = 1e-3


class InvalidStep(ValueError):
    def __init__(self, dx: float) -> None:
        super().__init__(f"Step must be positive, got {dx!r}")
        self.dx = dx


class RootIsolator:
    """Numerical real-root search for sparse polynomials."""

    def isolate(self, p: Polynomial, dx: float = DEFAULT_STEP) -> List[Interval]:
        """
        Bracket the real roots of p.

        Args:
            p: Polynomial to search
            dx: Sweep resolution, must be positive

        Returns:
            The point [0, 0] for a root at the origin, then one interval per
            detected sign change on the positive side, then the negative ones.
            Each bracket is at most dx wide.
        """
        self._check_step(dx)
        terms = [(power, c) for power, c in p.coeffs.items() if c != 0]
        if not terms:
            return []
        if len(terms) == 1:
            # c*x^n has a single real root at 0 unless it is a constant
            power, _ = terms[0]
            return [] if power == 0 else [Interval.point(0.0)]

        brackets: List[Interval] = []
        if p.at(0.0) == 0.0:
            brackets.append(Interval.point(0.0))
        for lo, hi in self.positive_brackets(p, dx):
            brackets.append(Interval.left_open(lo, hi))
        for lo, hi in self.positive_brackets(p.reflect_about_y_axis(), dx):
            brackets.append(Interval(-hi, -lo, False, True))
        return brackets

    def real_roots(self, p: Polynomial, dx: float = DEFAULT_STEP) -> List[float]:
        """
        Approximate the real roots of p to within dx.

        Roots come in the order zero, positive, negative. They are not
        deduplicated and a multiple root may be reported once or not at all.
        """
        roots: List[float] = []
        for b in self.isolate(p, dx):
            # the far end from the origin is the sample that hit the sign change
            roots.append(b.right() if b.right() > 0 else b.left())
        return roots

    def positive_brackets(self, p: Polynomial, dx: float) -> List[Tuple[float, float]]:
        """
        Sweep x = dx, 2dx, ... and collect (x_prev, x) pairs where p changes sign.

        The origin only opens the first pair when p(0) != 0, so a root at zero
        is never reported here. Every other pair with p(x_prev) * p(x) <= 0 is
        kept: a sample that lands exactly on a root shows up in two pairs.
        """
        self._check_step(dx)
        n = p.degree()
        if n is None or n == 0:
            return []
        derivatives: List[Polynomial] = []
        d = p
        for _ in range(n):
            d = d.derivative()
            derivatives.append(d)

        found: List[Tuple[float, float]] = []
        x_prev, y_prev = 0.0, p.at(0.0)
        # a root at the origin is reported by the caller, it never opens a bracket
        compare = y_prev != 0.0
        step = 1
        while True:
            x = step * dx
            try:
                y = p.at(x)
                slopes = [q.at(x) for q in derivatives]
            except OverflowError:
                logger.warning("Sweep overflowed at x=%g for %s, stopping", x, p)
                break
            if not math.isfinite(y) or not all(math.isfinite(s) for s in slopes):
                logger.warning("Sweep hit a non-finite value at x=%g for %s, stopping", x, p)
                break
            if compare and y_prev * y <= 0:
                found.append((x_prev, x))
            if (y > 0 and all(s > 0 for s in slopes)) or (
                y < 0 and all(s < 0 for s in slopes)
            ):
                logger.debug("Monotone past x=%g after %d steps", x, step)
                break
            x_prev, y_prev = x, y
            compare = True
            step += 1
        return found

    @staticmethod
    def _check_step(dx: float) -> None:
        if not dx > 0:
            raise InvalidStep(dx)


_default_isolator = RootIsolator()


def real_roots(p: Polynomial, dx: float = DEFAULT_STEP) -> List[float]:
    return _default_isolator.real_roots(p, dx)


def real_root_brackets(p: Polynomial, dx: float = DEFAULT_STEP) -> List[Interval]:
    return _default_isolator.isolate(p, dx)
