from __future__ import annotations
from typing import Dict, List, Tuple, Iterable, Optional
from dataclasses import dataclass, field
from numbers import Integral


class InvalidPower(ValueError):
    """Raised when a term is given a negative or non-integer power."""

    def __init__(self, power: object) -> None:
        super().__init__(f"Power must be a non-negative integer, got {power!r}")
        self.power = power


class DivisionByZeroPolynomial(ZeroDivisionError):
    def __init__(self) -> None:
        super().__init__("division by the zero polynomial")


@dataclass(eq=False)
class Polynomial:
    """Sparse univariate polynomial: a map from power to coefficient.

    Zero coefficients are never stored, so the empty map is the zero
    polynomial. Every operator returns a new value; only ``insert``,
    ``+=`` and ``-=`` mutate the receiver.
    """

    coeffs: Dict[int, float] = field(default_factory=dict)

    def __post_init__(self):
        raw = self.coeffs
        self.coeffs = {}
        for power, coeff in raw.items():
            self.insert(power, coeff)

    @staticmethod
    def from_pairs(pairs: Iterable[Tuple[int, float]]) -> "Polynomial":
        p = Polynomial()
        for power, coeff in pairs:
            p.insert(power, coeff)
        return p

    @staticmethod
    def constant(c: float) -> "Polynomial":
        return Polynomial.from_pairs([(0, c)])

    @staticmethod
    def variable() -> "Polynomial":
        return Polynomial.from_pairs([(1, 1.0)])

    def insert(self, power: int, coeff: float) -> None:
        if isinstance(power, bool) or not isinstance(power, Integral) or power < 0:
            raise InvalidPower(power)
        power = int(power)
        if coeff == 0:
            self.coeffs.pop(power, None)
        else:
            self.coeffs[power] = float(coeff)

    def coefficient(self, power: int) -> float:
        return self.coeffs.get(power, 0.0)

    def terms(self) -> List[Tuple[int, float]]:
        """Stored terms ordered by descending power."""
        return sorted(self.coeffs.items(), key=lambda t: t[0], reverse=True)

    def is_zero(self) -> bool:
        return all(c == 0 for c in self.coeffs.values())

    def degree(self) -> Optional[int]:
        return max((p for p, c in self.coeffs.items() if c != 0), default=None)

    def leading_coefficient(self) -> float:
        d = self.degree()
        return 0.0 if d is None else self.coeffs[d]

    def copy(self) -> "Polynomial":
        return Polynomial(dict(self.coeffs))

    def at(self, x: float) -> float:
        return sum(coeff * x ** power for power, coeff in self.coeffs.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        # both directions, so stale zero entries on either side compare equal to absence
        for a, b in ((self, other), (other, self)):
            for power, coeff in a.coeffs.items():
                if coeff != 0 and b.coefficient(power) != coeff:
                    return False
        return True

    __hash__ = None

    def __neg__(self) -> "Polynomial":
        return Polynomial({p: -c for p, c in self.coeffs.items()})

    def __add__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        res = self.copy()
        res += rhs
        return res

    def __iadd__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        for power, coeff in rhs.coeffs.items():
            self.insert(power, self.coefficient(power) + coeff)
        return self

    def __sub__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        res = self.copy()
        res -= rhs
        return res

    def __isub__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        for power, coeff in rhs.coeffs.items():
            self.insert(power, self.coefficient(power) - coeff)
        return self

    def __mul__(self, rhs: "Polynomial") -> "Polynomial":
        if not isinstance(rhs, Polynomial):
            return NotImplemented
        res = Polynomial()
        for a_power, a_coeff in self.coeffs.items():
            # cross terms of one left term land on distinct powers, but
            # different left terms collide, hence the accumulation
            row = Polynomial()
            for b_power, b_coeff in rhs.coeffs.items():
                row.insert(a_power + b_power, a_coeff * b_coeff)
            res += row
        return res

    def scalar_mul(self, r: float) -> "Polynomial":
        return Polynomial({p: c * r for p, c in self.coeffs.items()})

    def pow(self, exp: int) -> "Polynomial":
        if exp < 0:
            raise ValueError("Exponent must be non-negative integer")
        res = Polynomial.constant(1.0)
        for _ in range(exp):
            res = res * self
        return res

    def __pow__(self, exp: int) -> "Polynomial":
        if not isinstance(exp, int):
            return NotImplemented
        return self.pow(exp)

    def __truediv__(self, divisor: "Polynomial") -> "Polynomial":
        """Quotient of polynomial long division.

        The remaining dividend is reduced in place; after each step the
        entry at the old leading power is removed outright, because the
        floating-point subtraction may leave a tiny residue there and the
        degree has to drop for the loop to end.
        """
        if not isinstance(divisor, Polynomial):
            return NotImplemented
        v = divisor.degree()
        if v is None:
            raise DivisionByZeroPolynomial()
        vc = divisor.coeffs[v]
        remaining = self.copy()
        quotient = Polynomial()
        d = remaining.degree()
        while d is not None and d >= v:
            shift = d - v
            factor = remaining.coeffs[d] / vc
            quotient.insert(shift, factor)
            for power, coeff in divisor.coeffs.items():
                target = power + shift
                remaining.insert(target, remaining.coefficient(target) - factor * coeff)
            remaining.insert(d, 0.0)
            d = remaining.degree()
        return quotient

    def __mod__(self, divisor: "Polynomial") -> "Polynomial":
        if not isinstance(divisor, Polynomial):
            return NotImplemented
        return self - (self / divisor) * divisor

    def __divmod__(self, divisor: "Polynomial") -> Tuple["Polynomial", "Polynomial"]:
        if not isinstance(divisor, Polynomial):
            return NotImplemented
        q = self / divisor
        return q, self - q * divisor

    def derivative(self) -> "Polynomial":
        res = Polynomial()
        for power, coeff in self.coeffs.items():
            if power == 0:
                continue
            res.insert(power - 1, power * coeff)
        return res

    def integral(self, c: float = 0.0) -> "Polynomial":
        res = Polynomial()
        for power, coeff in self.coeffs.items():
            res.insert(power + 1, coeff / (power + 1))
        res.insert(0, c)
        return res

    def reflect_about_y_axis(self) -> "Polynomial":
        """Return q with q(x) == p(-x): odd-power coefficients change sign."""
        return Polynomial({p: (-c if p % 2 else c) for p, c in self.coeffs.items()})

    def to_string(self, var: str = "x") -> str:
        terms = [(p, c) for p, c in self.terms() if c != 0]
        if len(terms) == 0:
            return "0"
        parts: List[str] = []
        for idx, (power, coeff) in enumerate(terms):
            sign = "-" if coeff < 0 else "+"
            mag = abs(coeff)
            if power == 0:
                body = _fmt(mag)
            else:
                coeff_part = "" if mag == 1 else _fmt(mag)
                var_part = var if power == 1 else f"{var}^{power}"
                body = f"{coeff_part}{var_part}"
            if idx == 0:
                parts.append(f"-{body}" if sign == "-" else body)
            else:
                parts.append(f" {sign} {body}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        body = ", ".join(f"{p}: {c!r}" for p, c in self.terms())
        return f"Polynomial({{{body}}})"


def _fmt(c: float) -> str:
    # 5.0 -> "5", 0.25 -> "0.25"
    return str(int(c)) if c.is_integer() else repr(c)
