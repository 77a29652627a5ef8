"""Exact fractions over machine-width integers.

A ``Fraction`` keeps a signed numerator and a strictly positive denominator.
Fractions are not reduced automatically: ``Fraction(2, 4)`` stays ``2/4``
until :meth:`Fraction.simplify` is called, and arithmetic results are left
unsimplified as well.

    >>> frac = Fraction(2, 4)
    >>> frac.simplify()
    >>> str(frac)
    '1/2'
    >>> str(frac.reciprocal())
    '2/1'
    >>> str(Fraction(1, 2) + Fraction(1, 2))
    '2/2'
"""

from __future__ import annotations

from dataclasses import dataclass

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1
UINT_MAX = 2**64 - 1


class FractionError(ValueError):
    """Base error for fraction construction and arithmetic."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidDenominator(FractionError):
    pass


class FractionOverflowError(FractionError, OverflowError):
    pass


def _require_int(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an integer, got {type(value).__name__}.")
    return value


def _check_signed(value: int, label: str = "Numerator") -> int:
    if value < INT_MIN or value > INT_MAX:
        raise FractionOverflowError(f"{label} {value} does not fit in a signed 64-bit integer.")
    return value


def _check_unsigned(value: int, label: str = "Denominator") -> int:
    if value > UINT_MAX:
        raise FractionOverflowError(f"{label} {value} does not fit in an unsigned 64-bit integer.")
    return value


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers.

    ``gcd(0, b) == b`` and ``gcd(a, 0) == a``; ``gcd(0, 0) == 0``.
    """
    a = _require_int(a, "a")
    b = _require_int(b, "b")
    if a < 0 or b < 0:
        raise ValueError("gcd is defined here for non-negative integers only.")
    _check_unsigned(a, "a")
    _check_unsigned(b, "b")
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers.

    Any zero input gives ``0``.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return _check_unsigned(a * (b // divisor), "Least common multiple")


@dataclass
class Fraction:
    numerator: int
    denominator: int

    gcd = staticmethod(gcd)
    lcm = staticmethod(lcm)

    def __post_init__(self) -> None:
        _require_int(self.numerator, "Numerator")
        _require_int(self.denominator, "Denominator")
        if self.denominator == 0:
            raise InvalidDenominator("Denominator cannot be 0")
        if self.denominator < 0:
            raise InvalidDenominator("Denominator cannot be negative")
        _check_signed(self.numerator)
        _check_unsigned(self.denominator)

    def reciprocal(self) -> Fraction:
        """Return the multiplicative inverse, keeping the sign on the numerator.

        Raises :class:`InvalidDenominator` for a zero-valued fraction.
        """
        if self.numerator < 0:
            numerator = -self.denominator
        else:
            numerator = self.denominator
        return Fraction(numerator, abs(self.numerator))

    def simplify(self) -> None:
        """Reduce to lowest terms in place. ``0/d`` becomes ``0/1``."""
        divisor = gcd(abs(self.numerator), self.denominator)
        magnitude = abs(self.numerator) // divisor
        self.numerator = -magnitude if self.numerator < 0 else magnitude
        self.denominator = self.denominator // divisor

    def to_decimal(self) -> float:
        return float(self.numerator) / float(self.denominator)

    def to_string(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __float__(self) -> float:
        return self.to_decimal()

    def _scaled_numerators(self, other: Fraction) -> tuple[int, int, int]:
        common = lcm(self.denominator, other.denominator)
        left = _check_signed(self.numerator * (common // self.denominator))
        right = _check_signed(other.numerator * (common // other.denominator))
        return left, right, common

    def __add__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right, common = self._scaled_numerators(other)
        return Fraction(left + right, common)

    def __sub__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right, common = self._scaled_numerators(other)
        return Fraction(left - right, common)

    def __mul__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def __truediv__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        numerator = _check_signed(self.numerator * other.denominator)
        result = Fraction(numerator, self.denominator * abs(other.numerator))
        # the divisor's sign moved into the denominator's magnitude
        if other.numerator < 0:
            result.numerator = _check_signed(-result.numerator)
        return result
