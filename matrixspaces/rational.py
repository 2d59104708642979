"""Exact rational numbers for matrix arithmetic."""

"""
Every cell of a matrix is a ``Rational`` kept in lowest terms with a
positive denominator, so row reduction never accumulates floating-point
error.  ``to_rational`` is the one place where raw input (ints, floats,
strings, other rational types) is turned into a ``Rational``; code past
that boundary only ever handles ``Rational``.
"""

import math
import numbers
import re
from functools import total_ordering

import sympy

from matrixspaces.errors import DivisionByZeroError, InvalidNumberError
from matrixspaces.settings import DECIMAL_EPSILON, MAX_DENOMINATOR

# Literal forms accepted by ``Rational.parse``.
_INTEGER_RE = re.compile(r'-?\d+')
_DECIMAL_RE = re.compile(r'-?\d+\.\d+')


@total_ordering
class Rational:
    """Immutable fraction ``numerator / denominator`` in lowest terms."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        for part in (numerator, denominator):
            if isinstance(part, bool) or not isinstance(part, int):
                raise TypeError(
                    f"Rational parts must be integers, got {type(part).__name__}")
        if denominator == 0:
            raise DivisionByZeroError("Denominator cannot be zero.")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = math.gcd(numerator, denominator)
        object.__setattr__(self, "_numerator", numerator // g)
        object.__setattr__(self, "_denominator", denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # ── Construction helpers ────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Read an integer (``-3``), decimal (``0.25``) or fraction (``3/-4``).

        Decimals go through ``from_decimal`` and are therefore approximated
        with a bounded denominator, not converted digit by digit.  Both parts of
        a fraction must be integers.
        """
        s = text.strip()
        if '/' in s:
            parts = [p.strip() for p in s.split('/')]
            if len(parts) != 2 or not all(_INTEGER_RE.fullmatch(p) for p in parts):
                raise InvalidNumberError(f"Invalid fraction: '{text.strip()}'")
            num, den = (int(p) for p in parts)
            if den == 0:
                raise DivisionByZeroError(
                    f"Invalid fraction: '{text.strip()}' has a zero denominator.")
            return cls(num, den)
        if _INTEGER_RE.fullmatch(s) or _DECIMAL_RE.fullmatch(s):
            return cls._parse_plain(s)
        raise InvalidNumberError(f"Invalid number: '{text.strip()}'")

    @classmethod
    def _parse_plain(cls, s: str) -> "Rational":
        if '.' in s:
            return cls.from_decimal(float(s))
        return cls(int(s))

    @classmethod
    def from_decimal(cls, value: float,
                     max_denominator: int = MAX_DENOMINATOR) -> "Rational":
        """Best approximation of *value* with denominator ≤ *max_denominator*.

        Scans every denominator in order and keeps the first candidate with
        the smallest error, stopping early once the error drops below
        ``DECIMAL_EPSILON``.
        """
        if math.isnan(value) or math.isinf(value):
            raise InvalidNumberError(f"Invalid number: {value}")
        if float(value).is_integer():
            return cls(int(value))

        sign = -1 if value < 0 else 1
        x = abs(value)

        best_num, best_den = 1, 1
        best_error = abs(x - 1)
        for den in range(1, max_denominator + 1):
            num = math.floor(x * den + 0.5)
            error = abs(x - num / den)
            if error < best_error:
                best_num, best_den, best_error = num, den, error
                if error < DECIMAL_EPSILON:
                    break
        return cls(sign * best_num, best_den)

    # ── Predicates ──────────────────────────────────────────────────────

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    # ── Arithmetic ──────────────────────────────────────────────────────

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational(self._numerator * other._denominator + other._numerator * self._denominator,
                        self._denominator * other._denominator)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Rational(self._numerator * other._numerator,
                        self._denominator * other._denominator)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other.is_zero():
            raise DivisionByZeroError("Division by zero.")
        return Rational(self._numerator * other._denominator,
                        self._denominator * other._numerator)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __neg__(self):
        return Rational(-self._numerator, self._denominator)

    def __abs__(self):
        return Rational(abs(self._numerator), self._denominator)

    def reciprocal(self) -> "Rational":
        if self.is_zero():
            raise DivisionByZeroError("Zero has no reciprocal.")
        return Rational(self._denominator, self._numerator)

    # ── Comparison ──────────────────────────────────────────────────────

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return (self._numerator == other._numerator
                and self._denominator == other._denominator)

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __hash__(self):
        # Integral values hash like the int they compare equal to.
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    # ── Conversions ─────────────────────────────────────────────────────

    def __float__(self):
        return self._numerator / self._denominator

    def to_display(self) -> str:
        """``"3"`` for integers, ``"-1/2"`` otherwise."""
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def to_sympy(self) -> sympy.Rational:
        return sympy.Rational(self._numerator, self._denominator)

    def to_latex(self) -> str:
        return sympy.latex(self.to_sympy())

    def __str__(self):
        return self.to_display()

    def __repr__(self):
        return f"Rational({self._numerator}, {self._denominator})"


def _coerce(value):
    """Operand coercion for the arithmetic dunders: ints only, never floats."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return NotImplemented


ZERO = Rational(0)
ONE = Rational(1)


def to_rational(value) -> Rational:
    """Convert a raw cell value into a ``Rational``.

    Accepts ``Rational``, ``int``, ``float``, numeric strings and any other
    ``numbers.Rational`` (``fractions.Fraction``, SymPy rationals).
    Raises ``InvalidNumberError`` for anything else.
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, bool):
        raise InvalidNumberError(f"Invalid number: {value!r}")
    if isinstance(value, int):
        return Rational(value)
    if isinstance(value, str):
        return Rational.parse(value)
    if isinstance(value, float):
        return Rational.from_decimal(value)
    if isinstance(value, sympy.Rational):
        return Rational(int(value.p), int(value.q))
    if isinstance(value, numbers.Rational):
        return Rational(int(value.numerator), int(value.denominator))
    raise InvalidNumberError(f"Cannot convert {type(value).__name__} to a number.")
