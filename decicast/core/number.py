"""
Exact base-10 decimal value type.

A Decimal is an unscaled integer plus a scale (the count of digits after the
decimal point). Nothing is ever rounded implicitly:

- add / subtract keep the larger operand scale
- multiply adds the operand scales
- divide always takes an explicit target scale and rounding mode

Comparison and equality are numeric, so Decimal("1.5") == Decimal("1.50"),
while to_canonical_text() still renders each value with its own scale.
"""

from typing import Optional, Union

from ..config import DecimalConfig
from .errors import DivisionByZero, MalformedLiteral
from .models import Comparison, RoundingMode

_LITERAL_CHARS = frozenset("0123456789-.")

# Stay well below the interpreter's int/str conversion limit (4300 digits)
_CHUNK_DIGITS = 1000
_CHUNK_BITS = 3000  # ~903 decimal digits


def digits_to_int(digits: str) -> int:
    """Convert an ASCII digit string of any length to a non-negative int."""
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    split = len(digits) // 2
    high, low = digits[:-split], digits[-split:]
    return digits_to_int(high) * 10 ** split + digits_to_int(low)


def int_to_digits(value: int) -> str:
    """Render a non-negative int of any size as decimal digits."""
    if value.bit_length() <= _CHUNK_BITS:
        return str(value)
    split = int(value.bit_length() * 0.30103) // 2
    high, low = divmod(value, 10 ** split)
    return int_to_digits(high) + int_to_digits(low).rjust(split, "0")


def _round_quotient(quotient: int, remainder: int, divisor: int, negative: bool, mode: RoundingMode) -> int:
    """
    Round a non-negative quotient whose exact value is quotient + remainder/divisor.

    Args:
        quotient: Truncated magnitude of the result
        remainder: Remainder of the magnitude division (0 <= remainder < divisor)
        divisor: Positive divisor
        negative: Whether the true result is negative
        mode: Rounding policy

    Returns:
        Rounded magnitude (sign is applied by the caller)
    """
    if remainder == 0:
        return quotient

    if mode is RoundingMode.TRUNCATE:
        round_up = False
    elif mode is RoundingMode.AWAY_FROM_ZERO:
        round_up = True
    elif mode is RoundingMode.CEILING:
        round_up = not negative
    elif mode is RoundingMode.FLOOR:
        round_up = negative
    else:
        twice = remainder * 2
        if twice != divisor:
            round_up = twice > divisor
        elif mode is RoundingMode.HALF_UP:
            round_up = True
        elif mode is RoundingMode.HALF_DOWN:
            round_up = False
        else:
            round_up = quotient % 2 == 1

    return quotient + 1 if round_up else quotient


class Decimal:
    """
    Immutable exact decimal number.

    parse() also accepts non-canonical spellings such as "007" and "-0.00"
    and normalizes them ("7", "0.00"). Text therefore round-trips character
    for character only for canonical literals, i.e. the output of
    to_canonical_text().

    Usage:
        price = Decimal("19.99")
        total = price * 3                      # Decimal('59.97')
        share = total.divide(Decimal("7"), 2)  # Decimal('8.57')
    """

    __slots__ = ("_unscaled", "_scale")

    def __init__(self, value: Union[str, int, "Decimal"] = "0"):
        if isinstance(value, Decimal):
            unscaled, scale = value._unscaled, value._scale
        elif isinstance(value, int) and not isinstance(value, bool):
            unscaled, scale = value, 0
        else:
            parsed = Decimal.parse(value)
            unscaled, scale = parsed._unscaled, parsed._scale
        object.__setattr__(self, "_unscaled", unscaled)
        object.__setattr__(self, "_scale", scale)

    @classmethod
    def _make(cls, unscaled: int, scale: int) -> "Decimal":
        obj = object.__new__(cls)
        object.__setattr__(obj, "_unscaled", unscaled)
        object.__setattr__(obj, "_scale", scale)
        return obj

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Decimal":
        """
        Parse a decimal literal: optional leading '-', digits, optional '.digits'.

        Whitespace is never trimmed. Leading zeros and negative zero are
        accepted and normalized, so only canonical literals round-trip
        character for character.

        Raises:
            MalformedLiteral: If text does not match the grammar
        """
        if not isinstance(text, str):
            raise MalformedLiteral(text, f"expected str, got {type(text).__name__}")
        if not text:
            raise MalformedLiteral(text, "empty literal")

        max_length = DecimalConfig.get_max_literal_length()
        if len(text) > max_length:
            raise MalformedLiteral(text[:32] + "...", f"literal longer than {max_length} characters")

        for ch in text:
            if ch.isspace():
                raise MalformedLiteral(text, "whitespace is not allowed")
            if ch not in _LITERAL_CHARS:
                raise MalformedLiteral(text, f"unexpected character {ch!r}")

        sign_count = text.count("-")
        if sign_count > 1:
            raise MalformedLiteral(text, "multiple signs")
        if sign_count == 1 and not text.startswith("-"):
            raise MalformedLiteral(text, "sign must be in leading position")

        body = text[1:] if sign_count else text
        if body.count(".") > 1:
            raise MalformedLiteral(text, "multiple decimal points")

        int_part, dot, frac_part = body.partition(".")
        if not int_part:
            raise MalformedLiteral(text, "missing integer digits")
        if dot and not frac_part:
            raise MalformedLiteral(text, "missing fractional digits")

        unscaled = digits_to_int(int_part + frac_part)
        return cls._make(-unscaled if sign_count else unscaled, len(frac_part))

    @classmethod
    def from_int(cls, value: int) -> "Decimal":
        """Zero-scale Decimal holding an integer exactly."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls._make(value, 0)

    @classmethod
    def from_unscaled(cls, unscaled: int, scale: int = 0) -> "Decimal":
        """Build unscaled * 10**-scale."""
        if isinstance(unscaled, bool) or not isinstance(unscaled, int):
            raise TypeError(f"unscaled value must be int, got {type(unscaled).__name__}")
        if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
            raise ValueError(f"scale must be a non-negative int, got {scale!r}")
        return cls._make(unscaled, scale)

    @classmethod
    def zero(cls, scale: int = 0) -> "Decimal":
        return cls.from_unscaled(0, scale)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    @property
    def sign(self) -> int:
        """-1 for negative values, +1 otherwise (zero is positive)."""
        return -1 if self._unscaled < 0 else 1

    @property
    def digits(self) -> str:
        return int_to_digits(abs(self._unscaled))

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def unscaled(self) -> int:
        return self._unscaled

    def to_canonical_text(self) -> str:
        """Render [-]digits[.digits] with exactly `scale` fractional digits."""
        digits = int_to_digits(abs(self._unscaled))
        if self._scale:
            digits = digits.rjust(self._scale + 1, "0")
            digits = f"{digits[:-self._scale]}.{digits[-self._scale:]}"
        return f"-{digits}" if self._unscaled < 0 else digits

    def __str__(self) -> str:
        return self.to_canonical_text()

    def __repr__(self) -> str:
        return f"Decimal('{self.to_canonical_text()}')"

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_restore, (self._unscaled, self._scale))

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self._unscaled == 0

    def is_negative(self) -> bool:
        return self._unscaled < 0

    def __bool__(self) -> bool:
        return self._unscaled != 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _aligned(self, other: "Decimal"):
        scale = max(self._scale, other._scale)
        left = self._unscaled * 10 ** (scale - self._scale)
        right = other._unscaled * 10 ** (scale - other._scale)
        return left, right, scale

    def add(self, other: "Decimal") -> "Decimal":
        left, right, scale = self._aligned(other)
        return Decimal._make(left + right, scale)

    def subtract(self, other: "Decimal") -> "Decimal":
        left, right, scale = self._aligned(other)
        return Decimal._make(left - right, scale)

    def multiply(self, other: "Decimal") -> "Decimal":
        return Decimal._make(self._unscaled * other._unscaled, self._scale + other._scale)

    def divide(self, other: "Decimal", target_scale: int, rounding: RoundingMode = RoundingMode.HALF_UP) -> "Decimal":
        """
        Divide by other, producing a result with exactly target_scale digits.

        Args:
            other: Divisor
            target_scale: Number of fractional digits in the result
            rounding: Rounding policy for the dropped digits

        Raises:
            DivisionByZero: If other is zero
            ValueError: If target_scale is negative
        """
        if isinstance(target_scale, bool) or not isinstance(target_scale, int) or target_scale < 0:
            raise ValueError(f"target scale must be a non-negative int, got {target_scale!r}")
        if other._unscaled == 0:
            raise DivisionByZero(self.to_canonical_text())

        # self/other * 10**target_scale == numerator/denominator
        numerator = self._unscaled * 10 ** (target_scale + other._scale)
        denominator = other._unscaled * 10 ** self._scale
        negative = (numerator < 0) != (denominator < 0)
        quotient, remainder = divmod(abs(numerator), abs(denominator))
        magnitude = _round_quotient(quotient, remainder, abs(denominator), negative, rounding)
        return Decimal._make(-magnitude if negative else magnitude, target_scale)

    def modulo(self, other: "Decimal") -> "Decimal":
        """Truncated remainder: carries the dividend's sign, scale = max of scales."""
        if other._unscaled == 0:
            raise DivisionByZero(self.to_canonical_text())
        left, right, scale = self._aligned(other)
        remainder = abs(left) % abs(right)
        return Decimal._make(-remainder if left < 0 else remainder, scale)

    def power(self, exponent: int) -> "Decimal":
        """Raise to a non-negative integer power; scale is multiplied by the exponent."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            raise ValueError("negative exponents need an explicit division scale")
        return Decimal._make(self._unscaled ** exponent, self._scale * exponent)

    def negate(self) -> "Decimal":
        return Decimal._make(-self._unscaled, self._scale)

    def absolute(self) -> "Decimal":
        return Decimal._make(abs(self._unscaled), self._scale)

    # ------------------------------------------------------------------
    # Rounding
    # ------------------------------------------------------------------

    def rescale(self, scale: int, rounding: RoundingMode = RoundingMode.HALF_UP) -> "Decimal":
        """Return the value at exactly `scale` digits, zero-extending or rounding."""
        if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
            raise ValueError(f"scale must be a non-negative int, got {scale!r}")
        if scale >= self._scale:
            return Decimal._make(self._unscaled * 10 ** (scale - self._scale), scale)
        divisor = 10 ** (self._scale - scale)
        negative = self._unscaled < 0
        quotient, remainder = divmod(abs(self._unscaled), divisor)
        magnitude = _round_quotient(quotient, remainder, divisor, negative, rounding)
        return Decimal._make(-magnitude if negative else magnitude, scale)

    def round(self, places: int = 0, rounding: RoundingMode = RoundingMode.HALF_UP) -> "Decimal":
        """
        Round to `places` fractional digits without ever widening the scale.

        Negative places round to tens, hundreds, ... and return scale 0.
        """
        if isinstance(places, bool) or not isinstance(places, int):
            raise TypeError(f"places must be int, got {type(places).__name__}")
        if places >= self._scale:
            return self
        if places >= 0:
            return self.rescale(places, rounding)
        divisor = 10 ** (self._scale - places)
        negative = self._unscaled < 0
        quotient, remainder = divmod(abs(self._unscaled), divisor)
        magnitude = _round_quotient(quotient, remainder, divisor, negative, rounding) * 10 ** (-places)
        return Decimal._make(-magnitude if negative else magnitude, 0)

    def floor(self) -> "Decimal":
        return self.rescale(0, RoundingMode.FLOOR)

    def ceil(self) -> "Decimal":
        return self.rescale(0, RoundingMode.CEILING)

    def normalize(self) -> "Decimal":
        """Strip trailing fractional zeros (zero normalizes to scale 0)."""
        unscaled, scale = self._unscaled, self._scale
        if unscaled == 0:
            return Decimal._make(0, 0)
        while scale and unscaled % 10 == 0:
            unscaled //= 10
            scale -= 1
        return Decimal._make(unscaled, scale)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, other: "Decimal") -> Comparison:
        left, right, _ = self._aligned(other)
        if left < right:
            return Comparison.LESS
        if left > right:
            return Comparison.GREATER
        return Comparison.EQUAL

    @staticmethod
    def _coerce(other) -> Optional["Decimal"]:
        if isinstance(other, Decimal):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Decimal._make(other, 0)
        return None

    def _compare_to(self, other) -> Optional[int]:
        coerced = Decimal._coerce(other)
        if coerced is None:
            return None
        return self.compare(coerced).value

    def __eq__(self, other):
        result = self._compare_to(other)
        return NotImplemented if result is None else result == 0

    def __ne__(self, other):
        result = self._compare_to(other)
        return NotImplemented if result is None else result != 0

    def __lt__(self, other):
        result = self._compare_to(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other):
        result = self._compare_to(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other):
        result = self._compare_to(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other):
        result = self._compare_to(other)
        return NotImplemented if result is None else result >= 0

    def __hash__(self):
        normal = self.normalize()
        if normal._scale == 0:
            return hash(normal._unscaled)
        return hash((normal._unscaled, normal._scale))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        coerced = Decimal._coerce(other)
        return NotImplemented if coerced is None else self.add(coerced)

    def __radd__(self, other):
        coerced = Decimal._coerce(other)
        return NotImplemented if coerced is None else coerced.add(self)

    def __sub__(self, other):
        coerced = Decimal._coerce(other)
        return NotImplemented if coerced is None else self.subtract(coerced)

    def __rsub__(self, other):
        coerced = Decimal._coerce(other)
        return NotImplemented if coerced is None else coerced.subtract(self)

    def __mul__(self, other):
        coerced = Decimal._coerce(other)
        return NotImplemented if coerced is None else self.multiply(coerced)

    def __rmul__(self, other):
        coerced = Decimal._coerce(other)
        return NotImplemented if coerced is None else coerced.multiply(self)

    def __mod__(self, other):
        coerced = Decimal._coerce(other)
        return NotImplemented if coerced is None else self.modulo(coerced)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.absolute()

    def __int__(self) -> int:
        """Integer part, truncated toward zero."""
        return self.rescale(0, RoundingMode.TRUNCATE)._unscaled


def _restore(unscaled: int, scale: int) -> Decimal:
    return Decimal.from_unscaled(unscaled, scale)
