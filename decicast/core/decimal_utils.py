"""
Utility functions for conversions at the edges of the Decimal type.

This module covers the representations that live next to decicast's Decimal
in a typical application: binary floats (lossy, opt-in) and the standard
library's decimal.Decimal (lossless both ways).
"""

import decimal
import math
from typing import Optional

from .errors import UnsupportedInputType
from .number import Decimal, digits_to_int


def render_float(value: float) -> str:
    """
    Render a float as plain positional decimal text.

    The digits are the shortest string that round-trips to the same float
    (Python's repr), with exponent notation expanded so the result is a valid
    decimal literal. Negative zero renders as "0.0". Non-finite values are
    returned as repr() text ("nan", "inf", "-inf") and fail to parse later.

    Args:
        value: Float to render

    Returns:
        Decimal text such as "19.99", "0.00001" or "10000000000000000.0"
    """
    if not math.isfinite(value):
        return repr(value)
    if value == 0:
        return "0.0"

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, _, exp = text.partition("e")
    negative = mantissa.startswith("-")
    int_part, _, frac_part = mantissa.lstrip("-").partition(".")
    digits = int_part + frac_part
    point = len(int_part) + int(exp)

    if point <= 0:
        body = "0." + "0" * (-point) + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits)) + ".0"
    else:
        body = f"{digits[:point]}.{digits[point:]}"

    return f"-{body}" if negative else body


def from_std_decimal(value: decimal.Decimal, field: str = "value") -> Decimal:
    """
    Convert a standard library decimal.Decimal without losing digits or scale.

    decimal.Decimal("1.50") becomes scale 2; positive exponents such as
    decimal.Decimal("1E+3") are expanded to a zero-scale integer.

    Raises:
        UnsupportedInputType: If value is NaN or infinite
    """
    if not value.is_finite():
        raise UnsupportedInputType(field, "decimal.Decimal", f"Non-finite value {value} has no exact decimal form.")

    sign, digit_tuple, exponent = value.as_tuple()
    unscaled = digits_to_int("".join(str(d) for d in digit_tuple))
    if exponent >= 0:
        unscaled *= 10 ** exponent
        scale = 0
    else:
        scale = -exponent

    return Decimal.from_unscaled(-unscaled if sign else unscaled, scale)


def to_std_decimal(value: Decimal) -> decimal.Decimal:
    """Convert to decimal.Decimal, keeping the scale (Decimal('1.50') -> '1.50')."""
    return decimal.Decimal((
        1 if value.is_negative() else 0,
        tuple(int(c) for c in value.digits),
        -value.scale,
    ))


def to_float(value: Optional[Decimal]) -> Optional[float]:
    """
    Convert a Decimal to float for JSON output or charting.

    This is lossy and should only be used at output boundaries. Internal
    calculations should always use Decimal.
    """
    if value is None:
        return None
    return float(value.to_canonical_text())
