"""
Validated conversion between untyped external values and Decimal.

The converter is the gatekeeper at both storage boundaries:

- read:  raw value -> classify() -> ConversionInput -> Decimal (or None)
- write: Decimal (or None) -> canonical text

Float input is the only conversion that succeeds with a diagnostic. What
happens to that diagnostic depends on the float policy:

- warn:   logged and issued as a LossyConversionWarning
- log:    logged only
- reject: floats raise UnsupportedInputType
"""

import decimal
import logging
import warnings
from typing import Optional

from ..config import FLOAT_POLICIES, DecimalConfig
from .decimal_utils import from_std_decimal, render_float
from .errors import InvalidDecimalText, LossyConversionWarning, MalformedLiteral, UnsupportedInputType
from .models import (
    Absent,
    AlreadyDecimal,
    ConversionInput,
    ConversionResult,
    FloatingPoint,
    Integer,
    LossyConversion,
    Text,
)
from .number import Decimal

logger = logging.getLogger(__name__)

FLOAT_PRECISION_MESSAGE = (
    "Float values may lose precision when converted to Decimal. "
    "Use strings for exact decimal values (e.g., '19.99' instead of 19.99)."
)

_VARIANTS = (Text, Integer, FloatingPoint, AlreadyDecimal, Absent)


def describe_type(value: object) -> str:
    """Short type description used in error messages."""
    if value is None:
        return "None"
    if isinstance(value, decimal.Decimal):
        return "decimal.Decimal"
    return type(value).__name__


def classify(value: object, field: str = "value") -> ConversionInput:
    """
    Map a plain Python value onto the closed set of boundary inputs.

    Values that are already ConversionInput variants are returned unchanged.

    Raises:
        UnsupportedInputType: For bool, containers and any other type
    """
    if isinstance(value, _VARIANTS):
        return value
    if value is None:
        return Absent()
    if isinstance(value, Decimal):
        return AlreadyDecimal(value)
    if isinstance(value, decimal.Decimal):
        return AlreadyDecimal(from_std_decimal(value, field))
    if isinstance(value, str):
        return Text(value)
    # bool is an int subclass but never a quantity
    if isinstance(value, bool):
        raise UnsupportedInputType(field, "bool")
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return FloatingPoint(value)
    raise UnsupportedInputType(field, describe_type(value))


class BoundaryConverter:
    """
    Stateless converter between external values and Decimal.

    Usage:
        converter = BoundaryConverter()
        price = converter.from_external("19.99", field="price")
        converter.to_storage_text(price)  # "19.99"
    """

    def __init__(self, float_policy: Optional[str] = None):
        """
        Initialize the converter.

        Args:
            float_policy: 'warn', 'log' or 'reject' (defaults to DECICAST_FLOAT_POLICY)
        """
        policy = (float_policy or DecimalConfig.get_float_policy()).strip().lower()
        if policy not in FLOAT_POLICIES:
            raise ValueError(f"Unknown float policy {float_policy!r}; expected one of {FLOAT_POLICIES}")
        self.float_policy = policy

    def convert(self, value: object, field: str = "value", *, stacklevel: int = 1) -> ConversionResult:
        """
        Convert an external value, returning diagnostics alongside the result.

        Args:
            value: Raw value or ConversionInput variant
            field: Attribute name, used in messages
            stacklevel: Frames above the caller that a LossyConversionWarning points at

        Raises:
            InvalidDecimalText: If text (or a float's rendering) is not a decimal literal
            UnsupportedInputType: If the value's type is not convertible
        """
        source = classify(value, field)

        if isinstance(source, Absent):
            return ConversionResult(None)

        if isinstance(source, AlreadyDecimal):
            if not isinstance(source.value, Decimal):
                raise UnsupportedInputType(field, describe_type(source.value))
            return ConversionResult(source.value)

        if isinstance(source, Text):
            return ConversionResult(self._parse_text(source.value, field, describe_type(source.value)))

        if isinstance(source, Integer):
            if isinstance(source.value, bool) or not isinstance(source.value, int):
                raise UnsupportedInputType(field, describe_type(source.value))
            return ConversionResult(Decimal.from_int(source.value))

        if isinstance(source, FloatingPoint):
            return self._convert_float(source.value, field, stacklevel + 2)

        raise UnsupportedInputType(field, describe_type(source))

    def from_external(self, value: object, field: str = "value", *, stacklevel: int = 1) -> Optional[Decimal]:
        """Convert an external value to Decimal; None stays None."""
        return self.convert(value, field, stacklevel=stacklevel + 1).value

    def to_storage_text(self, value: Optional[Decimal], field: str = "value") -> Optional[str]:
        """Render a Decimal as canonical storage text; None stays None."""
        if value is None or isinstance(value, Absent):
            return None
        if not isinstance(value, Decimal):
            raise UnsupportedInputType(field, describe_type(value))
        return value.to_canonical_text()

    def _parse_text(self, text: str, field: str, type_name: str) -> Decimal:
        try:
            return Decimal.parse(text)
        except MalformedLiteral as e:
            logger.debug(f"Rejected {field} literal ({type_name}): {e.reason}")
            raise InvalidDecimalText(field, type_name, e.reason) from e

    def _convert_float(self, value: float, field: str, stacklevel: int) -> ConversionResult:
        if self.float_policy == "reject":
            raise UnsupportedInputType(
                field, "float", "Float input is disabled; pass the value as a numeric string."
            )

        rendered = render_float(float(value))
        result = self._parse_text(rendered, field, "float")

        diagnostic = LossyConversion(
            field=field,
            original=value,
            rendered=rendered,
            message=FLOAT_PRECISION_MESSAGE,
        )
        logger.warning(f"Lossy float conversion for {field}: {value!r} stored as {rendered}")
        if self.float_policy == "warn":
            warnings.warn(FLOAT_PRECISION_MESSAGE, LossyConversionWarning, stacklevel=stacklevel)

        return ConversionResult(result, (diagnostic,))


def from_external(value: object, field: str = "value") -> Optional[Decimal]:
    """Convert with a converter built from the current configuration."""
    return BoundaryConverter().from_external(value, field, stacklevel=2)


def to_storage_text(value: Optional[Decimal], field: str = "value") -> Optional[str]:
    """Render canonical storage text with a default converter."""
    return BoundaryConverter().to_storage_text(value, field)
