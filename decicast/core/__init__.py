"""
decicast Core Module

Provides the exact Decimal type, boundary conversion and the cast hook.
"""

from .boundary import BoundaryConverter, classify, from_external, to_storage_text
from .cast import DecimalCast, load, store
from .decimal_utils import from_std_decimal, render_float, to_float, to_std_decimal
from .errors import (
    ConversionError,
    DecimalError,
    DivisionByZero,
    InvalidDecimalText,
    LossyConversionWarning,
    MalformedLiteral,
    UnsupportedInputType,
)
from .models import (
    Absent,
    AlreadyDecimal,
    Comparison,
    ConversionInput,
    ConversionResult,
    FloatingPoint,
    Integer,
    LossyConversion,
    RoundingMode,
    Text,
)
from .number import Decimal

__all__ = [
    # Number
    "Decimal",
    # Boundary
    "BoundaryConverter",
    "classify",
    "from_external",
    "to_storage_text",
    # Cast hook
    "DecimalCast",
    "load",
    "store",
    # Interop
    "from_std_decimal",
    "render_float",
    "to_float",
    "to_std_decimal",
    # Errors
    "ConversionError",
    "DecimalError",
    "DivisionByZero",
    "InvalidDecimalText",
    "LossyConversionWarning",
    "MalformedLiteral",
    "UnsupportedInputType",
    # Models
    "Absent",
    "AlreadyDecimal",
    "Comparison",
    "ConversionInput",
    "ConversionResult",
    "FloatingPoint",
    "Integer",
    "LossyConversion",
    "RoundingMode",
    "Text",
]
