"""
decicast - exact decimal values at the storage boundary.
"""

from .core import (
    BoundaryConverter,
    Decimal,
    DecimalCast,
    InvalidDecimalText,
    MalformedLiteral,
    RoundingMode,
    UnsupportedInputType,
    load,
    store,
)

__version__ = "0.1.0"

__all__ = [
    "BoundaryConverter",
    "Decimal",
    "DecimalCast",
    "InvalidDecimalText",
    "MalformedLiteral",
    "RoundingMode",
    "UnsupportedInputType",
    "load",
    "store",
]
