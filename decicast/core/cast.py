"""
Attribute cast hook for persistence and serialization layers.

An ORM calls load() when hydrating a decimal column and store() before
writing one. Both directions go through BoundaryConverter, so the stored text
is always the canonical form that load() parses back unchanged.
"""

import logging
from typing import Optional, Union

from .boundary import BoundaryConverter, describe_type
from .errors import UnsupportedInputType
from .models import Integer, Text
from .number import Decimal

logger = logging.getLogger(__name__)

StoredValue = Optional[Union[str, int]]
ApplicationValue = Optional[Union[Decimal, int, str, float]]


def load(raw: StoredValue, field: str, converter: Optional[BoundaryConverter] = None) -> Optional[Decimal]:
    """
    Cast a stored column value to Decimal.

    Args:
        raw: Text read from the database (drivers may also hand back ints)
        field: Attribute name, used in error messages
        converter: Converter to use (defaults to one built from config)

    Returns:
        Decimal, or None when the column is NULL

    Raises:
        InvalidDecimalText: If the stored text is not a decimal literal
        UnsupportedInputType: If the driver returned some other type
    """
    if raw is None:
        return None

    converter = converter or BoundaryConverter()
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, str):
        return converter.from_external(Text(raw), field)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return converter.from_external(Integer(raw), field)

    logger.debug(f"Refusing to load {field} from {describe_type(raw)}")
    raise UnsupportedInputType(field, describe_type(raw))


def store(
    value: ApplicationValue,
    field: str,
    converter: Optional[BoundaryConverter] = None,
    *,
    stacklevel: int = 1,
) -> Optional[str]:
    """
    Prepare an application value for storage as canonical text.

    Raises:
        UnsupportedInputType: If the value's type is not convertible
        InvalidDecimalText: If a string value is not a decimal literal
    """
    converter = converter or BoundaryConverter()
    return converter.to_storage_text(converter.from_external(value, field, stacklevel=stacklevel + 1), field)


class DecimalCast:
    """
    load/store pair bound to one attribute.

    Usage:
        price_cast = DecimalCast("price")
        column_text = price_cast.store(Decimal("19.99"))
        price = price_cast.load(column_text)
    """

    def __init__(self, field: str, converter: Optional[BoundaryConverter] = None):
        self.field = field
        self.converter = converter or BoundaryConverter()

    def load(self, raw: StoredValue) -> Optional[Decimal]:
        return load(raw, self.field, self.converter)

    def store(self, value: ApplicationValue) -> Optional[str]:
        return store(value, self.field, self.converter, stacklevel=2)

    def __repr__(self) -> str:
        return f"DecimalCast(field={self.field!r}, float_policy={self.converter.float_policy!r})"
