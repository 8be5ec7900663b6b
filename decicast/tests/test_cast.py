"""
Cast Hook Tests

Tests the load/store pair an ORM calls:
- load() from stored column text
- store() from application values
- persistence through a real SQLite TEXT column
"""

import sqlite3

import pytest

from decicast.core.boundary import BoundaryConverter
from decicast.core.cast import DecimalCast, load, store
from decicast.core.errors import InvalidDecimalText, LossyConversionWarning, UnsupportedInputType
from decicast.core.number import Decimal


# =============================================================================
# LOAD
# =============================================================================

def test_load_converts_string_to_decimal():
    result = load("19.99", "price")

    assert isinstance(result, Decimal)
    assert result.to_canonical_text() == "19.99"


def test_load_handles_null():
    assert load(None, "price") is None


def test_load_preserves_precision():
    assert load("123.456789", "price").to_canonical_text() == "123.456789"


def test_load_handles_zero_and_negatives():
    assert load("0", "price").to_canonical_text() == "0"
    assert load("-99.99", "price").to_canonical_text() == "-99.99"


def test_load_accepts_integer_column_values():
    assert load(42, "quantity").to_canonical_text() == "42"


def test_load_rejects_invalid_text():
    with pytest.raises(InvalidDecimalText, match="price"):
        load("invalid", "price")


def test_load_rejects_float_column_values():
    with pytest.raises(UnsupportedInputType):
        load(19.99, "price")


# =============================================================================
# STORE
# =============================================================================

def test_store_converts_decimal_to_string():
    assert store(Decimal("19.99"), "price") == "19.99"
    assert store(Decimal("123.456789"), "price") == "123.456789"


def test_store_handles_null():
    assert store(None, "price") is None


def test_store_converts_integer():
    assert store(42, "price") == "42"


def test_store_accepts_numeric_strings():
    assert store("19.99", "price") == "19.99"
    assert store("-19.99", "price") == "-19.99"


def test_store_converts_float_with_warning():
    with pytest.warns(LossyConversionWarning, match="Float values may lose precision"):
        assert store(19.99, "price") == "19.99"


def test_store_rejects_non_numeric_string():
    with pytest.raises(InvalidDecimalText, match="must be a numeric string"):
        store("not-a-number", "price")


def test_store_rejects_invalid_types():
    with pytest.raises(UnsupportedInputType):
        store([], "price")


def test_store_uses_given_converter():
    with pytest.raises(UnsupportedInputType):
        store(1.5, "price", BoundaryConverter(float_policy="reject"))


# =============================================================================
# DECIMAL CAST + PERSISTENCE
# =============================================================================

def test_decimal_cast_binds_field(price_cast):
    assert price_cast.field == "price"
    assert price_cast.store(Decimal("10.50")) == "10.50"
    assert price_cast.load("10.50").to_canonical_text() == "10.50"
    with pytest.raises(InvalidDecimalText) as exc_info:
        price_cast.load("1.2.3")
    assert exc_info.value.field == "price"


def test_arithmetic_on_loaded_values(price_cast):
    price = price_cast.load("19.99")
    tax = price_cast.load("10.50") + Decimal("0.84")

    assert (price * Decimal("3")).to_canonical_text() == "59.97"
    assert tax.to_canonical_text() == "11.34"
    assert price < Decimal("20.00")


def test_round_trip_through_sqlite_text_column(price_cast):
    """Stored canonical text comes back with the same scale."""
    conn = sqlite3.connect(":memory:")
    try:
        conn.execute("CREATE TABLE products (id INTEGER PRIMARY KEY, price TEXT)")
        values = [Decimal("19.99"), Decimal("5.00"), Decimal("0.000"), None, Decimal("-1234567890.123456789")]
        conn.executemany(
            "INSERT INTO products (price) VALUES (?)",
            [(price_cast.store(v),) for v in values],
        )

        rows = conn.execute("SELECT price FROM products ORDER BY id").fetchall()
        loaded = [price_cast.load(row[0]) for row in rows]
    finally:
        conn.close()

    assert [None if v is None else v.to_canonical_text() for v in loaded] == [
        "19.99",
        "5.00",
        "0.000",
        None,
        "-1234567890.123456789",
    ]


def test_decimal_cast_repr():
    cast = DecimalCast("amount", BoundaryConverter(float_policy="log"))
    assert repr(cast) == "DecimalCast(field='amount', float_policy='log')"


def test_store_huge_integer():
    assert store(10 ** 5000, "price") == "1" + "0" * 5000
    assert store(-(10 ** 5000) + 1, "price") == "-" + "9" * 5000


def test_store_warning_points_at_caller(price_cast):
    with pytest.warns(LossyConversionWarning) as record:
        store(19.99, "price")
    with pytest.warns(LossyConversionWarning) as cast_record:
        price_cast.store(19.99)

    assert record[0].filename == __file__
    assert cast_record[0].filename == __file__
