"""
Pytest configuration and fixtures for decicast tests.
"""

import pytest
from hypothesis import HealthCheck, settings

from decicast.core.boundary import BoundaryConverter
from decicast.core.cast import DecimalCast

# clean_env is autouse, so property tests see a function-scoped fixture
settings.register_profile("decicast", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("decicast")

_ENV_VARS = (
    "DECICAST_FLOAT_POLICY",
    "DECICAST_DEFAULT_ROUNDING",
    "DECICAST_DEFAULT_DIVISION_SCALE",
    "DECICAST_MAX_LITERAL_LENGTH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against the default configuration."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def converter():
    """Converter with the default 'warn' float policy."""
    return BoundaryConverter(float_policy="warn")


@pytest.fixture
def quiet_converter():
    """Converter that only logs lossy float conversions."""
    return BoundaryConverter(float_policy="log")


@pytest.fixture
def strict_converter():
    """Converter that refuses float input."""
    return BoundaryConverter(float_policy="reject")


@pytest.fixture
def price_cast():
    """Cast bound to a 'price' attribute."""
    return DecimalCast("price")


@pytest.fixture
def canonical_literals():
    """Literals that must survive parse -> text unchanged."""
    return [
        "0",
        "0.00",
        "5",
        "5.00",
        "-99.99",
        "19.99",
        "123.456789",
        "0.0001",
        "-0.5",
        "1000000000000000000000000000000.000000000000000000000001",
    ]
