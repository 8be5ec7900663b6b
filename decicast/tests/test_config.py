"""Tests for environment-driven configuration"""

from decicast.config import DecimalConfig
from decicast.core.models import RoundingMode


def test_defaults():
    assert DecimalConfig.get_float_policy() == "warn"
    assert DecimalConfig.get_default_rounding() is RoundingMode.HALF_UP
    assert DecimalConfig.get_default_division_scale() == 10
    assert DecimalConfig.get_max_literal_length() == 4096

    is_valid, warnings = DecimalConfig.validate_config()
    assert is_valid
    assert warnings == []


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DECICAST_FLOAT_POLICY", "REJECT")
    monkeypatch.setenv("DECICAST_DEFAULT_ROUNDING", "half-even")
    monkeypatch.setenv("DECICAST_DEFAULT_DIVISION_SCALE", "4")
    monkeypatch.setenv("DECICAST_MAX_LITERAL_LENGTH", "64")

    assert DecimalConfig.get_float_policy() == "reject"
    assert DecimalConfig.get_default_rounding() is RoundingMode.HALF_EVEN
    assert DecimalConfig.get_default_division_scale() == 4
    assert DecimalConfig.get_max_literal_length() == 64


def test_invalid_values_fall_back_and_fail_validation(monkeypatch):
    monkeypatch.setenv("DECICAST_FLOAT_POLICY", "ignore")
    monkeypatch.setenv("DECICAST_DEFAULT_ROUNDING", "bankers")
    monkeypatch.setenv("DECICAST_DEFAULT_DIVISION_SCALE", "-1")
    monkeypatch.setenv("DECICAST_MAX_LITERAL_LENGTH", "lots")

    assert DecimalConfig.get_float_policy() == "warn"
    assert DecimalConfig.get_default_rounding() is RoundingMode.HALF_UP
    assert DecimalConfig.get_default_division_scale() == 10
    assert DecimalConfig.get_max_literal_length() == 4096

    is_valid, warnings = DecimalConfig.validate_config()
    assert not is_valid
    assert len(warnings) == 4


def test_log_policy_is_valid_with_warning(monkeypatch):
    monkeypatch.setenv("DECICAST_FLOAT_POLICY", "log")

    is_valid, warnings = DecimalConfig.validate_config()
    assert is_valid
    assert any("only logged" in w for w in warnings)


def test_print_config_summary(capsys):
    DecimalConfig.print_config_summary()

    out = capsys.readouterr().out
    assert "Float Policy: warn" in out
    assert "Default Rounding: half_up" in out
    assert "Configuration looks good" in out


def test_literal_length_above_int_str_limit_warns(monkeypatch):
    monkeypatch.setenv("DECICAST_MAX_LITERAL_LENGTH", "10000")

    is_valid, warnings = DecimalConfig.validate_config()
    assert is_valid
    assert any("4300-digit" in w for w in warnings)
