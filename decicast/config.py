"""
decicast Configuration Module

Centralized configuration management for the decimal boundary.
Loads from environment variables with sensible defaults.
"""

import os
from typing import TYPE_CHECKING, Tuple, List

if TYPE_CHECKING:
    from .core.models import RoundingMode


FLOAT_POLICIES = ("warn", "log", "reject")

DEFAULT_FLOAT_POLICY = "warn"
DEFAULT_ROUNDING = "half_up"
DEFAULT_DIVISION_SCALE = 10
DEFAULT_MAX_LITERAL_LENGTH = 4096
INT_STR_DIGIT_LIMIT = 4300


class DecimalConfig:
    """Centralized decicast configuration."""

    # ========================================================================
    # Boundary Conversion
    # ========================================================================

    @staticmethod
    def get_float_policy() -> str:
        """Get float input policy: 'warn', 'log' or 'reject'."""
        policy = os.getenv("DECICAST_FLOAT_POLICY", DEFAULT_FLOAT_POLICY).strip().lower()
        if policy not in FLOAT_POLICIES:
            return DEFAULT_FLOAT_POLICY
        return policy

    @staticmethod
    def get_max_literal_length() -> int:
        """Get the longest decimal literal accepted by the parser."""
        try:
            length = int(os.getenv("DECICAST_MAX_LITERAL_LENGTH", str(DEFAULT_MAX_LITERAL_LENGTH)))
        except ValueError:
            return DEFAULT_MAX_LITERAL_LENGTH
        return length if length > 0 else DEFAULT_MAX_LITERAL_LENGTH

    # ========================================================================
    # Division Defaults
    # ========================================================================

    @staticmethod
    def get_default_rounding() -> "RoundingMode":
        """Get rounding mode used when none is given explicitly."""
        from .core.models import RoundingMode

        try:
            return RoundingMode.from_name(os.getenv("DECICAST_DEFAULT_ROUNDING", DEFAULT_ROUNDING))
        except ValueError:
            return RoundingMode.HALF_UP

    @staticmethod
    def get_default_division_scale() -> int:
        """Get target scale for divisions that do not name one."""
        try:
            scale = int(os.getenv("DECICAST_DEFAULT_DIVISION_SCALE", str(DEFAULT_DIVISION_SCALE)))
        except ValueError:
            return DEFAULT_DIVISION_SCALE
        return scale if scale >= 0 else DEFAULT_DIVISION_SCALE

    # ========================================================================
    # Configuration Validation
    # ========================================================================

    @staticmethod
    def validate_config() -> Tuple[bool, List[str]]:
        """
        Validate the current configuration.

        Returns:
            Tuple of (is_valid, list_of_warnings)
        """
        warnings = []
        is_valid = True

        policy = os.getenv("DECICAST_FLOAT_POLICY")
        if policy is not None and policy.strip().lower() not in FLOAT_POLICIES:
            is_valid = False
            warnings.append(
                f"DECICAST_FLOAT_POLICY={policy!r} is not one of {', '.join(FLOAT_POLICIES)}; "
                f"using '{DEFAULT_FLOAT_POLICY}'"
            )
        elif DecimalConfig.get_float_policy() == "log":
            warnings.append("Float input is only logged. Set DECICAST_FLOAT_POLICY=warn to surface Python warnings.")

        rounding = os.getenv("DECICAST_DEFAULT_ROUNDING")
        if rounding is not None:
            from .core.models import RoundingMode

            try:
                RoundingMode.from_name(rounding)
            except ValueError:
                is_valid = False
                warnings.append(f"DECICAST_DEFAULT_ROUNDING={rounding!r} is unknown; using '{DEFAULT_ROUNDING}'")

        for name, minimum in (("DECICAST_DEFAULT_DIVISION_SCALE", 0), ("DECICAST_MAX_LITERAL_LENGTH", 1)):
            raw = os.getenv(name)
            if raw is None:
                continue
            try:
                if int(raw) < minimum:
                    raise ValueError(raw)
            except ValueError:
                is_valid = False
                warnings.append(f"{name}={raw!r} must be an integer >= {minimum}; using the default")

        max_length = DecimalConfig.get_max_literal_length()
        if max_length > INT_STR_DIGIT_LIMIT:
            warnings.append(
                f"DECICAST_MAX_LITERAL_LENGTH={max_length} exceeds the interpreter's "
                f"{INT_STR_DIGIT_LIMIT}-digit int/str limit; literals that long are parsed in chunks and cost more"
            )

        return is_valid, warnings

    @staticmethod
    def print_config_summary():
        """Print a summary of current configuration."""
        print("=" * 70)
        print("decicast Configuration Summary")
        print("=" * 70)
        print(f"Float Policy: {DecimalConfig.get_float_policy()}")
        print(f"Default Rounding: {DecimalConfig.get_default_rounding().value}")
        print(f"Default Division Scale: {DecimalConfig.get_default_division_scale()}")
        print(f"Max Literal Length: {DecimalConfig.get_max_literal_length()}")
        print("=" * 70)

        is_valid, warnings = DecimalConfig.validate_config()
        if warnings:
            print("\nConfiguration Warnings:")
            for warning in warnings:
                print(f"  ⚠️  {warning}")
        else:
            print("\n✓ Configuration looks good!")
