#!/usr/bin/env python3
"""
decicast - command line front end for the decimal boundary

Exercises the same code paths an ORM cast goes through, which makes it handy
for checking what a column value will turn into.

Usage:
    decicast parse 19.990                 # canonical text, scale and digits
    decicast calc 19.99 mul 3             # exact arithmetic
    decicast calc 10 div 3 --scale 4 --rounding truncate
    decicast store 19.99 --float          # convert like the write boundary
    decicast load 0.50 --field price      # convert like the read boundary
    decicast config                       # print configuration summary
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DecimalConfig
from .core.boundary import BoundaryConverter
from .core.cast import load, store
from .core.errors import DecimalError
from .core.models import RoundingMode
from .core.number import Decimal

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 2

OPERATIONS = ("add", "sub", "mul", "div", "mod")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Exact decimal parsing, arithmetic and boundary conversion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse a literal and show its canonical form")
    p_parse.add_argument("text")

    p_calc = sub.add_parser("calc", help="Exact arithmetic on two literals")
    p_calc.add_argument("left")
    p_calc.add_argument("op", choices=OPERATIONS)
    p_calc.add_argument("right")
    p_calc.add_argument(
        "--scale",
        type=int,
        default=None,
        help="Target scale for div (default: DECICAST_DEFAULT_DIVISION_SCALE)",
    )
    p_calc.add_argument(
        "--rounding",
        choices=[mode.value for mode in RoundingMode],
        default=None,
        help="Rounding mode for div (default: DECICAST_DEFAULT_ROUNDING)",
    )

    p_store = sub.add_parser("store", help="Convert a value for storage")
    p_store.add_argument("value")
    p_store.add_argument("--field", default="value", help="Attribute name used in messages")
    kind = p_store.add_mutually_exclusive_group()
    kind.add_argument("--float", dest="as_float", action="store_true", help="Treat the value as a float")
    kind.add_argument("--int", dest="as_int", action="store_true", help="Treat the value as an integer")

    p_load = sub.add_parser("load", help="Convert a stored column value")
    p_load.add_argument("text")
    p_load.add_argument("--field", default="value", help="Attribute name used in messages")

    sub.add_parser("config", help="Print configuration summary")

    return parser.parse_args(argv)


def _calc(args: argparse.Namespace) -> Decimal:
    left = Decimal.parse(args.left)
    right = Decimal.parse(args.right)
    if args.op == "add":
        return left.add(right)
    if args.op == "sub":
        return left.subtract(right)
    if args.op == "mul":
        return left.multiply(right)
    if args.op == "mod":
        return left.modulo(right)

    scale = args.scale if args.scale is not None else DecimalConfig.get_default_division_scale()
    rounding = (
        RoundingMode.from_name(args.rounding)
        if args.rounding is not None
        else DecimalConfig.get_default_rounding()
    )
    logger.debug(f"Dividing {left} by {right} at scale {scale} ({rounding.value})")
    return left.divide(right, scale, rounding)


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command and return the process exit code."""
    if args.command == "config":
        DecimalConfig.print_config_summary()
        is_valid, _ = DecimalConfig.validate_config()
        return EXIT_OK if is_valid else EXIT_FAILURE

    try:
        if args.command == "parse":
            value = Decimal.parse(args.text)
            print(value.to_canonical_text())
            print(f"  scale: {value.scale}")
            print(f"  digits: {value.digits}")
            print(f"  sign: {'-' if value.is_negative() else '+'}")
        elif args.command == "calc":
            print(_calc(args).to_canonical_text())
        elif args.command == "store":
            raw = args.value
            if args.as_float:
                raw = float(raw)
            elif args.as_int:
                raw = int(raw)
            print(store(raw, args.field, BoundaryConverter()))
        elif args.command == "load":
            print(load(args.text, args.field).to_canonical_text())
    except (DecimalError, ValueError) as e:
        print(f"[decicast] ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
