"""Command-line front end: print duration literals as nanoseconds."""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal, localcontext

from loguru import logger

from goduration.duration import parse_duration, parse_timedelta
from goduration.errors import ParseError
from goduration.units import UNITS


def setup_logging(verbose: bool) -> None:
    """Route the library's debug records to stderr when asked for."""
    if not verbose:
        return
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level:<7}</level> | {message}",
        level="DEBUG",
    )
    logger.enable("goduration")


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="goduration",
        description="Parse Go-style duration literals such as 300ms, -1.5h or 2h45m.",
        epilog="Put negative durations after --, e.g. goduration -- -1h45m",
    )
    p.add_argument("durations", nargs="+", metavar="DURATION")
    out = p.add_mutually_exclusive_group()
    out.add_argument(
        "--unit",
        choices=list(UNITS),
        default="ns",
        help=(
            "Print the result in this unit (default: ns); "
            "repeating decimals are rounded to 30 significant digits"
        ),
    )
    out.add_argument(
        "--timedelta",
        action="store_true",
        help="Print the result as a Python timedelta",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def format_duration(nanoseconds: int, unit: str) -> str:
    """Render ``nanoseconds`` in ``unit``, as a plain decimal."""
    size = UNITS[unit]
    whole, rest = divmod(abs(nanoseconds), size)
    if rest == 0:
        return str(-whole if nanoseconds < 0 else whole)
    with localcontext() as ctx:
        ctx.prec = 30
        quotient = (Decimal(nanoseconds) / Decimal(size)).normalize()
    return format(quotient, "f")


def main(argv: list[str] | None = None) -> int:
    ns = make_parser().parse_args(argv)
    setup_logging(ns.verbose)

    status = 0
    for text in ns.durations:
        try:
            if ns.timedelta:
                print(parse_timedelta(text))
            else:
                print(format_duration(parse_duration(text), ns.unit))
        except ParseError as e:
            print(f"goduration: {e}", file=sys.stderr)
            status = 1
    return status

