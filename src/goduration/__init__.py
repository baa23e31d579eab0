"""goduration - Go-compatible duration parsing for Python."""

from loguru import logger

# Duration parsing
from goduration.duration import parse_duration, parse_timedelta, to_nanoseconds

# Errors
from goduration.errors import ErrorKind, ParseError

# Core types
from goduration.types import MAX_NANOSECONDS, MIN_NANOSECONDS, Duration

# Units
from goduration.units import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    UNITS,
    unit_nanoseconds,
)

# Silent unless the application calls logger.enable("goduration")
logger.disable("goduration")

__version__ = "0.1.0"

__all__ = [
    "HOUR",
    "MAX_NANOSECONDS",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "MIN_NANOSECONDS",
    "NANOSECOND",
    "SECOND",
    "UNITS",
    "Duration",
    "ErrorKind",
    "ParseError",
    "parse_duration",
    "parse_timedelta",
    "to_nanoseconds",
    "unit_nanoseconds",
]
