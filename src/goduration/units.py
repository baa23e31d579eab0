"""Unit suffixes and their size in nanoseconds."""

from types import MappingProxyType

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS: MappingProxyType[str, int] = MappingProxyType(
    {
        "ns": NANOSECOND,
        "us": MICROSECOND,
        "µs": MICROSECOND,  # U+00B5 micro sign
        "μs": MICROSECOND,  # U+03BC Greek small letter mu
        "ms": MILLISECOND,
        "s": SECOND,
        "m": MINUTE,
        "h": HOUR,
    }
)


def unit_nanoseconds(suffix: str) -> int:
    """Return the size of one ``suffix`` in nanoseconds. Raises KeyError if unknown."""
    return UNITS[suffix]
