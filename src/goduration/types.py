"""Core types for goduration."""

from dataclasses import dataclass

# Bounds of a signed 64-bit nanosecond count
MAX_NANOSECONDS = (1 << 63) - 1
MIN_NANOSECONDS = -(1 << 63)

# Duration type alias
Duration = str | int  # "300ms", "-1.5h", "2h45m" or nanoseconds


@dataclass(frozen=True, slots=True)
class LeadingInt:
    """A run of integer digits read from the front of a term."""

    value: int
    end: int  # offset of the first character not consumed


@dataclass(frozen=True, slots=True)
class LeadingFraction:
    """A run of digits read after a decimal point."""

    value: int
    scale: float  # 10**k for the k digits accumulated
    end: int
