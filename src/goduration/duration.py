"""Duration parsing utilities."""

from datetime import timedelta

from loguru import logger

from goduration.errors import ErrorKind, ParseError
from goduration.scanner import is_digit, leading_fraction, leading_int
from goduration.types import MAX_NANOSECONDS, MIN_NANOSECONDS, Duration
from goduration.units import MICROSECOND, unit_nanoseconds


def _reject(
    kind: ErrorKind, message: str, text: str, unit: str | None = None
) -> ParseError:
    logger.debug("rejected duration {!r} ({})", text, kind.value)
    return ParseError(kind, message, text=text, unit=unit)


def parse_duration(text: str) -> int:
    """Parse a duration string to nanoseconds.

    A duration string is a possibly signed sequence of decimal numbers, each
    with optional fraction and a unit suffix, such as "300ms", "-1.5h" or
    "2h45m". Valid units are "ns", "us" (or "µs"/"μs"), "ms", "s", "m", "h".

    Raises:
        ParseError: if ``text`` is not a valid duration or does not fit in a
            signed 64-bit count of nanoseconds.
    """
    # [-+]?([0-9]*(\.[0-9]*)?[a-z]+)+
    pos = 0
    end = len(text)
    neg = False

    if pos < end and text[pos] in "+-":
        neg = text[pos] == "-"
        pos += 1

    # Special case: if all that is left is "0", this is zero.
    if end - pos == 1 and text[pos] == "0":
        return 0
    if pos == end:
        raise _reject(ErrorKind.INVALID, f"invalid duration: {text}", text)

    total = 0
    while pos < end:
        # The next character must be [0-9.]
        if not (text[pos] == "." or is_digit(text[pos])):
            raise _reject(ErrorKind.INVALID, f"invalid duration: {text}", text)

        # Consume [0-9]*
        try:
            whole = leading_int(text, pos)
        except OverflowError as e:
            raise _reject(
                ErrorKind.OVERFLOW, f"invalid duration {text}", text
            ) from e
        pre = whole.end != pos
        value = whole.value
        pos = whole.end

        # Consume (\.[0-9]*)?
        frac = 0
        scale = 1.0
        post = False
        if pos < end and text[pos] == ".":
            fraction = leading_fraction(text, pos + 1)
            post = fraction.end != pos + 1
            frac, scale, pos = fraction.value, fraction.scale, fraction.end
        if not pre and not post:
            # No digits, e.g. ".s" or "-.s"
            raise _reject(ErrorKind.INVALID, f"invalid duration: {text}", text)

        # Consume unit.
        unit_start = pos
        while pos < end and not (text[pos] == "." or is_digit(text[pos])):
            pos += 1
        if pos == unit_start:
            raise _reject(
                ErrorKind.MISSING_UNIT, f"missing unit in duration: {text}", text
            )
        suffix = text[unit_start:pos]
        try:
            unit = unit_nanoseconds(suffix)
        except KeyError as e:
            raise _reject(
                ErrorKind.UNKNOWN_UNIT,
                f"unknown unit {suffix} in duration {text}",
                text,
                suffix,
            ) from e

        if value > MAX_NANOSECONDS // unit:
            raise _reject(ErrorKind.OVERFLOW, f"invalid duration {text}", text)
        value *= unit
        if frac > 0:
            # Float keeps fractions of an hour nanosecond-accurate:
            # frac * unit / scale <= 3.6e12 (ns per hour)
            value += int(float(frac) * (float(unit) / scale))
            if value > MAX_NANOSECONDS:
                raise _reject(ErrorKind.OVERFLOW, f"invalid duration {text}", text)
        total += value
        if total > MAX_NANOSECONDS:
            raise _reject(ErrorKind.OVERFLOW, f"invalid duration {text}", text)

    return -total if neg else total


def parse_timedelta(text: str) -> timedelta:
    """Parse a duration string to a timedelta, truncating below one microsecond."""
    nanoseconds = parse_duration(text)
    micros = abs(nanoseconds) // MICROSECOND
    return timedelta(microseconds=-micros if nanoseconds < 0 else micros)


def to_nanoseconds(duration: Duration) -> int:
    """Parse duration string to nanoseconds. Passthrough if already int."""
    if isinstance(duration, int):
        if not MIN_NANOSECONDS <= duration <= MAX_NANOSECONDS:
            raise _reject(
                ErrorKind.OVERFLOW, f"invalid duration {duration}", str(duration)
            )
        return duration
    return parse_duration(duration)
