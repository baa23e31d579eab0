"""Digit-run scanners used by the duration parser.

Both scanners work on the original string plus an offset and report where
they stopped, so the parser never copies the remaining input.
"""

from goduration.types import MAX_NANOSECONDS, LeadingFraction, LeadingInt

_CUTOFF = MAX_NANOSECONDS // 10


def is_digit(char: str) -> bool:
    """ASCII digits only; ``str.isdigit`` also accepts other scripts."""
    return "0" <= char <= "9"


def leading_int(text: str, start: int = 0) -> LeadingInt:
    """Consume the leading ``[0-9]*`` of ``text[start:]``.

    Raises:
        OverflowError: if the digits do not fit in a signed 64-bit integer.
    """
    value = 0
    i = start
    while i < len(text) and is_digit(text[i]):
        if value > _CUTOFF:
            raise OverflowError(f"integer overflow at offset {i}")
        value = value * 10 + (ord(text[i]) - ord("0"))
        if value > MAX_NANOSECONDS:
            raise OverflowError(f"integer overflow at offset {i}")
        i += 1
    return LeadingInt(value, i)


def leading_fraction(text: str, start: int = 0) -> LeadingFraction:
    """Consume the leading ``[0-9]*`` of ``text[start:]`` as a fraction.

    Once the value can no longer grow without overflowing, the remaining
    digits are consumed but ignored.
    """
    value = 0
    scale = 1.0
    saturated = False
    i = start
    while i < len(text) and is_digit(text[i]):
        if not saturated:
            if value > _CUTOFF:
                saturated = True
            else:
                candidate = value * 10 + (ord(text[i]) - ord("0"))
                if candidate > MAX_NANOSECONDS:
                    saturated = True
                else:
                    value = candidate
                    scale *= 10
        i += 1
    return LeadingFraction(value, scale, i)
