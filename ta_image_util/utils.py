"""
Utility functions for TA 1600 disk image utilities.
"""

import re

_LEADING_DIGITS = re.compile(r'\s*(\d*)')


def parse_digits(text: str) -> int:
    """
    Parse a numeric field the way label fields are read.

    Leading whitespace is skipped, parsing stops at the first non-digit,
    and a field without leading digits yields 0.
    """
    match = _LEADING_DIGITS.match(text)
    digits = match.group(1) if match else ''
    return int(digits) if digits else 0


def decode_name(data: bytes) -> str:
    """Decode a directory name slot, dropping trailing blanks and NULs."""
    return data.decode('latin-1').rstrip(' \x00')


# Whitespace plus NUL; unused label bytes are often zero-filled
BLANKS = ' \t\n\v\f\r\x00'


def strip_blanks(text: str) -> str:
    """Strip surrounding whitespace and NULs from a decoded text field."""
    return text.strip(BLANKS)
