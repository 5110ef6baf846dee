# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
import re
from typing import Tuple

from natgrid.errors import ParseError
from natgrid.precision import Precision

_DIGITS_RE = re.compile('[0-9]*')
_ASCII_WHITESPACE = ' \t\n\r\x0b\x0c'


def round_down_to(num: int, divisor: int) -> int:
    """Round down to the nearest `divisor`"""
    return int(num - (num % divisor))


def trim_string(s: str) -> str:
    """
    Strip all ASCII whitespace (including inside the string) and uppercase
    ASCII letters for parsing. Anything else is left for the parser to reject.
    """
    return ''.join(c.upper() if c.isascii() else c for c in s if c not in _ASCII_WHITESPACE)


def digits(s: str) -> Tuple[int, int, Precision]:
    """
    Split the numeric part of a grid reference into eastings, northings and
    the precision implied by the number of digits.

    The first half of the digits are the eastings, the second the northings.
    Each half is most-significant-first within the 100km square, so '1234'
    is 12km east and 34km north:

    >>> digits('1234')
    (12000, 34000, <Precision.P_1KM: 1000>)
    """
    if len(s) > 10 or len(s) % 2 != 0:
        raise ParseError(f"{len(s)} is not a valid number of digits. Supported values: 0, 2, 4, 6, 8, 10.")
    if _DIGITS_RE.fullmatch(s) is None:
        raise ParseError(f"invalid literal for int() with base 10: {s!r}")

    precision = Precision.from_digits(len(s))
    if not s:
        return 0, 0, precision

    half = len(s) // 2
    eastings = int(s[:half])
    northings = int(s[half:])
    return eastings * precision.metres(), northings * precision.metres(), precision
