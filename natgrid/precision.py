# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
from enum import Enum
from functools import total_ordering
from typing import Optional

from natgrid.constants import _100KM, _10KM, _2KM, _1KM, _100M, _10M, _1M
from natgrid.errors import InvalidPrecision


@total_ordering
class Precision(Enum):
    """
    The resolutions a grid reference can be given at. The value of each
    member is the width in metres of the square it refers to.

    Members are ordered from coarsest to finest, so
    `Precision.P_100KM < Precision.P_1M`.

    P_2KM is the tetrad pseudo-level: it is only produced by parsing a
    tetrad reference (e.g. 'SN24R') or by asking for it explicitly.
    """
    P_100KM = _100KM
    P_10KM = _10KM
    P_2KM = _2KM
    P_1KM = _1KM
    P_100M = _100M
    P_10M = _10M
    P_1M = _1M

    def __lt__(self, other):
        if not isinstance(other, Precision):
            return NotImplemented
        return self.value > other.value

    def metres(self) -> int:
        return self.value

    def digits(self) -> int:
        """
        The number of digits needed to write a grid reference at this
        precision. Tetrads write their 10km digits followed by a letter.
        """
        return _DIGITS[self]

    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_string(cls, string: str) -> Optional['Precision']:
        string = string.strip().lower()
        for precision, label in _LABELS.items():
            if label == string:
                return precision
        return None

    @classmethod
    def from_digits(cls, digits: int) -> 'Precision':
        for precision in (cls.P_100KM, cls.P_10KM, cls.P_1KM, cls.P_100M, cls.P_10M, cls.P_1M):
            if precision.digits() == digits:
                return precision
        raise InvalidPrecision(f"{digits} is not a valid number of digits")


_DIGITS = {
    Precision.P_100KM: 0,
    Precision.P_10KM: 2,
    Precision.P_2KM: 2,
    Precision.P_1KM: 4,
    Precision.P_100M: 6,
    Precision.P_10M: 8,
    Precision.P_1M: 10,
}

_LABELS = {
    Precision.P_100KM: '100km',
    Precision.P_10KM: '10km',
    Precision.P_2KM: '2km',
    Precision.P_1KM: '1km',
    Precision.P_100M: '100m',
    Precision.P_10M: '10m',
    Precision.P_1M: '1m',
}
