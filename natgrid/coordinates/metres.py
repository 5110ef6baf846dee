# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
from dataclasses import dataclass

from natgrid.constants import _500KM, _100KM
from natgrid.errors import OutOfBounds
from natgrid.precision import Precision
from natgrid.util import round_down_to


@dataclass(frozen=True)
class Metres:
    """
    A distance in metres within a single 500km square, i.e. in the range
    [0, 500_000). Use `Metres.from_int` to create one: it checks the bounds.
    """
    value: int

    @classmethod
    def from_int(cls, value: int) -> 'Metres':
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Metres must be a whole number, got {value!r}")
        if value < 0 or value >= _500KM:
            raise OutOfBounds(f"{value} is outside the range 0 - {_500KM - 1} metres.")
        return cls(value)

    def precision(self, precision: Precision) -> 'Metres':
        """Round down to the SW edge of the square at `precision`"""
        return Metres(round_down_to(self.value, precision.metres()))

    def padded(self, precision: Precision) -> str:
        """
        The digits for this distance within its 100km square, zero-padded to
        half the number of digits a reference at `precision` needs.
        """
        width = precision.digits() // 2
        if width == 0:
            return ""
        return str((self.value % _100KM) // precision.metres()).zfill(width)

    def __int__(self):
        return self.value

    def __float__(self):
        return float(self.value)
