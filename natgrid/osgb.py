# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
import logging
from dataclasses import dataclass

from shapely.geometry import Point, Polygon

from natgrid import geos
from natgrid.constants import _500KM
from natgrid.coordinates.metres import Metres
from natgrid.coordinates.point import GridPoint
from natgrid.errors import ParseError, OutOfBounds
from natgrid.grid import GRID
from natgrid.precision import Precision
from natgrid.util import trim_string

# The SW corner of the 500km squares is offset from the true origin of the
# British National Grid, which lies at the SW corner of 'S':
OFFSET_EAST = _500KM * 2
OFFSET_NORTH = _500KM

SUPPORTED_500KM_SQUARES = ('S', 'T', 'N', 'O', 'H')
"""
The only 500km squares that cover Great Britain. The other 20 letters of the
grid are never used for the 1st letter of a reference.
"""


def _check_500km_square(column: int, row: int) -> str:
    square = GRID.coords_to_letter(column, row)
    if square not in SUPPORTED_500KM_SQUARES:
        logging.debug(f"Rejecting grid ref in unsupported 500km square {square}")
        raise ParseError(f"{square} is not a supported 500km square.")
    return square


@dataclass(frozen=True)
class OSGB:
    """
    A British National Grid reference, such as 'SO892437'.

    The 1st letter gives a 500km square (see `SUPPORTED_500KM_SQUARES`), and
    the rest is a `GridPoint` within that square: a letter for the 100km
    square followed by 0 - 10 digits.

    Create one with `OSGB.new` from eastings and northings, or `OSGB.parse`
    from a string; `str()` gives the canonical form back.

    >>> ref = OSGB.parse("SO892437")
    >>> str(ref.recalculate(Precision.P_10KM))
    'SO84'
    """
    square_500k_east: int
    square_500k_north: int
    point: GridPoint

    @classmethod
    def new(cls, eastings: int, northings: int, precision: Precision) -> 'OSGB':
        """
        :raises OutOfBounds: if the coordinates are outside the 5x5 500km grid
        :raises ParseError: if they are in a 500km square that isn't one of
            `SUPPORTED_500KM_SQUARES`
        """
        if not isinstance(eastings, int) or not isinstance(northings, int):
            raise TypeError(f"Eastings and northings must be whole numbers, got {eastings!r}, {northings!r}")
        if eastings < 0 or northings < 0:
            raise OutOfBounds(f"Negative coordinates are out of bounds: {eastings}, {northings}")

        column = (eastings + OFFSET_EAST) // _500KM
        row = (northings + OFFSET_NORTH) // _500KM
        _check_500km_square(column, row)

        point = GridPoint.new(
            Metres.from_int(eastings % _500KM),
            Metres.from_int(northings % _500KM),
            precision)
        return cls(column, row, point)

    @classmethod
    def parse(cls, s: str) -> 'OSGB':
        """
        Parse a grid reference, ignoring case and whitespace, so
        ' so 892 437' is the same as 'SO892437'.
        """
        string = trim_string(s)
        if not string:
            raise ParseError("String can not be empty.")

        column, row = GRID.letter_to_coords(string[0])
        _check_500km_square(column, row)
        return cls(column, row, GridPoint.parse(string[1:]))

    def recalculate(self, precision: Precision) -> 'OSGB':
        """
        The grid reference at a coarser `precision`. Asking for a finer
        precision than the reference already has returns it unchanged:
        resolution is never invented.
        """
        if precision > self.precision:
            logging.debug(f"Not recalculating {self} to finer precision {precision.label()}")
            return self
        return OSGB(self.square_500k_east, self.square_500k_north, self.point.recalculate(precision))

    @property
    def precision(self) -> Precision:
        return self.point.precision

    @property
    def eastings(self) -> int:
        """Eastings of the SW corner, from the true origin"""
        return self.square_500k_east * _500KM - OFFSET_EAST + int(self.point.eastings)

    @property
    def northings(self) -> int:
        """Northings of the SW corner, from the true origin"""
        return self.square_500k_north * _500KM - OFFSET_NORTH + int(self.point.northings)

    def sw(self) -> Point:
        return geos.sw(self.eastings, self.northings, self.precision.metres())

    def nw(self) -> Point:
        return geos.nw(self.eastings, self.northings, self.precision.metres())

    def ne(self) -> Point:
        return geos.ne(self.eastings, self.northings, self.precision.metres())

    def se(self) -> Point:
        return geos.se(self.eastings, self.northings, self.precision.metres())

    def centre(self) -> Point:
        return geos.centre(self.eastings, self.northings, self.precision.metres())

    def perimeter(self) -> Polygon:
        return geos.perimeter(self.eastings, self.northings, self.precision.metres())

    def __str__(self):
        return GRID.coords_to_letter(self.square_500k_east, self.square_500k_north) + str(self.point)
