# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
import logging
from dataclasses import dataclass

from natgrid import config
from natgrid.constants import _100KM, _10KM, _2KM
from natgrid.coordinates.metres import Metres
from natgrid.errors import ParseError, InvalidPrecision
from natgrid.grid import GRID, TETRAD_GRID
from natgrid.precision import Precision
from natgrid import util


@dataclass(frozen=True)
class GridPoint:
    """
    The part of a British or Irish grid reference within a 500km square:
    a 100km square letter followed by digits, e.g. the 'O892437' in
    'SO892437'.

    Eastings and northings are always rounded down to `precision`, so they
    are the SW corner of the square the point refers to.
    """
    eastings: Metres
    northings: Metres
    precision: Precision

    @classmethod
    def new(cls, eastings: Metres, northings: Metres, precision: Precision) -> 'GridPoint':
        if precision == Precision.P_2KM and not config.TETRADS:
            raise InvalidPrecision("2km precision is only available with tetrads enabled.")
        return cls(eastings.precision(precision), northings.precision(precision), precision)

    def recalculate(self, precision: Precision) -> 'GridPoint':
        return GridPoint.new(self.eastings, self.northings, precision)

    @classmethod
    def parse(cls, s: str) -> 'GridPoint':
        if not s:
            raise ParseError("String can not be empty.")

        column, row = GRID.letter_to_coords(s[0])
        eastings = column * _100KM
        northings = row * _100KM

        if config.TETRADS and len(s) == 4 and s[-1].isascii() and s[-1].isalpha():
            tetrad_column, tetrad_row = TETRAD_GRID.letter_to_coords(s[-1])
            east, north, _ = util.digits(s[1:-1])
            logging.debug(f"Parsed {s} as tetrad {s[-1]}")
            return cls(
                Metres.from_int(eastings + east + tetrad_column * _2KM),
                Metres.from_int(northings + north + tetrad_row * _2KM),
                Precision.P_2KM)

        east, north, precision = util.digits(s[1:])
        return cls(
            Metres.from_int(eastings + east),
            Metres.from_int(northings + north),
            precision)

    def __str__(self):
        eastings = int(self.eastings)
        northings = int(self.northings)
        letter = GRID.coords_to_letter(eastings // _100KM, northings // _100KM)

        if self.precision == Precision.P_2KM:
            tetrad = TETRAD_GRID.coords_to_letter((eastings % _10KM) // _2KM, (northings % _10KM) // _2KM)
            return letter \
                + self.eastings.padded(Precision.P_10KM) \
                + self.northings.padded(Precision.P_10KM) \
                + tetrad

        return letter + self.eastings.padded(self.precision) + self.northings.padded(self.precision)
