# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
import logging
from dataclasses import dataclass

from shapely.geometry import Point, Polygon

from natgrid import geos
from natgrid.coordinates.metres import Metres
from natgrid.coordinates.point import GridPoint
from natgrid.precision import Precision
from natgrid.util import trim_string


@dataclass(frozen=True)
class OSI:
    """
    An Irish National Grid reference, such as 'O892437': a single 100km
    square letter followed by 0 - 10 digits. There is no 500km square, so
    this is a thin wrapper around `GridPoint`.
    """
    point: GridPoint

    @classmethod
    def new(cls, eastings: int, northings: int, precision: Precision) -> 'OSI':
        """:raises OutOfBounds: if either coordinate is outside 0 - 499,999"""
        return cls(GridPoint.new(Metres.from_int(eastings), Metres.from_int(northings), precision))

    @classmethod
    def parse(cls, s: str) -> 'OSI':
        return cls(GridPoint.parse(trim_string(s)))

    def recalculate(self, precision: Precision) -> 'OSI':
        if precision > self.precision:
            logging.debug(f"Not recalculating {self} to finer precision {precision.label()}")
            return self
        return OSI(self.point.recalculate(precision))

    @property
    def precision(self) -> Precision:
        return self.point.precision

    @property
    def eastings(self) -> int:
        return int(self.point.eastings)

    @property
    def northings(self) -> int:
        return int(self.point.northings)

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
        return str(self.point)
