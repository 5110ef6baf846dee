# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
from shapely.geometry import Point, Polygon


def sw(easting: int, northing: int, size: int) -> Point:
    return Point(easting, northing)


def nw(easting: int, northing: int, size: int) -> Point:
    return Point(easting, northing + size)


def ne(easting: int, northing: int, size: int) -> Point:
    return Point(easting + size, northing + size)


def se(easting: int, northing: int, size: int) -> Point:
    return Point(easting + size, northing)


def centre(easting: int, northing: int, size: int) -> Point:
    return Point(easting + size / 2, northing + size / 2)


def perimeter(easting: int, northing: int, size: int) -> Polygon:
    """
    Square with its SW corner at (easting, northing). The ring runs
    SW, NW, NE, SE; shapely closes it back to SW.
    """
    return Polygon([
        (easting, northing),
        (easting, northing + size),
        (easting + size, northing + size),
        (easting + size, northing),
    ])
