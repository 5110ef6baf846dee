# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.


class GridRefError(ValueError):
    """Base class for all errors raised while handling grid references"""


class ParseError(GridRefError):
    """A grid reference string, or part of one, is malformed"""


class InvalidPrecision(GridRefError):
    """A number of digits could not be mapped to a Precision"""


class OutOfBounds(GridRefError):
    """
    A coordinate is numerically valid but lies outside the area a
    grid reference can represent.
    """

    def __init__(self, message: str = "Coordinates are out of bounds."):
        super().__init__(message)


class DeserializationError(GridRefError):
    """A serialized grid reference could not be read back"""
