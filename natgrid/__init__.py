"""
Convert between British (OSGB) and Irish (OSI) national grid references and
eastings / northings, at any precision from 100km down to 1m.

Does not convert between coordinate systems.
"""
from natgrid.errors import GridRefError, ParseError, InvalidPrecision, OutOfBounds, DeserializationError
from natgrid.osgb import OSGB
from natgrid.osi import OSI
from natgrid.precision import Precision
