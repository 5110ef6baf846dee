# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
"""
JSON support for grid references. References are written as their canonical
string, e.g. "SO892437", and read back by parsing that string.
"""
import json
from typing import Type, TypeVar, Union

from natgrid.errors import DeserializationError, GridRefError
from natgrid.osgb import OSGB
from natgrid.osi import OSI

GridRef = TypeVar('GridRef', OSGB, OSI)


class GridRefEncoder(json.JSONEncoder):
    """Encodes any OSGB or OSI found in a structure as its grid ref string"""

    def default(self, o):
        if isinstance(o, (OSGB, OSI)):
            return str(o)
        return super().default(o)


def to_json(ref: Union[OSGB, OSI]) -> str:
    return json.dumps(str(ref))


def from_json(cls: Type[GridRef], text: str) -> GridRef:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(str(e)) from e
    return from_value(cls, value)


def from_value(cls: Type[GridRef], value) -> GridRef:
    """Parse an already-decoded value, e.g. a field from `json.load`"""
    if not isinstance(value, str):
        raise DeserializationError(f"invalid type: expected a formatted grid ref string, got {type(value).__name__}")
    try:
        return cls.parse(value)
    except GridRefError as e:
        raise DeserializationError(str(e)) from e
