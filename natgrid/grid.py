# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
from typing import Tuple, Sequence

from natgrid.constants import GRID_WIDTH
from natgrid.errors import ParseError, OutOfBounds

Column = int
Row = int


class SquareGrid:
    """
    A 5x5 grid of lettered squares with its origin at the bottom left (SW)
    square, so the first letter in `letters` is (0, 0), the 6th is (0, 1)
    and the last is (4, 4).

    Scale agnostic: the same letters are used for 500km and 100km squares in
    the national grids, and a different ordering for the 2km tetrads within a
    10km square.
    """

    def __init__(self, name: str, letters: Sequence[str]):
        if len(letters) != GRID_WIDTH * GRID_WIDTH:
            raise ValueError(f"{name} grid needs {GRID_WIDTH * GRID_WIDTH} letters, got {len(letters)}")
        self.name = name
        self.letters = tuple(letters)

    def letter_to_coords(self, letter: str) -> Tuple[Column, Row]:
        """Zero-based column and row of a letter, so for the main grid H => (2, 3)"""
        try:
            idx = self.letters.index(letter)
        except ValueError:
            raise ParseError(f"{letter} is not a valid {self.name} square.") from None
        return idx % GRID_WIDTH, idx // GRID_WIDTH

    def coords_to_letter(self, column: Column, row: Row) -> str:
        """Letter at a zero-based column and row, so for the main grid (1, 1) => R"""
        if not 0 <= column < GRID_WIDTH or not 0 <= row < GRID_WIDTH:
            raise OutOfBounds(f"({column}, {row}) is outside the {self.name} squares.")
        return self.letters[column + GRID_WIDTH * row]


GRID = SquareGrid("grid", [
    'V', 'W', 'X', 'Y', 'Z',
    'Q', 'R', 'S', 'T', 'U',
    'L', 'M', 'N', 'O', 'P',
    'F', 'G', 'H', 'J', 'K',
    'A', 'B', 'C', 'D', 'E',
])
"""
Letters for both the 500km squares (the 'S' in 'SO892437') and the 100km
squares (the 'O'). Every letter is used except 'I'.
"""

TETRAD_GRID = SquareGrid("tetrad", [
    'A', 'F', 'K', 'Q', 'V',
    'B', 'G', 'L', 'R', 'W',
    'C', 'H', 'M', 'S', 'X',
    'D', 'I', 'N', 'T', 'Y',
    'E', 'J', 'P', 'U', 'Z',
])
"""
DINTY tetrad letters for the 2km squares within a 10km square. Letters
run up each column from the SW corner, and 'O' is not used.
"""
