# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.

_500KM = 500_000
_100KM = 100_000
_10KM = 10_000
_2KM = 2_000
_1KM = 1_000
_100M = 100
_10M = 10
_1M = 1

# Both the 100km/500km letter grids and the tetrad grid are 5 squares wide:
GRID_WIDTH = 5
