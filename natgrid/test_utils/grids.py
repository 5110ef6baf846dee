# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
from typing import NamedTuple, List

from natgrid.precision import Precision


class GridCase(NamedTuple):
    eastings: int
    northings: int
    precision: Precision
    input_string: str
    output_string: str


OSGB_GRIDS: List[GridCase] = [
    GridCase(300_000, 200_000, Precision.P_100KM, "SO", "SO"),
    GridCase(380_000, 240_000, Precision.P_10KM, "SO84", "SO84"),
    GridCase(389_000, 243_000, Precision.P_1KM, "SO8943", "SO8943"),
    GridCase(389_200, 243_700, Precision.P_100M, "SO892437", "SO892437"),
    GridCase(389_290, 243_760, Precision.P_10M, "SO89294376", "SO89294376"),
    GridCase(389_291, 243_762, Precision.P_1M, "SO8929143762", "SO8929143762"),
    GridCase(224_000, 668_000, Precision.P_1KM, "ns 24 68", "NS2468"),
    GridCase(365_000, 620_000, Precision.P_1KM, "NT6520", "NT6520"),
    GridCase(512_300, 245_600, Precision.P_100M, " TL123456 ", "TL123456"),
    GridCase(503_400, 443_400, Precision.P_100M, "Ta 0344 34", "TA034434"),
    GridCase(460_726, 212_585, Precision.P_1M, "SP6072612585", "SP6072612585"),
    GridCase(0, 1_000_000, Precision.P_100KM, "hv", "HV"),
]

OSI_GRIDS: List[GridCase] = [
    GridCase(300_000, 200_000, Precision.P_100KM, "O", "O"),
    GridCase(380_000, 240_000, Precision.P_10KM, "O84", "O84"),
    GridCase(389_000, 243_000, Precision.P_1KM, "O8943", "O8943"),
    GridCase(389_200, 243_700, Precision.P_100M, "O892437", "O892437"),
    GridCase(389_290, 243_760, Precision.P_10M, "O89294376", "O89294376"),
    GridCase(389_291, 243_762, Precision.P_1M, "O8929143762", "O8929143762"),
    GridCase(224_000, 168_000, Precision.P_1KM, "s 24 68", "S2468"),
    GridCase(365_000, 120_000, Precision.P_1KM, "T6520", "T6520"),
    GridCase(12_300, 245_600, Precision.P_100M, " L123456 ", "L123456"),
    GridCase(3_400, 443_400, Precision.P_100M, "a 0344 34", "A034434"),
    GridCase(315_904, 234_671, Precision.P_1M, "O1590434671", "O1590434671"),
]
