# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
from unittest import mock

from natgrid import config
from natgrid.coordinates.metres import Metres
from natgrid.coordinates.point import GridPoint
from natgrid.errors import ParseError, OutOfBounds, InvalidPrecision
from natgrid.precision import Precision
from natgrid.test_utils.test_funcs import ParameterisedTestCase

VALID_POINTS = [
    ("N", 200_000, 200_000, Precision.P_100KM),
    ("N24", 220_000, 240_000, Precision.P_10KM),
    ("V0000000000", 0, 0, Precision.P_1M),
    ("E9999999999", 499_999, 499_999, Precision.P_1M),
]

VALID_TETRADS = [
    ("L03P", 4_000, 238_000),
    ("N24R", 226_000, 242_000),
    ("V00A", 0, 0),
    ("E99Z", 498_000, 498_000),
]


def _point(eastings: int, northings: int, precision: Precision) -> GridPoint:
    return GridPoint.new(Metres.from_int(eastings), Metres.from_int(northings), precision)


def _parse(s: str):
    point = GridPoint.parse(s)
    return int(point.eastings), int(point.northings), point.precision


class GridPointTest(ParameterisedTestCase):

    def test_new_rounds_down_to_precision(self):
        point = _point(123, 2000, Precision.P_10M)
        assert int(point.eastings) == 120
        assert int(point.northings) == 2000

    def test_parses_valid_strings(self):
        self.parameterised_test(
            [(s, (e, n, p)) for s, e, n, p in VALID_POINTS],
            _parse)

    def test_prints_valid_strings(self):
        self.parameterised_test(
            [(e, n, p, s) for s, e, n, p in VALID_POINTS],
            lambda e, n, p: str(_point(e, n, p)))

    def test_rejects_invalid_strings(self):
        self.parameterised_test([
            ("", ParseError("String can not be empty.")),
            ("I12", ParseError("I is not a valid grid square.")),
            ("N123", ParseError("3 is not a valid number of digits. Supported values: 0, 2, 4, 6, 8, 10.")),
        ], GridPoint.parse)

    def test_recalculate(self):
        point = _point(389_291, 243_762, Precision.P_1M)
        self.parameterised_test([
            (Precision.P_1M, "O8929143762"),
            (Precision.P_100M, "O892437"),
            (Precision.P_10KM, "O84"),
            (Precision.P_100KM, "O"),
        ], lambda p: str(point.recalculate(p)))

    def test_tetrads_disabled(self):
        with mock.patch.object(config, "TETRADS", False):
            with self.assertRaises(ParseError) as cm:
                GridPoint.parse("N24R")
        assert "3 is not a valid number of digits" in str(cm.exception)

    def test_tetrad_precision_needs_tetrads(self):
        with mock.patch.object(config, "TETRADS", False):
            with self.assertRaises(InvalidPrecision):
                _point(226_000, 242_000, Precision.P_2KM)
            with self.assertRaises(InvalidPrecision):
                _point(226_789, 243_999, Precision.P_1M).recalculate(Precision.P_2KM)

    def test_trailing_newline_is_not_a_digit(self):
        self.parameterised_test([
            ("N24\n", ParseError("3 is not a valid number of digits. Supported values: 0, 2, 4, 6, 8, 10.")),
            ("N2\n", ParseError("invalid literal for int() with base 10: '2\\n'")),
        ], GridPoint.parse)


class TetradTest(ParameterisedTestCase):

    def setUp(self):
        patcher = mock.patch.object(config, "TETRADS", True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_parses_valid_tetrads(self):
        self.parameterised_test(
            [(s, (e, n, Precision.P_2KM)) for s, e, n in VALID_TETRADS],
            _parse)

    def test_prints_valid_tetrads(self):
        self.parameterised_test(
            [(e, n, s) for s, e, n in VALID_TETRADS],
            lambda e, n: str(_point(e, n, Precision.P_2KM)))

    def test_rejects_invalid_tetrads(self):
        self.parameterised_test([
            ("N24O", ParseError("O is not a valid tetrad square.")),
            ("NA4R", ParseError("invalid literal for int() with base 10: 'A4'")),
        ], GridPoint.parse)

    def test_other_lengths_are_not_tetrads(self):
        assert _parse("N2468") == (224_000, 268_000, Precision.P_1KM)
        assert _parse("N24") == (220_000, 240_000, Precision.P_10KM)

    def test_recalculate_to_tetrad(self):
        point = _point(226_789, 243_999, Precision.P_1M)
        assert str(point.recalculate(Precision.P_2KM)) == "N24R"


class OutOfBoundsTest(ParameterisedTestCase):

    def test_new_rejects_out_of_bounds(self):
        with self.assertRaises(OutOfBounds):
            _point(500_000, 0, Precision.P_1M)
