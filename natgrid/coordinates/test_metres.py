# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
from natgrid.coordinates.metres import Metres
from natgrid.errors import OutOfBounds
from natgrid.precision import Precision
from natgrid.test_utils.test_funcs import ParameterisedTestCase


class MetresTest(ParameterisedTestCase):

    def test_bounds(self):
        assert int(Metres.from_int(0)) == 0
        assert int(Metres.from_int(499_999)) == 499_999
        for value in (500_000, 2 ** 32 - 1, -1):
            with self.subTest(value):
                with self.assertRaises(OutOfBounds):
                    Metres.from_int(value)

    def test_rejects_non_integers(self):
        for value in (1.5, 1.0, "1", True):
            with self.subTest(value):
                with self.assertRaises(TypeError):
                    Metres.from_int(value)

    def test_precision(self):
        metres = Metres.from_int(23_480)
        self.parameterised_test([
            (Precision.P_1M, 23_480),
            (Precision.P_10M, 23_480),
            (Precision.P_100M, 23_400),
            (Precision.P_1KM, 23_000),
            (Precision.P_2KM, 22_000),
            (Precision.P_10KM, 20_000),
            (Precision.P_100KM, 0),
        ], lambda p: int(metres.precision(p)))

    def test_precision_is_idempotent_and_never_increases(self):
        for value in (0, 1, 99_999, 123_456, 499_999):
            metres = Metres.from_int(value)
            for precision in Precision:
                with self.subTest((value, precision)):
                    once = metres.precision(precision)
                    assert once.precision(precision) == once
                    assert int(once) <= value

    def test_padded(self):
        zero = Metres.from_int(0)
        self.parameterised_test([
            (Precision.P_100KM, ""),
            (Precision.P_10KM, "0"),
            (Precision.P_1KM, "00"),
            (Precision.P_100M, "000"),
            (Precision.P_10M, "0000"),
            (Precision.P_1M, "00000"),
        ], zero.padded)

        # Only the distance within the 100km square is written:
        metres = Metres.from_int(200_250)
        self.parameterised_test([
            (Precision.P_100KM, ""),
            (Precision.P_10KM, "0"),
            (Precision.P_1KM, "00"),
            (Precision.P_100M, "002"),
            (Precision.P_10M, "0025"),
            (Precision.P_1M, "00250"),
        ], metres.padded)
