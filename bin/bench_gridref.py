# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
"""
Time parsing and printing of grid references at each number of digits.
"""
import argparse
import logging
import timeit

from natgrid.osgb import OSGB
from natgrid.osi import OSI

DIGITS = ["", "01", "0123", "012345", "01234567", "0123456789"]


def _bench(name: str, fn, number: int):
    seconds = timeit.timeit(fn, number=number)
    logging.info(f"{name}: {round(seconds / number * 1_000_000, 3)} µs per call")


def bench(number: int):
    for digits in DIGITS:
        osgb_str = f"SO{digits}"
        osi_str = f"O{digits}"
        osgb = OSGB.parse(osgb_str)
        osi = OSI.parse(osi_str)

        _bench(f"from_string_osgb ({len(digits)} digits)", lambda: OSGB.parse(osgb_str), number)
        _bench(f"from_string_osi ({len(digits)} digits)", lambda: OSI.parse(osi_str), number)
        _bench(f"to_string_osgb ({len(digits)} digits)", lambda: str(osgb), number)
        _bench(f"to_string_osi ({len(digits)} digits)", lambda: str(osi), number)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='[%(asctime)s] %(levelname)s: %(message)s')

    parser = argparse.ArgumentParser(description="Benchmark grid reference parsing and printing")
    parser.add_argument("--number", default=100_000, type=int, metavar="INT", help="Calls per case (default 100000)")
    args = parser.parse_args()

    bench(args.number)
