# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
"""
Convert grid references to and from eastings / northings.

  gridref.py parse "SO 892 437"
  gridref.py format 389200 243700 --precision 100m
  gridref.py --grid osi recalculate O892437 --precision 10km
"""
import argparse
import logging
import sys

from natgrid import config
from natgrid.errors import GridRefError
from natgrid.osgb import OSGB
from natgrid.osi import OSI
from natgrid.precision import Precision

GRIDS = {'osgb': OSGB, 'osi': OSI}


def _precision(label: str) -> Precision:
    precision = Precision.from_string(label)
    if precision is None:
        raise argparse.ArgumentTypeError(f"Unknown precision: {label}")
    return precision


def _describe(ref) -> str:
    return f"{ref}\t{ref.eastings}\t{ref.northings}\t{ref.precision.label()}"


def run(args) -> str:
    grid = GRIDS[args.grid]
    if args.command == 'parse':
        return _describe(grid.parse(args.ref))
    elif args.command == 'format':
        return str(grid.new(args.eastings, args.northings, args.precision))
    elif args.command == 'recalculate':
        return _describe(grid.parse(args.ref).recalculate(args.precision))
    raise ValueError(f"Unknown command: {args.command}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Convert British and Irish national grid references")
    parser.add_argument("--grid", choices=sorted(GRIDS.keys()), default='osgb', help="National grid (default osgb)")
    parser.add_argument("--tetrads", action='store_true', help="Parse 4 character references ending in a letter as tetrads, e.g. SN24R")
    parser.add_argument("--verbose", action='store_true', help="Log debug output")
    subparsers = parser.add_subparsers(dest='command', required=True)

    parse_cmd = subparsers.add_parser('parse', help="Print the canonical ref, SW eastings / northings and precision")
    parse_cmd.add_argument("ref", metavar="REF")

    format_cmd = subparsers.add_parser('format', help="Print the grid ref for eastings / northings")
    format_cmd.add_argument("eastings", type=int, metavar="EASTINGS")
    format_cmd.add_argument("northings", type=int, metavar="NORTHINGS")
    format_cmd.add_argument("--precision", type=_precision, required=True, metavar="PRECISION",
                            help="One of 100km, 10km, 2km, 1km, 100m, 10m, 1m")

    recalc_cmd = subparsers.add_parser('recalculate', help="Print the ref at a coarser precision")
    recalc_cmd.add_argument("ref", metavar="REF")
    recalc_cmd.add_argument("--precision", type=_precision, required=True, metavar="PRECISION",
                            help="One of 100km, 10km, 2km, 1km, 100m, 10m, 1m")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='[%(asctime)s] %(levelname)s: %(message)s')
    if args.tetrads:
        config.TETRADS = True

    try:
        print(run(args))
    except GridRefError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
