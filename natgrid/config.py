# This file is part of the natgrid grid reference library, copyright © Centre for Sustainable Energy, 2023-2026
# Licensed under the Reciprocal Public License v1.5. See LICENSE for licensing details.
import os

_TRUTHY = ('1', 'true', 'yes', 'on')

TETRADS: bool = os.environ.get("NATGRID_TETRADS", "0").strip().lower() in _TRUTHY
"""
Whether 4-character strings ending in a letter (e.g. 'N24R') are parsed as
DINTY tetrads (2km squares, as used in biological recording) rather than
rejected as malformed 1km references.

Read once from the NATGRID_TETRADS environment variable. The parser checks
this at call time, so it can be switched for a whole process (see the
`--tetrads` flag of bin/gridref.py) or patched in tests.
"""
