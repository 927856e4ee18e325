#!/usr/bin/env python3
##############################################################################
##                                                                          ##
##                                PYFRAC                                    ##
##                                                                          ##
##              Copyright (C) 2025, The PyFrac Developers                   ##
##                                                                          ##
##  This file is part of PyFrac.                                            ##
##                                                                          ##
##  PyFrac is free software: you can redistribute it and/or modify          ##
##  it under the terms of the GNU General Public License as published by    ##
##  the Free Software Foundation, either version 3 of the License, or       ##
##  (at your option) any later version.                                     ##
##                                                                          ##
##  PyFrac is distributed in the hope that it will be useful,               ##
##  but WITHOUT ANY WARRANTY; without even the implied warranty of          ##
##  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           ##
##  GNU General Public License for more details.                            ##
##                                                                          ##
##  You should have received a copy of the GNU General Public License       ##
##  along with PyFrac. If not, see <http://www.gnu.org/licenses/>.          ##
##                                                                          ##
##############################################################################

"""
Single precision helpers.

The float constructor of :class:`.Rational` works on IEEE-754 binary32
values, and the stream adapter reads decimal literals as binary32. Python
floats are binary64, so values are rounded through the binary32
interchange format first.

The conversion from a float to a fraction goes through a fixed-precision
decimal rendering of the float. This is deliberately simple: the result
is as precise as that rendering, and not as precise as the binary value
it came from.
"""

import re
import struct

from .names import DECIMAL_PLACES

# Optional sign, digits with an optional point (or a point followed by
# digits), optional exponent. No "inf", "nan", or digit separators.
DECIMAL_LITERAL = re.compile(r"[-+]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][-+]?[0-9]+)?")

def to_single(value):
    """Round python float *value* to the nearest binary32 value

    Raises OverflowError if the value is finite but outside the binary32
    range. Infinities and NaN are passed through.
    """
    return struct.unpack("<f", struct.pack("<f", value))[0]

def unpack_single(value):
    """Split a binary32 value into sign, exponent, and significand

    Returns a tuple of integers (S, E, T), as in the binary interchange
    format.
    """
    bits = struct.unpack("<I", struct.pack("<f", value))[0]
    S = bits >> 31
    E = (bits >> 23) & 0xff
    T = bits & 0x7fffff
    return (S, E, T)

def is_finite_single(value):
    """Test if *value* is a finite binary32 number"""
    try:
        S, E, T = unpack_single(value)
    except OverflowError:
        # finite, but rounds to infinity
        return False
    return E != 0xff

def parse_single(text):
    """Read *text* as a binary32 decimal literal

    The literal must make up the entire string. Returns None if it does
    not, or if the value does not fit into binary32.
    """
    if DECIMAL_LITERAL.fullmatch(text) is None:
        return None
    value = float(text)
    if not is_finite_single(value):
        return None
    return to_single(value)

def decimal_string(value, places=DECIMAL_PLACES):
    """Render *value* with a fixed number of decimal places"""
    return "%.*f" % (places, value)

def significant_places(value, places=DECIMAL_PLACES):
    """Count decimal places of *value* once trailing zeros are gone

    >>> significant_places(0.75)
    2
    >>> significant_places(3.0)
    0
    """
    _, _, fraction = decimal_string(value, places).partition(".")
    return len(fraction.rstrip("0"))
