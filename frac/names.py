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

"""Static strings and settings used in the PyFrac package

    Machine integers

        INT_WIDTH = 32

    Float to rational conversion

        DECIMAL_PLACES = 6

    Error messages

        ZERO_DIVISOR_ERROR, OVERFLOW_ERROR, FORMAT_ERROR,
        STREAM_FORMAT_ERROR

The error messages are part of the public interface so that users can
match on them (or replace them when localising).
"""

# Width (in bits) of the signed integer every field of a Rational, and
# every intermediate product computed by the arithmetic, must fit in.
INT_WIDTH = 32

# Number of digits after the decimal point used when a float is
# rendered as text on its way to becoming a Rational.
DECIMAL_PLACES = 6

ZERO_DIVISOR_ERROR = \
    "Division by zero not allowed. Denominator cannot be zero."
OVERFLOW_ERROR = \
    "Integer overflow detected."
FORMAT_ERROR = \
    "Improper format. Accepted fraction form: " \
    "(ie \"1/2\" or \"25\" or  \"3 1/2\")."
STREAM_FORMAT_ERROR = \
    "Invalid format: use decimal (0.5, 1.2) or string fractions " \
    "(1/2, 2 1/2)."
