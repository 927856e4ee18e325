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
PyFrac: exact fractions over bounded machine integers.

>>> from frac import Rational
>>> print((Rational(1, 1, 2) * Rational(2, 1, 4)).simplify())
3 3/8
"""

from .names import (INT_WIDTH,
                    DECIMAL_PLACES,
                    ZERO_DIVISOR_ERROR,
                    OVERFLOW_ERROR,
                    FORMAT_ERROR,
                    STREAM_FORMAT_ERROR)
from .errors import Fraction_Error, Zero_Divisor, Overflow, Invalid_Format
from .integers import (Signed_Int,
                       mul_overflows,
                       add_overflows,
                       sub_overflows)
from .rationals import Rational, simplify, simplify_in_place
from .streams import Rational_Reader, read_rational, write_rational
