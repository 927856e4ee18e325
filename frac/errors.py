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
Exceptions raised by PyFrac.

Every exception derives from :class:`Fraction_Error`, and also from the
closest built-in exception, so that code written against plain Python
arithmetic (catching ``ZeroDivisionError`` for example) keeps working.
"""

from .names import (ZERO_DIVISOR_ERROR,
                    OVERFLOW_ERROR,
                    FORMAT_ERROR)

class Fraction_Error(Exception):
    """Base class for all errors raised by this package"""
    default_message = None

    def __init__(self, message=None):
        if message is None:
            message = self.default_message
        super().__init__(message)
        self.message = message

class Zero_Divisor(Fraction_Error, ZeroDivisionError):
    """A denominator, divisor, or reciprocal would be zero"""
    default_message = ZERO_DIVISOR_ERROR

class Overflow(Fraction_Error, OverflowError):
    """A checked integer operation would leave the signed range"""
    default_message = OVERFLOW_ERROR

class Invalid_Format(Fraction_Error, ValueError):
    """Text could not be read as a fraction or decimal"""
    default_message = FORMAT_ERROR
