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
Text scanner for fractions.

Three shapes are understood, each optionally surrounded by blanks
(spaces or tabs):

    ``N``     a lone non-negative integer

    ``N/D``   a simple fraction

    ``W N/D`` a mixed fraction

The whole part of a mixed fraction must be followed by a space; more
blanks may follow that space. Signs are not part of this grammar. A
mixed fraction is collapsed into an improper one while scanning, so
"3 1/2" produces 7 / 2.

A lone integer ``N`` produces N / N. This is the long-standing
behaviour of the scanner and callers rely on it; use the decimal path of
:mod:`.streams` (or the int constructor) for N / 1.
"""

import logging

from .errors import Zero_Divisor, Overflow, Invalid_Format
from .integers import mul_overflows, add_overflows

LOG = logging.getLogger(__name__)

DIGITS     = "0123456789"
WHITESPACE = " \t"

class Scanner:
    """Scanner over a single string

    >>> Scanner("3 1/2").scan()
    (7, 2)
    """
    def __init__(self, text):
        assert isinstance(text, str)
        self.text = text
        self.pos  = 0

    ######################################################################
    # Character level

    def peek(self):
        """Next character, or None at the end of the text"""
        if self.pos < len(self.text):
            return self.text[self.pos]
        else:
            return None

    def advance(self):
        assert self.pos < len(self.text)
        self.pos += 1

    def at_end(self):
        return self.pos >= len(self.text)

    def skip_whitespace(self):
        while not self.at_end() and self.peek() in WHITESPACE:
            self.advance()

    def error(self):
        LOG.debug("cannot scan %r at offset %u", self.text, self.pos)
        return Invalid_Format()

    ######################################################################
    # Tokens

    def read_number(self):
        """Read a run of digits

        There must be at least one digit. The value is accumulated
        digit by digit and must stay within the integer range.
        """
        if self.at_end() or self.peek() not in DIGITS:
            raise self.error()

        value = 0
        while not self.at_end() and self.peek() in DIGITS:
            digit = ord(self.peek()) - ord("0")
            if mul_overflows(value, 10) or add_overflows(value * 10, digit):
                LOG.debug("number in %r does not fit", self.text)
                raise Overflow()
            value = value * 10 + digit
            self.advance()

        return value

    def expect_end(self):
        self.skip_whitespace()
        if not self.at_end():
            raise self.error()

    ######################################################################
    # Fractions

    def scan(self):
        """Scan the whole text

        Returns a tuple (numerator, denominator). Raises
        :class:`.Invalid_Format` for text that is not one of the three
        shapes, :class:`.Zero_Divisor` for a zero denominator, and
        :class:`.Overflow` if a number (or the collapsed mixed
        numerator) does not fit.
        """
        self.skip_whitespace()
        first = self.read_number()
        whole = 0

        if self.at_end():
            return self.lone_integer(first)

        if self.peek() == "/":
            self.advance()
            numerator = first

        elif self.peek() in WHITESPACE:
            # only a space separates the whole part of a mixed fraction
            separator = self.peek()
            self.skip_whitespace()
            if self.at_end():
                return self.lone_integer(first)
            if separator != " ":
                raise self.error()

            whole     = first
            numerator = self.read_number()
            if self.peek() != "/":
                raise self.error()
            self.advance()

        else:
            raise self.error()

        self.skip_whitespace()
        denominator = self.read_number()
        self.expect_end()

        if denominator == 0:
            LOG.debug("zero denominator in %r", self.text)
            raise Zero_Divisor()

        if whole != 0:
            if mul_overflows(denominator, whole):
                raise Overflow()
            if add_overflows(denominator * whole, numerator):
                raise Overflow()
            numerator += denominator * whole

        return (numerator, denominator)

    def lone_integer(self, value):
        if value == 0:
            LOG.debug("zero denominator in %r", self.text)
            raise Zero_Divisor()
        return (value, value)

def scan_fraction(text):
    """Scan *text*, see :meth:`Scanner.scan`"""
    return Scanner(text).scan()
