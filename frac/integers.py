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
Bounded machine integers.

Python integers never overflow, but the values a :class:`.Rational`
carries are meant to behave like signed machine integers of a fixed
width. This module models that range and provides the overflow
predicates the arithmetic uses to reject an operation *before*
computing a result that would not fit.
"""

from .names import INT_WIDTH

class Signed_Int:
    """Signed two's complement integer of *width* bits

    >>> i = Signed_Int(8)
    >>> i.min_signed, i.max_signed
    (-128, 127)
    """
    def __init__(self, width):
        assert isinstance(width, int)
        assert width >= 2

        self.width      = width
        self.min_signed = - (2 ** (width - 1))
        self.max_signed = 2 ** (width - 1) - 1

    def __repr__(self):
        return "Signed_Int(%u)" % self.width

    def contains(self, value):
        """Test if *value* is representable"""
        return self.min_signed <= value <= self.max_signed

    ######################################################################
    # Overflow predicates

    def mul_overflows(self, a, b):
        """Test if a * b would leave the signed range"""
        if a == 0 or b == 0:
            return False

        # MIN * -1
        if a == -1 and b == self.min_signed:
            return True
        if b == -1 and a == self.min_signed:
            return True

        return not self.contains(a * b)

    def add_overflows(self, a, b):
        """Test if a + b would leave the signed range"""
        if b > 0 and a > self.max_signed - b:
            return True
        if b < 0 and a < self.min_signed - b:
            return True
        return False

    def sub_overflows(self, a, b):
        """Test if a - b would leave the signed range"""
        if b < 0 and a > self.max_signed + b:
            return True
        if b > 0 and a < self.min_signed + b:
            return True
        return False

    def neg_overflows(self, a):
        """Test if -a would leave the signed range"""
        return self.sub_overflows(0, a)

INT = Signed_Int(INT_WIDTH)

def mul_overflows(a, b):
    """Test if a * b overflows the library integer type"""
    return INT.mul_overflows(a, b)

def add_overflows(a, b):
    """Test if a + b overflows the library integer type"""
    return INT.add_overflows(a, b)

def sub_overflows(a, b):
    """Test if a - b overflows the library integer type"""
    return INT.sub_overflows(a, b)

def neg_overflows(a):
    """Test if -a overflows the library integer type"""
    return INT.neg_overflows(a)

##############################################################################
# Machine style division
##############################################################################

# Python rounds integer division towards negative infinity; machine
# integers truncate towards zero. The simplifier and the mixed-fraction
# split depend on the latter.

def c_div(a, b):
    """Integer division, truncating towards zero"""
    assert b != 0
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    else:
        return q

def c_mod(a, b):
    """Remainder of :func:`c_div`; takes the sign of *a*"""
    return a - b * c_div(a, b)

def gcd(a, b):
    """Greatest common divisor of two non-negative integers

    Repeatedly reduces the larger by the smaller; once one of them
    reaches zero the other one is the answer.
    """
    assert a >= 0 and b >= 0
    while a != 0 and b != 0:
        if a > b:
            a %= b
        else:
            b %= a
    if a == 0:
        return b
    else:
        return a
