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
This module defines the :class:`Rational` value type: a signed fraction
over bounded machine integers, with an optional whole part that is kept
for displaying mixed fractions.

The value of a Rational with fields (*whole*, *numerator*,
*denominator*) is *numerator* / *denominator* if *whole* is 0.
Otherwise it is *whole* plus |*numerator*| / *denominator* taken with
the sign of *whole*: the whole part carries the sign of a mixed
fraction, so (-3, 1, 2) is -3.5 and (1, 1, -2) is 1 - 1/2. All
arithmetic works on the improper view of its operands (see
:func:`lift`).

Results of arithmetic are **not** simplified. Call
:meth:`Rational.simplify` (or :meth:`Rational.simplify_in_place`) when a
reduced result is wanted. This avoids repeated gcd computations in the
middle of longer expressions, but it means results like "6/8" or
"3 0/2" are normal.

Every arithmetic operation checks the exact intermediate products it is
about to compute with the predicates from :mod:`.integers`, and raises
:class:`.Overflow` before touching any of its operands.
"""

import math
import logging

from .errors import Zero_Divisor, Overflow, Invalid_Format
from .integers import (INT,
                       mul_overflows, add_overflows, sub_overflows,
                       neg_overflows,
                       c_div, c_mod, gcd)
from .floats import to_single, significant_places
from .scanner import scan_fraction

LOG = logging.getLogger(__name__)

def overflow(where):
    LOG.debug("integer overflow in %s", where)
    return Overflow()

def zero_divisor(where):
    LOG.debug("zero divisor in %s", where)
    return Zero_Divisor()

##############################################################################
# Improper view
##############################################################################

def lift(whole, numerator, denominator):
    """Improper numerator of a (possibly mixed) fraction

    The result *n* is such that *n* / *denominator* is the value of the
    fraction. No range check is done here; see :func:`checked_lift`.
    """
    if whole == 0:
        return numerator
    elif whole < 0:
        return whole * denominator - abs(numerator)
    else:
        return whole * denominator + abs(numerator)

def checked_lift(q):
    """Improper numerator of *q*, which must fit the integer range"""
    if mul_overflows(q.whole, q.denominator):
        raise overflow("improper form")
    rv = lift(q.whole, q.numerator, q.denominator)
    if not INT.contains(rv):
        raise overflow("improper form")
    return rv

def improper(q):
    """Return the tuple (numerator, denominator) of the improper view"""
    return (checked_lift(q), q.denominator)

class Rational:
    """Rational number

    Constructed from:

    * nothing, giving 0/1

    * an int *n*, giving *n*/1

    * two ints *n*, *d*, giving *n*/*d*

    * three ints *w*, *n*, *d*, giving the mixed fraction *w* *n*/*d*

    * a float (treated as single precision, see :meth:`from_float`)

    * a string "N", "N/D", or "W N/D" (see :mod:`.scanner`)

    * another Rational (copy)

    If *simplify* is set, the result is simplified.

    Raises :class:`.Zero_Divisor` for a zero denominator and
    :class:`.Overflow` for integers outside the machine range.

    >>> print(Rational(1, 2, 4, simplify=True))
    1 1/2
    """
    def __init__(self, *args, simplify=False):
        self.whole       = 0
        self.numerator   = 0
        self.denominator = 1

        if len(args) == 0:
            pass

        elif len(args) == 1:
            value = args[0]
            if isinstance(value, Rational):
                self.set_fields(value.whole,
                                value.numerator,
                                value.denominator)
            elif isinstance(value, int):
                self.set_fields(0, value, 1)
            elif isinstance(value, float):
                self.set_from_float(value)
            elif isinstance(value, str):
                self.set_from_string(value)
            else:
                raise TypeError("cannot build Rational from %s" %
                                type(value).__name__)

        elif len(args) == 2:
            self.set_fields(0, args[0], args[1])

        elif len(args) == 3:
            self.set_fields(args[0], args[1], args[2])

        else:
            raise TypeError("Rational takes at most 3 arguments (%u given)" %
                            len(args))

        if simplify:
            self.simplify_in_place()

    @classmethod
    def from_float(cls, value):
        """Build a rational from a (single precision) float

        The float is rounded to binary32, rendered as a decimal string
        with :data:`.DECIMAL_PLACES` places, and the digits after the
        point (minus trailing zeros) decide the power of ten used as
        denominator. The result is simplified. This is approximate: 0.1
        gives 1/10 even though no binary float is exactly 0.1.
        """
        return cls(float(value))

    @classmethod
    def from_string(cls, text, simplify=False):
        """Build a rational from "N", "N/D", or "W N/D"

        A mixed fraction is collapsed into an improper one. Note that a
        lone "N" gives N/N.
        """
        return cls(text, simplify=simplify)

    ######################################################################
    # Setters

    def set_fields(self, whole, numerator, denominator):
        """Set all three fields, after validating them"""
        for value in (whole, numerator, denominator):
            if not isinstance(value, int):
                raise TypeError("fields of a Rational must be int, not %s" %
                                type(value).__name__)
            if not INT.contains(value):
                raise overflow("construction")
        if denominator == 0:
            raise zero_divisor("construction")

        self.whole       = whole
        self.numerator   = numerator
        self.denominator = denominator

    def set_from_float(self, value):
        assert isinstance(value, float)

        if math.isnan(value):
            LOG.debug("cannot convert NaN")
            raise Invalid_Format()
        if math.isinf(value):
            raise overflow("float conversion")
        try:
            value = to_single(value)
        except OverflowError:
            raise overflow("float conversion") from None

        negative = value < 0
        value    = abs(value)

        denominator = 10 ** significant_places(value)
        numerator   = int(value * denominator + 0.5)
        if not INT.contains(numerator) or not INT.contains(denominator):
            raise overflow("float conversion")
        if negative:
            numerator = -numerator

        self.set_fields(0, numerator, denominator)
        self.simplify_in_place()

    def set_from_string(self, text):
        numerator, denominator = scan_fraction(text)
        self.set_fields(0, numerator, denominator)

    def assign(self, value):
        """Overwrite this rational with *value*

        *value* may be a Rational (copied), an int, a float (simplified,
        as with the constructor), or a string (not simplified). On
        error this rational is left unchanged.
        """
        if isinstance(value, (Rational, int, float, str)):
            self.commit(Rational(value))
        else:
            raise TypeError("cannot assign %s to Rational" %
                            type(value).__name__)
        return self

    def commit(self, other):
        self.whole       = other.whole
        self.numerator   = other.numerator
        self.denominator = other.denominator

    ######################################################################
    # Simplification

    def simplify_in_place(self):
        """Reduce to canonical form

        The canonical form has a positive denominator and a fraction
        reduced by the gcd. Integral values become *k*/1 with no whole
        part. Other values with magnitude at least one become a mixed
        fraction whose whole part carries the sign, e.g. "-3 1/2".
        Smaller values are a proper fraction, e.g. "-1/2". Zero is 0/1.
        """
        if self.denominator == 0:
            return

        n = lift(self.whole, self.numerator, self.denominator)
        d = self.denominator

        if n == 0:
            self.whole       = 0
            self.numerator   = 0
            self.denominator = 1
            return

        if d < 0:
            n = -n
            d = -d

        whole = c_div(n, d)
        n     = c_mod(n, d)

        if n == 0:
            # integral
            n     = whole
            d     = 1
            whole = 0
        elif whole != 0:
            n = abs(n)

        g = gcd(abs(n), d)
        n = n // g
        d = d // g

        if not (INT.contains(whole) and
                INT.contains(n) and
                INT.contains(d)):
            raise overflow("simplification")

        self.whole       = whole
        self.numerator   = n
        self.denominator = d

    def simplify(self):
        """Return a simplified copy, see :meth:`simplify_in_place`"""
        rv = Rational(self)
        rv.simplify_in_place()
        return rv

    ######################################################################
    # Conversion

    def to_improper(self):
        """Return the improper form (whole part 0), not simplified"""
        n, d = improper(self)
        return Rational(n, d)

    def to_reciprocal(self):
        """Return the reciprocal, not simplified

        A mixed fraction is made improper first, so the reciprocal of
        1 1/2 is 2/3.
        """
        n, d = improper(self)
        if n == 0:
            raise zero_divisor("reciprocal")
        return Rational(d, n)

    def to_float(self):
        """Convert to single precision

        The result is a python float holding a binary32 value.
        """
        n = to_single(float(lift(self.whole,
                                 self.numerator,
                                 self.denominator)))
        d = to_single(float(self.denominator))
        return to_single(n / d)

    def to_double(self):
        """Convert to python float"""
        return lift(self.whole,
                    self.numerator,
                    self.denominator) / self.denominator

    def to_string(self):
        """Render as "N/D", or "W N/D" when there is a whole part

        The fields are printed as they are, nothing is simplified.
        """
        if self.whole != 0:
            return "%i %i/%i" % (self.whole,
                                 self.numerator,
                                 self.denominator)
        else:
            return "%i/%i" % (self.numerator, self.denominator)

    ######################################################################
    # Predicates

    def is_zero(self):
        """Test if zero"""
        return lift(self.whole, self.numerator, self.denominator) == 0

    def is_negative(self):
        """Test if negative

        Returns false for 0.
        """
        n = lift(self.whole, self.numerator, self.denominator)
        return (n < 0) != (self.denominator < 0) and n != 0

    def is_integral(self):
        """Test if integral"""
        n = lift(self.whole, self.numerator, self.denominator)
        return n % self.denominator == 0

    def is_mixed(self):
        """Test if a whole part is present"""
        return self.whole != 0

    ######################################################################
    # Arithmetic

    def __add__(self, other):
        """Addition"""
        if isinstance(other, int):
            return q_add_int(self, other)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_add(self, other)

    def __radd__(self, other):
        if isinstance(other, int):
            return q_add_int(self, other)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_add(other, self)

    def __sub__(self, other):
        """Subtraction"""
        if isinstance(other, int):
            return q_sub_int(self, other)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_sub(self, other)

    def __rsub__(self, other):
        if isinstance(other, int):
            return q_int_sub(other, self)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_sub(other, self)

    def __mul__(self, other):
        """Multiplication"""
        if isinstance(other, int):
            return q_mul_int(self, other)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_mul(self, other)

    def __rmul__(self, other):
        if isinstance(other, int):
            return q_mul_int(self, other)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_mul(other, self)

    def __truediv__(self, other):
        """Division

        Dividing by an int uses the reciprocal shortcut of
        :func:`q_div_int`.
        """
        if isinstance(other, int):
            return q_div_int(self, other)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_div(self, other)

    def __rtruediv__(self, other):
        if isinstance(other, int):
            return q_int_div(other, self)
        other = as_rational(other)
        if other is None:
            return NotImplemented
        return q_div(other, self)

    # Compound assignment computes the complete result first and then
    # overwrites all three fields, so a failing operation leaves the
    # receiver untouched.

    def __iadd__(self, other):
        rv = self.__add__(other)
        if rv is NotImplemented:
            return rv
        self.commit(rv)
        return self

    def __isub__(self, other):
        rv = self.__sub__(other)
        if rv is NotImplemented:
            return rv
        self.commit(rv)
        return self

    def __imul__(self, other):
        rv = self.__mul__(other)
        if rv is NotImplemented:
            return rv
        self.commit(rv)
        return self

    def __itruediv__(self, other):
        rv = self.__truediv__(other)
        if rv is NotImplemented:
            return rv
        self.commit(rv)
        return self

    ######################################################################
    # Increment and decrement

    def step(self, delta):
        """Move the improper numerator by *delta* (1 or -1)

        With a whole part present the fraction is made improper, moved,
        and split again (so 1 1/2 becomes 2 0/2). Otherwise the
        numerator is moved directly.
        """
        assert delta in (1, -1)

        whole       = self.whole
        numerator   = self.numerator
        denominator = self.denominator

        if whole != 0:
            n = checked_lift(self)
            if add_overflows(n, delta):
                raise overflow("increment")
            n += delta

            whole     = c_div(n, denominator)
            numerator = c_mod(n, denominator)
            if denominator < 0:
                if neg_overflows(denominator):
                    raise overflow("increment")
                numerator   = -numerator
                denominator = -denominator
            if whole != 0:
                numerator = abs(numerator)

        else:
            if add_overflows(numerator, delta):
                raise overflow("increment")
            numerator += delta

        self.whole       = whole
        self.numerator   = numerator
        self.denominator = denominator

    def increment(self):
        """Pre-increment; returns this rational"""
        self.step(1)
        return self

    def decrement(self):
        """Pre-decrement; returns this rational"""
        self.step(-1)
        return self

    def post_increment(self):
        """Post-increment; returns a copy of the previous value"""
        rv = Rational(self)
        self.step(1)
        return rv

    def post_decrement(self):
        """Post-decrement; returns a copy of the previous value"""
        rv = Rational(self)
        self.step(-1)
        return rv

    ######################################################################
    # Unary

    def __neg__(self):
        """Negation

        Only the whole part changes sign for a mixed fraction, the
        denominator is never touched.
        """
        if self.whole != 0:
            if neg_overflows(self.whole):
                raise overflow("negation")
            return Rational(-self.whole, self.numerator, self.denominator)
        else:
            if neg_overflows(self.numerator):
                raise overflow("negation")
            return Rational(-self.numerator, self.denominator)

    def __pos__(self):
        return Rational(self)

    def __abs__(self):
        """Absolute value"""
        if self.is_negative():
            return -self
        else:
            return Rational(self)

    def __bool__(self):
        return not self.is_zero()

    ######################################################################
    # Comparison

    def __lt__(self, other):
        """<"""
        other = as_comparable(other)
        if other is None:
            return NotImplemented
        return q_compare(self.comparable(), other) < 0

    def __le__(self, other):
        """<="""
        other = as_comparable(other)
        if other is None:
            return NotImplemented
        return q_compare(self.comparable(), other) <= 0

    def __eq__(self, other):
        """Equality

        Equal values compare equal whatever their representation, so
        1/2, 2/4, and 0 1/2 are all equal.
        """
        other = as_comparable(other)
        if other is None:
            return NotImplemented
        return q_compare(self.comparable(), other) == 0

    def __ne__(self, other):
        """Inequality"""
        other = as_comparable(other)
        if other is None:
            return NotImplemented
        return q_compare(self.comparable(), other) != 0

    def __gt__(self, other):
        """>"""
        other = as_comparable(other)
        if other is None:
            return NotImplemented
        return q_compare(self.comparable(), other) > 0

    def __ge__(self, other):
        """>="""
        other = as_comparable(other)
        if other is None:
            return NotImplemented
        return q_compare(self.comparable(), other) >= 0

    # Rationals are mutable (compound assignment works in place)
    __hash__ = None

    def comparable(self):
        return (lift(self.whole, self.numerator, self.denominator),
                self.denominator)

    ######################################################################
    # Built-ins

    def __repr__(self):
        if self.whole != 0:
            return "Rational(%i, %i, %i)" % (self.whole,
                                             self.numerator,
                                             self.denominator)
        elif self.denominator == 1:
            return "Rational(%i)" % self.numerator
        else:
            return "Rational(%i, %i)" % (self.numerator, self.denominator)

    def __str__(self):
        return self.to_string()

    def __format__(self, format_spec):
        return format(self.to_string(), format_spec)

    def __float__(self):
        return self.to_double()

    def __int__(self):
        """Convert to int, truncating towards zero"""
        return c_div(lift(self.whole, self.numerator, self.denominator),
                     self.denominator)

##############################################################################
# Operand coercion
##############################################################################

def as_rational(value):
    """Rational for a Rational, float, or string operand

    Returns None for anything else.
    """
    if isinstance(value, Rational):
        return value
    elif isinstance(value, (float, str)):
        return Rational(value)
    else:
        return None

def as_comparable(value):
    """Tuple (numerator, denominator) for a comparison operand

    Returns None for unsupported types.
    """
    if isinstance(value, Rational):
        return value.comparable()
    elif isinstance(value, int):
        return (value, 1)
    elif isinstance(value, (float, str)):
        return Rational(value).comparable()
    else:
        return None

##############################################################################
# Arithmetic kernel
##############################################################################

def q_add(a, b):
    """Rational + Rational"""
    an, ad = improper(a)
    bn, bd = improper(b)

    if (mul_overflows(an, bd) or
        mul_overflows(bn, ad) or
        mul_overflows(ad, bd) or
        add_overflows(an * bd, bn * ad)):
        raise overflow("addition")

    return Rational(an * bd + bn * ad, ad * bd)

def q_sub(a, b):
    """Rational - Rational"""
    an, ad = improper(a)
    bn, bd = improper(b)

    if (mul_overflows(an, bd) or
        mul_overflows(bn, ad) or
        mul_overflows(ad, bd) or
        sub_overflows(an * bd, bn * ad)):
        raise overflow("subtraction")

    return Rational(an * bd - bn * ad, ad * bd)

def q_mul(a, b):
    """Rational * Rational"""
    an, ad = improper(a)
    bn, bd = improper(b)

    if mul_overflows(an, bn) or mul_overflows(ad, bd):
        raise overflow("multiplication")

    return Rational(an * bn, ad * bd)

def q_div(a, b):
    """Rational / Rational"""
    an, ad = improper(a)
    bn, bd = improper(b)

    if bn == 0:
        raise zero_divisor("division")
    if mul_overflows(an, bd) or mul_overflows(ad, bn):
        raise overflow("division")

    return Rational(an * bd, ad * bn)

def q_add_int(a, k):
    """Rational + int (and int + Rational)"""
    an, ad = improper(a)

    if mul_overflows(ad, k) or add_overflows(an, ad * k):
        raise overflow("addition")

    return Rational(an + ad * k, ad)

def q_sub_int(a, k):
    """Rational - int"""
    an, ad = improper(a)

    if mul_overflows(ad, k) or sub_overflows(an, ad * k):
        raise overflow("subtraction")

    return Rational(an - ad * k, ad)

def q_int_sub(k, a):
    """int - Rational"""
    an, ad = improper(a)

    if mul_overflows(ad, k) or sub_overflows(ad * k, an):
        raise overflow("subtraction")

    return Rational(ad * k - an, ad)

def q_mul_int(a, k):
    """Rational * int (and int * Rational)"""
    an, ad = improper(a)

    if mul_overflows(an, k):
        raise overflow("multiplication")

    return Rational(an * k, ad)

def q_div_int(a, k):
    """Rational / int, in its reciprocal form

    For a = n/d this computes (d * k) / n, which is the reciprocal of
    the quotient n / (d * k). This is the established behaviour of the
    int division operator and kept for compatibility; divide by
    Rational(k) for the ordinary quotient.
    """
    an, ad = improper(a)

    if an == 0 or k == 0:
        raise zero_divisor("division")
    if mul_overflows(ad, k):
        raise overflow("division")

    return Rational(ad * k, an)

def q_int_div(k, a):
    """int / Rational"""
    an, ad = improper(a)

    if an == 0:
        raise zero_divisor("division")
    if mul_overflows(k, ad):
        raise overflow("division")

    return Rational(k * ad, an)

##############################################################################
# Comparison kernel
##############################################################################

def q_compare(left, right):
    """Compare two (numerator, denominator) tuples

    Returns -1, 0, or 1. The cross products are computed with python
    integers, so this never overflows, and the operands need not be
    simplified (or even have a positive denominator).
    """
    ln, ld = left
    rn, rd = right

    lhs = ln * rd
    rhs = rn * ld
    if (ld < 0) != (rd < 0):
        lhs, rhs = rhs, lhs

    if lhs < rhs:
        return -1
    elif lhs > rhs:
        return 1
    else:
        return 0

##############################################################################
# Functional helpers
##############################################################################

def simplify(q):
    """Return a simplified copy of *q*"""
    return q.simplify()

def simplify_in_place(q):
    """Simplify *q*"""
    q.simplify_in_place()
