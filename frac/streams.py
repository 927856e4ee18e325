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
Line oriented text I/O for rationals.

Reading takes one line from a text stream. A line that is a decimal
literal (e.g. "0.5" or "-1.25") is read as a single precision float and
converted with :meth:`.Rational.from_float`; anything else goes to the
fraction scanner.

Python streams have no failure flag, so the :class:`Rational_Reader`
keeps one. Once a read has failed, further reads fail as well until
:meth:`Rational_Reader.clear` is called.
"""

import logging

from .names import STREAM_FORMAT_ERROR
from .errors import Fraction_Error, Invalid_Format
from .floats import parse_single
from .rationals import Rational

LOG = logging.getLogger(__name__)

BLANKS = " \t\n\r\f\v"
DIGITS = "0123456789"

class Rational_Reader:
    """Read rationals, one per line, from a text stream

    >>> import io
    >>> reader = Rational_Reader(io.StringIO("0.75\\n2 1/2\\n"))
    >>> print(reader.read(), reader.read())
    3/4 5/2
    """
    def __init__(self, stream):
        self.stream = stream
        self.failed = False

    def clear(self):
        """Reset the failure flag"""
        self.failed = False

    def fail(self, error):
        self.failed = True
        LOG.debug("read failed: %s", error)
        return error

    def read(self):
        """Read the next line as a rational

        Raises :class:`.Invalid_Format` (with
        :data:`.STREAM_FORMAT_ERROR`) for an empty line, or a line that
        starts with neither a digit nor '-'. Errors from the conversion
        itself propagate unchanged. Any error sets :attr:`failed`.
        """
        if self.failed:
            raise Invalid_Format(STREAM_FORMAT_ERROR)
        return self.convert(self.stream.readline())

    def convert(self, line):
        text = line.strip(BLANKS)
        if not text or text[0] not in DIGITS + "-":
            raise self.fail(Invalid_Format(STREAM_FORMAT_ERROR))

        try:
            value = parse_single(text)
            if value is not None:
                return Rational(value)
            else:
                return Rational(text)
        except Fraction_Error as error:
            raise self.fail(error)

    def read_into(self, q):
        """Read the next line into the existing rational *q*

        On error *q* is left unchanged.
        """
        q.assign(self.read())
        return q

    def __iter__(self):
        """Read all remaining lines"""
        for line in self.stream:
            if self.failed:
                raise Invalid_Format(STREAM_FORMAT_ERROR)
            yield self.convert(line)

def read_rational(stream):
    """Read one rational from *stream*, see :meth:`Rational_Reader.read`"""
    return Rational_Reader(stream).read()

def write_rational(stream, q):
    """Write *q* to *stream* in "N/D" or "W N/D" form"""
    stream.write(q.to_string())
