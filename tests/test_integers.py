"""Test the machine integer model and the overflow predicates."""
import pytest

from frac.integers import (Signed_Int, INT,
                           mul_overflows, add_overflows, sub_overflows,
                           neg_overflows,
                           c_div, c_mod, gcd)

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def test_default_range():
    assert INT.width == 32
    assert INT.min_signed == INT_MIN
    assert INT.max_signed == INT_MAX
    assert INT.contains(INT_MAX)
    assert not INT.contains(INT_MAX + 1)
    assert not INT.contains(INT_MIN - 1)


def test_min_times_minus_one():
    assert mul_overflows(INT_MIN, -1)
    assert mul_overflows(-1, INT_MIN)


def test_mul_zero_never_overflows():
    for x in (INT_MIN, -1, 0, 1, INT_MAX):
        assert not mul_overflows(0, x)
        assert not mul_overflows(x, 0)


@pytest.mark.parametrize("a, b, expected", [
    (INT_MIN, 1, False),
    (INT_MAX, -1, False),
    (65536, 32768, True),
    (65536, -32768, False),
    (46340, 46340, False),
    (46341, 46341, True),
    (-46341, 46341, True),
    (INT_MAX, 2, True),
])
def test_mul_overflows(a, b, expected):
    assert mul_overflows(a, b) == expected


def test_add_overflows():
    assert add_overflows(INT_MAX, 1)
    assert add_overflows(INT_MIN, -1)
    assert add_overflows(1, INT_MAX)
    assert not add_overflows(INT_MAX, 0)
    assert not add_overflows(INT_MIN, INT_MAX)
    assert not add_overflows(INT_MAX - 1, 1)


def test_sub_overflows():
    assert sub_overflows(INT_MIN, 1)
    assert sub_overflows(INT_MAX, -1)
    assert sub_overflows(0, INT_MIN)
    assert not sub_overflows(-1, INT_MIN)
    assert not sub_overflows(INT_MIN, 0)
    assert not sub_overflows(INT_MIN + 1, 1)


def test_neg_overflows():
    assert neg_overflows(INT_MIN)
    assert not neg_overflows(INT_MAX)
    assert not neg_overflows(0)


def test_narrow_width():
    i8 = Signed_Int(8)
    assert (i8.min_signed, i8.max_signed) == (-128, 127)
    assert i8.mul_overflows(-128, -1)
    assert i8.mul_overflows(16, 8)
    assert not i8.mul_overflows(-16, 8)
    assert i8.add_overflows(127, 1)
    assert i8.sub_overflows(-128, 1)
    assert repr(i8) == "Signed_Int(8)"


@pytest.mark.parametrize("a, b, quotient, remainder", [
    (7, 2, 3, 1),
    (-7, 2, -3, -1),
    (7, -2, -3, 1),
    (-7, -2, 3, -1),
    (2, -4, 0, 2),
    (6, 3, 2, 0),
])
def test_truncating_division(a, b, quotient, remainder):
    assert c_div(a, b) == quotient
    assert c_mod(a, b) == remainder
    assert b * c_div(a, b) + c_mod(a, b) == a


def test_gcd():
    assert gcd(12, 18) == 6
    assert gcd(18, 12) == 6
    assert gcd(0, 5) == 5
    assert gcd(5, 0) == 5
    assert gcd(7, 7) == 7
    assert gcd(1, INT_MAX) == 1
