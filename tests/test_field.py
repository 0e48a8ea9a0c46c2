"""Tests for prime-field arithmetic on plain ints.

``add`` and ``sub`` reduce with one conditional step instead of ``%``;
most cases here sit on either side of that step.
"""

import pytest

from modint.arith import field
from modint.config import MODULUS

M = MODULUS


# ---- add: a + b in [0, 2M) ----


def test_add_below_modulus_is_untouched():
    assert field.add(M - 2, 1) == M - 1


def test_add_reaching_modulus_wraps_to_zero():
    assert field.add(M - 1, 1) == 0
    assert field.add(0, 0) == 0


def test_add_largest_sum():
    # (M-1) + (M-1) = 2M - 2, the top of the range one subtraction covers
    assert field.add(M - 1, M - 1) == M - 2


def test_add_agrees_with_modulo_near_boundary():
    for a in range(M - 5, M):
        for b in range(0, 6):
            assert field.add(a, b) == (a + b) % M


# ---- sub: a - b in (-M, M) ----


def test_sub_equal_operands():
    assert field.sub(M - 1, M - 1) == 0


def test_sub_one_below_borrows():
    assert field.sub(0, 1) == M - 1
    assert field.sub(5, 6) == M - 1


def test_sub_most_negative_difference():
    assert field.sub(0, M - 1) == 1


def test_sub_agrees_with_modulo_near_boundary():
    for a in range(0, 6):
        for b in range(M - 5, M):
            assert field.sub(a, b) == (a - b) % M
            assert field.sub(b, a) == (b - a) % M


# ---- mul / neg / reduce ----


def test_mul_largest_operands():
    # (M-1)^2 = (-1)^2
    assert field.mul(M - 1, M - 1) == 1


def test_neg_boundaries():
    assert field.neg(0) == 0
    assert field.neg(1) == M - 1
    assert field.neg(M - 1) == 1


def test_reduce():
    assert field.reduce(M) == 0
    assert field.reduce(2**64 - 1) == (2**64 - 1) % M
    assert field.reduce(-1) == M - 1


# ---- mod_pow / inv ----


def test_mod_pow_matches_builtin():
    for a, n in ((2, 10), (3, 0), (12345, 678), (M - 1, 2**40 + 3)):
        assert field.mod_pow(a, n) == pow(a, n, M)


def test_mod_pow_zero_base():
    assert field.mod_pow(0, 0) == 0
    assert field.mod_pow(0, 5) == 0


def test_mod_pow_negative_exponent():
    with pytest.raises(ValueError):
        field.mod_pow(2, -1)


def test_inv_product_is_one():
    for a in (2, 12345, M - 2):
        assert field.mul(a, field.inv(a)) == 1


def test_inv_minus_one_is_self():
    assert field.inv(M - 1) == M - 1


def test_inv_zero_is_zero():
    assert field.inv(0) == 0


def test_custom_modulus():
    assert field.add(5, 4, modulus=7) == 2
    assert field.sub(1, 3, modulus=7) == 5
    assert field.inv(3, modulus=7) == 5
