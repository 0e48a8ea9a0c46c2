"""Prime-field arithmetic on plain ints.

Inputs (except to ``reduce``) are expected in [0, modulus); every result
is in [0, modulus).
"""

from __future__ import annotations

from modint.config import MODULUS


def reduce(a: int, modulus: int = MODULUS) -> int:
    """Reduce an integer into [0, modulus)."""
    return a % modulus


def add(a: int, b: int, modulus: int = MODULUS) -> int:
    """Field addition.  a + b < 2 * modulus, so one subtraction suffices."""
    s = a + b
    if s >= modulus:
        s -= modulus
    return s


def sub(a: int, b: int, modulus: int = MODULUS) -> int:
    """Field subtraction."""
    if a < b:
        a += modulus
    return a - b


def mul(a: int, b: int, modulus: int = MODULUS) -> int:
    """Field multiplication."""
    return (a * b) % modulus


def neg(a: int, modulus: int = MODULUS) -> int:
    """Additive inverse."""
    return 0 if a == 0 else modulus - a


def mod_pow(a: int, n: int, modulus: int = MODULUS) -> int:
    """Square-and-multiply exponentiation.

    A zero base yields 0 for every exponent, including n == 0.
    """
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")
    if a == 0:
        return 0
    result = 1
    base = a
    while n > 0:
        if n & 1:
            result = mul(result, base, modulus)
        base = mul(base, base, modulus)
        n >>= 1
    return result


def inv(a: int, modulus: int = MODULUS) -> int:
    """Multiplicative inverse via Fermat's little theorem (modulus is prime).

    inv(0) is 0, following the zero short-circuit in ``mod_pow``.
    """
    return mod_pow(a, modulus - 2, modulus)
