#!/usr/bin/env python3
"""modint walkthrough.

Usage:
    python -m modint.demo.run_demo

The script:
1. Shows canonical reduction on construction.
2. Runs the ring operations across the wraparound point.
3. Checks Fermat's little theorem and the modular inverse.
4. Divides, then shows that dividing by zero fails fast.
5. Computes a binomial coefficient with factorials and inverses.
6. Repeats a computation under a second prime modulus.
"""

from __future__ import annotations

from typing import List

from modint.arith.modint import ModInt
from modint.config import MODULUS


class ModInt998(ModInt):
    __slots__ = ()
    MODULUS = 998_244_353


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def binomial(n: int, k: int, cls=ModInt) -> ModInt:
    """C(n, k) mod cls.MODULUS using n! / (k! (n-k)!)."""
    if k < 0 or k > n:
        return cls(0)
    fact: List[ModInt] = [cls(1)]
    for i in range(1, n + 1):
        fact.append(fact[-1] * cls(i))
    return fact[n] / (fact[k] * fact[n - k])


def main() -> None:
    # ---- 1. Construction ----
    banner("1) Construction reduces mod M")
    for raw in (0, 42, MODULUS, MODULUS + 5, -1):
        print(f"   ModInt({raw}) = {ModInt(raw)}")

    # ---- 2. Ring operations ----
    banner("2) Ring operations")
    a, b = ModInt(MODULUS - 2), ModInt(15)
    print(f"   {a} + {b} = {a + b}")
    print(f"   {ModInt(1)} - {ModInt(MODULUS)} = {ModInt(1) - ModInt(MODULUS)}")
    print(f"   {a} * {b} = {a * b}")

    # ---- 3. Fermat / inverse ----
    banner("3) Fermat's little theorem")
    two = ModInt(2)
    print(f"   2^(M-1) = {two.mod_pow(MODULUS - 1)}")
    print(f"   inv(2) = {two.mod_inv()}  (2 * inv(2) = {two * two.mod_inv()})")
    print(f"   0^0 = {ModInt(0).mod_pow(0)}  (zero base short-circuits)")

    # ---- 4. Division ----
    banner("4) Division")
    q = ModInt(12345678900000) / ModInt(100000)
    print(f"   12345678900000 / 100000 = {q}")
    try:
        ModInt(1) / ModInt(MODULUS)
    except ZeroDivisionError as exc:
        print(f"   1 / M -> ZeroDivisionError: {exc}")

    # ---- 5. Combinatorics ----
    banner("5) Binomial coefficients")
    for n, k in ((10, 3), (1000, 500), (100000, 50000)):
        print(f"   C({n}, {k}) mod M = {binomial(n, k)}")

    # ---- 6. Another modulus ----
    banner("6) Modulus 998244353")
    print(f"   C(1000, 500) mod 998244353 = {binomial(1000, 500, ModInt998)}")

    banner("Demo complete")


if __name__ == "__main__":
    main()
