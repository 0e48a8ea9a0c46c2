"""Validated modulus parameters for ModInt types."""

from __future__ import annotations

from math import isqrt

from pydantic import BaseModel, StrictInt, field_validator

from modint.config import MAX_MODULUS, MIN_MODULUS


def is_prime(n: int) -> bool:
    """Deterministic trial division; fine for n < 2**32."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for d in range(3, isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


class ModulusParams(BaseModel):
    """A prime modulus small enough that canonical products need no bignums."""

    modulus: StrictInt

    @field_validator("modulus")
    @classmethod
    def _check_modulus(cls, v: int) -> int:
        if not MIN_MODULUS <= v < MAX_MODULUS:
            raise ValueError(f"modulus must be in [{MIN_MODULUS}, 2**32), got {v}")
        if not is_prime(v):
            raise ValueError(f"modulus {v} is not prime")
        return v
