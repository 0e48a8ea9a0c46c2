"""ModInt: integers modulo a fixed prime.

Every instance holds its value in canonical form, 0 <= val < MODULUS, and
every operation returns a new canonical instance.  Instances are never
mutated after construction, so ``a += b`` rebinds ``a`` and leaves any
other reference to the old value untouched.

The default modulus is ``config.MODULUS`` (1_000_000_007).  Another prime
modulus is obtained by subclassing::

    class ModInt998(ModInt):
        __slots__ = ()
        MODULUS = 998_244_353

Subclasses should declare ``__slots__ = ()`` so their instances stay
without a ``__dict__``.

Operands must share a modulus; mixing ModInt with plain ints or with a
ModInt of another modulus is a ``TypeError``.  Raw integers enter the
type only through the constructor.
"""

from __future__ import annotations

from modint.arith import field
from modint.arith.params import ModulusParams
from modint.config import MODULUS


class ModInt:
    """Integer modulo ``MODULUS`` (a prime)."""

    MODULUS = MODULUS

    __slots__ = ("_val",)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if "MODULUS" in cls.__dict__:
            cls.MODULUS = ModulusParams(modulus=cls.MODULUS).modulus

    def __init__(self, x: int = 0) -> None:
        if not isinstance(x, int) or isinstance(x, bool):
            raise TypeError(f"{type(self).__name__} expects an int, got {type(x).__name__}")
        self._val = field.reduce(x, type(self).MODULUS)

    @classmethod
    def new(cls, x: int) -> ModInt:
        """Alias for the constructor: the value ``x mod MODULUS``."""
        return cls(x)

    def value(self) -> int:
        """Canonical value in [0, MODULUS)."""
        return self._val

    def _same(self, other: object) -> bool:
        return isinstance(other, ModInt) and other.MODULUS == type(self).MODULUS

    def _wrap(self, v: int) -> ModInt:
        return type(self)(v)

    # ---- ring operations ----

    def __add__(self, other: object) -> ModInt:
        if not self._same(other):
            return NotImplemented
        return self._wrap(field.add(self._val, other._val, self.MODULUS))

    def __sub__(self, other: object) -> ModInt:
        if not self._same(other):
            return NotImplemented
        return self._wrap(field.sub(self._val, other._val, self.MODULUS))

    def __mul__(self, other: object) -> ModInt:
        if not self._same(other):
            return NotImplemented
        return self._wrap(field.mul(self._val, other._val, self.MODULUS))

    def __neg__(self) -> ModInt:
        return self._wrap(field.neg(self._val, self.MODULUS))

    def __pos__(self) -> ModInt:
        return self

    # ---- exponentiation / inverse / division ----

    def mod_pow(self, n: int) -> ModInt:
        """Return self**n mod MODULUS by square-and-multiply.

        The receiver is left unchanged.  A zero base gives zero for every
        ``n``, ``n == 0`` included.  Negative ``n`` raises ``ValueError``.
        """
        return self._wrap(field.mod_pow(self._val, n, self.MODULUS))

    def mod_inv(self) -> ModInt:
        """Multiplicative inverse, self**(MODULUS - 2).  Zero maps to zero."""
        return self._wrap(field.inv(self._val, self.MODULUS))

    def __pow__(self, n: int, mod: None = None) -> ModInt:
        if mod is not None:
            raise TypeError("three-argument pow() is not supported for ModInt")
        if not isinstance(n, int):
            return NotImplemented
        if n < 0:
            return self.mod_inv().mod_pow(-n)
        return self.mod_pow(n)

    def __truediv__(self, other: object) -> ModInt:
        if not self._same(other):
            return NotImplemented
        if other._val == 0:
            raise ZeroDivisionError("division by zero ModInt")
        return self * other.mod_inv()

    # ---- comparison ----

    def __eq__(self, other: object) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._val == other._val

    def __lt__(self, other: object) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._val < other._val

    def __le__(self, other: object) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._val <= other._val

    def __gt__(self, other: object) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._val > other._val

    def __ge__(self, other: object) -> bool:
        if not self._same(other):
            return NotImplemented
        return self._val >= other._val

    def __hash__(self) -> int:
        return hash((self.MODULUS, self._val))

    # ---- conversions ----

    def __int__(self) -> int:
        return self._val

    def __bool__(self) -> bool:
        return self._val != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._val})"

    def __str__(self) -> str:
        return str(self._val)
