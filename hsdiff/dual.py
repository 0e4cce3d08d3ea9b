"""Forward-mode automatic differentiation with first-order dual numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Dual:
    """A number ``re + eps * ε`` with ``ε² = 0``.

    ``re`` is the value and ``eps`` its derivative along the seeded direction.
    """

    re: float
    eps: float = 0.0

    @staticmethod
    def _lift(other: object) -> "Dual | None":
        if isinstance(other, Dual):
            return other
        if isinstance(other, Real):
            return Dual(float(other), 0.0)
        return None

    def __neg__(self) -> "Dual":
        return Dual(-self.re, -self.eps)

    def __pos__(self) -> "Dual":
        return self

    def __add__(self, other: object) -> "Dual":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Dual(self.re + rhs.re, self.eps + rhs.eps)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Dual":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Dual(self.re - rhs.re, self.eps - rhs.eps)

    def __rsub__(self, other: object) -> "Dual":
        lhs = self._lift(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Dual":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Dual(self.re * rhs.re, self.eps * rhs.re + self.re * rhs.eps)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Dual":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        inv = 1.0 / rhs.re
        return Dual(
            self.re * inv,
            (self.eps * rhs.re - self.re * rhs.eps) * inv * inv,
        )

    def __rtruediv__(self, other: object) -> "Dual":
        lhs = self._lift(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def recip(self) -> "Dual":
        """Return ``1 / self``."""
        inv = 1.0 / self.re
        return Dual(inv, -self.eps * inv * inv)

    def exp(self) -> "Dual":
        """Return the exponential of ``self``."""
        value = math.exp(self.re)
        return Dual(value, self.eps * value)

    def ln_1p(self) -> "Dual":
        """Return ``ln(1 + self)``, accurate for small values."""
        return Dual(math.log1p(self.re), self.eps / (1.0 + self.re))

    def powi(self, n: int) -> "Dual":
        """Return ``self`` raised to the integer power ``n``."""
        if n == 0:
            return Dual(1.0, 0.0)
        return Dual(self.re**n, self.eps * n * self.re ** (n - 1))