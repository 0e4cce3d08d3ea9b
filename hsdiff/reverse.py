"""Reverse-mode automatic differentiation on a recorded expression graph."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable


class Variable:
    """A scalar node of an expression graph.

    Arithmetic on variables records the local derivatives needed to
    propagate adjoints back to the inputs with :meth:`backward`.
    """

    __slots__ = ("value", "grad", "_parents")

    def __init__(
        self, value: float, _parents: Iterable[tuple["Variable", float]] = ()
    ) -> None:
        self.value = float(value)
        self.grad = 0.0
        self._parents = tuple(_parents)

    def __repr__(self) -> str:
        return f"Variable(value={self.value!r}, grad={self.grad!r})"

    @staticmethod
    def _lift(other: object) -> "Variable | None":
        if isinstance(other, Variable):
            return other
        if isinstance(other, Real):
            return Variable(float(other))
        return None

    def __neg__(self) -> "Variable":
        return Variable(-self.value, ((self, -1.0),))

    def __pos__(self) -> "Variable":
        return self

    def __add__(self, other: object) -> "Variable":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Variable(self.value + rhs.value, ((self, 1.0), (rhs, 1.0)))

    __radd__ = __add__

    def __sub__(self, other: object) -> "Variable":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Variable(self.value - rhs.value, ((self, 1.0), (rhs, -1.0)))

    def __rsub__(self, other: object) -> "Variable":
        lhs = self._lift(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Variable":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        return Variable(
            self.value * rhs.value, ((self, rhs.value), (rhs, self.value))
        )

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Variable":
        rhs = self._lift(other)
        if rhs is None:
            return NotImplemented
        inv = 1.0 / rhs.value
        value = self.value * inv
        return Variable(value, ((self, inv), (rhs, -value * inv)))

    def __rtruediv__(self, other: object) -> "Variable":
        lhs = self._lift(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def recip(self) -> "Variable":
        """Return ``1 / self``."""
        inv = 1.0 / self.value
        return Variable(inv, ((self, -inv * inv),))

    def exp(self) -> "Variable":
        """Return the exponential of ``self``."""
        value = math.exp(self.value)
        return Variable(value, ((self, value),))

    def ln_1p(self) -> "Variable":
        """Return ``ln(1 + self)``, accurate for small values."""
        return Variable(math.log1p(self.value), ((self, 1.0 / (1.0 + self.value)),))

    def powi(self, n: int) -> "Variable":
        """Return ``self`` raised to the integer power ``n``."""
        if n == 0:
            return Variable(1.0)
        return Variable(self.value**n, ((self, n * self.value ** (n - 1)),))

    def _topological_order(self) -> list["Variable"]:
        order: list[Variable] = []
        visited: set[int] = set()
        stack: list[tuple[Variable, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                order.append(node)
                continue
            if id(node) in visited:
                continue
            visited.add(id(node))
            stack.append((node, True))
            stack.extend(
                (parent, False)
                for parent, _ in node._parents
                if id(parent) not in visited
            )
        return order

    def backward(self, seed: float = 1.0) -> None:
        """Propagate ``seed`` from this node to every node it depends on.

        Gradients of all nodes in the graph are reset first, so after the
        call each input's ``grad`` holds ``seed * d(self)/d(input)``.
        """
        order = self._topological_order()
        for node in order:
            node.grad = 0.0
        self.grad = float(seed)
        for node in reversed(order):
            for parent, local in node._parents:
                parent.grad += node.grad * local