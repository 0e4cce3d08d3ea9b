"""First derivatives of the Helmholtz energy in forward and reverse mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from hsdiff.dual import Dual
from hsdiff.helmholtz import Parameters, helmholtz_energy
from hsdiff.reverse import Variable


@dataclass(frozen=True)
class Derivatives:
    """Helmholtz energy and its partial derivatives at one state point."""

    value: float
    da_dt: float
    da_dv: float
    da_dn: tuple[float, ...]


def forward_derivative(
    function: Callable[[list[Any]], Any],
    args: Sequence[float],
    seed: Sequence[float],
) -> tuple[float, float]:
    """Evaluate ``function`` and its directional derivative along ``seed``.

    ``function`` receives a list of dual numbers, one per entry of ``args``.
    Returns ``(value, derivative)``.
    """
    args = list(args)
    seed = list(seed)
    if len(args) != len(seed):
        raise ValueError(
            f"seed has {len(seed)} entries but {len(args)} arguments were given"
        )
    result = function([Dual(float(a), float(s)) for a, s in zip(args, seed)])
    if isinstance(result, Dual):
        return result.re, result.eps
    return float(result), 0.0


def reverse_gradient(
    function: Callable[[list[Any]], Any],
    args: Sequence[float],
    seed: float = 1.0,
) -> tuple[float, list[float]]:
    """Evaluate ``function`` and its gradient scaled by ``seed``.

    ``function`` receives a list of graph variables, one per entry of
    ``args``. Returns ``(value, gradient)``.
    """
    inputs = [Variable(float(a)) for a in args]
    result = function(inputs)
    if not isinstance(result, Variable):
        return float(result), [0.0] * len(inputs)
    result.backward(seed)
    return result.value, [v.grad for v in inputs]


def partial_derivatives(
    parameters: Parameters,
    temperature: float,
    volume: float,
    moles: Iterable[float],
) -> Derivatives:
    """Helmholtz energy with its derivatives by temperature, volume and moles."""
    moles = [float(n) for n in moles]
    if not moles:
        raise ValueError("at least one mole number is required")

    def energy(args: list[Variable]) -> Variable:
        return helmholtz_energy(parameters, args[0], args[1], args[2:])

    value, gradient = reverse_gradient(
        energy, [float(temperature), float(volume), *moles]
    )
    da_dt, da_dv, *da_dn = gradient
    return Derivatives(value=value, da_dt=da_dt, da_dv=da_dv, da_dn=tuple(da_dn))