"""Hard-sphere Helmholtz energy, generic over floats and AD number types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence

FRAC_PI_6 = math.pi / 6.0


@dataclass(frozen=True)
class Parameters:
    """Per-component segment number, segment diameter and dispersion energy."""

    m: tuple[float, ...]
    sigma: tuple[float, ...]
    epsilon_k: tuple[float, ...]

    def __post_init__(self) -> None:
        m = tuple(float(v) for v in self.m)
        sigma = tuple(float(v) for v in self.sigma)
        epsilon_k = tuple(float(v) for v in self.epsilon_k)
        if not len(m) == len(sigma) == len(epsilon_k):
            raise ValueError("m, sigma and epsilon_k must have the same length")
        object.__setattr__(self, "m", m)
        object.__setattr__(self, "sigma", sigma)
        object.__setattr__(self, "epsilon_k", epsilon_k)

    def __len__(self) -> int:
        return len(self.m)

    @classmethod
    def propane(cls) -> "Parameters":
        """Single-component parameters used throughout the examples."""
        return cls(m=(2.001829,), sigma=(3.618353,), epsilon_k=(208.1101,))


def _recip(x: Any) -> Any:
    return 1.0 / x if isinstance(x, Real) else x.recip()


def _exp(x: Any) -> Any:
    return math.exp(x) if isinstance(x, Real) else x.exp()


def _ln_1p(x: Any) -> Any:
    return math.log1p(x) if isinstance(x, Real) else x.ln_1p()


def _powi(x: Any, n: int) -> Any:
    return float(x) ** n if isinstance(x, Real) else x.powi(n)


def helmholtz_energy(
    parameters: Parameters, temperature: Any, volume: Any, moles: Sequence[Any]
) -> Any:
    """Reduced hard-sphere Helmholtz energy of a mixture.

    ``temperature``, ``volume`` and the entries of ``moles`` may be floats,
    :class:`~hsdiff.dual.Dual` or :class:`~hsdiff.reverse.Variable` values.
    """
    moles = list(moles)
    if len(moles) > len(parameters):
        raise ValueError(
            f"{len(moles)} mole numbers given for {len(parameters)} components"
        )

    t_inv = _recip(temperature)
    diameter = [
        -(_exp(t_inv * -3.0 * eps_k) * 0.12 - 1.0) * sigma
        for eps_k, sigma in zip(parameters.epsilon_k, parameters.sigma)
    ][: len(moles)]

    density = sum(n / volume for n in moles)
    total_moles = sum(moles)
    x = [n / total_moles for n in moles]

    zeta = [
        sum(
            xi * _powi(di, k) * (mi * FRAC_PI_6)
            for xi, di, mi in zip(x, diameter, parameters.m)
        )
        for k in range(4)
    ]
    zeta_23 = zeta[2] / zeta[3]

    z0, z1, z2, z3 = (z * density for z in zeta)
    frac_1mz3 = -_recip(z3 - 1.0)
    return (
        volume
        / FRAC_PI_6
        * (
            z1 * z2 * frac_1mz3 * 3.0
            + _powi(z2, 2) * _powi(frac_1mz3, 2) * zeta_23
            + (z2 * _powi(zeta_23, 2) - z0) * _ln_1p(z3 * -1.0)
        )
    )


def helmholtz_energy_args(args: Sequence[Any]) -> Any:
    """Helmholtz energy of propane from ``[temperature, volume, *moles]``."""
    args = list(args)
    if len(args) < 3:
        raise ValueError("expected temperature, volume and at least one mole number")
    temperature, volume, *moles = args
    return helmholtz_energy(Parameters.propane(), temperature, volume, moles)