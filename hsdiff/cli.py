"""Command line entry point printing the Helmholtz energy and its derivatives."""

from __future__ import annotations

import argparse
import math
from typing import Sequence

from hsdiff.derivatives import forward_derivative, partial_derivatives
from hsdiff.helmholtz import Parameters, helmholtz_energy

_TOLERANCE = 1e-12


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hsdiff",
        description=(
            "Compute the hard-sphere Helmholtz energy of propane and its "
            "derivatives in forward and reverse mode."
        ),
    )
    parser.add_argument("--temperature", type=float, default=250.0)
    parser.add_argument("--volume", type=float, default=1000.0)
    parser.add_argument("--moles", type=float, nargs="+", default=[1.0])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print energy and derivatives; return 1 if the two modes disagree."""
    parser = _parser()
    options = parser.parse_args(argv)
    parameters = Parameters.propane()
    args = [options.temperature, options.volume, *options.moles]

    def energy(values):
        return helmholtz_energy(parameters, values[0], values[1], values[2:])

    try:
        reverse = partial_derivatives(
            parameters, options.temperature, options.volume, options.moles
        )
        forward = [
            forward_derivative(
                energy, args, [1.0 if j == i else 0.0 for j in range(len(args))]
            )
            for i in range(len(args))
        ]
    except (ValueError, ZeroDivisionError) as error:
        parser.error(str(error))

    names = ["da_dt", "da_dv"] + [f"da_dn{i}" for i in range(len(options.moles))]
    reverse_values = [reverse.da_dt, reverse.da_dv, *reverse.da_dn]

    print(f"a = {reverse.value!r}")
    agree = True
    for name, (value, fwd), rev in zip(names, forward, reverse_values):
        print(f"{name} forward = {fwd!r}")
        print(f"{name} reverse = {rev!r}")
        if not math.isclose(value, reverse.value, rel_tol=_TOLERANCE):
            agree = False
        if not math.isclose(fwd, rev, rel_tol=_TOLERANCE, abs_tol=1e-300):
            agree = False

    if agree:
        print("forward and reverse mode agree")
        return 0
    print("forward and reverse mode disagree")
    return 1