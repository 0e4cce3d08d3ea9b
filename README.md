# hsdiff

`hsdiff` evaluates the hard-sphere (BMCSL) contribution to the residual
Helmholtz energy of a mixture. The segment diameter depends on temperature as
`sigma * (1 - 0.12 * exp(-3 * epsilon_k / T))`. The package also computes
exact derivatives of that energy with respect to temperature, volume and mole
numbers, by two methods:

* **forward mode** uses dual numbers (`hsdiff.dual.Dual`). Each pass gives one
  directional derivative.
* **reverse mode** uses a recorded computation graph
  (`hsdiff.reverse.Variable`). One call to `Variable.backward` gives the whole
  gradient.

The package needs nothing outside the standard library.

## Installation

```
pip install .
```

## Usage

```python
from hsdiff.helmholtz import Parameters, helmholtz_energy, helmholtz_energy_args
from hsdiff.derivatives import forward_derivative, reverse_gradient, partial_derivatives

params = Parameters.propane()

# Plain value
a = helmholtz_energy(params, 250.0, 1000.0, [1.0])   # ~0.41061

# dA/dT in one forward pass. Arguments are [T, V, n...].
value, da_dt = forward_derivative(helmholtz_energy_args, [250.0, 1000.0, 1.0], [1.0, 0.0, 0.0])

# All partial derivatives in one reverse pass, scaled by the seed
value, gradient = reverse_gradient(helmholtz_energy_args, [250.0, 1000.0, 1.0], 1.0)

# Named results (value, da_dt, da_dv, da_dn) for a given parameter set
d = partial_derivatives(params, 250.0, 1000.0, [1.0])
print(d)
```

`helmholtz_energy` is written once and accepts plain floats, `Dual` values or
`Variable` values. `helmholtz_energy_args` takes `[temperature, volume, *moles]`
and always uses the propane parameters. `Parameters` checks that `m`, `sigma`
and `epsilon_k` have the same length, and `helmholtz_energy` raises
`ValueError` when more mole numbers are given than there are components.

## Command line

```
hsdiff
hsdiff --temperature 300 --volume 2000 --moles 1.0
```

The command uses the propane parameters. By default it evaluates the state
point T = 250, V = 1000, n = 1; `--temperature`, `--volume` and `--moles`
change it. It prints the Helmholtz energy and, for every argument, the
derivative from forward mode and from reverse mode. It then reports whether
the two modes agree to a relative tolerance of 1e-12 and exits with status 0
if they do and 1 if they do not.

## Tests

```
pip install .[test]
pytest
```