"""Hard-sphere Helmholtz energy with forward- and reverse-mode automatic differentiation."""

__version__ = "0.1.0"
__all__ = ["cli", "derivatives", "dual", "helmholtz", "reverse"]