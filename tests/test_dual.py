import math

import pytest

from hsdiff.dual import Dual


def _finite_difference(func, x, h=1e-6):
    return (func(x + h) - func(x - h)) / (2.0 * h)


@pytest.mark.parametrize("x", [0.3, 1.7, 4.0])
def test_exp_derivative_matches_finite_difference(x):
    result = Dual(x, 1.0).exp()
    assert result.re == pytest.approx(math.exp(x))
    assert result.eps == pytest.approx(_finite_difference(math.exp, x), rel=1e-8)


@pytest.mark.parametrize("x", [0.5, 2.0, -3.0])
def test_recip_derivative_matches_finite_difference(x):
    result = Dual(x, 1.0).recip()
    assert result.re == pytest.approx(1.0 / x)
    assert result.eps == pytest.approx(
        _finite_difference(lambda v: 1.0 / v, x), rel=1e-7
    )


@pytest.mark.parametrize("x", [0.01, 0.5, 3.0])
def test_ln_1p_derivative_matches_finite_difference(x):
    result = Dual(x, 1.0).ln_1p()
    assert result.re == pytest.approx(math.log1p(x))
    assert result.eps == pytest.approx(_finite_difference(math.log1p, x), rel=1e-8)


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_powi_derivative_matches_finite_difference(n):
    x = 1.3
    result = Dual(x, 1.0).powi(n)
    assert result.re == pytest.approx(x**n)
    assert result.eps == pytest.approx(
        _finite_difference(lambda v: v**n, x), rel=1e-7
    )


def test_powi_zero_is_constant_one():
    assert Dual(0.0, 1.0).powi(0) == Dual(1.0, 0.0)


def test_ln_1p_inverts_exp_minus_one():
    x = Dual(0.7, 1.0)
    roundtrip = (x.exp() - 1.0).ln_1p()
    assert roundtrip.re == pytest.approx(x.re)
    assert roundtrip.eps == pytest.approx(x.eps)


def test_recip_twice_is_identity():
    x = Dual(2.5, -1.5)
    back = x.recip().recip()
    assert back.re == pytest.approx(x.re)
    assert back.eps == pytest.approx(x.eps)


def test_division_undoes_multiplication():
    a = Dual(3.0, 0.25)
    b = Dual(-1.5, 2.0)
    result = (a * b) / b
    assert result.re == pytest.approx(a.re)
    assert result.eps == pytest.approx(a.eps)


def test_mixed_float_arithmetic_keeps_derivative():
    x = Dual(2.0, 1.0)
    expr = 3.0 * x + 1.0 - x / 2.0
    assert expr.eps == pytest.approx(2.5)
    assert (1.0 - x) == -(x - 1.0)
    assert (4.0 / x).re == pytest.approx(2.0)


def test_sum_of_duals_adds_components():
    values = [Dual(1.0, 0.5), Dual(2.0, 0.25), Dual(3.0, 0.25)]
    total = sum(values)
    assert total == Dual(6.0, 1.0)


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Dual(1.0) + "a"