from __future__ import annotations


__copyright__ = "Copyright (C) 2026 The taylorpoly developers"

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

import logging
import sys
from fractions import Fraction

import numpy as np
import pytest

import taylorpoly.symbolic as sym
from taylorpoly import (
    InsufficientOrderError,
    Taylor,
    derivative,
    differentiate,
    evaluate,
    exp,
    integrate,
    sin,
)


logger = logging.getLogger(__name__)


def make_fraction_series(rng, order):
    nums = rng.integers(-9, 10, order+1)
    dens = rng.integers(1, 6, order+1)
    return Taylor([Fraction(int(n), int(d)) for n, d in zip(nums, dens)], order)


# {{{ differentiation and integration

def test_differentiate():
    a = Taylor([1, 2, 3, 4])

    assert differentiate(a) == Taylor([2, 6, 12, 0])
    assert differentiate(a).order == a.order
    assert differentiate(Taylor([5])) == Taylor([0])


def test_integrate():
    a = Taylor([1, 2, 3, 4], ctype=Fraction)

    assert integrate(a) == Taylor([0, 1, 1, 1])
    assert integrate(a, 5) == Taylor([5, 1, 1, 1])
    assert integrate(a).order == a.order

    b = integrate(Taylor([1, 2, 3, 4]))
    assert b.ctype is float
    assert b == Taylor([0, 1, 1, 1])


@pytest.mark.parametrize("order", [0, 1, 6])
def test_integrate_differentiate_inverse(order):
    rng = np.random.default_rng(42)
    a = make_fraction_series(rng, order)

    assert integrate(differentiate(a), a[0]) == a

    b = differentiate(integrate(a))
    assert b.coeffs[:-1] == a.coeffs[:-1]
    assert b[-1] == 0


def test_derivative():
    a = exp(Taylor([0, 1], 5, ctype=sym.Basic))

    for n in range(6):
        assert derivative(a, n) == 1

    assert derivative(Taylor([1, 2, 3])) == 2
    assert derivative(Taylor([1, 2, 3]), 2) == 6

    with pytest.raises(InsufficientOrderError):
        derivative(a, 6)

    with pytest.raises(ValueError):
        derivative(a, -1)


def test_calculus_rejects_scalars():
    with pytest.raises(TypeError):
        differentiate(1.0)

    with pytest.raises(TypeError):
        evaluate([1, 2], 0.5)

# }}}


# {{{ evaluation

def test_evaluate_scalar():
    a = Taylor([1, 2, 3])

    assert evaluate(a, 2) == 17
    assert evaluate(a) == 1
    assert a(2) == 17
    assert a() == 1
    assert evaluate(a, Fraction(1, 2)) == Fraction(11, 4)


def test_evaluate_array():
    a = Taylor([1.0, 2.0, 3.0])
    points = np.array([0.0, 1.0, 2.0])

    assert np.allclose(evaluate(a, points), [1, 6, 17])


def test_evaluate_at_identity():
    rng = np.random.default_rng(17)
    a = make_fraction_series(rng, 4)

    assert evaluate(a, Taylor([0, 1], 4)) == a


def test_composition_exact():
    x = Taylor([0, 1], 6, ctype=sym.Basic)
    exp_poly = exp(x)
    sin_x = sin(x)

    # exp_poly holds the coefficients of e**y, so composing with a series
    # without constant term gives the truncated e**sin(x)
    assert evaluate(exp_poly, sin_x) == exp(sin_x)


def test_composition_reconciles():
    a = Taylor([1, 1])
    dx = Taylor([0, 1, 1], 4, ctype=Fraction)

    result = evaluate(a, dx)

    assert result.order == 4
    assert result.ctype is Fraction
    assert result == Taylor([1, 1, 1, 0, 0])

# }}}


# You can test individual routines by typing
# $ python test_calculus.py 'test_derivative()'

if __name__ == "__main__":
    if len(sys.argv) > 1:
        exec(sys.argv[1])
    else:
        pytest.main([__file__])

# vim: fdm=marker
