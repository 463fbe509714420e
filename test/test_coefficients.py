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

import cmath
import logging
import math
import sys
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

import mpmath

import taylorpoly.symbolic as sym
from taylorpoly.coefficients import (
    convert,
    elementary_function,
    has_reciprocal,
    infer_ctype,
    is_finite,
    is_zero,
    promote_types,
    two_pi,
    type_of,
)
from taylorpoly.kernels import (
    div_homog_coeff,
    mul_homog_coeff,
    sincos_homog_coeff,
    square_homog_coeff,
)


logger = logging.getLogger(__name__)


# {{{ promotion

@pytest.mark.parametrize(("t", "s", "expected"), [
    (int, int, int),
    (int, Fraction, Fraction),
    (Fraction, float, float),
    (float, complex, complex),
    (int, complex, complex),
    (int, Decimal, Decimal),
    (float, mpmath.mpf, mpmath.mpf),
    (complex, mpmath.mpf, mpmath.mpc),
    (Fraction, mpmath.mpc, mpmath.mpc),
    (mpmath.mpf, sym.Basic, sym.Basic),
    (complex, sym.Basic, sym.Basic),
    ])
def test_promote_types(t, s, expected):
    assert promote_types(t, s) is expected
    assert promote_types(s, t) is expected


@pytest.mark.parametrize(("t", "s"), [
    (Decimal, float),
    (Decimal, Fraction),
    (Decimal, mpmath.mpf),
    ])
def test_promote_types_incompatible(t, s):
    with pytest.raises(TypeError):
        promote_types(t, s)


def test_type_of():
    assert type_of(np.float64(1)) is float
    assert type_of(np.int32(1)) is int
    assert type_of(True) is int
    assert type_of(mpmath.mpf(1)) is mpmath.mpf
    assert type_of(sym.Symbol("t")) is sym.Basic
    assert type_of(Decimal(1)) is Decimal


def test_infer_ctype():
    assert infer_ctype([]) is int
    assert infer_ctype([1, Fraction(1, 2)]) is Fraction
    assert infer_ctype([1, 2.0, 1j]) is complex
    assert infer_ctype([1, sym.Symbol("t")]) is sym.Basic

    with pytest.raises(TypeError):
        infer_ctype([1.0, Decimal(1)])


def test_convert():
    assert convert(Fraction(1, 4), float) == 0.25
    assert type(convert(np.int64(3), int)) is int
    assert convert(Fraction(1, 4), mpmath.mpf) == mpmath.mpf("0.25")
    assert convert(1, sym.Basic) == sym.Integer(1)
    assert convert(2, complex) == 2+0j

# }}}


# {{{ predicates and elementary functions

def test_is_zero():
    assert is_zero(0)
    assert is_zero(0.0)
    assert is_zero(sym.Integer(0))
    assert not is_zero(Fraction(1, 3))


@pytest.mark.parametrize(("value", "finite"), [
    (1.0, True),
    (math.inf, False),
    (math.nan, False),
    (complex(1, math.inf), False),
    (Fraction(1, 3), True),
    (10**400, True),
    (mpmath.mpf("inf"), False),
    (mpmath.mpf(2), True),
    (Decimal("Infinity"), False),
    (Decimal(2), True),
    (sym.Integer(1)/sym.Integer(0), False),
    (sym.Symbol("t"), True),
    ])
def test_is_finite(value, finite):
    assert is_finite(value) == finite


def test_has_reciprocal():
    assert not has_reciprocal(int)
    assert has_reciprocal(Fraction)
    assert has_reciprocal(float)
    assert has_reciprocal(mpmath.mpf)
    assert has_reciprocal(sym.Basic)


def test_elementary_function():
    assert elementary_function("exp", float) is math.exp
    assert elementary_function("exp", Fraction) is math.exp
    assert elementary_function("log", complex) is cmath.log
    assert elementary_function("sin", mpmath.mpc) is mpmath.sin
    assert elementary_function("tan", sym.Basic) is sym.tan

    decimal_sqrt = elementary_function("sqrt", Decimal)
    assert decimal_sqrt(Decimal(9)) == 3

    with pytest.raises(TypeError):
        elementary_function("log", Decimal)

    with pytest.raises(ValueError):
        elementary_function("sinh", float)


def test_two_pi():
    assert two_pi(float) == 2*math.pi
    assert two_pi(sym.Basic) == 2*sym.pi
    assert two_pi(mpmath.mpf) == 2*mpmath.pi

    with pytest.raises(TypeError):
        two_pi(Decimal)

# }}}


# {{{ kernels

@pytest.mark.parametrize("k", [0, 1, 4, 7])
def test_square_kernel_matches_product(k):
    rng = np.random.default_rng(42)
    a = [int(c) for c in rng.integers(-9, 10, 8)]

    assert square_homog_coeff(k, a) == mul_homog_coeff(k, a, a)
    assert mul_homog_coeff(k, a, a) == sum(a[i]*a[k-i] for i in range(k+1))


def test_div_kernel_inverts_product():
    a = [Fraction(c) for c in (2, 3, -1, 5)]
    b = [Fraction(c) for c in (1, -2, 4, 1)]
    product = [mul_homog_coeff(k, a, b) for k in range(4)]

    quotient = [Fraction(0)] * 4
    for k in range(4):
        quotient[k] = div_homog_coeff(k, product, b, quotient, 0)

    assert quotient == a


def test_sincos_kernel_seed():
    assert sincos_homog_coeff(0, [0.0, 1.0], (), (), math.sin, math.cos) \
            == (0.0, 1.0)

# }}}


# {{{ symbolic backend

def test_symbolic_backend_env_var(monkeypatch):
    monkeypatch.setenv("TAYLORPOLY_FORCE_SYMBOLIC_BACKEND", "maxima")

    with pytest.raises(RuntimeError):
        sym._find_symbolic_backend()


def test_make_sym_coeffs():
    coeffs = sym.make_sym_coeffs("c", 3)

    assert [str(c) for c in coeffs] == ["c0", "c1", "c2"]
    assert all(sym.is_symbolic(c) for c in coeffs)

# }}}


# You can test individual routines by typing
# $ python test_coefficients.py 'test_promote_types(int, float, float)'

if __name__ == "__main__":
    if len(sys.argv) > 1:
        exec(sys.argv[1])
    else:
        pytest.main([__file__])

# vim: fdm=marker
