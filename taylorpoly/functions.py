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

__doc__ = """
Elementary Functions
====================

These functions extend their counterparts in :mod:`math` (or
:mod:`cmath`, :mod:`mpmath`, the symbolic backend) to take a
:class:`~taylorpoly.Taylor` as an argument. Given a scalar, they dispatch
to the implementation for the scalar's type.

.. autofunction:: square
.. autofunction:: sqrt
.. autofunction:: exp
.. autofunction:: log
.. autofunction:: sincos
.. autofunction:: sin
.. autofunction:: cos
.. autofunction:: tan
"""

import logging
from typing import Any

from taylorpoly.coefficients import (
    convert,
    elementary_function,
    promote_types,
    type_of,
)
from taylorpoly.errors import LogAtRootError, OddLeadingDegreeError
from taylorpoly.kernels import (
    exp_homog_coeff,
    log_homog_coeff,
    sincos_homog_coeff,
    sqrt_homog_coeff,
    square_homog_coeff,
    tan_homog_coeff,
)
from taylorpoly.series import Taylor, _report_factorization


logger = logging.getLogger(__name__)


def _lift(a: Taylor, seed: Any) -> tuple[type, list[Any]]:
    """Return the coefficient type of a result whose degree-0 coefficient is
    *seed*, and the coefficients of *a* converted to it.
    """
    ctype = promote_types(a.ctype, type_of(seed))
    return ctype, [convert(c, ctype) for c in a.coeffs]


def _scalar(name: str, x: Any) -> Any:
    return elementary_function(name, type_of(x))(x)


def square(a: Any) -> Any:
    if isinstance(a, Taylor):
        return a.square()
    return a*a


# {{{ sqrt

def sqrt(a: Any) -> Any:
    """Square root. The first non-vanishing degree of a series must be even;
    the result then vanishes to half that degree.

    :raises OddLeadingDegreeError: otherwise.
    """
    if not isinstance(a, Taylor):
        return _scalar("sqrt", a)

    fsqrt = elementary_function("sqrt", a.ctype)
    order = a.order

    l0nz = a.first_nonzero()
    if l0nz > order:
        logger.debug("sqrt: argument vanishes up to order %d", order)
        return a.zero()
    if l0nz % 2:
        raise OddLeadingDegreeError(
                "first non-vanishing Taylor coefficient must be an even power "
                f"to expand sqrt around 0, found degree {l0nz}")

    lnull = l0nz // 2
    aux = sqrt_homog_coeff(lnull, a.coeffs, (), lnull, fsqrt)
    ctype, av = _lift(a, aux)

    coeffs = [convert(0, ctype)] * (order+1)
    coeffs[lnull] = aux
    for k in range(lnull+1, order-l0nz+1):
        coeffs[k] = sqrt_homog_coeff(k, av, coeffs, lnull, fsqrt)

    if l0nz:
        _report_factorization("sqrt", l0nz)

    return Taylor(coeffs, order, ctype)

# }}}


# {{{ exp and log

def exp(a: Any) -> Any:
    if not isinstance(a, Taylor):
        return _scalar("exp", a)

    fexp = elementary_function("exp", a.ctype)
    order = a.order

    aux = exp_homog_coeff(0, a.coeffs, (), fexp)
    ctype, av = _lift(a, aux)

    coeffs = [convert(0, ctype)] * (order+1)
    coeffs[0] = aux
    for k in range(1, order+1):
        coeffs[k] = exp_homog_coeff(k, av, coeffs, fexp)

    return Taylor(coeffs, order, ctype)


def log(a: Any) -> Any:
    """Natural logarithm.

    :raises LogAtRootError: if the constant term of a series vanishes.
    """
    if not isinstance(a, Taylor):
        return _scalar("log", a)

    flog = elementary_function("log", a.ctype)
    order = a.order

    if a.first_nonzero() > 0:
        raise LogAtRootError("not possible to expand log around 0")

    aux = log_homog_coeff(0, a.coeffs, (), flog)
    ctype, av = _lift(a, aux)

    coeffs = [convert(0, ctype)] * (order+1)
    coeffs[0] = aux
    for k in range(1, order+1):
        coeffs[k] = log_homog_coeff(k, av, coeffs, flog)

    return Taylor(coeffs, order, ctype)

# }}}


# {{{ trigonometric functions

def sincos(a: Any) -> tuple[Any, Any]:
    """Return ``(sin(a), cos(a))``, computed in one pass."""
    if not isinstance(a, Taylor):
        return _scalar("sin", a), _scalar("cos", a)

    fsin = elementary_function("sin", a.ctype)
    fcos = elementary_function("cos", a.ctype)
    order = a.order

    sin_aux, cos_aux = sincos_homog_coeff(0, a.coeffs, (), (), fsin, fcos)
    ctype, av = _lift(a, sin_aux)
    ctype = promote_types(ctype, type_of(cos_aux))
    av = [convert(c, ctype) for c in av]

    sin_coeffs = [convert(0, ctype)] * (order+1)
    cos_coeffs = [convert(0, ctype)] * (order+1)
    sin_coeffs[0] = sin_aux
    cos_coeffs[0] = cos_aux
    for k in range(1, order+1):
        sin_coeffs[k], cos_coeffs[k] = sincos_homog_coeff(
                k, av, sin_coeffs, cos_coeffs, fsin, fcos)

    return Taylor(sin_coeffs, order, ctype), Taylor(cos_coeffs, order, ctype)


def sin(a: Any) -> Any:
    if not isinstance(a, Taylor):
        return _scalar("sin", a)
    return sincos(a)[0]


def cos(a: Any) -> Any:
    if not isinstance(a, Taylor):
        return _scalar("cos", a)
    return sincos(a)[1]


def tan(a: Any) -> Any:
    """Tangent, from :math:`\\tan' = 1 + \\tan^2`. The square of the result
    is advanced alongside the result, one degree at a time.
    """
    if not isinstance(a, Taylor):
        return _scalar("tan", a)

    ftan = elementary_function("tan", a.ctype)
    order = a.order

    aux = tan_homog_coeff(0, a.coeffs, (), ftan)
    ctype, av = _lift(a, aux)

    coeffs = [convert(0, ctype)] * (order+1)
    t2_coeffs = [convert(0, ctype)] * (order+1)
    coeffs[0] = aux
    t2_coeffs[0] = aux**2
    for k in range(1, order+1):
        coeffs[k] = tan_homog_coeff(k, av, t2_coeffs, ftan)
        t2_coeffs[k] = square_homog_coeff(k, coeffs)

    return Taylor(coeffs, order, ctype)

# }}}

# vim: fdm=marker
