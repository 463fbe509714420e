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
Calculus
========

.. autofunction:: differentiate
.. autofunction:: integrate
.. autofunction:: derivative
.. autofunction:: evaluate
"""

import math
from typing import Any

from taylorpoly.coefficients import convert, promote_types, type_of
from taylorpoly.errors import InsufficientOrderError
from taylorpoly.series import Taylor, reconcile


def _check_series(a: Any, what: str) -> None:
    if not isinstance(a, Taylor):
        raise TypeError(f"cannot {what} object of type {type(a).__name__}")


def differentiate(a: Taylor) -> Taylor:
    """Return the derivative of *a* with respect to the indeterminate.

    The order is kept, so the top coefficient of the result is zero.
    """
    _check_series(a, "differentiate")

    coeffs = [(i+1) * a.coeffs[i+1] for i in range(a.order)]
    coeffs.append(convert(0, a.ctype))
    return Taylor(coeffs, a.order, a.ctype)


def integrate(a: Taylor, const: Any = None) -> Taylor:
    """Return the antiderivative of *a* whose constant term is *const*
    (zero by default). The order is kept, so the top coefficient of *a*
    does not contribute.
    """
    _check_series(a, "integrate")

    if const is None:
        const = convert(0, a.ctype)

    ctype = promote_types(a.ctype, type_of(a.coeffs[0] / 1))
    ctype = promote_types(ctype, type_of(const))

    coeffs = [const] + [a.coeffs[i] / (i+1) for i in range(a.order)]
    return Taylor(coeffs, a.order, ctype)


def derivative(a: Taylor, n: int = 1) -> Any:
    """Return the *n*-th derivative of *a* at the origin, ``n! * a[n]``.

    :raises InsufficientOrderError: if *n* exceeds the order of *a*.
    """
    _check_series(a, "differentiate")

    if n < 0:
        raise ValueError(f"derivative order must be non-negative, got {n}")
    if n > a.order:
        raise InsufficientOrderError(
                f"the order of the series (currently {a.order}) must be "
                f"increased to calculate its {n}-th derivative")

    return math.factorial(n) * a.coeffs[n]


def evaluate(a: Taylor, dx: Any = 0) -> Any:
    """Evaluate *a* at *dx* by Horner's rule.

    :arg dx: a scalar, a :class:`numpy.ndarray` of points (evaluated
        elementwise), or another :class:`~taylorpoly.Taylor`, in which case
        the result is the composition of the two series, truncated to their
        common order.
    """
    _check_series(a, "evaluate")

    if isinstance(dx, Taylor):
        a, dx = reconcile(a, dx)
        result = Taylor(a.coeffs[-1], a.order, a.ctype)
        for coeff in reversed(a.coeffs[:-1]):
            result = result*dx + coeff
        return result

    result = a.coeffs[-1]
    for coeff in reversed(a.coeffs[:-1]):
        result = result*dx + coeff
    return result

# vim: fdm=marker
