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

__doc__ = r"""
Homogeneous Coefficient Kernels
===============================

Each function here computes the coefficient of degree :math:`k` of the
result of one operation, from the coefficients of the operands and the
already-computed prefix of the result. The recurrences follow from the
differential equation the result satisfies, e.g. :math:`(e^a)' = a' e^a`.

All sequences are indexed by degree. Kernels never allocate series and
never call back into :mod:`taylorpoly.series`; the drivers there own the
result buffers and call kernels in increasing degree.

.. autofunction:: mul_homog_coeff
.. autofunction:: div_homog_coeff
.. autofunction:: pow_homog_coeff
.. autofunction:: square_homog_coeff
.. autofunction:: sqrt_homog_coeff
.. autofunction:: exp_homog_coeff
.. autofunction:: log_homog_coeff
.. autofunction:: sincos_homog_coeff
.. autofunction:: tan_homog_coeff
"""

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


# {{{ products

def mul_homog_coeff(k: int, a: Sequence[Any], b: Sequence[Any]) -> Any:
    r"""Degree *k* of the truncated Cauchy product,
    :math:`\sum_{i=0}^k a_i b_{k-i}`.
    """
    if k == 0:
        return a[0] * b[0]

    result = 0
    for i in range(k+1):
        result += a[i] * b[k-i]
    return result


def square_homog_coeff(k: int, a: Sequence[Any]) -> Any:
    """Degree *k* of :math:`a^2`, using the symmetry of the product to
    halve the number of multiplications.
    """
    if k == 0:
        return a[0]**2

    kodd = k % 2
    kend = (k - 2 + kodd) // 2

    result = 0
    for i in range(kend+1):
        result += a[i] * a[k-i]
    result = 2*result

    if not kodd:
        result += a[k//2]**2

    return result


def div_homog_coeff(
        k: int, a: Sequence[Any], b: Sequence[Any], coeffs: Sequence[Any],
        ordfact: int) -> Any:
    """Solve the product recurrence for the unknown quotient coefficient of
    degree ``k - ordfact``.

    :arg coeffs: the quotient built so far, stored from degree 0 after
        *ordfact* vanishing leading terms were factored out of *a* and *b*.
        Entries at degree ``k - ordfact`` and above must still be zero.
    """
    if k == ordfact:
        return a[ordfact] / b[ordfact]

    known = mul_homog_coeff(k, coeffs, b)
    return (a[k] - known) / b[ordfact]

# }}}


# {{{ powers

def pow_homog_coeff(
        k: int, a: Sequence[Any], x: Any, coeffs: Sequence[Any],
        knull: int) -> Any:
    """Degree ``k - knull`` of :math:`a^x`, where *knull* is the first
    non-vanishing degree of *a*.
    """
    if k == knull:
        return a[knull]**x

    result = 0
    for i in range(k-knull):
        result += (x*(k-i) - i) * a[k-i] * coeffs[i]

    return result / ((k - knull*(x+1)) * a[knull])


def sqrt_homog_coeff(
        k: int, a: Sequence[Any], coeffs: Sequence[Any], knull: int,
        sqrt: Callable[[Any], Any]) -> Any:
    """Degree *k* of :math:`\\sqrt{a}`, where ``2*knull`` is the first
    non-vanishing degree of *a*. Inverts :math:`(\\sqrt a)^2 = a`.
    """
    if k == knull:
        return sqrt(a[2*knull])

    kodd = (k - knull) % 2
    kend = (k - knull - 2 + kodd) // 2

    result = 0
    for i in range(knull+1, knull+kend+1):
        result += coeffs[i] * coeffs[k+knull-i]

    aux = a[k+knull] - 2*result
    if not kodd:
        aux = aux - coeffs[kend+knull+1]**2

    return aux / (2*coeffs[knull])

# }}}


# {{{ transcendental functions

def exp_homog_coeff(
        k: int, a: Sequence[Any], coeffs: Sequence[Any],
        exp: Callable[[Any], Any]) -> Any:
    if k == 0:
        return exp(a[0])

    result = 0
    for i in range(k):
        result += (k-i) * a[k-i] * coeffs[i]
    return result / k


def log_homog_coeff(
        k: int, a: Sequence[Any], coeffs: Sequence[Any],
        log: Callable[[Any], Any]) -> Any:
    if k == 0:
        return log(a[0])

    result = 0
    for i in range(1, k):
        result += (k-i) * a[i] * coeffs[k-i]
    return (a[k] - result/k) / a[0]


def sincos_homog_coeff(
        k: int, a: Sequence[Any],
        sin_coeffs: Sequence[Any], cos_coeffs: Sequence[Any],
        sin: Callable[[Any], Any], cos: Callable[[Any], Any]
        ) -> tuple[Any, Any]:
    """Degree *k* of :math:`\\sin a` and :math:`\\cos a`, which have to be
    computed together since each one's derivative is the other.
    """
    if k == 0:
        return sin(a[0]), cos(a[0])

    sin_result = 0
    cos_result = 0
    for i in range(1, k+1):
        x = i * a[i]
        sin_result += x * cos_coeffs[k-i]
        cos_result -= x * sin_coeffs[k-i]

    return sin_result / k, cos_result / k


def tan_homog_coeff(
        k: int, a: Sequence[Any], t2_coeffs: Sequence[Any],
        tan: Callable[[Any], Any]) -> Any:
    r"""Degree *k* of :math:`\tan a` from :math:`\tan' = 1 + \tan^2`.

    :arg t2_coeffs: the square of the result, known up to degree ``k-1``.
    """
    if k == 0:
        return tan(a[0])

    result = 0
    for i in range(k):
        result += (k-i) * a[k-i] * t2_coeffs[i]
    return a[k] + result/k

# }}}

# vim: fdm=marker
