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
Coefficient Types
=================

A :class:`~taylorpoly.Taylor` series stores its coefficients as values of a
single *coefficient type* (``ctype``). This module knows how to find that
type for a given set of values, how to lift two types to a common one, and
which elementary functions each family of types supports.

Supported families:

- :class:`int`, :class:`fractions.Fraction`, :class:`float`, :class:`complex`
  (numpy scalars are converted to these),
- :class:`mpmath.mpf` and :class:`mpmath.mpc`,
- symbolic expressions, represented by :class:`taylorpoly.symbolic.Basic`,
- any other type that supports arithmetic with itself and with :class:`int`.
  Such types only mix with :class:`int`, and provide elementary functions
  through methods of the same name (e.g. :meth:`decimal.Decimal.exp`).

.. autofunction:: type_of
.. autofunction:: promote_types
.. autofunction:: infer_ctype
.. autofunction:: convert
.. autofunction:: zero
.. autofunction:: one
.. autofunction:: is_zero
.. autofunction:: is_finite
.. autofunction:: has_reciprocal
.. autofunction:: elementary_function
.. autofunction:: two_pi
"""

import cmath
import logging
import math
import numbers
from fractions import Fraction
from typing import Any, Callable, Iterable

import numpy as np

import mpmath

import taylorpoly.symbolic as sym


logger = logging.getLogger(__name__)

NATIVE_TOWER = (int, Fraction, float, complex)
MPMATH_TYPES = (mpmath.mpf, mpmath.mpc)

ELEMENTARY_FUNCTIONS = ("exp", "log", "sqrt", "sin", "cos", "tan")


# {{{ type inference and promotion

def _normalize(x: Any) -> Any:
    if isinstance(x, np.generic):
        return x.item()
    if isinstance(x, bool):
        return int(x)
    return x


def type_of(x: Any) -> type:
    """Return the coefficient type that *x* belongs to."""
    x = _normalize(x)
    if sym.is_symbolic(x):
        return sym.Basic
    if isinstance(x, mpmath.mpc):
        return mpmath.mpc
    if isinstance(x, mpmath.mpf):
        return mpmath.mpf
    return type(x)


def promote_types(t: type, s: type) -> type:
    """Return the smallest coefficient type that can represent values of
    both *t* and *s*.

    :raises TypeError: if the two types do not mix.
    """
    if t is s:
        return t

    if t is sym.Basic or s is sym.Basic:
        return sym.Basic

    if t is int:
        return s
    if s is int:
        return t

    if t in NATIVE_TOWER and s in NATIVE_TOWER:
        return max(t, s, key=NATIVE_TOWER.index)

    if t in MPMATH_TYPES or s in MPMATH_TYPES:
        other = s if t in MPMATH_TYPES else t
        if other in MPMATH_TYPES or other in NATIVE_TOWER:
            if mpmath.mpc in (t, s) or complex in (t, s):
                return mpmath.mpc
            return mpmath.mpf

    raise TypeError(
            f"no common coefficient type for '{t.__name__}' and '{s.__name__}'")


def infer_ctype(values: Iterable[Any]) -> type:
    result = int
    for value in values:
        result = promote_types(result, type_of(value))
    return result


def convert(x: Any, ctype: type) -> Any:
    """Convert *x* to a value of *ctype*."""
    x = _normalize(x)

    if ctype is sym.Basic:
        return sym.sympify(x)

    if type(x) is ctype:
        return x

    if ctype in MPMATH_TYPES:
        if isinstance(x, Fraction):
            return ctype(x.numerator) / x.denominator
        return ctype(x)

    return ctype(x)

# }}}


# {{{ predicates

def zero(ctype: type) -> Any:
    return convert(0, ctype)


def one(ctype: type) -> Any:
    return convert(1, ctype)


def is_zero(x: Any) -> bool:
    return bool(x == 0)


def is_finite(x: Any) -> bool:
    """Return *False* if *x* is an infinity or NaN of its type."""
    if sym.is_symbolic(x):
        return not sym.is_non_finite(x)
    if isinstance(x, MPMATH_TYPES):
        return bool(mpmath.isfinite(x))
    if isinstance(x, numbers.Rational):
        return True
    if isinstance(x, numbers.Complex):
        return cmath.isfinite(complex(x))

    is_finite_method = getattr(x, "is_finite", None)
    if callable(is_finite_method):
        return bool(is_finite_method())

    return True


def has_reciprocal(ctype: type) -> bool:
    """Integer coefficients have no notion of a reciprocal."""
    return not issubclass(ctype, numbers.Integral)

# }}}


# {{{ elementary functions

def elementary_function(name: str, ctype: type) -> Callable[[Any], Any]:
    """Return the implementation of the elementary function *name* for
    coefficients of type *ctype*.

    :arg name: one of ``exp``, ``log``, ``sqrt``, ``sin``, ``cos``, ``tan``.
    :raises TypeError: if *ctype* does not support *name*.
    """
    if name not in ELEMENTARY_FUNCTIONS:
        raise ValueError(f"unknown elementary function: '{name}'")

    if ctype is sym.Basic:
        return getattr(sym, name)
    if ctype in MPMATH_TYPES:
        return getattr(mpmath, name)
    if ctype is complex:
        return getattr(cmath, name)
    if ctype in NATIVE_TOWER:
        return getattr(math, name)

    if callable(getattr(ctype, name, None)):
        def method_call(x):
            return getattr(x, name)()

        return method_call

    raise TypeError(
            f"coefficient type '{ctype.__name__}' does not support '{name}'")


def two_pi(ctype: type) -> Any:
    if ctype is sym.Basic:
        return 2*sym.pi
    if ctype in MPMATH_TYPES:
        return 2*mpmath.pi
    if ctype in (int, Fraction, float):
        return 2*math.pi

    raise TypeError(
            f"coefficient type '{ctype.__name__}' has no representation of pi")


def real_part(x: Any) -> Any:
    if sym.is_symbolic(x):
        return sym.re(x)
    return x.real


def imag_part(x: Any) -> Any:
    if sym.is_symbolic(x):
        return sym.im(x)
    return x.imag


def conjugate(x: Any) -> Any:
    if sym.is_symbolic(x):
        return sym.conjugate(x)
    return x.conjugate()

# }}}

# vim: fdm=marker
