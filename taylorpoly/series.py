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
Truncated Power Series
======================

.. autoclass:: Taylor
.. autofunction:: reconcile
"""

import logging
import math
import numbers
import warnings
from collections.abc import Iterable
from typing import Any

import numpy as np

import mpmath
from pytools import memoize_method

import taylorpoly.symbolic as sym
from taylorpoly.coefficients import (
    convert,
    has_reciprocal,
    infer_ctype,
    is_finite,
    is_zero,
    promote_types,
    two_pi,
    type_of,
)
from taylorpoly.errors import (
    DivisionUndefinedError,
    FactorizationWarning,
    NegativeExpansionOrderError,
    NonIntegerExpansionOrderError,
    NonInvertibleCoefficientError,
)
from taylorpoly.kernels import (
    div_homog_coeff,
    mul_homog_coeff,
    pow_homog_coeff,
    square_homog_coeff,
)


logger = logging.getLogger(__name__)


def _is_scalar(x: Any) -> bool:
    return (isinstance(x, numbers.Number | mpmath.mpf | mpmath.mpc)
            or sym.is_symbolic(x))


def _report_factorization(operation: str, nterms: int) -> None:
    logger.debug("%s: factored out %d vanishing leading terms", operation, nterms)

    from taylorpoly import WARN_ON_FACTORIZATION
    if WARN_ON_FACTORIZATION:
        warnings.warn(
                f"{operation}: factorizing the series, the last {nterms} "
                "coefficients are set to zero",
                FactorizationWarning, stacklevel=3)


# {{{ series

class Taylor:
    """A power series in one indeterminate, truncated at degree
    :attr:`order`.

    .. attribute:: coeffs

        A :class:`tuple` of ``order + 1`` coefficients, all of type
        :attr:`ctype`. ``coeffs[i]`` multiplies the i-th power of the
        indeterminate.

    .. attribute:: order

        The truncation degree.

    .. attribute:: ctype

        The coefficient type, see :mod:`taylorpoly.coefficients`.

    Instances are immutable. All arithmetic operators accept another
    :class:`Taylor` or a scalar on either side; the operands are brought to
    a common coefficient type and order by :func:`reconcile` first.

    .. automethod:: __init__
    .. automethod:: __len__
    .. automethod:: first_nonzero
    .. automethod:: with_order
    .. automethod:: astype
    .. automethod:: zero
    .. automethod:: one
    .. automethod:: square
    .. automethod:: rem
    .. automethod:: mod2pi
    .. automethod:: real
    .. automethod:: imag
    .. automethod:: conj
    .. automethod:: to_numpy
    """

    def __init__(self,
            coeffs: Taylor | Iterable[Any] | Any = (),
            order: int | None = None,
            ctype: type | None = None) -> None:
        """
        :arg coeffs: a sequence of coefficients, a single scalar (giving a
            constant series) or another :class:`Taylor`.
        :arg order: the truncation degree. Defaults to the number of
            coefficients minus one. It is raised if too small to hold all of
            *coeffs*, so that supplied data is never truncated; missing
            coefficients are zero.
        :arg ctype: the coefficient type. Inferred from *coeffs* if not given.
        """
        if isinstance(coeffs, Taylor):
            values = list(coeffs.coeffs)
            if ctype is None:
                ctype = coeffs.ctype
        elif isinstance(coeffs, Iterable) and not _is_scalar(coeffs):
            values = list(coeffs)
        else:
            values = [coeffs]

        if not values:
            values = [0]

        if order is None:
            order = len(values) - 1
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")
        order = max(order, len(values) - 1)

        if ctype is None:
            ctype = infer_ctype(values)

        zero = convert(0, ctype)
        self.coeffs = (
                tuple(convert(value, ctype) for value in values)
                + (zero,) * (order + 1 - len(values)))
        self.order = order
        self.ctype = ctype

    # {{{ accessors

    def __len__(self) -> int:
        """Return :attr:`order`, the highest retained degree. Note that this
        is one less than the number of coefficients.
        """
        return self.order

    def __getitem__(self, index):
        return self.coeffs[index]

    def __iter__(self):
        return iter(self.coeffs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.coeffs)!r}, order={self.order})"

    @memoize_method
    def first_nonzero(self) -> int:
        """Return the lowest degree with a non-zero coefficient, or
        ``order + 1`` if all coefficients vanish.
        """
        for i, coeff in enumerate(self.coeffs):
            if not is_zero(coeff):
                return i
        return self.order + 1

    def with_order(self, order: int) -> Taylor:
        """Return the series zero-padded to *order*. A smaller *order* than
        :attr:`order` is raised to :attr:`order`.
        """
        if order <= self.order:
            return self
        return Taylor(self.coeffs, order, self.ctype)

    def astype(self, ctype: type) -> Taylor:
        if ctype is self.ctype:
            return self
        return Taylor(self.coeffs, self.order, ctype)

    def zero(self) -> Taylor:
        return Taylor(0, self.order, self.ctype)

    def one(self) -> Taylor:
        return Taylor(1, self.order, self.ctype)

    def to_numpy(self, dtype=None) -> np.ndarray:
        """Return the coefficients as a :class:`numpy.ndarray`. Symbolic
        and arbitrary-precision coefficients give an object array unless
        *dtype* is given.
        """
        if dtype is None and self.ctype not in (int, float, complex):
            dtype = object
        return np.array(self.coeffs, dtype=dtype)

    # }}}

    # {{{ ring operations

    __hash__ = None

    # numpy scalars on the left defer to the reflected operators here
    __array_ufunc__ = None

    def __eq__(self, other: object) -> bool:
        other = _as_series(other)
        if other is None:
            return NotImplemented

        a, b = reconcile(self, other)
        return all(ac == bc for ac, bc in zip(a.coeffs, b.coeffs, strict=True))

    def __add__(self, other: Any) -> Taylor:
        other = _as_series(other)
        if other is None:
            return NotImplemented

        a, b = reconcile(self, other)
        return Taylor(
                [ac + bc for ac, bc in zip(a.coeffs, b.coeffs, strict=True)],
                a.order, a.ctype)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Taylor:
        other = _as_series(other)
        if other is None:
            return NotImplemented

        a, b = reconcile(self, other)
        return Taylor(
                [ac - bc for ac, bc in zip(a.coeffs, b.coeffs, strict=True)],
                a.order, a.ctype)

    def __rsub__(self, other: Any) -> Taylor:
        other = _as_series(other)
        if other is None:
            return NotImplemented
        return other - self

    def __neg__(self) -> Taylor:
        return Taylor([-c for c in self.coeffs], self.order, self.ctype)

    def __pos__(self) -> Taylor:
        return self

    def __mul__(self, other: Any) -> Taylor:
        other = _as_series(other)
        if other is None:
            return NotImplemented

        a, b = reconcile(self, other)
        return Taylor(
                [mul_homog_coeff(k, a.coeffs, b.coeffs) for k in range(a.order+1)],
                a.order, a.ctype)

    __rmul__ = __mul__

    def square(self) -> Taylor:
        """Return ``self * self``, with about half the multiplications."""
        return Taylor(
                [square_homog_coeff(k, self.coeffs) for k in range(self.order+1)],
                self.order, self.ctype)

    # }}}

    # {{{ division

    def __truediv__(self, other: Any) -> Taylor:
        other = _as_series(other)
        if other is None:
            return NotImplemented

        a, b = reconcile(self, other)
        order = a.order
        ordfact, cdivfact = _div_factorization(a, b)

        ctype = promote_types(a.ctype, type_of(cdivfact))
        av = [convert(c, ctype) for c in a.coeffs]
        bv = [convert(c, ctype) for c in b.coeffs]

        coeffs = [convert(0, ctype)] * (order+1)
        coeffs[0] = cdivfact
        for k in range(ordfact+1, order+1):
            coeffs[k-ordfact] = div_homog_coeff(k, av, bv, coeffs, ordfact)

        if ordfact:
            _report_factorization("division", ordfact)

        return Taylor(coeffs, order, ctype)

    def __rtruediv__(self, other: Any) -> Taylor:
        other = _as_series(other)
        if other is None:
            return NotImplemented
        return other / self

    # }}}

    # {{{ powers

    def __pow__(self, x: Any) -> Taylor:
        if isinstance(x, Taylor):
            from taylorpoly.functions import exp, log
            return exp(x * log(self))

        if isinstance(x, numbers.Integral):
            return self._int_power(int(x))

        if isinstance(x, numbers.Rational):
            x = float(x)

        if isinstance(x, numbers.Real | mpmath.mpf):
            return self._real_power(x)

        if isinstance(x, numbers.Complex | mpmath.mpc) or sym.is_symbolic(x):
            from taylorpoly.functions import exp, log
            return exp(x * log(self))

        return NotImplemented

    def __rpow__(self, base: Any) -> Taylor:
        if not _is_scalar(base):
            return NotImplemented

        from taylorpoly.functions import exp, log
        return exp(self * log(base))

    def _int_power(self, n: int) -> Taylor:
        if n == 0:
            return self.one()
        if n == 1:
            return self
        if n == 2:
            return self.square()

        if n < 0:
            if not has_reciprocal(self.ctype):
                raise NonInvertibleCoefficientError(
                        "negative powers are undefined for series with "
                        f"coefficients of type '{self.ctype.__name__}'")
            return self.one() / self._power_by_squaring(-n)

        return self._power_by_squaring(n)

    def _power_by_squaring(self, n: int) -> Taylor:
        result = None
        base = self
        while n:
            if n & 1:
                result = base if result is None else result * base
            n >>= 1
            if n:
                base = base.square()

        return result

    def _real_power(self, x: Any) -> Taylor:
        if x == 0:
            return self.one()
        if x == 0.5:
            from taylorpoly.functions import sqrt
            return sqrt(self)
        if float(x).is_integer():
            logger.debug("real power: integral exponent %s", x)
            return self._int_power(int(x))

        order = self.order
        l0nz = self.first_nonzero()
        if l0nz > order:
            return self.zero()

        lnull = x*l0nz
        if not float(lnull).is_integer():
            raise NonIntegerExpansionOrderError(
                    f"cannot raise a series vanishing to order {l0nz} to the "
                    f"power {x}: integer exponent required for an expansion "
                    "around 0")

        lnull = int(lnull)
        if lnull < 0:
            raise NegativeExpansionOrderError(
                    f"raising a series vanishing to order {l0nz} to the power "
                    f"{x} gives a pole of order {-lnull} at 0")
        if lnull > order:
            logger.debug("real power: leading degree %d exceeds order %d",
                    lnull, order)
            return self.zero()

        aux = pow_homog_coeff(l0nz, self.coeffs, x, (), l0nz)
        ctype = promote_types(self.ctype, type_of(aux))
        av = [convert(c, ctype) for c in self.coeffs]

        coeffs = [convert(0, ctype)] * (order+1)
        coeffs[lnull] = aux
        for k in range(lnull+l0nz+1, order+1):
            coeffs[k-l0nz] = pow_homog_coeff(k, av, x, coeffs, l0nz)

        if l0nz:
            _report_factorization("power", l0nz)

        return Taylor(coeffs, order, ctype)

    # }}}

    # {{{ remainders

    def _with_constant_term(self, value: Any) -> Taylor:
        ctype = promote_types(self.ctype, type_of(value))
        return Taylor((value, *self.coeffs[1:]), self.order, ctype)

    def __mod__(self, x: Any) -> Taylor:
        """Floored remainder of the constant term modulo *x*."""
        if not _is_scalar(x):
            return NotImplemented
        return self._with_constant_term(self.coeffs[0] % x)

    def rem(self, x: Any) -> Taylor:
        """Truncated remainder of the constant term modulo *x*; the result
        has the sign of the constant term.
        """
        c0 = self.coeffs[0]
        if isinstance(c0, float) and isinstance(x, float | int):
            return self._with_constant_term(math.fmod(c0, x))
        if isinstance(c0, mpmath.mpf):
            return self._with_constant_term(mpmath.fmod(c0, x))
        return self._with_constant_term(c0 - x*math.trunc(c0/x))

    def mod2pi(self) -> Taylor:
        """Reduce the constant term modulo :math:`2\\pi`."""
        return self % two_pi(self.ctype)

    # }}}

    # {{{ complex parts

    def real(self) -> Taylor:
        from taylorpoly.coefficients import real_part
        return Taylor([real_part(c) for c in self.coeffs], self.order)

    def imag(self) -> Taylor:
        from taylorpoly.coefficients import imag_part
        return Taylor([imag_part(c) for c in self.coeffs], self.order)

    def conj(self) -> Taylor:
        from taylorpoly.coefficients import conjugate
        return Taylor([conjugate(c) for c in self.coeffs], self.order, self.ctype)

    conjugate = conj

    # }}}

    # {{{ elementary functions and calculus

    # These make numpy object arrays of series work with np.exp and friends.

    def sqrt(self) -> Taylor:
        from taylorpoly.functions import sqrt
        return sqrt(self)

    def exp(self) -> Taylor:
        from taylorpoly.functions import exp
        return exp(self)

    def log(self) -> Taylor:
        from taylorpoly.functions import log
        return log(self)

    def sin(self) -> Taylor:
        from taylorpoly.functions import sin
        return sin(self)

    def cos(self) -> Taylor:
        from taylorpoly.functions import cos
        return cos(self)

    def tan(self) -> Taylor:
        from taylorpoly.functions import tan
        return tan(self)

    def __call__(self, dx: Any = 0) -> Any:
        """Evaluate at *dx*, see :func:`taylorpoly.calculus.evaluate`."""
        from taylorpoly.calculus import evaluate
        return evaluate(self, dx)

    # }}}

# }}}


# {{{ reconciliation

def _as_series(x: Any) -> Taylor | None:
    if isinstance(x, Taylor):
        return x
    if _is_scalar(x):
        return Taylor(x, 0)
    return None


def reconcile(a: Taylor, b: Taylor) -> tuple[Taylor, Taylor]:
    """Bring *a* and *b* to a common coefficient type and the larger of
    their orders, zero-padding the shorter one. Neither input is modified.
    """
    ctype = promote_types(a.ctype, b.ctype)
    order = max(a.order, b.order)
    return (
            a.astype(ctype).with_order(order),
            b.astype(ctype).with_order(order))


def _div_factorization(a: Taylor, b: Taylor) -> tuple[int, Any]:
    """Return the order of the factored-out leading term of ``a / b`` and
    the quotient's first coefficient. *a* and *b* must be reconciled.
    """
    ordfact = min(a.first_nonzero(), b.first_nonzero(), a.order)

    try:
        cdivfact = a.coeffs[ordfact] / b.coeffs[ordfact]
    except ZeroDivisionError as err:
        raise DivisionUndefinedError(
                f"division does not define a Taylor polynomial: coefficient "
                f"{ordfact} of the divisor vanishes but not that of the "
                "dividend") from err

    if not is_finite(cdivfact):
        raise DivisionUndefinedError(
                "division does not define a Taylor polynomial: "
                f"coefficient {ordfact} of the quotient is {cdivfact}")

    return ordfact, cdivfact

# }}}

# vim: fdm=marker
