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
Errors
======

All errors are detected deterministically from the inputs of an operation
and are terminal for that operation.

.. autoexception:: TaylorError
.. autoexception:: DivisionUndefinedError
.. autoexception:: NonIntegerExpansionOrderError
.. autoexception:: NegativeExpansionOrderError
.. autoexception:: OddLeadingDegreeError
.. autoexception:: LogAtRootError
.. autoexception:: NonInvertibleCoefficientError
.. autoexception:: InsufficientOrderError

.. autoclass:: FactorizationWarning
"""


class TaylorError(ValueError):
    """Base class for operations that do not define a Taylor polynomial."""


class DivisionUndefinedError(TaylorError):
    """The dividend vanishes to strictly lower order than the divisor, so
    the leading coefficient of the quotient is infinite or undefined.
    """


class NonIntegerExpansionOrderError(TaylorError):
    """A non-integer power was requested of a series whose leading degree,
    scaled by the exponent, is not an integer.
    """


class NegativeExpansionOrderError(TaylorError):
    """A power was requested whose leading degree would be negative,
    i.e. the result has a pole at the origin.
    """


class OddLeadingDegreeError(TaylorError):
    """Square root of a series whose first non-zero coefficient sits at an
    odd degree.
    """


class LogAtRootError(TaylorError):
    """Logarithm of a series that vanishes at the origin."""


class NonInvertibleCoefficientError(TaylorError, TypeError):
    """Negative integer power of a series whose coefficient type has no
    reciprocal.
    """


class InsufficientOrderError(TaylorError):
    """A derivative was requested that exceeds the stored order."""


class FactorizationWarning(UserWarning):
    """Emitted when factoring out vanishing leading terms sets trailing
    coefficients of the result to zero.
    """

# vim: foldmethod=marker
