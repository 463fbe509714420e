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
taylorpoly: arithmetic on truncated power series
================================================

.. autoclass:: Taylor
.. autofunction:: reconcile

See :mod:`taylorpoly.functions` and :mod:`taylorpoly.calculus` for the
operations beyond the arithmetic operators, and :mod:`taylorpoly.errors`
for the ways in which they can fail.

Runtime configuration
---------------------

.. autofunction:: set_factorization_warnings
.. autoclass:: FactorizationWarningMode
"""

import os

from taylorpoly.calculus import derivative, differentiate, evaluate, integrate
from taylorpoly.errors import (
    DivisionUndefinedError,
    FactorizationWarning,
    InsufficientOrderError,
    LogAtRootError,
    NegativeExpansionOrderError,
    NonIntegerExpansionOrderError,
    NonInvertibleCoefficientError,
    OddLeadingDegreeError,
    TaylorError,
)
from taylorpoly.functions import cos, exp, log, sin, sincos, sqrt, square, tan
from taylorpoly.series import Taylor, reconcile
from taylorpoly.version import VERSION, VERSION_STATUS, VERSION_TEXT


__version__ = VERSION_TEXT

__all__ = [
    "VERSION",
    "VERSION_STATUS",
    "VERSION_TEXT",
    "DivisionUndefinedError",
    "FactorizationWarning",
    "FactorizationWarningMode",
    "InsufficientOrderError",
    "LogAtRootError",
    "NegativeExpansionOrderError",
    "NonIntegerExpansionOrderError",
    "NonInvertibleCoefficientError",
    "OddLeadingDegreeError",
    "Taylor",
    "TaylorError",
    "cos",
    "derivative",
    "differentiate",
    "evaluate",
    "exp",
    "integrate",
    "log",
    "reconcile",
    "set_factorization_warnings",
    "sin",
    "sincos",
    "sqrt",
    "square",
    "tan",
]


# {{{ factorization warnings

WARN_ON_FACTORIZATION = "TAYLORPOLY_WARN_FACTORIZATION" in os.environ


def set_factorization_warnings(flag):
    """Set whether a :class:`FactorizationWarning` is emitted when division,
    :func:`sqrt` or a real power sets trailing coefficients to zero after
    factoring out vanishing leading terms.
    """
    global WARN_ON_FACTORIZATION
    WARN_ON_FACTORIZATION = flag


class FactorizationWarningMode:
    """A context manager for setting whether :mod:`taylorpoly` warns about
    factorization, see :func:`set_factorization_warnings`.
    """

    def __init__(self, new_flag):
        self.new_flag = new_flag

    def __enter__(self):
        self.previous_flag = WARN_ON_FACTORIZATION
        set_factorization_warnings(self.new_flag)

    def __exit__(self, exc_type, exc_val, exc_tb):
        set_factorization_warnings(self.previous_flag)
        del self.previous_flag

# }}}
