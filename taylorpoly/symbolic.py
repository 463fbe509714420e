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

 Symbolic Coefficients
 =====================

 Series may carry symbolic expressions as coefficients. The expressions
 come from the "heavy-duty" computer algebra toolkit in use, either
 :mod:`sympy` or :mod:`symengine`.

 .. class:: Basic

    The expression base class of the active backend. Either
    :class:`sympy.core.basic.Basic` or :class:`symengine.Basic`.

 .. autodata:: USE_SYMENGINE
 .. autofunction:: is_symbolic
 .. autofunction:: make_sym_coeffs
"""


import logging

import sympy


logger = logging.getLogger(__name__)

USE_SYMENGINE = False


# {{{ symbolic backend

def _find_symbolic_backend():
    global USE_SYMENGINE

    try:
        import symengine  # noqa: F401
        symengine_found = True
        symengine_error = None
    except ImportError as import_error:
        symengine_found = False
        symengine_error = import_error

    allowed_backends = ("sympy", "symengine")
    backend_env_var = "TAYLORPOLY_FORCE_SYMBOLIC_BACKEND"

    import os
    backend = os.environ.get(backend_env_var)
    if backend is not None:
        if backend not in allowed_backends:
            raise RuntimeError(
                f"{backend_env_var} value is unrecognized: '{backend}' "
                "(allowed values are {})".format(
                    ", ".join(f"'{val}'" for val in allowed_backends))
                )

        if backend == "symengine" and not symengine_found:
            raise RuntimeError(f"could not find SymEngine: {symengine_error}")

        USE_SYMENGINE = (backend == "symengine")
    else:
        USE_SYMENGINE = symengine_found

    logger.debug("symbolic backend: %s",
            "symengine" if USE_SYMENGINE else "sympy")


_find_symbolic_backend()

# }}}

if not USE_SYMENGINE:
    import sympy as sym
else:
    import symengine as sym

# Symbolic API common to SymEngine and sympy.
# Before adding a function here, make sure it's present in both modules.
Basic = sym.Basic
Expr = sym.Expr
Symbol = sym.Symbol
Integer = sym.Integer
Rational = sym.Rational
Float = sym.Float
symbols = sym.symbols
sympify = sym.sympify
expand = sym.expand
exp = sym.exp
log = sym.log
sqrt = sym.sqrt
sin = sym.sin
cos = sym.cos
tan = sym.tan
re = sym.re
im = sym.im
conjugate = sym.conjugate
I = sym.I  # noqa: E741
pi = sym.pi

# sympy objects are accepted as coefficients even when symengine is active;
# they are converted on the way in.
SYMBOLIC_TYPES = tuple({Basic, sympy.Basic})


def is_symbolic(x) -> bool:
    return isinstance(x, SYMBOLIC_TYPES)


def is_non_finite(expr) -> bool:
    """Return *True* if *expr* is, or contains, an infinity or NaN."""
    # symengine expressions convert through their _sympy_ hook
    expr = sympy.sympify(expr)
    return any(expr.has(bad) for bad in (sympy.oo, sympy.zoo, sympy.nan))


def make_sym_coeffs(name: str, count: int) -> list:
    """Return a list of *count* symbols ``name0``, ``name1``, ..., suitable
    as the coefficients of a symbolic series.
    """
    return [Symbol(f"{name}{i}") for i in range(count)]

# vim: fdm=marker
