import logging

import sympy

import taylorpoly.symbolic as sym
from taylorpoly import Taylor, exp, sqrt, tan


logger = logging.getLogger(__name__)


def find_op_counts(func, orders):
    op_counts = []
    for order in orders:
        a = Taylor(sym.make_sym_coeffs("a", order+1))
        result = func(a)

        op_counts.append(
                sum(sympy.count_ops(sympy.sympify(c)) for c in result.coeffs))
        logger.info("%s order %d: %d ops", func.__name__, order, op_counts[-1])

    return op_counts


def main():
    logging.basicConfig(level=logging.INFO)

    orders = list(range(1, 9))
    for func in [exp, sqrt, tan]:
        print(func.__name__, orders)
        print(find_op_counts(func, orders))


if __name__ == "__main__":
    main()
