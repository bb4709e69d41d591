"""
Term algebra module.

Exact scalars (sympy rationals, symbols and expressions) and the
combinators the linear-algebra layer is written against.
"""

from .algebra import (
    Term,
    Symbol,
    TermAlgebra,
    SympyAlgebra,
    ALGEBRA,
    zero,
    one,
    as_term,
    sum_of,
    difference,
    product,
    quotient,
    negate,
    is_zero,
    is_one,
    evaluate,
    symbols,
)

__all__ = [
    # Types
    "Term",
    "Symbol",
    "TermAlgebra",
    "SympyAlgebra",
    "ALGEBRA",
    # Identities
    "zero",
    "one",
    # Combinators
    "as_term",
    "sum_of",
    "difference",
    "product",
    "quotient",
    "negate",
    "is_zero",
    "is_one",
    "evaluate",
    "symbols",
]
