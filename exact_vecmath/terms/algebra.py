"""
Exact Term algebra.

A Term is an immutable exact scalar: a rational constant, a named symbol,
or an expression built from them. Terms are sympy expressions; this module
fixes the subset of sympy the linear-algebra layer relies on and the
canonical form every Term is kept in.

The layer above is written against a capability interface, TermAlgebra,
with five operations:

- sum_of(terms):       addition over a list
- difference(a, b):    a - b
- product(a, b):       a * b
- quotient(a, b):      a / b (raises TermDivisionError when b is zero)
- negate(a):           -a

and two distinguished constants:

- zero: additive identity
- one:  multiplicative identity

SympyAlgebra is the canonical implementation. Every Term it returns is
fully expanded (sympy.expand), so sympy's automatic collection of like
terms makes structural equality a ring identity test on polynomials:
x - x is zero, a*b equals b*a, and the determinant of a symbolic matrix
with two equal rows is zero. Quotients are reduced with sympy.cancel
before expansion.

Floating-point numbers are never Terms. Plain ints and Fractions are
coerced to sympy Integer and Rational.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Iterable, Optional, Tuple

import sympy as sp

from ..core.exceptions import TermDivisionError, UnboundSymbolError
from ..core.types import Bindings, TermLike


Term = sp.Expr
Symbol = sp.Symbol


# =============================================================================
# Capability Interface
# =============================================================================

class TermAlgebra(ABC):
    """
    The operations Vector4 and Matrix4x4 need from their scalars.

    Implementations must return immutable, hashable values and treat
    division by zero as an error (TermDivisionError), never as a value.
    """

    @property
    @abstractmethod
    def zero(self) -> Term:
        pass

    @property
    @abstractmethod
    def one(self) -> Term:
        pass

    @abstractmethod
    def as_term(self, value: TermLike) -> Term:
        pass

    @abstractmethod
    def sum_of(self, terms: Iterable[TermLike]) -> Term:
        pass

    @abstractmethod
    def product(self, a: TermLike, b: TermLike) -> Term:
        pass

    @abstractmethod
    def quotient(self, a: TermLike, b: TermLike) -> Term:
        pass

    @abstractmethod
    def negate(self, a: TermLike) -> Term:
        pass

    @abstractmethod
    def evaluate(self, term: TermLike, bindings: Optional[Bindings] = None) -> Fraction:
        pass

    def difference(self, a: TermLike, b: TermLike) -> Term:
        return self.sum_of([a, self.negate(b)])

    def is_zero(self, term: TermLike) -> bool:
        return self.as_term(term) == self.zero

    def is_one(self, term: TermLike) -> bool:
        return self.as_term(term) == self.one


# =============================================================================
# Sympy Implementation
# =============================================================================

class SympyAlgebra(TermAlgebra):
    """TermAlgebra over sympy expressions kept in expanded form."""

    @property
    def zero(self) -> Term:
        return sp.S.Zero

    @property
    def one(self) -> Term:
        return sp.S.One

    def as_term(self, value: TermLike) -> Term:
        """
        Coerce an exact value to a canonical Term.

        Args:
            value: sympy expression, int or Fraction

        Returns:
            The expanded sympy expression

        Raises:
            TypeError: For floats, bools, sympy Floats and anything else
        """
        if isinstance(value, bool):
            raise TypeError("bool is not a Term")
        if isinstance(value, int):
            return sp.Integer(value)
        if isinstance(value, Fraction):
            return sp.Rational(value.numerator, value.denominator)
        if isinstance(value, sp.Expr):
            if value.has(sp.Float):
                raise TypeError(f"Floats are not exact Terms; got {value}")
            # doit() evaluates nodes built with evaluate=False
            return sp.expand(value.doit())
        if isinstance(value, float):
            raise TypeError(
                f"Floats are not exact Terms; got {value!r}. "
                "Use Fraction or the interop helpers."
            )
        raise TypeError(f"Cannot use {type(value).__name__} as a Term")

    def sum_of(self, terms: Iterable[TermLike]) -> Term:
        return sp.Add(*(self.as_term(t) for t in terms))

    def product(self, a: TermLike, b: TermLike) -> Term:
        return sp.expand(sp.Mul(self.as_term(a), self.as_term(b)))

    def quotient(self, a: TermLike, b: TermLike) -> Term:
        a = self.as_term(a)
        b = self.as_term(b)
        if sp.cancel(b) == self.zero:
            raise TermDivisionError(f"Division of {a} by a Term equal to zero")
        if b == self.one:
            return a
        return sp.expand(sp.cancel(a / b))

    def negate(self, a: TermLike) -> Term:
        return -self.as_term(a)

    def evaluate(self, term: TermLike, bindings: Optional[Bindings] = None) -> Fraction:
        """
        Substitute exact values for symbols and return the resulting Fraction.

        Raises:
            UnboundSymbolError: If a symbol has no entry in bindings
            TermDivisionError: If the substitution divides by zero
        """
        term = self.as_term(term)
        bindings = bindings or {}
        free = sorted(term.free_symbols, key=lambda s: s.name)
        for symbol in free:
            if symbol.name not in bindings:
                raise UnboundSymbolError(symbol.name)
        if free:
            term = term.subs({s: self.as_term(bindings[s.name]) for s in free})
        if term.has(sp.zoo, sp.nan, sp.oo, -sp.oo):
            raise TermDivisionError(f"Evaluation divides by zero: {term}")
        if not term.is_Rational:
            raise TypeError(f"Term did not evaluate to a rational: {term}")
        return Fraction(int(term.p), int(term.q))


ALGEBRA = SympyAlgebra()

zero = ALGEBRA.zero
one = ALGEBRA.one


# =============================================================================
# Combinators
# =============================================================================

def as_term(value: TermLike) -> Term:
    return ALGEBRA.as_term(value)


def sum_of(terms: Iterable[TermLike]) -> Term:
    """Add over a list; an empty list gives zero."""
    return ALGEBRA.sum_of(terms)


def difference(a: TermLike, b: TermLike) -> Term:
    return ALGEBRA.difference(a, b)


def product(a: TermLike, b: TermLike) -> Term:
    return ALGEBRA.product(a, b)


def quotient(a: TermLike, b: TermLike) -> Term:
    """
    Exact a / b.

    Raises:
        TermDivisionError: If b is equal to zero
    """
    return ALGEBRA.quotient(a, b)


def negate(a: TermLike) -> Term:
    return ALGEBRA.negate(a)


def is_zero(term: TermLike) -> bool:
    return ALGEBRA.is_zero(term)


def is_one(term: TermLike) -> bool:
    return ALGEBRA.is_one(term)


def evaluate(term: TermLike, bindings: Optional[Bindings] = None) -> Fraction:
    return ALGEBRA.evaluate(term, bindings)


def symbols(names: str) -> Tuple[Symbol, ...]:
    """
    Create several symbols at once.

    Example:
        >>> x, y, z = symbols('x y z')
    """
    return tuple(sp.symbols(names.replace(',', ' '), seq=True))
