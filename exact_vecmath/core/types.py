"""
Type aliases for exact-vecmath.

Terms may be given as Term instances or as exact Python numbers, which are
coerced to constants. Floats are deliberately absent from TermLike: the
algebra has no floating-point fallback.
"""

from fractions import Fraction
from typing import Mapping, Sequence, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..terms.algebra import Term


# =============================================================================
# Scalar Aliases
# =============================================================================

# Anything accepted where a Term is expected
TermLike = Union["Term", int, Fraction]

# Values substituted for symbols when evaluating a Term
Bindings = Mapping[str, Union[int, Fraction]]


# =============================================================================
# Structural Aliases
# =============================================================================

# A matrix row as stored: exactly four Terms
Row4 = Tuple["Term", "Term", "Term", "Term"]

# A reduced matrix row as stored: exactly three Terms
Row3 = Tuple["Term", "Term", "Term"]

# Row data accepted by constructors before validation
RowsLike = Sequence[Sequence[TermLike]]
