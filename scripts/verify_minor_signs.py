"""Check the minor expansion and cofactor signs against the Leibniz formula."""
import itertools
import random
from fractions import Fraction

import torch

from exact_vecmath.linalg import Matrix4x4
from exact_vecmath.terms import evaluate
from exact_vecmath.utils import matrix_from_tensor


def permutation_sign(perm):
    """Sign of a permutation by counting inversions."""
    inversions = 0
    for i in range(len(perm)):
        for j in range(i + 1, len(perm)):
            if perm[i] > perm[j]:
                inversions += 1
    return -1 if inversions % 2 else 1


def leibniz_determinant(rows):
    """Determinant of a square list-of-lists of Fractions."""
    n = len(rows)
    total = Fraction(0)
    for perm in itertools.permutations(range(n)):
        term = Fraction(permutation_sign(perm))
        for i in range(n):
            term *= rows[i][perm[i]]
        total += term
    return total


def reduced(rows, skip_row, skip_col):
    return [
        [v for c, v in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows) if r != skip_row
    ]


random.seed(0)
errors = []

for trial in range(50):
    values = [[Fraction(random.randint(-9, 9)) for _ in range(4)] for _ in range(4)]
    m = Matrix4x4(values)

    for row in range(4):
        for col in range(4):
            expected = leibniz_determinant(reduced(values, row, col))
            got = evaluate(m.minor(row, col))
            if got != expected:
                errors.append(('minor', trial, row, col, got, expected))

    # Adjugate built from minors() and cofactors() must satisfy M adj(M) = det(M) I
    adjugate = m.minors().cofactors().transpose()
    det = leibniz_determinant(values)
    if evaluate(m.determinant()) != det:
        errors.append(('determinant', trial, None, None, m.determinant(), det))
    composed = m.multiply_matrix(adjugate)
    for row in range(4):
        for col in range(4):
            expected = det if row == col else 0
            if evaluate(composed[row, col]) != expected:
                errors.append(('adjugate', trial, row, col, composed[row, col], expected))

# Float matrices from torch go through the same checks exactly
t = torch.randn(4, 4, dtype=torch.float64)
m = matrix_from_tensor(t)
values = [[evaluate(term) for term in row] for row in m.elements]
if evaluate(m.determinant()) != leibniz_determinant(values):
    errors.append(('tensor determinant', None, None, None, None, None))

print(f"Found {len(errors)} discrepancies:")
for kind, trial, row, col, got, expected in errors:
    print(f"  {kind} trial={trial} ({row}, {col}): got {got}, expected {expected}")
