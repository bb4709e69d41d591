"""
Example 01: Exact Projective Transforms

Demonstrates:
1. Building translation, scaling and perspective matrices with exact entries.
2. Composing them and transforming homogeneous points without rounding.
3. Recovering the inverse from minors, cofactors, transpose and determinant.
4. Working with symbolic entries and evaluating them later.
5. Exporting the exact result to PyTorch for rendering code.
"""

from fractions import Fraction

from exact_vecmath import Vector4, Matrix4x4, Symbol, evaluate, identity, translation, scaling
from exact_vecmath.utils import matrix_to_tensor, vector_to_tensor

# =============================================================================
# 1. Building matrices
# =============================================================================

move = translation(1, 2, Fraction(1, 3))
grow = scaling(2, 2, 2)

# Perspective projection onto the plane z = d: w' = z / d
d = 3
project = Matrix4x4([
    [1, 0, 0, 0],
    [0, 1, 0, 0],
    [0, 0, 1, 0],
    [0, 0, Fraction(1, d), 0],
])

move.print_out('move')
project.print_out('project')

# =============================================================================
# 2. Composition and transformation
# =============================================================================

model = move.multiply_matrix(grow)
p = Vector4(1, 1, 1)
print('model @ p =', model.transform(p))

projected = project.transform(model.transform(p))
print('projected =', projected)
print('after perspective divide =', projected.normalize())

# =============================================================================
# 3. Inverse from the building blocks
# =============================================================================

det = model.determinant()
adjugate = model.minors().cofactors().transpose()
inverse = adjugate.divide_by(det)
inverse.print_out('model^-1')
assert model.multiply_matrix(inverse) == identity()

# =============================================================================
# 4. Symbolic entries
# =============================================================================

t = Symbol('t')
slide = translation(t, 0, 0)
moved = slide.transform(Vector4(1, 2, 3))
print('symbolic =', moved)
print('at t = 5/2:', [evaluate(c, {'t': Fraction(5, 2)}) for c in moved])

# =============================================================================
# 5. Export to torch
# =============================================================================

print(matrix_to_tensor(inverse))
print(vector_to_tensor(moved, bindings={'t': 1}))
