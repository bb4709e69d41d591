"""
Exception types raised by exact-vecmath.

Shape violations are programmer errors detected at construction time.
Arithmetic faults are raised by the Term algebra and propagate unchanged
through vectors and matrices.
"""


class ShapeError(ValueError):
    """A vector or matrix was built from data of the wrong shape."""


class TermDivisionError(ZeroDivisionError):
    """Division by a Term equal to the additive identity."""


class UnboundSymbolError(KeyError):
    """A symbol was evaluated without a value bound to its name."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No value bound for symbol '{self.name}'"
