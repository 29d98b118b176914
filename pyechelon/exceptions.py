"""
Exception types.

Numerical singularity is resolved by strategy choice inside ``decompose``;
these types surface only from the strict entry points or on contract
violations.
"""


class SingularMatrixError(ArithmeticError):
    """Gaussian elimination found an exact zero as the best pivot candidate."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(
            f"Singular matrix: no non-zero pivot in column {column}"
        )


class InvalidArgumentError(ValueError):
    """A value violates a constructor contract."""
    pass


__all__ = ["SingularMatrixError", "InvalidArgumentError"]
