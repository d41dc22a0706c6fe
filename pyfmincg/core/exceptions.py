"""
Exceptions raised by DenseMatrix operations.

All of them signal a programmer error in the caller (a shape or index
precondition that does not hold) and are raised at the operation that
detects it.
"""


class MatrixError(ValueError):
    """Base class for DenseMatrix precondition violations."""


class InvalidShapeError(MatrixError):
    """Negative dimensions or ragged nested input."""


class ShapeMismatchError(MatrixError):
    """Operand shapes cannot be combined by the requested operation."""


class DimensionMismatchError(MatrixError):
    """Inner dimensions disagree (matrix product or dot product)."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Row or column index outside the matrix bounds."""
