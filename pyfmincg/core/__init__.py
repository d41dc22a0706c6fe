"""
Core data structures for PyFmincg.

Classes:
    DenseMatrix: Dense row-major matrix of doubles
    RowMax: (value, index) result of DenseMatrix.row_argmax

Exceptions:
    MatrixError: Base class for shape/index precondition violations
    InvalidShapeError: Negative dimensions or ragged input
    ShapeMismatchError: Operands cannot be combined elementwise
    DimensionMismatchError: Inner dimensions disagree
    IndexOutOfRangeError: Row or column index out of bounds
"""

from .matrix import DenseMatrix, RowMax
from .exceptions import (
    MatrixError,
    InvalidShapeError,
    ShapeMismatchError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)

__all__ = [
    "DenseMatrix",
    "RowMax",
    "MatrixError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
]
