"""
DenseMatrix class for PyFmincg.

DenseMatrix is the value type the conjugate-gradient minimizer works on.
It stores a rows x columns grid of doubles in row-major order (backed by a
numpy array) and provides the indexing, broadcasting arithmetic and
elementwise functions needed by the optimizer and by the logistic
regression objective.
"""

import numbers
import numpy as np
from typing import List, NamedTuple, Sequence, Tuple, Union

from .exceptions import (
    InvalidShapeError,
    ShapeMismatchError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)

Scalar = Union[int, float]


class RowMax(NamedTuple):
    """Largest value in a row and the column where it first occurs."""

    value: float
    index: int


def _ieee():
    """Let Inf/NaN propagate silently through elementwise arithmetic."""
    return np.errstate(over='ignore', divide='ignore', invalid='ignore',
                       under='ignore')


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class DenseMatrix:
    """
    Dense matrix of double precision values.

    Parameters
    ----------
    rows : int
        Number of rows (>= 0)
    columns : int
        Number of columns (>= 0)
    value : float, optional
        Fill value for every element (default: 0.0)

    Attributes
    ----------
    rows : int
        Number of rows
    columns : int
        Number of columns
    data : ndarray
        Flat row-major copy of the elements, length rows * columns

    Raises
    ------
    InvalidShapeError
        If rows or columns is negative

    Examples
    --------
    >>> m = DenseMatrix(2, 3, 1.0)
    >>> m.shape
    (2, 3)
    >>> v = DenseMatrix.from_rows([[1.0], [2.0], [3.0]])
    >>> (m @ v).to_array()
    array([[6.],
           [6.]])

    Notes
    -----
    - A vector is a matrix with one row or one column; a scalar is 1x1.
    - Arithmetic always returns a new matrix. Element, row and column
      setters modify the matrix in place, use copy() to avoid sharing.
    """

    def __init__(self, rows: int, columns: int, value: float = 0.0):
        """Initialize a rows x columns matrix filled with value."""
        if rows < 0 or columns < 0:
            raise InvalidShapeError(
                f"Matrix dimensions must be non-negative, got {rows}x{columns}"
            )
        self._array = np.full((int(rows), int(columns)), value, dtype=float)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> 'DenseMatrix':
        """Adopt a 2D float array without copying it."""
        m = cls.__new__(cls)
        m._array = array
        return m

    @classmethod
    def from_rows(cls, nested: Sequence[Sequence[float]]) -> 'DenseMatrix':
        """
        Create a matrix from nested row data, e.g. [[a, b], [c, d], [e, f]].

        Parameters
        ----------
        nested : sequence of sequences of float
            One inner sequence per row

        Returns
        -------
        DenseMatrix
            Matrix with len(nested) rows and len(nested[0]) columns

        Raises
        ------
        InvalidShapeError
            If the inner sequences do not all have the same length
        """
        nested = [list(row) for row in nested]
        if not nested:
            return cls(0, 0)

        n_columns = len(nested[0])
        for i, row in enumerate(nested):
            if len(row) != n_columns:
                raise InvalidShapeError(
                    f"Row {i} has {len(row)} elements, expected {n_columns}"
                )

        array = np.array(nested, dtype=float).reshape(len(nested), n_columns)
        return cls._wrap(array)

    @classmethod
    def from_array(cls, array) -> 'DenseMatrix':
        """
        Create a matrix from array-like data.

        A 0D input becomes a 1x1 matrix, a 1D input becomes a column
        vector and a 2D input keeps its shape. The data is copied.
        """
        array = np.array(array, dtype=float)
        if array.ndim == 0:
            array = array.reshape(1, 1)
        elif array.ndim == 1:
            array = array.reshape(-1, 1)
        elif array.ndim != 2:
            raise InvalidShapeError(
                f"Expected at most 2 dimensions, got {array.ndim}"
            )
        return cls._wrap(array)

    @classmethod
    def identity(cls, n: int) -> 'DenseMatrix':
        """n x n identity matrix."""
        if n < 0:
            raise InvalidShapeError(f"Identity size must be non-negative, got {n}")
        return cls._wrap(np.eye(n, dtype=float))

    # ------------------------------------------------------------------
    # Shape and storage
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._array.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._array.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Shape of the matrix (rows, columns)."""
        return self._array.shape

    @property
    def size(self) -> int:
        """Number of elements (rows * columns)."""
        return self._array.size

    @property
    def data(self) -> np.ndarray:
        """Flat row-major copy of the elements."""
        return self._array.ravel().copy()

    @property
    def is_vector(self) -> bool:
        """True for row vectors, column vectors and 1x1 matrices."""
        return self.rows == 1 or self.columns == 1

    @property
    def scalar(self) -> float:
        """Value of a 1x1 matrix."""
        if self.shape != (1, 1):
            raise ShapeMismatchError(
                f"Only a 1x1 matrix has a scalar value, got "
                f"{self.rows}x{self.columns}"
            )
        return float(self._array[0, 0])

    def copy(self) -> 'DenseMatrix':
        """Return an independent copy."""
        return DenseMatrix._wrap(self._array.copy())

    def to_array(self) -> np.ndarray:
        """Return a 2D numpy copy of the matrix."""
        return self._array.copy()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._array.copy()
        return self._array.astype(dtype)

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def _check_row(self, r: int) -> None:
        if not 0 <= r < self.rows:
            raise IndexOutOfRangeError(
                f"Row index {r} out of range for {self.rows} rows"
            )

    def _check_column(self, c: int) -> None:
        if not 0 <= c < self.columns:
            raise IndexOutOfRangeError(
                f"Column index {c} out of range for {self.columns} columns"
            )

    def _locate(self, key) -> Tuple[int, int]:
        """Translate m[r, c] or vector m[i] into a (row, column) pair."""
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"Expected (row, column) index, got {key!r}")
            r, c = key
            self._check_row(r)
            self._check_column(c)
            return r, c

        if not self.is_vector:
            raise ShapeMismatchError(
                f"Single index requires a row or column vector, got "
                f"{self.rows}x{self.columns} matrix"
            )
        if not 0 <= key < self.size:
            raise IndexOutOfRangeError(
                f"Index {key} out of range for vector of length {self.size}"
            )
        return (0, key) if self.rows == 1 else (key, 0)

    def __getitem__(self, key) -> float:
        r, c = self._locate(key)
        return float(self._array[r, c])

    def __setitem__(self, key, value: float) -> None:
        r, c = self._locate(key)
        self._array[r, c] = value

    def row(self, r: int) -> 'DenseMatrix':
        """Return row r as a 1 x columns matrix."""
        self._check_row(r)
        return DenseMatrix._wrap(self._array[r:r + 1, :].copy())

    def set_row(self, r: int, vector: 'DenseMatrix') -> None:
        """Replace row r with a 1 x columns matrix."""
        self._check_row(r)
        if vector.shape != (1, self.columns):
            raise ShapeMismatchError(
                f"Not a compatible row vector: expected 1x{self.columns}, "
                f"got {vector.rows}x{vector.columns}"
            )
        self._array[r, :] = vector._array[0, :]

    def column(self, c: int) -> 'DenseMatrix':
        """Return column c as a rows x 1 matrix."""
        self._check_column(c)
        return DenseMatrix._wrap(self._array[:, c:c + 1].copy())

    def set_column(self, c: int, vector: 'DenseMatrix') -> None:
        """Replace column c with a rows x 1 matrix."""
        self._check_column(c)
        if vector.shape != (self.rows, 1):
            raise ShapeMismatchError(
                f"Not a compatible column vector: expected {self.rows}x1, "
                f"got {vector.rows}x{vector.columns}"
            )
        self._array[:, c] = vector._array[:, 0]

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def transpose(self) -> 'DenseMatrix':
        """Return the columns x rows transpose."""
        return DenseMatrix._wrap(self._array.T.copy())

    def _check_broadcast(self, other: 'DenseMatrix', operation: str) -> None:
        """
        Check that other can be combined elementwise with this matrix.

        Legal pairings are identical shapes, a row vector with matching
        column count (broadcast across rows) and a column vector with
        matching row count (broadcast across columns).
        """
        if other.shape == self.shape:
            return
        if other.rows == 1 and other.columns == self.columns:
            return
        if other.columns == 1 and other.rows == self.rows:
            return
        raise ShapeMismatchError(
            f"Cannot {operation} {self.rows}x{self.columns} matrix and "
            f"{other.rows}x{other.columns} matrix"
        )

    def add(self, other: Union['DenseMatrix', Scalar]) -> 'DenseMatrix':
        """
        Elementwise addition with broadcasting.

        Parameters
        ----------
        other : DenseMatrix or float
            Matrix of the same shape, row vector with the same number of
            columns, column vector with the same number of rows, or scalar

        Returns
        -------
        DenseMatrix
            New matrix with the shape of self

        Raises
        ------
        ShapeMismatchError
            If other is a matrix that cannot be broadcast onto self
        """
        if isinstance(other, DenseMatrix):
            self._check_broadcast(other, "add")
            operand = other._array
        else:
            operand = float(other)
        with _ieee():
            return DenseMatrix._wrap(self._array + operand)

    def subtract(self, other: Union['DenseMatrix', Scalar]) -> 'DenseMatrix':
        """Elementwise subtraction, same broadcasting rules as add()."""
        if isinstance(other, DenseMatrix):
            self._check_broadcast(other, "subtract")
            operand = other._array
        else:
            operand = float(other)
        with _ieee():
            return DenseMatrix._wrap(self._array - operand)

    def negate(self) -> 'DenseMatrix':
        """Flip the sign of every element."""
        return DenseMatrix._wrap(-self._array)

    def matmul(self, other: 'DenseMatrix') -> 'DenseMatrix':
        """
        Matrix product self x other.

        Raises
        ------
        DimensionMismatchError
            If self.columns != other.rows
        """
        if self.columns != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.rows}x{self.columns} matrix and "
                f"{other.rows}x{other.columns} matrix"
            )
        with _ieee():
            return DenseMatrix._wrap(self._array @ other._array)

    def dot(self, other: 'DenseMatrix') -> float:
        """
        Inner product of two vectors with the same number of elements.

        Row and column vectors may be mixed; this is the value of the 1x1
        product self' x other for column vectors.

        Raises
        ------
        DimensionMismatchError
            If either operand is not a vector or the lengths differ
        """
        if not (self.is_vector and other.is_vector) or self.size != other.size:
            raise DimensionMismatchError(
                f"Cannot take dot product of {self.rows}x{self.columns} and "
                f"{other.rows}x{other.columns} matrices"
            )
        with _ieee():
            return float(np.dot(self._array.ravel(), other._array.ravel()))

    def scale(self, k: Scalar) -> 'DenseMatrix':
        """Multiply every element by k."""
        with _ieee():
            return DenseMatrix._wrap(self._array * float(k))

    def divide(self, k: Scalar) -> 'DenseMatrix':
        """Divide every element by k. Division by zero yields Inf/NaN."""
        with _ieee():
            return DenseMatrix._wrap(self._array / np.float64(k))

    def rdivide(self, k: Scalar) -> 'DenseMatrix':
        """Compute k / x for every element x. Zeros yield Inf/NaN."""
        with _ieee():
            return DenseMatrix._wrap(np.float64(k) / self._array)

    # ------------------------------------------------------------------
    # Elementwise functions and reductions
    # ------------------------------------------------------------------

    def exp(self) -> 'DenseMatrix':
        """Exponentiate every element."""
        with _ieee():
            return DenseMatrix._wrap(np.exp(self._array))

    def log(self) -> 'DenseMatrix':
        """Natural logarithm of every element (log(0) = -inf)."""
        with _ieee():
            return DenseMatrix._wrap(np.log(self._array))

    def pow(self, alpha: float) -> 'DenseMatrix':
        """Raise every element to the power alpha."""
        with _ieee():
            return DenseMatrix._wrap(np.power(self._array, float(alpha)))

    def sum(self) -> float:
        """Sum of all elements."""
        with _ieee():
            return float(np.sum(self._array))

    def row_argmax(self, r: int) -> RowMax:
        """
        Find the largest element in row r.

        Parameters
        ----------
        r : int
            Row index

        Returns
        -------
        RowMax
            (value, index) of the maximum; ties resolve to the lowest
            column index

        Examples
        --------
        >>> DenseMatrix.from_rows([[2.0, 5.0, 5.0, 1.0]]).row_argmax(0)
        RowMax(value=5.0, index=1)
        """
        self._check_row(r)
        if self.columns == 0:
            raise InvalidShapeError("Cannot take argmax of an empty row")
        index = int(np.argmax(self._array[r, :]))
        return RowMax(float(self._array[r, index]), index)

    def sigmoid(self) -> 'DenseMatrix':
        """Logistic sigmoid 1 / (1 + exp(-x)) of every element."""
        return 1.0 / (1.0 + (-self).exp())

    def allclose(self, other: 'DenseMatrix', rtol: float = 1e-05,
                 atol: float = 1e-08) -> bool:
        """True if shapes match and all elements agree within tolerance."""
        return (
            self.shape == other.shape
            and bool(np.allclose(self._array, other._array, rtol=rtol, atol=atol))
        )

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if isinstance(other, DenseMatrix) or _is_scalar(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other):
        if _is_scalar(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, DenseMatrix) or _is_scalar(other):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return self.negate().add(other)
        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if _is_scalar(other):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_scalar(other):
            return self.rdivide(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, DenseMatrix):
            return self.matmul(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        """Exact equality of shape and elements."""
        if not isinstance(other, DenseMatrix):
            return False
        return self.shape == other.shape and np.array_equal(self._array, other._array)

    __hash__ = None

    # numpy scalars and arrays defer to the reflected operators above
    __array_ufunc__ = None

    def __repr__(self) -> str:
        return (
            f"DenseMatrix({self.rows}x{self.columns}, "
            f"{self._array.tolist()!r})"
        )

    def tolist(self) -> List[List[float]]:
        """Nested list of rows."""
        return self._array.tolist()
