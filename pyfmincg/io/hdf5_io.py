"""
HDF5 I/O functions for PyFmincg.

This module provides functions to save and load DenseMatrix objects and
fmincg results (for example trained one-vs-all weights together with the
cost history) to/from HDF5 format.

Note: Requires h5py package. Install with: pip install h5py
"""

import numpy as np
from typing import Optional
import warnings

from ..core import DenseMatrix
from ..optimization import MinimizeResult

# Try to import h5py, but make it optional
try:
    import h5py
    HAS_H5PY = True
except ImportError:
    HAS_H5PY = False
    h5py = None


def _check_h5py():
    """Check if h5py is available and raise helpful error if not."""
    if not HAS_H5PY:
        raise ImportError(
            "h5py is required for HDF5 I/O operations. "
            "Install it with: pip install h5py"
        )


def _check_type_marker(f, expected: str) -> None:
    if f.attrs.get('type') != expected:
        warnings.warn(
            f"File does not have '{expected}' type marker. "
            f"Found: {f.attrs.get('type')}"
        )


def save_matrix_hdf5(
    matrix: DenseMatrix,
    filename: str,
    compression: Optional[str] = 'gzip'
):
    """
    Save DenseMatrix to HDF5 file.

    Parameters
    ----------
    matrix : DenseMatrix
        Matrix to save
    filename : str
        Path to output HDF5 file
    compression : str, optional
        Compression algorithm ('gzip', 'lzf', or None)
        Default: 'gzip'

    Examples
    --------
    >>> W = DenseMatrix.from_rows([[0.5, -1.0], [2.0, 0.1]])
    >>> save_matrix_hdf5(W, 'weights.h5')
    """
    _check_h5py()

    if not isinstance(matrix, DenseMatrix):
        raise TypeError(f"Expected DenseMatrix object, got {type(matrix)}")

    with h5py.File(filename, 'w') as f:
        f.create_dataset('data', data=matrix.to_array(), compression=compression)

        f.attrs['type'] = 'DenseMatrix'
        f.attrs['version'] = '1.0'


def load_matrix_hdf5(filename: str) -> DenseMatrix:
    """
    Load DenseMatrix from HDF5 file.

    Parameters
    ----------
    filename : str
        Path to HDF5 file

    Returns
    -------
    DenseMatrix
        Loaded matrix
    """
    _check_h5py()

    with h5py.File(filename, 'r') as f:
        _check_type_marker(f, 'DenseMatrix')
        data = f['data'][:]

    return DenseMatrix.from_array(data)


def save_result_hdf5(
    result: MinimizeResult,
    filename: str,
    compression: Optional[str] = 'gzip'
):
    """
    Save an fmincg result (x, cost_history, iterations) to HDF5 file.

    Parameters
    ----------
    result : MinimizeResult
        Result returned by fmincg
    filename : str
        Path to output HDF5 file
    compression : str, optional
        Compression algorithm ('gzip', 'lzf', or None)
    """
    _check_h5py()

    if not isinstance(result, MinimizeResult):
        raise TypeError(f"Expected MinimizeResult object, got {type(result)}")

    with h5py.File(filename, 'w') as f:
        f.create_dataset('x', data=result.x.to_array(), compression=compression)
        f.create_dataset(
            'cost_history',
            data=np.asarray(result.cost_history, dtype=float),
            compression=compression
        )

        f.attrs['iterations'] = int(result.iterations)
        f.attrs['type'] = 'MinimizeResult'
        f.attrs['version'] = '1.0'


def load_result_hdf5(filename: str) -> MinimizeResult:
    """
    Load an fmincg result from HDF5 file.

    Returns
    -------
    MinimizeResult
        Loaded result
    """
    _check_h5py()

    with h5py.File(filename, 'r') as f:
        _check_type_marker(f, 'MinimizeResult')

        x = f['x'][:]
        cost_history = [float(c) for c in f['cost_history'][:]]
        iterations = int(f.attrs['iterations'])

    return MinimizeResult(DenseMatrix.from_array(x), cost_history, iterations)


# Convenience function for auto-detection
def load_hdf5(filename: str):
    """
    Load PyFmincg object from HDF5 file (auto-detect type).

    Returns
    -------
    Union[DenseMatrix, MinimizeResult]
        Loaded object (type depends on file content)

    Raises
    ------
    ValueError
        If file type cannot be determined
    """
    _check_h5py()

    with h5py.File(filename, 'r') as f:
        obj_type = f.attrs.get('type')

    if obj_type == 'DenseMatrix':
        return load_matrix_hdf5(filename)
    elif obj_type == 'MinimizeResult':
        return load_result_hdf5(filename)
    else:
        raise ValueError(
            f"Unknown object type in HDF5 file: {obj_type}. "
            f"Expected 'DenseMatrix' or 'MinimizeResult'"
        )
