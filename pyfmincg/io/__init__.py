"""
Input/Output functions for PyFmincg.

Formats Supported:
    HDF5: Efficient binary format - requires h5py

Functions:
    HDF5 I/O (requires h5py):
        save_matrix_hdf5: Save DenseMatrix to HDF5
        load_matrix_hdf5: Load DenseMatrix from HDF5
        save_result_hdf5: Save fmincg result to HDF5
        load_result_hdf5: Load fmincg result from HDF5
        load_hdf5: Auto-detect and load from HDF5
"""

from .hdf5_io import (
    save_matrix_hdf5,
    load_matrix_hdf5,
    save_result_hdf5,
    load_result_hdf5,
    load_hdf5,
    HAS_H5PY
)

__all__ = [
    "save_matrix_hdf5",
    "load_matrix_hdf5",
    "save_result_hdf5",
    "load_result_hdf5",
    "load_hdf5",
    "HAS_H5PY",
]
