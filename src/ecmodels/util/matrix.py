# -*- coding: utf-8 -*-
"""
Contains the sparse matrix helpers shared by the :mod:`ecmodels` models.

All model matrices are assembled from coordinate ``(row, column, value)``
triplets and stored as :class:`scipy.sparse.csr_matrix`. Matrices given in
another format, including a :class:`pandas.DataFrame`, are converted with
:func:`as_sparse`.
"""
import numpy as np
import pandas as pd
from scipy.sparse import coo_matrix, csr_matrix


# Public
def sparse_from_triplets(rows, cols, values, shape):
    """Build a sparse matrix from coordinate triplets.

    Entries given more than once for the same ``(row, column)`` position are
    summed.

    Parameters
    ----------
    rows : array-like
        Row index of every entry.
    cols : array-like
        Column index of every entry.
    values : array-like
        Value of every entry.
    shape : tuple of int
        The ``(n_rows, n_columns)`` shape of the matrix.

    Returns
    -------
    scipy.sparse.csr_matrix
        The assembled matrix.

    Raises
    ------
    ValueError
        Occurs if the triplet lengths differ or an index is out of range.

    """
    rows = np.asarray(rows, dtype=np.int64).reshape(-1)
    cols = np.asarray(cols, dtype=np.int64).reshape(-1)
    values = np.asarray(values, dtype=np.float64).reshape(-1)
    if not len(rows) == len(cols) == len(values):
        raise ValueError("rows, cols and values must have the same length.")

    n_rows, n_cols = shape
    if len(rows) and (
        rows.min() < 0 or rows.max() >= n_rows or cols.min() < 0 or cols.max() >= n_cols
    ):
        raise ValueError("Triplet index out of range for shape {0}.".format(shape))

    # COO -> CSR conversion sums the duplicate entries
    matrix = coo_matrix((values, (rows, cols)), shape=(n_rows, n_cols)).tocsr()
    matrix.sum_duplicates()
    return matrix


def empty_matrix(n_rows, n_cols):
    """Return an all-zero sparse matrix of the given shape."""
    return csr_matrix((n_rows, n_cols), dtype=np.float64)


def as_sparse(matrix):
    """Return ``matrix`` as a :class:`scipy.sparse.csr_matrix` copy."""
    return _to_csr(matrix).astype(np.float64)


def _to_csr(matrix):
    """Convert matrix to a scipy csr matrix."""
    if isinstance(matrix, pd.DataFrame):
        matrix = matrix.to_numpy()
    return csr_matrix(matrix, copy=True)


__all__ = (
    "sparse_from_triplets",
    "empty_matrix",
    "as_sparse",
)
