"""
Row echelon form with a backend-selectable interface.

This is the user-facing API.
"""

import numpy as np
import pandas as pd
from typing import List, Optional, Union

from ._backends import get_backend
from ._backends.base import Ref
from ._core import ref_solver
from .matrix import Matrix


def as_matrix(
    data: Union[Matrix, pd.DataFrame, np.ndarray, list],
    columns: Optional[List[str]] = None,
) -> Matrix:
    """Coerce supported inputs to a validated ``Matrix``."""
    if isinstance(data, Matrix):
        return data
    if isinstance(data, pd.DataFrame):
        return Matrix.from_frame(data, columns=columns)
    return Matrix(data)


class RefDecomposer:
    """
    Compute the row echelon form of a matrix.

    Partial-pivot Gaussian elimination is tried first; if it meets a
    column with no non-zero pivot, the matrix is reduced again with the
    zero-tolerant row reduction method instead.

    Examples
    --------
    >>> from pyechelon import RefDecomposer
    >>>
    >>> result = RefDecomposer().decompose([[0, 1], [1, 0]])
    >>> result.reduced.tolist()
    [[1.0, 0.0], [0.0, 1.0]]
    >>> result.swap_count
    1
    >>>
    >>> # Singular input falls back transparently
    >>> RefDecomposer().decompose([[2, 1], [4, 2]]).method
    'row_reduction'
    """

    def __init__(self, backend: str = 'auto'):
        """
        Parameters
        ----------
        backend : str
            Computational backend: 'auto', 'cpu', 'exact'
        """
        self.backend = get_backend(backend)

    def decompose(self, matrix, columns: Optional[List[str]] = None) -> Ref:
        """
        Row echelon form of ``matrix``.

        Parameters
        ----------
        matrix : Matrix, DataFrame or array_like
            Input, at least 1 x 1. Never modified.
        columns : list of str, optional
            Column selection when ``matrix`` is a DataFrame

        Returns
        -------
        Ref
            Reduced matrix and row swap count
        """
        return ref_solver.decompose(as_matrix(matrix, columns), self.backend)

    def gaussian_elimination(self, matrix, columns: Optional[List[str]] = None) -> Ref:
        """Gaussian elimination only; raises ``SingularMatrixError``."""
        return ref_solver.gaussian_elimination(
            as_matrix(matrix, columns), self.backend
        )

    def row_reduction_method(self, matrix, columns: Optional[List[str]] = None) -> Ref:
        """Row reduction only."""
        return ref_solver.row_reduction_method(
            as_matrix(matrix, columns), self.backend
        )

    def __repr__(self):
        return f"RefDecomposer(backend={self.backend.name!r})"


def ref(matrix, backend: str = 'auto', **kwargs) -> Ref:
    """
    Row echelon form (convenience function).

    Parameters
    ----------
    matrix : Matrix, DataFrame or array_like
        Input matrix
    backend : str
        Computational backend: 'auto', 'cpu', 'exact'
    **kwargs
        Passed to ``RefDecomposer.decompose``

    Returns
    -------
    Ref
        Row echelon form

    Examples
    --------
    >>> result = ref([[4, 3], [6, 3]])
    >>> result.reduced.tolist()
    [[6.0, 3.0], [0.0, 1.0]]
    >>> result.sign
    -1
    """
    return RefDecomposer(backend).decompose(matrix, **kwargs)


def determinant(matrix, backend: str = 'auto'):
    """
    Determinant of a square matrix from its row echelon form.

    The product of the Gaussian pivots times the swap sign. If the
    reduction had to fall back to row reduction the matrix is singular
    and the determinant is zero.
    """
    matrix = as_matrix(matrix)
    if matrix.rows != matrix.cols:
        raise ValueError(
            f"determinant requires a square matrix, got {matrix.rows}x{matrix.cols}"
        )

    result = RefDecomposer(backend).decompose(matrix)
    if result.method != 'gaussian':
        # zero in the backend's number type
        return result.reduced[0, 0] * 0

    det = result.sign
    for k in range(matrix.rows):
        det = det * result.reduced[k, k]
    return det
