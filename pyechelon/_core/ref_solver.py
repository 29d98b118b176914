"""
Row echelon form solver.

Delegates to backend for actual computation.
"""

from ..exceptions import SingularMatrixError
from ..matrix import Matrix
from .._backends.base import Singular


def _resolve(backend):
    from .._backends import get_backend
    return get_backend('cpu' if backend is None else backend)


def gaussian_elimination(matrix: Matrix, backend=None):
    """
    Partial-pivot Gaussian elimination, without fallback.

    Parameters
    ----------
    matrix : Matrix
        Matrix to reduce
    backend : BackendBase or str, optional
        Computational backend (default: CPU)

    Returns
    -------
    result : Ref
        Row echelon form and swap count

    Raises
    ------
    SingularMatrixError
        If a pivot column has no non-zero candidate
    """
    outcome = _resolve(backend).gaussian_elimination(matrix)

    if isinstance(outcome, Singular):
        raise SingularMatrixError(outcome.column)
    return outcome


def row_reduction_method(matrix: Matrix, backend=None):
    """
    Row reduction tolerant of singular and rank-deficient input.

    Pivots are normalised to 1; never raises for a well-formed matrix.
    """
    return _resolve(backend).row_reduction(matrix)


def decompose(matrix: Matrix, backend=None):
    """
    Row echelon form via Gaussian elimination, falling back to row
    reduction when the matrix is singular.

    This is just a thin wrapper - backends do all the work.
    """
    return _resolve(backend).decompose(matrix)
