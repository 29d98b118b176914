"""
PyEchelon: row echelon form with partial pivoting and a singular-safe fallback.
"""

__version__ = "1.0.0"

# Import main user-facing API
from .matrix import Matrix
from .ref import ref, RefDecomposer, determinant
from ._backends.base import Ref, Singular
from ._core import is_row_echelon
from .exceptions import SingularMatrixError, InvalidArgumentError

# Import backend utilities (for advanced users)
from ._backends import get_backend, list_available_backends

__all__ = [
    'ref',
    'RefDecomposer',
    'determinant',
    'Matrix',
    'Ref',
    'Singular',
    'is_row_echelon',
    'SingularMatrixError',
    'InvalidArgumentError',
    'get_backend',
    'list_available_backends',
]
