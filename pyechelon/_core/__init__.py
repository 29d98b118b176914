"""
Core algorithms (backend-agnostic).
"""

from .ref_solver import gaussian_elimination, row_reduction_method, decompose
from .structure import is_row_echelon

__all__ = [
    "gaussian_elimination",
    "row_reduction_method",
    "decompose",
    "is_row_echelon",
]
