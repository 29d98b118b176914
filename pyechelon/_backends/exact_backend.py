"""
Exact backend using rational arithmetic.

Same algorithms as the CPU backend, over ``fractions.Fraction``. Float
entries are converted exactly, so no rounding is introduced during
elimination.
"""

from fractions import Fraction
from typing import List

import numpy as np

from ..matrix import Matrix
from .base import BackendBase, EliminationOutcome, Ref, Singular


def _to_fractions(matrix: Matrix) -> List[List[Fraction]]:
    return [[Fraction(x) for x in matrix.row(i)] for i in range(matrix.rows)]


def _to_matrix(rows: List[List[Fraction]]) -> Matrix:
    m, n = len(rows), len(rows[0])
    out = np.empty((m, n), dtype=object)
    for i in range(m):
        for j in range(n):
            out[i, j] = rows[i][j]
    return Matrix.from_array(out)


class ExactBackend(BackendBase):
    """
    Pure-Python rational backend.

    Slow, but exact: a pivot is zero only if it is mathematically zero
    for the (exactly represented) input.
    """

    def __init__(self):
        self.name = "exact"
        self.precision = "rational"

    def gaussian_elimination(self, matrix: Matrix) -> EliminationOutcome:
        b = _to_fractions(matrix)
        m, n = matrix.rows, matrix.cols
        swaps = 0

        for k in range(min(m, n)):
            # Partial pivoting, first maximum wins
            index = k
            for i in range(k + 1, m):
                if abs(b[i][k]) > abs(b[index][k]):
                    index = i

            if b[index][k] == 0:
                return Singular(column=k, swap_count=swaps)

            if index != k:
                b[k], b[index] = b[index], b[k]
                swaps += 1

            diag = b[k][k]
            for i in range(k + 1, m):
                scale = b[i][k] / diag if diag != 0 else Fraction(1)
                for j in range(k + 1, n):
                    b[i][j] -= scale * b[k][j]
                b[i][k] = Fraction(0)

        return Ref(_to_matrix(b), swaps, method='gaussian')

    def row_reduction(self, matrix: Matrix) -> Ref:
        b = _to_fractions(matrix)
        m, n = matrix.rows, matrix.cols
        swaps = 0
        row = col = 0

        while row < m and col < n:
            t = b[row]
            if t[col] == 0:
                for i in range(row + 1, m):
                    if b[i][col] != 0:
                        b[row], b[i] = b[i], b[row]
                        t = b[row]
                        swaps += 1
                        break

            if t[col] == 0:
                col += 1
                continue

            divisor = t[col]
            if divisor != 1:
                for j in range(n):
                    t[j] /= divisor

            for i in range(row + 1, m):
                scale = b[i][col]
                if scale != 0:
                    for j in range(n):
                        b[i][j] -= scale * t[j]

            row += 1
            col += 1

        return Ref(_to_matrix(b), swaps, method='row_reduction')

    def get_device_info(self) -> dict:
        """Get backend information."""
        return {
            'backend': 'exact',
            'precision': 'rational',
            'library': 'fractions.Fraction',
        }
