"""
CPU backend using NumPy.

Reference implementation in float64. All zero tests are exact.
"""

import numpy as np

from ..matrix import Matrix
from .base import BackendBase, EliminationOutcome, Ref, Singular


class CPUBackendFP64(BackendBase):
    """
    CPU backend using NumPy.

    Works on a private row-major float64 copy of the input. Rows below a
    pivot are updated together; pivot selection stays sequential.
    """

    def __init__(self):
        self.name = "cpu_fp64"
        self.precision = "fp64"

    def gaussian_elimination(self, matrix: Matrix) -> EliminationOutcome:
        """
        Partial-pivot Gaussian elimination.

        Complete implementation - all computation stays in NumPy.
        """
        b = np.asarray(matrix.to_array(), dtype=np.float64, order='C')
        m, n = b.shape
        swaps = 0

        for k in range(min(m, n)):
            # argmax returns the first maximum, so ties keep scan order
            index = k + int(np.argmax(np.abs(b[k:, k])))

            if b[index, k] == 0:
                return Singular(column=k, swap_count=swaps)

            if index != k:
                b[[k, index]] = b[[index, k]]
                swaps += 1

            if k + 1 == m:
                continue

            diag = b[k, k]
            if diag != 0:
                scale = b[k + 1:, k] / diag
            else:
                scale = np.ones(m - k - 1)

            b[k + 1:, k + 1:] -= np.outer(scale, b[k, k + 1:])
            b[k + 1:, k] = 0.0

        return Ref(Matrix.from_array(b), swaps, method='gaussian')

    def row_reduction(self, matrix: Matrix) -> Ref:
        """Row reduction with unit pivots and full-row updates."""
        b = np.asarray(matrix.to_array(), dtype=np.float64, order='C')
        m, n = b.shape
        swaps = 0
        row = col = 0

        while row < m and col < n:
            if b[row, col] == 0:
                below = np.flatnonzero(b[row + 1:, col])
                if below.size:
                    index = row + 1 + int(below[0])
                    b[[row, index]] = b[[index, row]]
                    swaps += 1

            if b[row, col] == 0:
                # Column is zero from here down: no pivot
                col += 1
                continue

            divisor = b[row, col]
            if divisor != 1:
                b[row] /= divisor

            targets = row + 1 + np.flatnonzero(b[row + 1:, col])
            if targets.size:
                b[targets] -= np.outer(b[targets, col], b[row])

            row += 1
            col += 1

        return Ref(Matrix.from_array(b), swaps, method='row_reduction')

    def get_device_info(self) -> dict:
        """Get backend information."""
        return {
            'backend': 'cpu',
            'precision': 'fp64',
            'library': f'NumPy {np.__version__}',
        }
