"""
Structural checks on reduced matrices.
"""

import numpy as np


def is_row_echelon(matrix) -> bool:
    """
    Check whether a matrix is in row echelon form.

    Each non-zero row must lead strictly to the right of the row above
    it, and zero rows must come last. Zero means exactly zero.

    Parameters
    ----------
    matrix : Matrix or array_like, shape (m, n)

    Returns
    -------
    bool
    """
    values = np.asarray(matrix)
    last_lead = -1
    seen_zero_row = False

    for row in values:
        nonzero = np.flatnonzero(row != 0)
        if nonzero.size == 0:
            seen_zero_row = True
            continue
        lead = int(nonzero[0])
        if seen_zero_row or lead <= last_lead:
            return False
        last_lead = lead

    return True
