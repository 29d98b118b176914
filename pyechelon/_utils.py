"""
Utility functions.
"""

import numpy as np


def check_array(X, name='X', dtype=np.float64):
    """Validate matrix input."""
    X = np.array(X, dtype=dtype)
    if X.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional")
    if X.shape[0] < 1 or X.shape[1] < 1:
        raise ValueError(f"{name} must have at least one row and one column")
    if not np.all(np.isfinite(X)):
        raise ValueError(f"{name} contains NaN or Inf")
    return X


def check_columns(frame, columns, name='frame'):
    """Validate that every requested column exists in a DataFrame."""
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise ValueError(f"{name} has no column(s): {', '.join(map(str, missing))}")
    return list(columns)
