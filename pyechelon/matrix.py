"""
Dense immutable matrix.

Thin read-only wrapper over a 2-D NumPy array. Validating construction
for user data, fast-path construction for buffers whose shape is already
known to be correct.
"""

import numpy as np
import pandas as pd
from typing import List, Optional

from ._utils import check_array, check_columns


class Matrix:
    """
    Dense 2-D numeric matrix with read-only storage.

    Examples
    --------
    >>> A = Matrix([[2, 1], [4, 2]])
    >>> A.shape
    (2, 2)
    >>> A[1, 0]
    4.0
    """

    __slots__ = ('_data',)

    def __init__(self, data):
        """
        Build a matrix from any 2-D array-like.

        Parameters
        ----------
        data : array_like, shape (m, n)
            Numeric values, m >= 1 and n >= 1, all finite.
            Always copied and stored as float64.
        """
        values = check_array(data, name='data')
        values.flags.writeable = False
        self._data = values

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Matrix':
        """
        Wrap an array without validation or copying.

        The caller hands over ownership of ``array``; it is frozen in
        place. Used for algorithm output, whose shape is known-correct.
        """
        matrix = cls.__new__(cls)
        array.flags.writeable = False
        matrix._data = array
        return matrix

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        columns: Optional[List[str]] = None,
    ) -> 'Matrix':
        """
        Build a matrix from a DataFrame.

        Parameters
        ----------
        frame : DataFrame
            Source data, one matrix row per frame row.
        columns : list of str, optional
            Columns to use, in order. Defaults to all columns.
        """
        if columns is not None:
            frame = frame[check_columns(frame, columns)]
        return cls(frame.values)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    @property
    def dtype(self):
        return self._data.dtype

    def row(self, i: int) -> np.ndarray:
        """Read-only view of row ``i``."""
        return self._data[i]

    def to_array(self) -> np.ndarray:
        """Export a private, writeable copy of the values."""
        return self._data.copy()

    def tolist(self) -> list:
        return self._data.tolist()

    def __getitem__(self, key):
        return self._data[key]

    def __len__(self):
        return self._data.shape[0]

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __repr__(self):
        body = np.array2string(self._data, prefix='Matrix(')
        return f"Matrix({body})"
