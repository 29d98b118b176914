"""
Abstract base classes for backends.

Defines the result types and the interface all backends must implement.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
import pandas as pd

from ..exceptions import InvalidArgumentError
from ..matrix import Matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ref:
    """
    Row echelon form of a matrix.

    Attributes
    ----------
    reduced : Matrix
        The matrix in row echelon form
    swap_count : int
        Number of row interchanges performed, always >= 0
    method : str
        Strategy that produced the result: 'gaussian' or 'row_reduction'
    """
    reduced: Matrix
    swap_count: int
    method: str = 'gaussian'

    def __post_init__(self):
        if isinstance(self.swap_count, bool) or not isinstance(
            self.swap_count, (int, np.integer)
        ):
            raise InvalidArgumentError(
                f"swap_count must be an integer, got {type(self.swap_count).__name__}"
            )
        if self.swap_count < 0:
            raise InvalidArgumentError(
                f"swap_count must be non-negative, got {self.swap_count}"
            )

    @property
    def pivot_columns(self) -> Tuple[int, ...]:
        """Leading non-zero column of each non-zero row, top to bottom."""
        pivots = []
        for i in range(self.reduced.rows):
            nonzero = np.flatnonzero(self.reduced.row(i) != 0)
            if nonzero.size:
                pivots.append(int(nonzero[0]))
        return tuple(pivots)

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)

    @property
    def sign(self) -> int:
        """Determinant sign contributed by the row interchanges."""
        return -1 if self.swap_count % 2 else 1

    def to_frame(self) -> pd.DataFrame:
        """Reduced matrix as a DataFrame."""
        return pd.DataFrame(self.reduced.to_array())

    def summary(self):
        """Print a report of the reduction."""
        print()
        print("=" * 60)
        print("ROW ECHELON FORM")
        print("=" * 60)
        print(f"Method:        {self.method}")
        print(f"Shape:         {self.reduced.rows} x {self.reduced.cols}")
        print(f"Row swaps:     {self.swap_count} (sign {self.sign:+d})")
        print(f"Rank:          {self.rank}")
        print(f"Pivot columns: {list(self.pivot_columns)}")
        print("-" * 60)
        print(self.to_frame().to_string())
        print("=" * 60)
        print()


@dataclass(frozen=True)
class Singular:
    """Gaussian elimination met an exact zero pivot; retry with row reduction."""
    column: int       # Pivot column with no non-zero candidate
    swap_count: int   # Swaps performed before giving up


EliminationOutcome = Union[Ref, Singular]


class BackendBase(ABC):
    """Abstract base class for all backends."""

    name = "base"
    precision = None

    @abstractmethod
    def gaussian_elimination(self, matrix: Matrix) -> EliminationOutcome:
        """
        Partial-pivot Gaussian elimination.

        Backends work on a private copy in their native type and only
        convert at entry/exit.

        Parameters
        ----------
        matrix : Matrix
            Input matrix, never modified

        Returns
        -------
        Ref or Singular
            ``Ref`` on success, ``Singular`` when a pivot column has no
            non-zero candidate
        """
        pass

    @abstractmethod
    def row_reduction(self, matrix: Matrix) -> Ref:
        """
        Row reduction tolerant of zero pivots and rank deficiency.

        Never fails for a well-formed matrix.
        """
        pass

    @abstractmethod
    def get_device_info(self) -> dict:
        """Get backend information."""
        pass

    def decompose(self, matrix: Matrix) -> Ref:
        """Gaussian elimination, falling back to row reduction if singular."""
        outcome = self.gaussian_elimination(matrix)
        if isinstance(outcome, Singular):
            logger.debug(
                "%s: zero pivot in column %d of %dx%d matrix, "
                "falling back to row reduction",
                self.name, outcome.column, matrix.rows, matrix.cols,
            )
            return self.row_reduction(matrix)
        return outcome
