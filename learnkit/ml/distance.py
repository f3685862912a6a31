"""
Distance functions available to the nearest-neighbour and clustering code.
"""

from enum import Enum
from typing import Sequence, Union

import numpy as np
from scipy.spatial.distance import cdist


class DistanceFunction(Enum):
    """
    Closed set of supported distances.

    Both are computed over index-aligned coordinate pairs.
    """

    MANHATTAN = 'manh'
    SQUARED_EUCLIDEAN = 'e2'

    @classmethod
    def from_name(cls, name: Union[str, 'DistanceFunction']) -> 'DistanceFunction':
        """
        Resolve a distance by its short name.

        Args:
            name: 'manh', 'e2' or a DistanceFunction member

        Returns:
            The matching DistanceFunction
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            choices = ', '.join(member.value for member in cls)
            raise ValueError(f"Unknown distance function: {name!r} (expected one of {choices})") from None

    @property
    def _metric(self) -> str:
        if self is DistanceFunction.MANHATTAN:
            return 'cityblock'
        return 'sqeuclidean'

    def between(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Distance between two vectors of equal length."""
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)

        if a.shape != b.shape:
            raise ValueError(f"Cannot compare vectors of length {a.size} and {b.size}")

        diff = a - b
        if self is DistanceFunction.MANHATTAN:
            return float(np.sum(np.abs(diff)))
        return float(np.sum(diff ** 2))

    def pairwise(self, A: np.ndarray, B: np.ndarray) -> np.ndarray:
        """
        Compute distances between every row of A and every row of B.

        Args:
            A: Points of shape (n_a, n_features)
            B: Points of shape (n_b, n_features)

        Returns:
            Distances of shape (n_a, n_b)
        """
        A = np.atleast_2d(np.asarray(A, dtype=float))
        B = np.atleast_2d(np.asarray(B, dtype=float))

        if A.shape[1] != B.shape[1]:
            raise ValueError(f"A has {A.shape[1]} features, but B has {B.shape[1]} features")

        return cdist(A, B, metric=self._metric)
