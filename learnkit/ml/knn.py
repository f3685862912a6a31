"""
K-Nearest Neighbors classifier for learnkit.
Votes are weighted by inverse squared Euclidean distance.
"""

import numpy as np
from typing import Dict, List, Sequence, Tuple
from tqdm import tqdm

from ..core.data import DataPoint
from .distance import DistanceFunction


class KNNClassifier:
    """
    K-Nearest Neighbors classifier.

    Training only stores points; every prediction is a linear scan over the
    training set. A neighbour at distance 0 casts an infinite vote, so an exact
    match always wins. When two labels end with the same weight, the
    lexicographically smallest label is returned.

    Queries must have exactly as many features as the training points.
    Distances are only defined between vectors of equal length, so a shorter
    query is rejected just like a longer one.
    """

    def __init__(self, k: int = 5):
        """
        Initialize KNN classifier.

        Args:
            k: Number of neighbors to use (positive integer)
        """
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k <= 0:
            raise ValueError("k must be a positive integer")

        self.k = int(k)
        self.distance = DistanceFunction.SQUARED_EUCLIDEAN
        self._points: List[DataPoint] = []
        self._matrix = None

    def __len__(self) -> int:
        return len(self._points)

    @property
    def dimension(self) -> int:
        return self._points[0].dimension if self._points else 0

    def add(self, features: Sequence[float], label: str):
        """Append a single training point."""
        point = DataPoint(features, label)

        if self._points and point.dimension != self.dimension:
            raise ValueError(f"Point has {point.dimension} features, but KNN was trained with "
                             f"{self.dimension} features")

        self._points.append(point)
        self._matrix = None

    def train(self, X: Sequence[Sequence[float]], y: Sequence[str]):
        """
        Append every (features, label) pair to the training set.

        Args:
            X: Training rows
            y: Labels, one per row

        Returns:
            self: Returns the instance itself
        """
        if len(X) != len(y):
            raise ValueError("X and y must have the same number of samples")
        if len(X) == 0:
            raise ValueError("Cannot train on an empty dataset")

        for features, label in zip(X, y):
            self.add(features, label)

        return self

    def kneighbors(self, query: Sequence[float]) -> List[Tuple[float, str]]:
        """
        Find the neighbours that take part in the vote.

        Args:
            query: Feature vector

        Returns:
            (distance, label) pairs, nearest first
        """
        if not self._points:
            raise RuntimeError("Model must be trained before making predictions")

        query = np.asarray(query, dtype=float)
        if query.shape != (self.dimension,):
            raise ValueError(f"Query has {query.size} features, but KNN was trained with "
                             f"{self.dimension} features")

        if self._matrix is None:
            self._matrix = np.array([point.features for point in self._points], dtype=float)

        distances = self.distance.pairwise(query[np.newaxis, :], self._matrix)[0]
        # stable sort keeps insertion order among equidistant points
        nearest = np.argsort(distances, kind='stable')[:min(self.k, len(self._points))]

        return [(float(distances[i]), self._points[i].label) for i in nearest]

    def predict(self, query: Sequence[float]) -> str:
        """
        Predict the label of a single query.

        Args:
            query: Feature vector

        Returns:
            Label with the highest accumulated vote weight
        """
        votes: Dict[str, float] = {}

        for distance, label in self.kneighbors(query):
            weight = np.inf if distance == 0 else 1.0 / distance
            votes[label] = votes.get(label, 0.0) + weight

        best = max(votes.values())
        return min(label for label, weight in votes.items() if weight == best)

    def predict_on_data(self, queries: Sequence[Sequence[float]],
                        show_progress: bool = False) -> List[str]:
        """
        Predict labels for a batch of queries, preserving order.

        Args:
            queries: Feature vectors
            show_progress: Whether to display a progress bar

        Returns:
            Predicted labels
        """
        iterator = tqdm(queries, desc="KNN predict") if show_progress else queries
        return [self.predict(query) for query in iterator]

    def get_params(self) -> dict:
        """
        Get parameters for this classifier.

        Returns:
            Parameter names mapped to their values
        """
        return {
            'k': self.k,
            'distance': self.distance.value,
        }
