"""
Run configuration for the command line driver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..ml.distance import DistanceFunction


class Algorithm(Enum):
    KNN = 'knn'
    NAIVE_BAYES = 'naive_bayes'
    KMEANS = 'kmeans'


@dataclass
class RunConfig:
    """
    Options for a single run. Exactly one algorithm runs per invocation:
    a distance function selects K-Means, otherwise k selects KNN and c
    selects Naive Bayes.
    """
    train: Optional[str] = None
    test: Optional[str] = None
    k: Optional[int] = None
    c: Optional[float] = None
    distance: Optional[str] = None
    centroids: List[str] = field(default_factory=list)
    verbose: bool = False
    max_iter: Optional[int] = None
    log_level: str = 'WARNING'
    json_logs: bool = False

    def validate(self) -> Algorithm:
        """
        Check the combination of options and pick the algorithm.

        Raises:
            ValueError: with a message suitable for the user
        """
        if self.distance:
            DistanceFunction.from_name(self.distance)
            if not self.centroids:
                raise ValueError("Incorrect centroids provided for K-Means.")
            if not self.train:
                raise ValueError("A data file must be given with -train for K-Means.")
            if self.max_iter is not None and self.max_iter <= 0:
                raise ValueError("--max-iter must be positive.")
            return Algorithm.KMEANS

        if self.centroids:
            raise ValueError(f"Unexpected arguments: {' '.join(self.centroids)}")
        if not self.train or not self.test:
            raise ValueError("Both -train and -test files are required.")

        if self.k is not None and self.k < 0:
            raise ValueError('Number of nearest neighbours "K" must be >= 0.')
        if self.c is not None and self.c < 0:
            raise ValueError('Laplacian correction "C" must be >= 0.')
        if self.k and self.c:
            raise ValueError('Cannot use both "K" and "C" in the same algorithm.')

        if self.k:
            return Algorithm.KNN
        if self.c is not None:
            return Algorithm.NAIVE_BAYES

        raise ValueError('One of "K" (> 0) or "C" must be given.')
