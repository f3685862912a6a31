"""
K-Means clustering over named nodes with user supplied initial centroids.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.data import Node
from ..utils.formatting import format_decimal
from .distance import DistanceFunction

logger = logging.getLogger(__name__)

TOLERANCE = 1e-5


def format_coordinate(value: float) -> str:
    """Coordinate with at most 13 fractional digits, trailing zeros trimmed."""
    return format_decimal(value, digits=13)


@dataclass
class Cluster:
    """Final state of one centroid: its members and its coordinates."""
    identity: str
    members: List[str] = field(default_factory=list)
    coordinates: Tuple[float, ...] = field(default_factory=tuple)

    def formatted_coordinates(self) -> str:
        return "([" + " ".join(format_coordinate(v) for v in self.coordinates) + "])"


def sanity_check(data: Sequence[Node], centroids: Sequence[Node]):
    """
    Verify that every data node and every centroid share one dimension.

    Raises:
        ValueError: on empty input or any dimension mismatch
    """
    if not data:
        raise ValueError("No data provided for K-Means.")
    if not centroids:
        raise ValueError("No centroids provided for K-Means.")

    dimension = data[0].dimension

    for node in data:
        if node.dimension != dimension:
            raise ValueError(f"Incorrect dimensions for K-Means data input: node {node.identity} "
                             f"has {node.dimension} values, expected {dimension}.")

    for node in centroids:
        if node.dimension != dimension:
            raise ValueError(f"Incorrect dimensions for K-Means centroid arguments: {node.identity} "
                             f"has {node.dimension} values, expected {dimension}.")


class KMeansEngine:
    """
    K-Means clustering engine.

    Alternates assignment and update passes until the centroids move by at
    most ``TOLERANCE`` in total. Ties in assignment go to the lowest centroid
    index, and centroids that receive no members keep their position. There
    is no iteration cap: pass a ``MaxIterations`` or ``EarlyStopping``
    callback to ``run`` when the input may oscillate.
    """

    def __init__(self, data: Sequence[Node], centroids: Sequence[Node],
                 distance: Union[str, DistanceFunction] = DistanceFunction.SQUARED_EUCLIDEAN):
        """
        Initialize K-Means engine.

        Args:
            data: Nodes to cluster
            centroids: Initial centroids; k is the length of this list
            distance: 'manh', 'e2' or a DistanceFunction member
        """
        self.distance = DistanceFunction.from_name(distance)
        sanity_check(data, centroids)

        self.data = list(data)
        self._points = np.array([node.features for node in self.data], dtype=float)
        self.centroids = list(centroids)
        self.k = len(self.centroids)

        self.iterations = 0
        self.converged = False
        self.stop_training = False
        self.assignments: List[int] = []

    def assign(self, centroid_matrix: np.ndarray) -> np.ndarray:
        """Index of the nearest centroid for every data node."""
        distances = self.distance.pairwise(self._points, centroid_matrix)
        # argmin returns the first minimum, i.e. the lowest centroid index
        return np.argmin(distances, axis=1)

    def update(self, centroid_matrix: np.ndarray, assignments: np.ndarray) -> np.ndarray:
        """Mean of the members of every centroid; empty centroids stay put."""
        updated = centroid_matrix.copy()

        for index in range(self.k):
            members = self._points[assignments == index]
            if len(members):
                updated[index] = members.mean(axis=0)

        return updated

    def run(self, callbacks: Optional[List[Any]] = None) -> List[Cluster]:
        """
        Iterate until the centroids reach a fixed point.

        Args:
            callbacks: Objects with optional on_train_begin, on_iteration_end
                       and on_train_end hooks; any of them may stop the run

        Returns:
            One Cluster per centroid, in centroid order
        """
        callbacks = callbacks or []
        self.iterations = 0
        self.converged = False
        self.stop_training = False

        for callback in callbacks:
            if hasattr(callback, 'on_train_begin'):
                callback.on_train_begin()

        centroid_matrix = np.array([node.features for node in self.centroids], dtype=float)

        while True:
            assignments = self.assign(centroid_matrix)
            updated = self.update(centroid_matrix, assignments)
            shift = float(np.sum(np.abs(updated - centroid_matrix)))
            self.iterations += 1
            self.assignments = assignments.tolist()

            logger.debug("Iteration %d: centroid shift %.6g", self.iterations, shift)

            self.converged = shift <= TOLERANCE

            if not self.converged:
                centroid_matrix = updated
                for node, values in zip(self.centroids, centroid_matrix):
                    node.replace_features(values)

            # hooks see every pass, including the converging one
            logs: Dict[str, Any] = {'iteration': self.iterations, 'shift': shift,
                                    'converged': self.converged}
            for callback in callbacks:
                if hasattr(callback, 'on_iteration_end'):
                    callback.on_iteration_end(self.iterations, logs)
                if getattr(callback, 'stop_training', False):
                    self.stop_training = True

            if self.converged:
                break

            if self.stop_training:
                # membership must match the centroids that are reported
                self.assignments = self.assign(centroid_matrix).tolist()
                break

        for callback in callbacks:
            if hasattr(callback, 'on_train_end'):
                callback.on_train_end({'iteration': self.iterations, 'converged': self.converged})

        if self.converged:
            logger.info("K-Means converged after %d iteration(s)", self.iterations)
        else:
            logger.warning("K-Means stopped after %d iteration(s) without converging", self.iterations)

        return self.clusters()

    def clusters(self) -> List[Cluster]:
        """Current membership and coordinates of every centroid."""
        result = [Cluster(node.identity, [], node.features) for node in self.centroids]
        for node, index in zip(self.data, self.assignments):
            result[index].members.append(node.identity)
        return result


def report(clusters: Sequence[Cluster]) -> List[str]:
    """
    Render clusters as printable lines.

    Membership lines come first (``C1 = {a,b}``), followed by one coordinate
    line per cluster (``([1.5 2])``).
    """
    lines = [f"{cluster.identity} = {{{','.join(cluster.members)}}}" for cluster in clusters]
    lines.extend(cluster.formatted_coordinates() for cluster in clusters)
    return lines
