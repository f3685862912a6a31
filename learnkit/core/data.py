"""
Data holders shared by the classifiers and the clustering engine.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


def _as_vector(values: Sequence[float]) -> Tuple[float, ...]:
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class DataPoint:
    """A labelled observation. Immutable once constructed."""
    features: Tuple[float, ...]
    label: str

    def __post_init__(self):
        object.__setattr__(self, 'features', _as_vector(self.features))
        object.__setattr__(self, 'label', str(self.label))

    @property
    def dimension(self) -> int:
        return len(self.features)


@dataclass
class Node:
    """
    A named point used by K-Means.

    Data nodes keep their vector for their whole life. Centroid nodes get a
    new vector through ``replace_features`` after every update step.
    """
    identity: str
    features: Tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self):
        self.features = _as_vector(self.features)

    @property
    def dimension(self) -> int:
        return len(self.features)

    def replace_features(self, values: Sequence[float]):
        """Swap the whole feature vector."""
        self.features = _as_vector(values)


@dataclass
class Dataset:
    """Feature rows plus their labels, validated on construction."""
    features: List[Tuple[float, ...]]
    labels: List[str]

    def __post_init__(self):
        if len(self.features) != len(self.labels):
            raise ValueError(f"features and labels must have same length. "
                             f"Got features: {len(self.features)}, labels: {len(self.labels)}")

        self.features = [_as_vector(row) for row in self.features]
        self.labels = [str(label) for label in self.labels]

        if self.features:
            dimension = len(self.features[0])
            for index, row in enumerate(self.features):
                if len(row) != dimension:
                    raise ValueError(f"Row {index + 1} has {len(row)} features, "
                                     f"expected {dimension}")

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def dimension(self) -> int:
        return len(self.features[0]) if self.features else 0

    def points(self) -> List[DataPoint]:
        return [DataPoint(row, label) for row, label in zip(self.features, self.labels)]
