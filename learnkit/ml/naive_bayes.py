"""
Naive Bayes classifier over discretized feature values.

Every feature value is treated as a category (its canonical string form), and
conditional probabilities use additive (Laplace) smoothing with constant ``c``.
Scores are plain double precision products, not log probabilities, so many
features or many small probabilities can underflow to zero.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..utils.formatting import format_decimal

logger = logging.getLogger(__name__)


def discretize(value) -> str:
    """Canonical string form of a feature value, e.g. ``1.0``."""
    return repr(float(value))


class NaiveBayesClassifier:
    """
    Naive Bayes classifier with Laplace smoothing.

    Labels are kept sorted, so when several labels share the best score the
    first one in sorted order is predicted.
    """

    def __init__(self, c: float = 0.0, verbose: bool = False):
        """
        Initialize Naive Bayes classifier.

        Args:
            c: Smoothing constant added to every joint count (c >= 0)
            verbose: Print the probabilities behind every prediction
        """
        if c < 0:
            raise ValueError("Smoothing constant c must be >= 0")

        self.c = float(c)
        self.verbose = verbose

        self._domains: List[Set[str]] = []
        self._labels: List[str] = []
        self._priors: Dict[str, float] = {}
        self._prior_desc: Dict[str, str] = {}
        self._conditionals: Dict[Tuple[str, int, str], float] = {}
        self._conditional_desc: Dict[Tuple[str, int, str], str] = {}

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    @property
    def domains(self) -> List[Set[str]]:
        return [set(domain) for domain in self._domains]

    def train(self, X: Sequence[Sequence[float]], y: Sequence[str]):
        """
        Build the prior and conditional probability tables.

        Args:
            X: Training rows, all of the same length
            y: Labels, one per row

        Returns:
            self: Returns the instance itself
        """
        if len(X) != len(y):
            raise ValueError("X and y must have the same number of samples")
        if len(X) == 0:
            raise ValueError("Cannot train on an empty dataset")

        rows = [[discretize(value) for value in row] for row in X]
        labels = [str(label) for label in y]
        n_columns = len(rows[0])
        total = len(rows)

        for index, row in enumerate(rows):
            if len(row) != n_columns:
                raise ValueError(f"Row {index + 1} has {len(row)} features, expected {n_columns}")

        self._domains = [{row[col] for row in rows} for col in range(n_columns)]
        self._labels = sorted(set(labels))

        label_counts = Counter(labels)
        joint_counts = Counter(
            (value, col, label)
            for row, label in zip(rows, labels)
            for col, value in enumerate(row)
        )

        self._priors.clear()
        self._prior_desc.clear()
        self._conditionals.clear()
        self._conditional_desc.clear()

        for label in self._labels:
            count = label_counts[label]
            self._priors[label] = count / total
            self._prior_desc[label] = f"{count} / {total}"

            for col, domain in enumerate(self._domains):
                denominator = count + self.c * len(domain)
                for value in domain:
                    key = (value, col, label)
                    numerator = joint_counts.get(key, 0) + self.c
                    self._conditionals[key] = numerator / denominator
                    self._conditional_desc[key] = (f"{format_decimal(numerator)} / "
                                                   f"{format_decimal(denominator)}")

        logger.debug("Trained on %d rows, %d columns, %d labels",
                     total, n_columns, len(self._labels))
        return self

    def prior(self, label: str) -> float:
        return self._priors.get(str(label), 0.0)

    def conditional(self, value, column: int, label: str) -> float:
        """Smoothed P(column == value | label); 0.0 outside the trained domains."""
        return self._conditionals.get((discretize(value), column, str(label)), 0.0)

    def label_probability(self, query: Sequence[float], label: str) -> float:
        """
        Score a label for a query: prior times the product of conditionals.

        An unseen label or an unseen column value gives a score of exactly 0.
        A query with more features than the training data is rejected.
        """
        if not self._labels:
            raise RuntimeError("Model must be trained before making predictions")

        label = str(label)
        values = [discretize(value) for value in query]

        if len(values) > len(self._domains):
            raise ValueError(f"X ({', '.join(values)}) has more features than training data.")

        if label not in self._priors:
            logger.warning("Label %s does not exist in training label set", label)
            return 0.0

        if self.verbose:
            print(f"P(C={label}) = [{self._prior_desc[label]}]")

        probability = self._priors[label]
        for col, value in enumerate(values):
            if value not in self._domains[col]:
                logger.warning("X value %s for column #%d not in training set.",
                               format_decimal(float(value)), col + 1)
                return 0.0

            key = (value, col, label)
            if self.verbose:
                print(f"P(A{col}={format_decimal(float(value))} | C={label}) = "
                      f"{self._conditional_desc[key]}")

            probability *= self._conditionals[key]

        return probability

    def predict(self, query: Sequence[float], actual: Optional[str] = None) -> str:
        """
        Predict the most probable label.

        Args:
            query: Feature vector
            actual: Known label, only used for the verbose match/fail line

        Returns:
            Predicted label
        """
        if not self._labels:
            raise RuntimeError("Model must be trained before making predictions")

        scores = [(label, self.label_probability(query, label)) for label in self._labels]

        if self.verbose:
            for label, score in scores:
                print(f"NB(C={label}) = {score:.6f}")

        best_label, best_score = scores[0]
        for label, score in scores[1:]:
            if score > best_score:
                best_label, best_score = label, score

        if self.verbose and actual is not None:
            if best_label == str(actual):
                print(f'match: "{best_label}"')
            else:
                print(f'fail: got "{best_label}" != want "{actual}"')

        return best_label

    def predict_on_data(self, queries: Sequence[Sequence[float]],
                        actual_labels: Optional[Sequence[str]] = None) -> List[str]:
        """
        Predict labels for a batch of queries, preserving order.

        Args:
            queries: Feature vectors
            actual_labels: Known labels for the verbose trace

        Returns:
            Predicted labels
        """
        if actual_labels is not None and len(actual_labels) != len(queries):
            raise ValueError("queries and actual_labels must have the same length")

        predictions = []
        for index, query in enumerate(queries):
            actual = actual_labels[index] if actual_labels is not None else None
            predictions.append(self.predict(query, actual))
        return predictions
