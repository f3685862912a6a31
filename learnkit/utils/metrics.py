"""
Per-label evaluation counters for classifier output.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class LabelMetrics:
    """Counts gathered for one label."""
    correct: int = 0
    predicted: int = 0
    true_count: int = 0


def evaluate(actual: Sequence[str], predicted: Sequence[str]) -> Dict[str, LabelMetrics]:
    """
    Count correct, predicted and true occurrences per label.

    The three counters are independent: a wrong prediction adds to the true
    count of the actual label and to the predicted count of the predicted
    label. No ratios are computed here, see ``precision`` and ``recall``.

    Args:
        actual: True labels
        predicted: Predicted labels, paired with ``actual`` by position

    Returns:
        Mapping from label to its LabelMetrics
    """
    if len(actual) != len(predicted):
        raise ValueError(f"actual and predicted must have the same length. "
                         f"Got actual: {len(actual)}, predicted: {len(predicted)}")

    counts: Dict[str, List[int]] = {}

    def bucket(label: str) -> List[int]:
        return counts.setdefault(label, [0, 0, 0])

    for want, got in zip(actual, predicted):
        bucket(want)[2] += 1
        if want == got:
            bucket(want)[0] += 1
        bucket(got)[1] += 1

    return {label: LabelMetrics(*values) for label, values in counts.items()}


def precision(metrics: LabelMetrics) -> Optional[float]:
    """correct / predicted, or None when the label was never predicted."""
    if metrics.predicted == 0:
        return None
    return metrics.correct / metrics.predicted


def recall(metrics: LabelMetrics) -> Optional[float]:
    """correct / true_count, or None when the label never occurs."""
    if metrics.true_count == 0:
        return None
    return metrics.correct / metrics.true_count


def sorted_metrics(metrics: Dict[str, LabelMetrics]) -> List[Tuple[str, LabelMetrics]]:
    return sorted(metrics.items())
