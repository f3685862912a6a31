import pytest

from learnkit.utils.metrics import LabelMetrics, evaluate, precision, recall, sorted_metrics


def test_example_counts():
    metrics = evaluate(["A", "B", "A"], ["A", "A", "B"])
    assert metrics == {
        "A": LabelMetrics(correct=1, predicted=2, true_count=2),
        "B": LabelMetrics(correct=0, predicted=1, true_count=1),
    }


def test_totals_equal_sequence_length():
    actual = ["a", "b", "c", "a", "a", "b"]
    predicted = ["a", "c", "c", "b", "d", "b"]
    metrics = evaluate(actual, predicted)

    assert sum(m.true_count for m in metrics.values()) == len(actual)
    assert sum(m.predicted for m in metrics.values()) == len(actual)
    assert sum(m.correct for m in metrics.values()) == 3


def test_label_only_predicted():
    metrics = evaluate(["a"], ["z"])
    assert metrics["z"] == LabelMetrics(correct=0, predicted=1, true_count=0)
    assert metrics["a"] == LabelMetrics(correct=0, predicted=0, true_count=1)


def test_empty_sequences():
    assert evaluate([], []) == {}


def test_length_mismatch():
    with pytest.raises(ValueError):
        evaluate(["a", "b"], ["a"])


def test_precision_and_recall():
    metrics = evaluate(["A", "B", "A"], ["A", "A", "B"])
    assert precision(metrics["A"]) == pytest.approx(0.5)
    assert recall(metrics["A"]) == pytest.approx(0.5)
    assert precision(metrics["B"]) == 0.0


def test_zero_denominators_return_none():
    assert precision(LabelMetrics(0, 0, 3)) is None
    assert recall(LabelMetrics(0, 2, 0)) is None


def test_metrics_are_immutable():
    with pytest.raises(AttributeError):
        LabelMetrics().correct = 3


def test_sorted_metrics():
    metrics = evaluate(["b", "a", "c"], ["b", "a", "c"])
    assert [label for label, _ in sorted_metrics(metrics)] == ["a", "b", "c"]
