"""Evaluation, loading and logging helpers."""

from .metrics import LabelMetrics, evaluate, precision, recall, sorted_metrics
from .io import read_dataset, read_text, parse_nodes, parse_centroids

__all__ = [
    'LabelMetrics', 'evaluate', 'precision', 'recall', 'sorted_metrics',
    'read_dataset', 'read_text', 'parse_nodes', 'parse_centroids'
]
