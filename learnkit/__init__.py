"""
learnkit - classic learning algorithms implemented from first principles.

This package provides:
- K-nearest-neighbours classification with distance-weighted voting
- Naive Bayes classification with Laplace smoothing
- K-means clustering with Manhattan or squared Euclidean distance
- Per-label evaluation counters for precision and recall
"""

__version__ = "0.1.0"

from learnkit.core.data import DataPoint, Node, Dataset
from learnkit.ml.distance import DistanceFunction
from learnkit.ml.knn import KNNClassifier
from learnkit.ml.naive_bayes import NaiveBayesClassifier
from learnkit.ml.kmeans import KMeansEngine, Cluster, sanity_check
from learnkit.utils.metrics import LabelMetrics, evaluate, precision, recall
from learnkit.callbacks.early_stopping import EarlyStopping, MaxIterations

__all__ = [
    # Data
    'DataPoint', 'Node', 'Dataset',

    # ML
    'DistanceFunction', 'KNNClassifier', 'NaiveBayesClassifier',
    'KMeansEngine', 'Cluster', 'sanity_check',

    # Evaluation
    'LabelMetrics', 'evaluate', 'precision', 'recall',

    # Callbacks
    'EarlyStopping', 'MaxIterations',
]
