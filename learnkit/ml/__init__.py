"""Learning algorithms implemented from scratch."""

from .distance import DistanceFunction
from .knn import KNNClassifier
from .naive_bayes import NaiveBayesClassifier
from .kmeans import KMeansEngine, Cluster, sanity_check, report

__all__ = [
    'DistanceFunction', 'KNNClassifier', 'NaiveBayesClassifier',
    'KMeansEngine', 'Cluster', 'sanity_check', 'report'
]
