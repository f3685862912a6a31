"""
Command line driver: load data, run one algorithm, print the results.

    learnkit -train train.csv -test test.csv -k 3
    learnkit -train train.csv -test test.csv -c 1 -v
    learnkit -train points.txt -d e2 0,0 10,10
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from ..callbacks.early_stopping import MaxIterations
from ..ml.kmeans import KMeansEngine, report
from ..ml.knn import KNNClassifier
from ..ml.naive_bayes import NaiveBayesClassifier
from ..utils.io import parse_centroids, parse_nodes, read_dataset, read_text
from ..utils.log import setup_logging
from ..utils.metrics import LabelMetrics, evaluate, sorted_metrics
from .config import Algorithm, RunConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='learnkit',
        description='KNN, Naive Bayes and K-Means from first principles.')
    parser.add_argument('-train', help='training CSV, or K-Means data file')
    parser.add_argument('-test', help='testing CSV')
    parser.add_argument('-k', type=int, help='number of nearest neighbours (KNN)')
    parser.add_argument('-c', type=float, help='Laplacian correction (Naive Bayes)')
    parser.add_argument('-d', dest='distance', choices=['manh', 'e2'],
                        help='distance function, selects K-Means')
    parser.add_argument('-v', '-verbose', dest='verbose', action='store_true',
                        help='print per-prediction details')
    parser.add_argument('--max-iter', type=int, help='stop K-Means after this many iterations')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--json-logs', action='store_true', help='emit log records as JSON')
    parser.add_argument('centroids', nargs='*', metavar='CENTROID',
                        help='initial K-Means centroid, e.g. 0,0')
    return parser


_VALUE_OPTIONS = {'-train', '-test', '-k', '-c', '-d', '--max-iter', '--log-level'}


def split_centroids(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Separate centroid arguments from the rest of the command line.

    Any token containing a comma is a centroid, unless it is the value of an
    option. This lets centroids such as ``-1,-1`` through, which argparse
    would otherwise read as an unknown option.

    Returns:
        (remaining arguments, centroids) in their original order
    """
    remaining, centroids = [], []
    previous = None
    for token in argv:
        if ',' in token and previous not in _VALUE_OPTIONS:
            centroids.append(token)
        else:
            remaining.append(token)
        previous = token
    return remaining, centroids


def parse_config(argv: Optional[Sequence[str]] = None) -> RunConfig:
    if argv is None:
        argv = sys.argv[1:]
    argv, centroids = split_centroids(argv)
    args = build_parser().parse_args(argv)
    return RunConfig(
        train=args.train,
        test=args.test,
        k=args.k,
        c=args.c,
        distance=args.distance,
        centroids=centroids + list(args.centroids),
        verbose=args.verbose,
        max_iter=args.max_iter,
        log_level=args.log_level,
        json_logs=args.json_logs,
    )


def format_metrics(metrics: Dict[str, LabelMetrics]) -> List[str]:
    return [f"Label={label} Precision={m.correct}/{m.predicted} Recall={m.correct}/{m.true_count}"
            for label, m in sorted_metrics(metrics)]


def run_knn(config: RunConfig) -> List[str]:
    train, test = read_dataset(config.train), read_dataset(config.test)
    knn = KNNClassifier(config.k).train(train.features, train.labels)
    predictions = knn.predict_on_data(test.features)

    lines = []
    if config.verbose:
        lines.extend(f"want={want} got={got}" for want, got in zip(test.labels, predictions))
    lines.extend(format_metrics(evaluate(test.labels, predictions)))
    return lines


def run_naive_bayes(config: RunConfig) -> List[str]:
    train, test = read_dataset(config.train), read_dataset(config.test)
    model = NaiveBayesClassifier(config.c, verbose=config.verbose).train(train.features, train.labels)
    predictions = model.predict_on_data(test.features, test.labels)
    return format_metrics(evaluate(test.labels, predictions))


def run_kmeans(config: RunConfig) -> List[str]:
    nodes = parse_nodes(read_text(config.train))
    centroids = parse_centroids(config.centroids)
    engine = KMeansEngine(nodes, centroids, config.distance)

    callbacks = []
    if config.max_iter is not None:
        callbacks.append(MaxIterations(config.max_iter, verbose=int(config.verbose)))

    return report(engine.run(callbacks))


RUNNERS = {
    Algorithm.KNN: run_knn,
    Algorithm.NAIVE_BAYES: run_naive_bayes,
    Algorithm.KMEANS: run_kmeans,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_config(argv)
    setup_logging(config.log_level, json_format=config.json_logs)

    try:
        algorithm = config.validate()
        lines = RUNNERS[algorithm](config)
    except OSError as e:
        logger.error("Input file could not be read: %s", e)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
