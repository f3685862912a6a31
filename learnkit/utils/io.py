"""
Loaders for labelled CSV files and K-Means input.
"""

import csv
import re
from typing import List, Sequence

from ..core.data import Dataset, Node

_SEPARATORS = re.compile(r'[,\s]+')


def _to_float(token: str, where: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"Invalid numeric value {token!r} at {where}") from None


def read_dataset(path: str) -> Dataset:
    """
    Read a CSV file whose last column is the label.

    Blank lines are skipped; every other column must be numeric.
    """
    features, labels = [], []

    with open(path, newline='', encoding='utf-8') as fh:
        for line_no, row in enumerate(csv.reader(fh), start=1):
            if not row or all(not cell.strip() for cell in row):
                continue
            *values, label = row
            features.append([_to_float(v.strip(), f"{path}:{line_no}") for v in values])
            labels.append(label.strip())

    return Dataset(features, labels)


def read_text(path: str) -> str:
    with open(path, encoding='utf-8') as fh:
        return fh.read()


def parse_nodes(text: str) -> List[Node]:
    """
    Parse K-Means data, one node per line.

    Commas count as whitespace, the last token is the node identity and the
    rest are its coordinates. Blank lines and lines starting with ``#`` are
    ignored.
    """
    nodes = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.replace(',', ' ').strip()
        if not line or line.startswith('#'):
            continue

        *values, identity = _SEPARATORS.split(line)
        nodes.append(Node(identity, [_to_float(v, f"line {line_no}") for v in values]))

    return nodes


def parse_centroids(args: Sequence[str]) -> List[Node]:
    """Turn coordinate strings such as ``"0,0"`` into centroids C1, C2, ..."""
    centroids = []

    for index, arg in enumerate(args, start=1):
        tokens = [t for t in _SEPARATORS.split(arg.strip()) if t]
        if not tokens:
            raise ValueError(f"Centroid argument {index} is empty")
        centroids.append(Node(f"C{index}", [_to_float(t, f"centroid {index}") for t in tokens]))

    return centroids
