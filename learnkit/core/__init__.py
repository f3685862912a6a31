"""Data holders for learnkit."""

from .data import DataPoint, Node, Dataset

__all__ = ['DataPoint', 'Node', 'Dataset']
