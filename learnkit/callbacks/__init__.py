"""Callbacks for the K-Means engine."""

from .early_stopping import Callback, EarlyStopping, MaxIterations

__all__ = ['Callback', 'EarlyStopping', 'MaxIterations']
