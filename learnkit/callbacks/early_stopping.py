"""
Stopping callbacks for the K-Means engine.
The engine has no built-in iteration cap; these callbacks add one explicitly.
"""

import numpy as np
from typing import Optional, Dict, Any


class Callback:
    """
    Base class for engine callbacks.

    Set ``stop_training`` to True from any hook to end the loop after the
    current iteration.
    """

    def __init__(self, verbose: int = 0):
        self.verbose = verbose
        self.stop_training = False
        self.stopped_iteration = None

    def on_train_begin(self, logs: Optional[Dict[str, Any]] = None):
        """Called before the first iteration."""
        self.stop_training = False
        self.stopped_iteration = None

    def on_iteration_end(self, iteration: int, logs: Optional[Dict[str, Any]] = None):
        """Called after every assign/update pass."""

    def on_train_end(self, logs: Optional[Dict[str, Any]] = None):
        """Called once the loop has ended."""
        logs = logs or {}
        if self.stopped_iteration is not None and self.verbose > 0 and not logs.get('converged'):
            print(f"Iteration {self.stopped_iteration}: {type(self).__name__} stopped the run")


class MaxIterations(Callback):
    """Stop after a fixed number of iterations."""

    def __init__(self, max_iter: int, verbose: int = 0):
        super().__init__(verbose)

        if max_iter <= 0:
            raise ValueError("max_iter must be positive")

        self.max_iter = max_iter

    def on_iteration_end(self, iteration: int, logs: Optional[Dict[str, Any]] = None):
        if iteration >= self.max_iter:
            self.stopped_iteration = iteration
            self.stop_training = True


class EarlyStopping(Callback):
    """
    Stop when a monitored quantity has stopped improving.

    With the default ``monitor='shift'`` this ends runs whose centroids keep
    oscillating instead of settling.
    """

    def __init__(self, monitor: str = 'shift', min_delta: float = 0,
                 patience: int = 0, verbose: int = 0, mode: str = 'min'):
        """
        Initialize EarlyStopping callback.

        Args:
            monitor: Key of the iteration logs to watch
            min_delta: Minimum change in the monitored quantity to qualify as an improvement
            patience: Number of iterations with no improvement after which the run is stopped
            verbose: Verbosity mode (0 = silent, 1 = update messages)
            mode: One of {'min', 'max'}. In 'min' mode the run stops when the
                  quantity has stopped decreasing; in 'max' mode when it has
                  stopped increasing
        """
        super().__init__(verbose)
        self.monitor = monitor
        self.min_delta = abs(min_delta)
        self.patience = patience

        if mode not in ['min', 'max']:
            raise ValueError(f"Mode {mode} is unknown, please use one of 'min', 'max'")

        if mode == 'min':
            self.monitor_op = np.less
            self.min_delta *= -1
        else:
            self.monitor_op = np.greater

        self.best = None
        self.wait = 0

    def on_train_begin(self, logs: Optional[Dict[str, Any]] = None):
        super().on_train_begin(logs)
        self.wait = 0
        self.best = np.inf if self.monitor_op == np.less else -np.inf

    def on_iteration_end(self, iteration: int, logs: Optional[Dict[str, Any]] = None):
        logs = logs or {}
        current = logs.get(self.monitor)

        if current is None:
            if self.verbose > 0:
                print(f"Early stopping conditioned on `{self.monitor}` "
                      f"which is not available. Available values are: {list(logs.keys())}")
            return

        if self.monitor_op(current - self.min_delta, self.best):
            self.best = current
            self.wait = 0
        else:
            self.wait += 1
            if self.wait >= self.patience:
                self.stopped_iteration = iteration
                self.stop_training = True
