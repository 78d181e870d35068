# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Progress and cancellation plumbing between the kernel and its callers.

The kernel reports finished units of work through :meth:`ProgressMonitor.add`
and polls :meth:`ProgressMonitor.check_cancelled` between them. Callers own
the monitor: they read the accumulated fraction, receive each increment
through a callback, and request cancellation from any thread.
"""

import threading
from typing import Callable, Optional

from ..errors import ComputationCancelled

ProgressCallback = Callable[[float], None]


class ProgressMonitor:
    """
    Accumulates fractional progress and carries a cancellation flag.

    :param callback: Called with each increment as it is added.
    :type callback: Optional[ProgressCallback]
    """

    def __init__(self, callback: Optional[ProgressCallback] = None):
        self._callback = callback
        self._cancel_event = threading.Event()
        self._lock = threading.Lock()
        self._progress = 0.0

    @property
    def progress(self) -> float:
        """Cumulative progress, 1.0 once a computation completes."""
        with self._lock:
            return self._progress

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def add(self, amount: float) -> None:
        """Record ``amount`` of additional progress."""
        with self._lock:
            self._progress += amount
        if self._callback is not None:
            self._callback(amount)

    def cancel(self) -> None:
        """Ask the running computation to stop at its next check."""
        self._cancel_event.set()

    def check_cancelled(self) -> None:
        """
        Raise if cancellation was requested.

        :raises ComputationCancelled: If :meth:`cancel` has been called.
        """
        if self._cancel_event.is_set():
            raise ComputationCancelled("Computation cancelled")

    def scaled(self, weight: float) -> 'ProgressMonitor':
        """
        Child monitor whose progress counts ``weight`` times toward this one.

        The child shares this monitor's cancellation flag, so a job made of
        several kernel calls can split its progress between them.
        """
        child = ProgressMonitor(callback=lambda amount: self.add(amount * weight))
        child._cancel_event = self._cancel_event
        return child


def report_progress(monitor: Optional[ProgressMonitor], amount: float) -> None:
    """Add progress to an optional monitor."""
    if monitor is not None:
        monitor.add(amount)


def check_cancelled(monitor: Optional[ProgressMonitor]) -> None:
    """Poll an optional monitor for cancellation."""
    if monitor is not None:
        monitor.check_cancelled()


def print_progress(fraction: float, prefix: str = 'Progress') -> None:
    """
    Print a simple progress indicator.

    :param fraction: Completed fraction in [0, 1].
    :type fraction: float
    :param prefix: Prefix text for progress message.
    :type prefix: str
    """
    percentage = min(max(fraction, 0.0), 1.0) * 100
    print(f"{prefix}: {percentage:.1f}%")
