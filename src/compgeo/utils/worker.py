# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Background execution of kernel jobs.

A job is a callable taking a :class:`ProgressMonitor` and returning a
result. :class:`KernelWorker` runs it on an executor thread, forwards
progress increments, and settles on one of three outcomes: completed (the
completion action receives the result), cancelled, or failed (a kernel
error, kept on the outcome).
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, Optional, TypeVar

import structlog

from ..errors import ComputationCancelled, GeometryError
from .helpers import ProgressCallback, ProgressMonitor

logger = structlog.get_logger()

T = TypeVar('T')
Job = Callable[[ProgressMonitor], T]


class TaskStatus(str, Enum):
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
    FAILED = 'failed'


@dataclass
class TaskOutcome(Generic[T]):
    """Terminal state of a worker."""
    status: TaskStatus
    value: Optional[T] = None
    error: Optional[GeometryError] = None


class KernelWorker(Generic[T]):
    """
    Runs one kernel job off the calling thread.

    :param job: Callable receiving the worker's monitor.
    :type job: Job
    :param completed_action: Called with the result on successful completion.
    :type completed_action: Optional[Callable[[T], None]]
    :param progress_action: Called with each progress increment.
    :type progress_action: Optional[ProgressCallback]
    :param description: Label used in log entries.
    :type description: str
    """

    def __init__(self, job: Job,
                 completed_action: Optional[Callable[[T], None]] = None,
                 progress_action: Optional[ProgressCallback] = None,
                 description: str = 'kernel job'):
        self._job = job
        self._completed_action = completed_action
        self.description = description
        self.monitor = ProgressMonitor(callback=progress_action)
        self._future: Optional[Future] = None

    @property
    def progress(self) -> float:
        return self.monitor.progress

    def start(self, executor: Optional[Executor] = None) -> 'Future[TaskOutcome[T]]':
        """
        Submit the job.

        :param executor: Executor to run on; a private single-thread
            executor is used when omitted.
        :type executor: Optional[Executor]
        :return: Future resolving to the :class:`TaskOutcome`.
        :rtype: Future
        """
        if self._future is not None:
            raise RuntimeError(f"{self.description} has already been started")

        if executor is None:
            own = ThreadPoolExecutor(max_workers=1, thread_name_prefix='compgeo')
            self._future = own.submit(self._run)
            own.shutdown(wait=False)
        else:
            self._future = executor.submit(self._run)
        return self._future

    def cancel(self) -> None:
        """Request cooperative cancellation."""
        self.monitor.cancel()

    def result(self, timeout: Optional[float] = None) -> TaskOutcome[T]:
        """Block until the job settles and return its outcome."""
        if self._future is None:
            raise RuntimeError(f"{self.description} has not been started")
        return self._future.result(timeout=timeout)

    def _run(self) -> TaskOutcome[T]:
        logger.debug("Worker started", description=self.description)
        try:
            value = self._job(self.monitor)
        except ComputationCancelled:
            logger.info("Worker cancelled", description=self.description)
            return TaskOutcome(TaskStatus.CANCELLED)
        except GeometryError as exc:
            logger.warning("Worker failed", description=self.description, error=str(exc))
            return TaskOutcome(TaskStatus.FAILED, error=exc)

        if self._completed_action is not None:
            self._completed_action(value)
        logger.debug("Worker completed", description=self.description)
        return TaskOutcome(TaskStatus.COMPLETED, value=value)


def triangulation_job(points: Iterable, width: Optional[float] = None,
                      height: Optional[float] = None) -> Job:
    """Job building a Delaunay triangulation."""
    from ..tessellation import triangulate

    return lambda monitor: triangulate(points, width=width, height=height, monitor=monitor)


def voronoi_job(points: Iterable, width: float, height: float) -> Job:
    """Job computing clipped Voronoi cells."""
    from ..tessellation import voronoi_cells

    return lambda monitor: voronoi_cells(points, width, height, monitor=monitor)


def bezier_job(control_points: Iterable,
               max_point_difference: Optional[float] = None) -> Job:
    """Job sampling a Bezier curve adaptively."""
    from ..curves import sample_bezier

    return lambda monitor: sample_bezier(
        control_points, max_point_difference=max_point_difference, monitor=monitor)
