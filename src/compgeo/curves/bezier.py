# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Bezier curves and adaptive polyline sampling.

A curve of degree ``n`` over control points ``P_0 .. P_n`` is evaluated with
Bernstein weights::

    B(t) = sum_{i=0}^{n} C(n, i) * t^i * (1 - t)^(n - i) * P_i,   t in [0, 1]

Fixed-step sampling either returns every point or, when consecutive points
are farther apart than an allowed distance, reports that the range needs
refinement. The adaptive sampler bisects such ranges until every piece
passes.
"""

from typing import Iterable, List, Optional

import numpy as np
import structlog

from ..config.settings import settings
from ..errors import ComputationFailedError, InvalidArgumentError
from ..geometry.spatial import Point, as_points, distance
from ..utils.helpers import ProgressMonitor, check_cancelled, report_progress
from .binomial import Binomial

logger = structlog.get_logger()


class BezierCurve:
    """
    Immutable Bezier curve.

    :param control_points: Ordered (N, 2) array-like, N >= 2. Coordinates
        are canvas coordinates and must be non-negative when evaluated.
    :type control_points: Iterable
    :raises InvalidArgumentError: If fewer than two control points are given.
    """

    def __init__(self, control_points: Iterable):
        points = as_points(control_points)
        if len(points) < 2:
            raise InvalidArgumentError(
                f"Must have at least two control points, got {len(points)}")

        self.control_points = tuple(points)
        self.degree = len(points) - 1
        self._binomial = Binomial()

    def point_at(self, t: float) -> Point:
        """
        Evaluate B(t).

        :raises InvalidArgumentError: On a negative weight or control coordinate.
        """
        n = self.degree
        x = 0.0
        y = 0.0
        for i, p in enumerate(self.control_points):
            scale = self._binomial.of(n, i) * t ** i * (1 - t) ** (n - i)
            if scale < 0 or p.x < 0 or p.y < 0:
                raise InvalidArgumentError(
                    f"Invalid scale or point [x,y]: {scale}, {p.x}, {p.y}")
            x += scale * p.x
            y += scale * p.y
        return Point(x, y)

    def points(self, step_count: int) -> List[Point]:
        """``step_count + 1`` evenly spaced points over the whole curve."""
        return self.get_points(0.0, 1.0, step_count)

    def get_points(self, t_min: float, t_max: float, step_count: int,
                   max_point_difference: Optional[float] = None) -> Optional[List[Point]]:
        """
        Sample ``step_count + 1`` evenly spaced points over [t_min, t_max].

        :param t_min: Starting parameter; 0 for a complete curve.
        :type t_min: float
        :param t_max: Ending parameter; 1 for a complete curve.
        :type t_max: float
        :param step_count: Number of steps between t_min and t_max.
        :type step_count: int
        :param max_point_difference: Maximum distance allowed between
            consecutive points, or None for no bound.
        :type max_point_difference: Optional[float]
        :return: The sampled points, or None if two consecutive points are
            farther apart than ``max_point_difference``.
        :rtype: Optional[List[Point]]
        :raises InvalidArgumentError: On invalid bounds or step count.
        """
        validate_parametric_values(t_min, t_max, step_count)
        step_count = int(step_count)
        if max_point_difference is not None and max_point_difference < 0:
            raise InvalidArgumentError(
                f"max_point_difference must be >= 0, got {max_point_difference}")

        if step_count == 0:
            return [self.point_at(t_min)]

        # linspace returns t_min and t_max exactly, so adjacent ranges meet
        # at an identical point
        points: List[Point] = []
        for t in np.linspace(t_min, t_max, step_count + 1):
            point = self.point_at(float(t))
            if (max_point_difference is not None and points
                    and distance(points[-1], point) > max_point_difference):
                return None
            points.append(point)
        return points

    def sample_adaptive(self,
                        max_point_difference: Optional[float] = None,
                        steps_per_sample: Optional[int] = None,
                        monitor: Optional[ProgressMonitor] = None,
                        min_parametric_range: Optional[float] = None) -> List[Point]:
        """
        Polyline over the whole curve with bounded point spacing.

        Starts from [0, 1]. A range whose fixed-step sample breaks the
        distance bound is bisected and each half sampled in turn, carrying
        half of the parent's progress weight. Halves are processed from an
        explicit stack in parameter order; the point shared by neighbouring
        ranges is kept once.

        :param max_point_difference: Distance bound (default from settings).
        :type max_point_difference: Optional[float]
        :param steps_per_sample: Steps per range (default from settings).
        :type steps_per_sample: Optional[int]
        :param monitor: Progress and cancellation monitor.
        :type monitor: Optional[ProgressMonitor]
        :param min_parametric_range: Narrowest range that may still be split
            (default from settings).
        :type min_parametric_range: Optional[float]
        :return: Ordered points from B(0) to B(1).
        :rtype: List[Point]
        :raises InvalidArgumentError: If a bound or the step count is not positive.
        :raises ComputationFailedError: If a range narrower than the floor
            still breaks the bound.
        :raises ComputationCancelled: If the monitor is cancelled.
        """
        max_diff = settings.bezier_max_point_difference if max_point_difference is None else max_point_difference
        steps = settings.bezier_steps_per_sample if steps_per_sample is None else steps_per_sample
        floor = settings.bezier_min_parametric_range if min_parametric_range is None else min_parametric_range
        if max_diff <= 0:
            raise InvalidArgumentError(f"max_point_difference must be > 0, got {max_diff}")
        if int(steps) != steps or steps < 1:
            raise InvalidArgumentError(f"steps_per_sample must be a positive integer, got {steps}")
        if floor <= 0:
            raise InvalidArgumentError(f"min_parametric_range must be > 0, got {floor}")

        result: List[Point] = []
        stack = [(0.0, 1.0, 1.0)]
        splits = 0

        while stack:
            check_cancelled(monitor)
            t_min, t_max, weight = stack.pop()

            points = self.get_points(t_min, t_max, steps, max_diff)
            if points is None:
                if t_max - t_min < floor:
                    raise ComputationFailedError(
                        f"Range [{t_min}, {t_max}] still exceeds {max_diff} below the "
                        f"parametric floor {floor}")
                t_mid = (t_min + t_max) / 2.0
                stack.append((t_mid, t_max, weight / 2.0))
                stack.append((t_min, t_mid, weight / 2.0))
                splits += 1
                logger.debug("Bezier range refined", t_min=t_min, t_max=t_max)
                continue

            if result:
                if result[-1] != points[0]:
                    raise ComputationFailedError(
                        f"Adjacent ranges disagree at t={t_min}: {result[-1]} != {points[0]}")
                points = points[1:]
            result.extend(points)
            report_progress(monitor, weight)

        logger.info("Bezier curve sampled", degree=self.degree,
                    points=len(result), splits=splits)
        return result

    def __repr__(self) -> str:
        return f"BezierCurve(control_points={list(self.control_points)})"


def validate_parametric_values(t_min: float, t_max: float, step_count: int) -> None:
    """
    Check ``0 <= t_min <= t_max <= 1`` and ``step_count >= 0``.

    :raises InvalidArgumentError: On any violation.
    """
    if t_min < 0:
        raise InvalidArgumentError(f"t_min must be >= 0, got {t_min}")
    if t_max > 1:
        raise InvalidArgumentError(f"t_max must be <= 1, got {t_max}")
    if t_min > t_max:
        raise InvalidArgumentError(f"t_min must not exceed t_max, got {t_min} > {t_max}")
    if int(step_count) != step_count or step_count < 0:
        raise InvalidArgumentError(f"step_count must be a non-negative integer, got {step_count}")


def sample_bezier(control_points: Iterable,
                  max_point_difference: Optional[float] = None,
                  monitor: Optional[ProgressMonitor] = None) -> List[Point]:
    """
    Adaptive polyline of the Bezier curve over ``control_points``.

    :param control_points: Ordered (N, 2) array-like, N >= 2.
    :type control_points: Iterable
    :param max_point_difference: Distance bound (default from settings).
    :type max_point_difference: Optional[float]
    :param monitor: Progress and cancellation monitor.
    :type monitor: Optional[ProgressMonitor]
    :return: Ordered polyline points.
    :rtype: List[Point]
    """
    return BezierCurve(control_points).sample_adaptive(
        max_point_difference=max_point_difference, monitor=monitor)
