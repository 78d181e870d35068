# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np
import pytest

from compgeo.curves import BezierCurve, Binomial, sample_bezier, validate_parametric_values
from compgeo.errors import ComputationCancelled, ComputationFailedError, InvalidArgumentError
from compgeo.geometry import Point, distance
from compgeo.utils import ProgressMonitor

"""Unit tests for Bezier evaluation, fixed-step and adaptive sampling."""

ARCH = [(0, 0), (5, 10), (10, 0)]


def max_gap(points):
    return max(distance(a, b) for a, b in zip(points, points[1:]))


def test_quadratic_three_points():
    curve = BezierCurve(ARCH)
    expected = [Point(0, 0), Point(5, 5), Point(10, 0)]
    assert curve.get_points(0, 1, 2) == expected
    assert curve.points(2) == expected
    assert curve.degree == 2


def test_endpoints_are_control_points():
    curve = BezierCurve([(1, 2), (3, 9), (8, 7), (12, 1)])
    assert curve.point_at(0.0) == Point(1, 2)
    assert curve.point_at(1.0) == Point(12, 1)


def test_linear_curve_is_the_segment():
    curve = BezierCurve([(0, 0), (10, 20)])
    pts = curve.get_points(0, 1, 4)
    assert [p.x for p in pts] == pytest.approx([0, 2.5, 5, 7.5, 10])
    assert [p.y for p in pts] == pytest.approx([0, 5, 10, 15, 20])


def test_zero_steps_returns_single_point():
    curve = BezierCurve(ARCH)
    assert curve.get_points(0.5, 0.5, 0) == [Point(5, 5)]
    assert curve.get_points(0.25, 0.75, 0) == [curve.point_at(0.25)]


def test_distance_bound_rejects_coarse_sampling():
    curve = BezierCurve(ARCH)
    assert curve.get_points(0, 1, 2, max_point_difference=1.0) is None

    fine = curve.get_points(0, 1, 100, max_point_difference=1.0)
    assert len(fine) == 101
    assert max_gap(fine) <= 1.0


@pytest.mark.parametrize("t_min, t_max, steps", [
    (-0.1, 1.0, 2),
    (0.0, 1.1, 2),
    (0.8, 0.2, 2),
    (0.0, 1.0, -1),
    (0.0, 1.0, 1.5),
])
def test_invalid_parametric_values(t_min, t_max, steps):
    with pytest.raises(InvalidArgumentError):
        validate_parametric_values(t_min, t_max, steps)
    with pytest.raises(InvalidArgumentError):
        BezierCurve(ARCH).get_points(t_min, t_max, steps)


def test_negative_max_point_difference():
    with pytest.raises(InvalidArgumentError):
        BezierCurve(ARCH).get_points(0, 1, 2, max_point_difference=-1)


def test_invalid_control_points():
    with pytest.raises(InvalidArgumentError):
        BezierCurve([(1, 1)])
    with pytest.raises(InvalidArgumentError):
        BezierCurve([])
    with pytest.raises(InvalidArgumentError, match="Invalid scale or point"):
        BezierCurve([(-1, 0), (5, 5)]).point_at(0.5)


def test_evaluation_is_deterministic():
    a = BezierCurve([(0.1, 0.3), (7.7, 9.1), (3.3, 0.2), (9.9, 4.4)])
    b = BezierCurve([(0.1, 0.3), (7.7, 9.1), (3.3, 0.2), (9.9, 4.4)])
    assert a.get_points(0.0, 1.0, 37) == b.get_points(0.0, 1.0, 37)
    assert a.sample_adaptive(0.2) == b.sample_adaptive(0.2)


def test_adaptive_sampling_respects_bound():
    curve = BezierCurve(ARCH)
    pts = curve.sample_adaptive(max_point_difference=0.5)
    assert pts[0] == Point(0, 0)
    assert pts[-1] == Point(10, 0)
    assert max_gap(pts) <= 0.5
    # x(t) = 10t for this curve, so points come out in parameter order
    xs = np.array([p.x for p in pts])
    assert np.all(np.diff(xs) > 0)


def test_adaptive_sampling_without_refinement():
    pts = BezierCurve(ARCH).sample_adaptive(max_point_difference=100.0)
    assert len(pts) == 11


def test_adaptive_sampling_defaults():
    pts = sample_bezier(ARCH)
    assert max_gap(pts) <= 0.5
    assert pts == BezierCurve(ARCH).sample_adaptive(0.5)


def test_adaptive_sampling_gives_up_below_floor():
    curve = BezierCurve(ARCH)
    with pytest.raises(ComputationFailedError):
        curve.sample_adaptive(max_point_difference=1e-6, min_parametric_range=0.5)
    with pytest.raises(InvalidArgumentError):
        curve.sample_adaptive(max_point_difference=0)


@pytest.mark.parametrize("options", [
    {"steps_per_sample": 0},
    {"steps_per_sample": 2.5},
    {"min_parametric_range": 0},
    {"min_parametric_range": -1e-3},
])
def test_adaptive_sampling_rejects_explicit_zero_or_invalid_options(options):
    with pytest.raises(InvalidArgumentError):
        BezierCurve(ARCH).sample_adaptive(0.5, **options)


def test_adaptive_progress_and_cancellation():
    increments = []
    monitor = ProgressMonitor(callback=increments.append)
    BezierCurve(ARCH).sample_adaptive(0.5, monitor=monitor)
    assert monitor.progress == pytest.approx(1.0)
    assert len(increments) > 1

    cancelled = ProgressMonitor()
    cancelled.cancel()
    with pytest.raises(ComputationCancelled):
        sample_bezier(ARCH, monitor=cancelled)


def test_binomial_cache():
    binomial = Binomial()
    assert binomial.of(4, 2) == 6
    assert binomial.row(4) == (1, 4, 6, 4, 1)
    assert len(binomial) == 5
    assert binomial.of(30, 15) == 155117520
    with pytest.raises(InvalidArgumentError):
        binomial.of(3, 4)
    with pytest.raises(InvalidArgumentError):
        binomial.of(-1, 0)


def test_each_curve_owns_its_cache():
    a = BezierCurve(ARCH)
    b = BezierCurve(ARCH)
    a.points(4)
    assert len(a._binomial) == 3
    assert len(b._binomial) == 0
