# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import itertools

import pytest

from compgeo.errors import InvalidArgumentError
from compgeo.geometry import Point, Triangle, edge_key, orientation

"""Unit tests for canonically oriented triangles and their predicates."""

A, B, C = Point(0, 0), Point(4, 0), Point(2, 4)


def test_canonical_form_ignores_construction_order():
    triangles = [Triangle(*perm) for perm in itertools.permutations((A, B, C))]
    assert len(set(triangles)) == 1
    for t in triangles:
        assert t.points == (Point(0, 0), Point(2, 4), Point(4, 0))
        assert orientation(t.p1, t.p2, t.p3) < 0


def test_collinear_points_rejected():
    with pytest.raises(InvalidArgumentError, match="collinear"):
        Triangle(Point(0, 0), Point(1, 1), Point(2, 2))
    # also a ValueError for callers outside the kernel
    with pytest.raises(ValueError):
        Triangle(Point(0, 0), Point(0, 0), Point(3, 1))


def test_contains_is_boundary_inclusive():
    t = Triangle(A, B, C)
    assert t.contains(Point(2, 1))
    assert t.contains(Point(0, 0))
    assert t.contains(Point(2, 0))
    assert not t.contains(Point(10, 10))
    assert not t.contains(Point(-1, 0))


def test_points_on_edges():
    t = Triangle(A, B, C)
    assert t.contains_point_on_edge(Point(2, 0))
    assert not t.contains_point_on_edge(Point(2, 1))
    # the supporting line counts, not just the segment
    assert t.contains_point_on_edge(Point(8, 0))

    edges = t.edges_through(Point(2, 0))
    assert len(edges) == 1
    assert edge_key(*edges[0]) == (Point(0, 0), Point(4, 0))
    assert len(t.edges_through(Point(0, 0))) == 2


def test_in_circle_is_strict():
    t = Triangle(A, B, C)
    # circumcircle has center (2, 1.5) and radius 2.5
    assert t.contains_point_in_circle(Point(2, 1.5))
    assert t.contains_point_in_circle(Point(2, -0.9))
    assert not t.contains_point_in_circle(Point(2, -1))
    assert not t.contains_point_in_circle(Point(0, 0))
    assert not t.contains_point_in_circle(Point(10, 10))


def test_circumcenter():
    t = Triangle(A, B, C)
    center = t.circumcenter()
    assert center == pytest.approx((2.0, 1.5))
    assert t.circumcenter() is center


def test_opposite_and_shared_points():
    t1 = Triangle(Point(0, 0), Point(10, 0), Point(10, 10))
    t2 = Triangle(Point(0, 0), Point(10, 10), Point(0, 10))
    assert t1.opposite(Point(0, 0), Point(10, 10)) == Point(10, 0)
    assert t2.opposite(Point(10, 10), Point(0, 0)) == Point(0, 10)
    assert set(t1.shared_points(t2)) == {Point(0, 0), Point(10, 10)}

    with pytest.raises(InvalidArgumentError):
        t1.opposite(Point(0, 10), Point(10, 0))


def test_edges_form_a_cycle():
    t = Triangle(A, B, C)
    (a, b), (b2, c), (c2, a2) = t.edges
    assert b == b2 and c == c2 and a == a2
    assert t.has_vertex(Point(2, 4))
    assert not t.has_vertex(Point(2, 3))


def test_around_gives_counter_clockwise_pair():
    t = Triangle(A, B, C)
    for vertex in (A, B, C):
        y, x = t.around(vertex)
        assert {vertex, y, x} == {A, B, C}
        assert orientation(vertex, y, x) > 0
    assert t.around(A) == (B, C)

    with pytest.raises(InvalidArgumentError):
        t.around(Point(1, 1))
