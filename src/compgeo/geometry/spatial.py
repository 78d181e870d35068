# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point type, orientation predicate and nearest-site queries.

Every topological decision in the kernel rests on :func:`orientation`. The
triangle and triangulation code call it through
:func:`canonical_orientation` so that the same three points always produce
the same floating-point value, whatever order they are passed in.
"""

import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np
from scipy.spatial import KDTree

from ..errors import InvalidArgumentError


class Point(NamedTuple):
    """
    Immutable planar point.

    Ordering is lexicographic (x, then y) and equality is exact coordinate
    equality, both inherited from the tuple.
    """
    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


def as_point(value) -> Point:
    """
    Coerce an ``(x, y)`` pair into a :class:`Point`.

    :param value: Point, tuple, list or length-2 array.
    :return: Point with float coordinates.
    :rtype: Point
    :raises InvalidArgumentError: If the value is not a finite coordinate pair.
    """
    if isinstance(value, Point):
        return value
    return as_points([value])[0]


def as_points(points: Iterable) -> List[Point]:
    """
    Coerce a collection of coordinate pairs into a list of Points.

    :param points: (N, 2) array-like of coordinates.
    :type points: Iterable
    :return: List of Points in input order.
    :rtype: List[Point]
    :raises InvalidArgumentError: If the data is not (N, 2) or holds non-finite values.
    """
    try:
        arr = np.asarray(list(points), dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Points must be numeric (x, y) pairs: {exc}") from exc

    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgumentError(f"Points must have shape (N, 2), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError("Point coordinates must be finite")

    return [Point(float(x), float(y)) for x, y in arr]


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """
    Stack Points into an (N, 2) float array.

    :param points: Points to convert.
    :type points: Sequence[Point]
    :return: (N, 2) array of coordinates.
    :rtype: np.ndarray
    """
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def orientation(a: Point, b: Point, c: Point) -> float:
    """
    Signed orientation determinant of the triple (a, b, c).

    ``(b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)``. Zero means the
    points are collinear; the sign gives the turn direction. The value is
    twice the signed area of the triangle.

    :return: Determinant value.
    :rtype: float
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def canonical_orientation(a: Point, b: Point, c: Point) -> float:
    """
    :func:`orientation` evaluated on the Point-sorted triple.

    The determinant is always computed with the operands in sorted order and
    its sign corrected for the permutation, so two callers asking about the
    same three points (for example two triangles sharing an edge) cannot get
    contradicting answers from rounding.

    :return: Determinant with the sign of ``orientation(a, b, c)``.
    :rtype: float
    """
    sign = 1.0
    if a > b:
        a, b = b, a
        sign = -sign
    if b > c:
        b, c = c, b
        sign = -sign
    if a > b:
        a, b = b, a
        sign = -sign
    return sign * orientation(a, b, c)


def distance(a: Point, b: Point) -> float:
    """
    Euclidean distance between two points.

    Used for approximation-error checks only, never for topology.
    """
    return math.hypot(b.x - a.x, b.y - a.y)


def build_kdtree(points: Sequence[Point]) -> KDTree:
    """
    Build a KDTree from Points for nearest-site queries.

    :param points: Reference points.
    :type points: Sequence[Point]
    :return: KDTree object.
    :rtype: KDTree
    """
    return KDTree(points_to_array(points))


def nearest_neighbors(tree: KDTree, query_points: Iterable,
                      k: int = 1) -> Tuple[np.ndarray, np.ndarray]:
    """
    Find k nearest reference points for each query point.

    :param tree: KDTree built from reference points.
    :type tree: KDTree
    :param query_points: (M, 2) array-like of query coordinates.
    :type query_points: Iterable
    :param k: Number of nearest neighbors to find.
    :type k: int
    :return: Tuple of (distances, indices) arrays.
    :rtype: Tuple[np.ndarray, np.ndarray]
    """
    query = points_to_array(as_points(query_points))
    distances, indices = tree.query(query, k=k)
    return distances, indices
