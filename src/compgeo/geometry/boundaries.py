# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Bounding regions and rectangle clipping.

This module provides the enclosing super-triangle that seeds a Delaunay
triangulation and the clipping of cell polygons to the canvas rectangle.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon, box
from shapely.geometry.polygon import orient

from ..errors import InvalidArgumentError
from .spatial import Point, points_to_array


def compute_bounding_box(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    """
    Compute the axis-aligned bounding box of a point set.

    :param points: Points to bound (at least one).
    :type points: Sequence[Point]
    :return: Tuple of (min_x, min_y, max_x, max_y).
    :rtype: Tuple[float, float, float, float]
    """
    if len(points) == 0:
        raise InvalidArgumentError("Cannot bound an empty point set")
    arr = points_to_array(points)
    min_x, min_y = arr.min(axis=0)
    max_x, max_y = arr.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def compute_super_triangle(points: Sequence[Point],
                           scale: float = 100.0,
                           rectangle: Optional[Tuple[float, float]] = None) -> Tuple[Point, Point, Point]:
    """
    Build a triangle enclosing all points (and the clipping rectangle).

    The vertices sit ``scale`` extents away from the center of the bounding
    box, far enough that no location inside the box is nearer to a vertex of
    the super-triangle than to an input point.

    :param points: Input points (may be empty when a rectangle is given).
    :type points: Sequence[Point]
    :param scale: Distance of the vertices from the center, in box extents.
    :type scale: float
    :param rectangle: Optional (width, height) of a canvas anchored at the origin.
    :type rectangle: Optional[Tuple[float, float]]
    :return: Three vertices of the super-triangle.
    :rtype: Tuple[Point, Point, Point]
    """
    corners = list(points)
    if rectangle is not None:
        width, height = rectangle
        corners += [Point(0.0, 0.0), Point(float(width), float(height))]
    if not corners:
        corners = [Point(0.0, 0.0)]

    min_x, min_y, max_x, max_y = compute_bounding_box(corners)
    d = max(max_x - min_x, max_y - min_y, 1.0)
    cx = (min_x + max_x) / 2.0
    cy = (min_y + max_y) / 2.0

    return (Point(cx - scale * d, cy - scale * d),
            Point(cx + scale * d, cy - scale * d),
            Point(cx, cy + scale * d))


def clip_polygon_to_rectangle(polygon: Sequence[Point],
                              width: float, height: float) -> List[Point]:
    """
    Intersect a convex polygon with the rectangle [0, width] x [0, height].

    :param polygon: Polygon vertices in boundary order (not closed).
    :type polygon: Sequence[Point]
    :param width: Rectangle width.
    :type width: float
    :param height: Rectangle height.
    :type height: float
    :return: Clipped polygon vertices (not closed), empty if nothing remains.
    :rtype: List[Point]
    """
    if width <= 0 or height <= 0:
        raise InvalidArgumentError(f"Clipping rectangle must be positive, got {width} x {height}")
    if len(polygon) < 3:
        return []

    clipped = Polygon(points_to_array(polygon)).intersection(box(0.0, 0.0, width, height))
    if clipped.is_empty or clipped.geom_type != 'Polygon':
        return []

    coords = np.asarray(orient(clipped, sign=1.0).exterior.coords)[:-1]
    return _drop_repeated([Point(float(x), float(y)) for x, y in coords])


def _drop_repeated(ring: List[Point]) -> List[Point]:
    out: List[Point] = []
    for p in ring:
        if not out or out[-1] != p:
            out.append(p)
    if len(out) > 1 and out[0] == out[-1]:
        out.pop()
    return out
