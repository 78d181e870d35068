# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Canonically oriented triangles.

A Triangle sorts its three points, keeps the smallest first and orders the
other two so that ``orientation(p1, p2, p3) < 0`` (counter-clockwise on a
canvas whose y axis points down). Two triangles over the same point set are
therefore equal and hash alike regardless of construction order.
"""

from typing import List, Optional, Tuple

from ..errors import ComputationFailedError, InvalidArgumentError
from .lines import ParametricLine
from .spatial import Point, as_point, canonical_orientation, orientation

Edge = Tuple[Point, Point]


def edge_key(a: Point, b: Point) -> Edge:
    """Undirected edge as a Point-ordered pair."""
    return (a, b) if a <= b else (b, a)


class Triangle:
    """
    Immutable, canonically oriented triangle over three non-collinear points.

    :raises InvalidArgumentError: If the points are collinear.
    """

    __slots__ = ('_points', '_circumcenter')

    def __init__(self, p1: Point, p2: Point, p3: Point):
        a, b, c = sorted((as_point(p1), as_point(p2), as_point(p3)))
        det = orientation(a, b, c)
        if det == 0:
            raise InvalidArgumentError(f"Triangle points ({p1}, {p2}, {p3}) are collinear.")

        self._points = (a, b, c) if det < 0 else (a, c, b)
        self._circumcenter: Optional[Point] = None

    @property
    def p1(self) -> Point:
        return self._points[0]

    @property
    def p2(self) -> Point:
        return self._points[1]

    @property
    def p3(self) -> Point:
        return self._points[2]

    @property
    def points(self) -> Tuple[Point, Point, Point]:
        return self._points

    @property
    def edges(self) -> Tuple[Edge, Edge, Edge]:
        """Directed edges (p1, p2), (p2, p3), (p3, p1)."""
        p1, p2, p3 = self._points
        return (p1, p2), (p2, p3), (p3, p1)

    def has_vertex(self, point: Point) -> bool:
        return point in self._points

    def opposite(self, a: Point, b: Point) -> Point:
        """
        Vertex not on edge ab.

        :raises InvalidArgumentError: If ab is not an edge of this triangle.
        """
        rest = [p for p in self._points if p != a and p != b]
        if len(rest) != 1:
            raise InvalidArgumentError(f"({a}, {b}) is not an edge of {self!r}")
        return rest[0]

    def around(self, vertex: Point) -> Tuple[Point, Point]:
        """
        The other two vertices ``(y, x)`` ordered so that ``(vertex, y, x)``
        turns counter-clockwise (positive orientation).

        :raises InvalidArgumentError: If vertex is not a vertex of this triangle.
        """
        if vertex not in self._points:
            raise InvalidArgumentError(f"{vertex} is not a vertex of {self!r}")
        i = self._points.index(vertex)
        return self._points[(i + 2) % 3], self._points[(i + 1) % 3]

    def _edge_sides(self, point: Point) -> Tuple[float, float, float]:
        p1, p2, p3 = self._points
        return (canonical_orientation(p1, p2, point),
                canonical_orientation(p2, p3, point),
                canonical_orientation(p3, p1, point))

    def contains(self, point: Point) -> bool:
        """
        True iff point is inside the triangle or on its boundary.

        A point on a shared edge is contained by both triangles sharing it.
        """
        d1, d2, d3 = self._edge_sides(point)
        return (d1 <= 0 and d2 <= 0 and d3 <= 0) or (d1 >= 0 and d2 >= 0 and d3 >= 0)

    def contains_point_on_edge(self, point: Point) -> bool:
        """True iff point is collinear with any of the three edges."""
        return 0 in self._edge_sides(point)

    def edges_through(self, point: Point) -> List[Edge]:
        """Edges whose supporting line passes exactly through point."""
        return [edge for edge, side in zip(self.edges, self._edge_sides(point)) if side == 0]

    def contains_point_in_circle(self, p4: Point) -> bool:
        """
        In-circumcircle predicate (Lischinski, "Incremental Delaunay
        Triangulation", Graphics Gems IV, 1993).

        Coordinates are taken relative to p4, which zeroes its own term and
        keeps the squared magnitudes small. The determinant is positive for an
        interior point of a positively oriented triangle; stored triangles
        are negatively oriented, so the test is reversed.

        :return: True iff p4 lies strictly inside the circumcircle.
        :rtype: bool
        """
        origin = Point(0.0, 0.0)
        a, b, c = (Point(p.x - p4.x, p.y - p4.y) for p in self._points)

        det = ((a.x * a.x + a.y * a.y) * orientation(b, c, origin)
               - (b.x * b.x + b.y * b.y) * orientation(a, c, origin)
               + (c.x * c.x + c.y * c.y) * orientation(a, b, origin))
        return det < 0

    def circumcenter(self) -> Point:
        """
        Intersection of the perpendicular bisectors of (p1, p2) and (p2, p3).

        :return: The point equidistant from all three vertices.
        :rtype: Point
        """
        if self._circumcenter is None:
            b1 = ParametricLine.bisector(self.p1, self.p2)
            b2 = ParametricLine.bisector(self.p2, self.p3)
            center = b1.intersection(b2)
            if center is None:
                raise ComputationFailedError(f"Bisectors of {self!r} are parallel")
            self._circumcenter = center
        return self._circumcenter

    def shared_points(self, other: 'Triangle') -> List[Point]:
        """Points common to both triangles, in this triangle's order."""
        return [p for p in self._points if p in other._points]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"Triangle(p1={self.p1}, p2={self.p2}, p3={self.p3})"
