# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Incremental Delaunay triangulation with edge flipping.

Points are inserted one at a time into a triangulation seeded by a
super-triangle (Lischinski, "Incremental Delaunay Triangulation", Graphics
Gems IV, 1993). Each insertion splits the containing triangle into three, or
the two triangles sharing an edge into four when the point lands exactly on
that edge, and then flips edges outward until every triangle around the new
point satisfies the Delaunay condition again.

The super-triangle's vertices have finite coordinates, which point location
and the convexity check use, but the flip decision treats them as points at
infinity (de Berg et al., Computational Geometry, 3rd ed., section 9.3). An
edge between two input points is never traded for one that reaches a super
vertex, so the triangles over input points alone cover the convex hull of
the input however flat that hull is.

Triangles live in an arena addressed by integer handles. An adjacency table
keyed by undirected edge maps each edge to the (at most two) handles that
share it, and an incidence table maps each vertex to its handles.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set, Tuple

import structlog

from ..config.settings import settings
from ..errors import ComputationFailedError
from ..geometry.boundaries import compute_super_triangle
from ..geometry.spatial import Point, as_points, canonical_orientation
from ..geometry.triangle import Edge, Triangle, edge_key
from ..utils.helpers import ProgressMonitor, check_cancelled, report_progress

logger = structlog.get_logger()


class DelaunayTriangulation:
    """
    Triangle arena with edge adjacency, seeded by a super-triangle.

    Mutated only through :meth:`insert` while it is being built; treat it
    as read-only afterwards.

    :param super_vertices: Vertices of a triangle enclosing every point that
        will be inserted.
    :type super_vertices: Tuple[Point, Point, Point]
    """

    def __init__(self, super_vertices: Tuple[Point, Point, Point]):
        self.super_vertices: Tuple[Point, Point, Point] = tuple(super_vertices)
        self.points: List[Point] = []
        self._triangles: Dict[int, Triangle] = {}
        self._edges: Dict[Edge, Set[int]] = defaultdict(set)
        self._incident: Dict[Point, Set[int]] = defaultdict(set)
        self._next_handle = 0

        self._add(Triangle(*self.super_vertices))

    # ------------------------------------------------------------------
    # Arena bookkeeping
    # ------------------------------------------------------------------

    def _add(self, triangle: Triangle) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._triangles[handle] = triangle
        for a, b in triangle.edges:
            self._edges[edge_key(a, b)].add(handle)
        for p in triangle.points:
            self._incident[p].add(handle)
        return handle

    def _remove(self, handle: int) -> Triangle:
        triangle = self._triangles.pop(handle)
        for a, b in triangle.edges:
            key = edge_key(a, b)
            self._edges[key].discard(handle)
            if not self._edges[key]:
                del self._edges[key]
        for p in triangle.points:
            self._incident[p].discard(handle)
        return triangle

    def _neighbor_handle(self, handle: int, a: Point, b: Point) -> Optional[int]:
        for other in self._edges.get(edge_key(a, b), ()):
            if other != handle:
                return other
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_super_vertex(self, point: Point) -> bool:
        return point in self.super_vertices

    @property
    def all_triangles(self) -> List[Triangle]:
        """Every triangle, including those touching the super-triangle."""
        return list(self._triangles.values())

    @property
    def triangles(self) -> List[Triangle]:
        """Triangles whose three vertices are all input points."""
        return [t for t in self._triangles.values()
                if not any(self.is_super_vertex(p) for p in t.points)]

    def triangles_around(self, point: Point) -> List[Triangle]:
        """All triangles having ``point`` as a vertex."""
        return [self._triangles[h] for h in self._incident.get(point, ())]

    def fan(self, point: Point) -> List[Triangle]:
        """
        Triangles around ``point`` in counter-clockwise order.

        Consecutive entries share an edge through ``point``; the last one
        shares an edge with the first.

        :return: The ordered fan, empty if point is not a vertex.
        :rtype: List[Triangle]
        """
        handles = self._incident.get(point)
        if not handles:
            return []

        start = min(handles)
        ordered: List[Triangle] = []
        handle = start
        while handle is not None and len(ordered) < len(handles):
            triangle = self._triangles[handle]
            ordered.append(triangle)
            _, x = triangle.around(point)
            handle = self._neighbor_handle(handle, point, x)
            if handle == start:
                break
        return ordered

    def neighbors(self, triangle: Triangle) -> List[Optional[Triangle]]:
        """
        Triangles across each edge of ``triangle``.

        :return: One entry per edge in ``triangle.edges`` order; None on the
            outer boundary.
        :rtype: List[Optional[Triangle]]
        """
        handle = self._handle_of(triangle)
        result = []
        for a, b in triangle.edges:
            other = self._neighbor_handle(handle, a, b)
            result.append(None if other is None else self._triangles[other])
        return result

    def _handle_of(self, triangle: Triangle) -> int:
        for handle in self._incident.get(triangle.p1, ()):
            if self._triangles[handle] == triangle:
                return handle
        raise KeyError(f"{triangle!r} is not part of this triangulation")

    def locate(self, point: Point) -> int:
        """
        Handle of a triangle containing ``point`` (boundary inclusive).

        :raises ComputationFailedError: If no triangle contains the point.
        """
        for handle, triangle in self._triangles.items():
            if triangle.contains(point):
                return handle
        raise ComputationFailedError(f"Point {point} lies outside the triangulation")

    def is_delaunay(self) -> bool:
        """True iff no input point lies strictly inside any triangle's circumcircle."""
        for triangle in self.triangles:
            for p in self.points:
                if not triangle.has_vertex(p) and triangle.contains_point_in_circle(p):
                    return False
        return True

    def __len__(self) -> int:
        return len(self.triangles)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def insert(self, point: Point) -> bool:
        """
        Insert a point and restore the Delaunay condition around it.

        :param point: Point strictly inside the super-triangle.
        :type point: Point
        :return: False if the point was already a vertex (nothing changes).
        :rtype: bool
        :raises ComputationFailedError: If the point cannot be located.
        """
        if self._incident.get(point):
            return False

        handle = self.locate(point)
        triangle = self._triangles[handle]

        on_edges = triangle.edges_through(point)
        if len(on_edges) > 1:
            raise ComputationFailedError(
                f"Point {point} is numerically indistinguishable from a vertex of {triangle!r}")

        if on_edges:
            link = self._split_edge(handle, *on_edges[0], point)
        else:
            self._remove(handle)
            link = list(triangle.edges)
            for a, b in link:
                self._add(Triangle(a, b, point))

        self._legalize(point, link)
        self.points.append(point)
        return True

    def _split_edge(self, handle: int, a: Point, b: Point, point: Point) -> List[Edge]:
        other = self._neighbor_handle(handle, a, b)
        if other is None:
            raise ComputationFailedError(f"Point {point} lies on the outer boundary")
        if len(self._triangles[other].edges_through(point)) > 1:
            raise ComputationFailedError(
                f"Point {point} is numerically indistinguishable from a vertex of {self._triangles[other]!r}")

        c = self._triangles[handle].opposite(a, b)
        d = self._triangles[other].opposite(a, b)
        self._remove(handle)
        self._remove(other)

        link = [(a, c), (c, b), (b, d), (d, a)]
        for u, v in link:
            self._add(Triangle(u, v, point))
        return link

    def _legalize(self, point: Point, link: Iterable[Edge]) -> None:
        """Flip edges opposite ``point`` until its neighbourhood is Delaunay."""
        stack = list(link)
        while stack:
            a, b = stack.pop()
            handles = self._edges.get(edge_key(a, b), set())
            inner = [h for h in handles if self._triangles[h].has_vertex(point)]
            if not inner:
                continue
            outer = self._neighbor_handle(inner[0], a, b)
            if outer is None:
                continue

            d = self._triangles[outer].opposite(a, b)
            if not self._is_illegal(self._triangles[inner[0]], point, a, b, d):
                continue
            if not self._flippable(point, a, b, d):
                continue

            self._remove(inner[0])
            self._remove(outer)
            self._add(Triangle(point, a, d))
            self._add(Triangle(point, d, b))
            stack.append((a, d))
            stack.append((d, b))

    def _rank(self, point: Point) -> int:
        # super vertices rank below every input point, each on its own level
        if point in self.super_vertices:
            return self.super_vertices.index(point)
        return len(self.super_vertices)

    def _is_illegal(self, inner: Triangle, p: Point, a: Point, b: Point, d: Point) -> bool:
        """
        Whether edge ab of ``inner`` = (p, a, b) must be flipped to pd.

        With four input points this is the in-circle test. Otherwise the
        super vertices are symbolic and ab is illegal iff
        ``min(rank(p), rank(d)) > min(rank(a), rank(b))``: an edge reaching a
        super vertex gives way to an edge between input points, and an edge
        between input points never gives way to one reaching a super vertex.
        """
        if not any(self.is_super_vertex(v) for v in (p, a, b, d)):
            return inner.contains_point_in_circle(d)
        return min(self._rank(p), self._rank(d)) > min(self._rank(a), self._rank(b))

    @staticmethod
    def _flippable(p: Point, a: Point, b: Point, d: Point) -> bool:
        # quad p-a-d-b must be strictly convex for the diagonal pd to exist
        side_a = canonical_orientation(p, d, a)
        side_b = canonical_orientation(p, d, b)
        return (side_a > 0 > side_b) or (side_a < 0 < side_b)


def triangulate(points: Iterable,
                width: Optional[float] = None,
                height: Optional[float] = None,
                monitor: Optional[ProgressMonitor] = None,
                scale: Optional[float] = None) -> DelaunayTriangulation:
    """
    Build the Delaunay triangulation of a point set.

    Duplicate points are skipped. Progress advances by ``1 / len(points)``
    per point and cancellation is checked before each insertion.

    :param points: (N, 2) array-like of input points.
    :type points: Iterable
    :param width: Optional canvas width; with height, the super-triangle
        also encloses the canvas rectangle.
    :type width: Optional[float]
    :param height: Optional canvas height.
    :type height: Optional[float]
    :param monitor: Progress and cancellation monitor.
    :type monitor: Optional[ProgressMonitor]
    :param scale: Super-triangle scale (default from settings).
    :type scale: Optional[float]
    :return: Completed triangulation.
    :rtype: DelaunayTriangulation
    :raises ComputationCancelled: If the monitor is cancelled mid-build.
    :raises ComputationFailedError: If a point cannot be located.
    """
    pts = as_points(points)
    rectangle = (width, height) if width is not None and height is not None else None
    super_vertices = compute_super_triangle(
        pts, scale=scale or settings.super_triangle_scale, rectangle=rectangle)

    triangulation = DelaunayTriangulation(super_vertices)
    step = 1.0 / len(pts) if pts else 0.0
    skipped = 0

    for p in pts:
        check_cancelled(monitor)
        if not triangulation.insert(p):
            skipped += 1
            logger.debug("Duplicate point skipped", point=str(p))
        report_progress(monitor, step)

    logger.info("Delaunay triangulation built",
                points=len(triangulation.points),
                duplicates=skipped,
                triangles=len(triangulation))
    return triangulation
