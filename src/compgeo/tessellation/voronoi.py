# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Voronoi cells as the dual of a Delaunay triangulation.

The cell of an input point is traced by walking the fan of triangles around
it counter-clockwise. A triangle over three input points contributes its
circumcenter. A triangle with one super vertex sits outside a convex hull
edge; the cell edge dual to that hull edge is a ray along the edge's
perpendicular bisector, so it contributes a point far out along that ray.
Between a ray leaving the hull and the next one coming back, the cell is
closed by an arc of points far outside the canvas, and the resulting
polygon is clipped to the ``[0, width] x [0, height]`` rectangle.
"""

import itertools
import math
from typing import Dict, Iterable, List, Optional

import structlog

from ..errors import InvalidArgumentError
from ..geometry.boundaries import clip_polygon_to_rectangle
from ..geometry.spatial import (
    Point, as_point, as_points, build_kdtree, distance, nearest_neighbors, orientation)
from ..geometry.triangle import Triangle
from ..utils.helpers import ProgressMonitor, check_cancelled, report_progress
from .delaunay import DelaunayTriangulation, triangulate

logger = structlog.get_logger()

# angular step of the arc closing an unbounded cell
ARC_STEP = math.pi / 6
# points used when a single site owns the whole plane
FULL_TURN_STEPS = 12


class VoronoiDiagram:
    """
    Voronoi diagram of a point set, clipped to a canvas rectangle.

    :param points: (N, 2) array-like of input points.
    :type points: Iterable
    :param width: Canvas width.
    :type width: float
    :param height: Canvas height.
    :type height: float
    :param triangulation: Pre-built triangulation of the same points whose
        super-triangle encloses the canvas; built here when omitted.
    :type triangulation: Optional[DelaunayTriangulation]
    :param monitor: Monitor for the triangulation step when one is built.
    :type monitor: Optional[ProgressMonitor]
    """

    def __init__(self, points: Iterable, width: float, height: float,
                 triangulation: Optional[DelaunayTriangulation] = None,
                 monitor: Optional[ProgressMonitor] = None):
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(f"Canvas must be positive, got {width} x {height}")

        self.width = float(width)
        self.height = float(height)
        if triangulation is None:
            triangulation = triangulate(points, width=self.width, height=self.height, monitor=monitor)
        self.triangulation = triangulation
        # triangulation.points holds each distinct point once, in insertion order
        self.points: List[Point] = list(self.triangulation.points)
        self._tree = build_kdtree(self.points) if self.points else None

        s1, s2, s3 = self.triangulation.super_vertices
        self._far = max(distance(s1, s2), distance(s2, s3), distance(s3, s1),
                        math.hypot(self.width, self.height))

    def cell(self, point) -> List[Point]:
        """
        Boundary of the cell owned by ``point``, clipped to the canvas.

        :param point: One of the input points.
        :return: Cell vertices in counter-clockwise order (not closed).
        :rtype: List[Point]
        :raises InvalidArgumentError: If point is not an input point.
        """
        point = as_point(point)
        fan = self.triangulation.fan(point)
        if not fan or self.triangulation.is_super_vertex(point):
            raise InvalidArgumentError(f"{point} is not a vertex of the triangulation")

        is_super = self.triangulation.is_super_vertex
        # start where the previous triangle ends on an input point
        starts = [i for i, t in enumerate(fan) if not is_super(t.around(point)[0])]
        if not starts:
            radius = self._far
            ring = [Point(point.x + radius * math.cos(k * 2 * math.pi / FULL_TURN_STEPS),
                          point.y + radius * math.sin(k * 2 * math.pi / FULL_TURN_STEPS))
                    for k in range(FULL_TURN_STEPS)]
            return clip_polygon_to_rectangle(ring, self.width, self.height)

        fan = fan[starts[0]:] + fan[:starts[0]]
        radius = self._cell_radius(point, fan)

        ring: List[Point] = []
        leaving: Optional[float] = None
        for triangle in fan:
            y, x = triangle.around(point)
            if not is_super(y) and not is_super(x):
                ring.append(triangle.circumcenter())
            elif not is_super(y):
                far, leaving = self._far_point(point, y, x, radius)
                ring.append(far)
            elif not is_super(x):
                far, arriving = self._far_point(point, x, y, radius)
                if leaving is not None:
                    ring.extend(self._arc(point, leaving, arriving, radius))
                    leaving = None
                ring.append(far)

        # cocircular neighbours share a circumcenter
        ring = [p for p, _ in itertools.groupby(ring)]
        if len(ring) > 1 and ring[0] == ring[-1]:
            ring.pop()

        return clip_polygon_to_rectangle(ring, self.width, self.height)

    def _cell_radius(self, point: Point, fan: List[Triangle]) -> float:
        # far enough that the closing arc misses the canvas and every ray
        # passes its finite end before reaching the arc
        reach = 0.0
        for triangle in fan:
            y, x = triangle.around(point)
            real = [v for v in (y, x) if not self.triangulation.is_super_vertex(v)]
            if len(real) == 2:
                reach = max(reach, distance(point, triangle.circumcenter()))
            for v in real:
                reach = max(reach, distance(point, v))
        return self._far + reach

    @staticmethod
    def _far_point(point: Point, neighbor: Point, outside: Point, radius: float):
        """
        Point at ``radius`` along the bisector of ``point`` and ``neighbor``,
        on the side of ``outside``, with the angle of that direction.
        """
        dx, dy = neighbor.x - point.x, neighbor.y - point.y
        length = math.hypot(dx, dy)
        nx, ny = -dy / length, dx / length
        if orientation(point, neighbor, outside) < 0:
            nx, ny = -nx, -ny
        far = Point((point.x + neighbor.x) / 2.0 + radius * nx,
                    (point.y + neighbor.y) / 2.0 + radius * ny)
        return far, math.atan2(ny, nx)

    @staticmethod
    def _arc(point: Point, start: float, end: float, radius: float) -> List[Point]:
        """Points strictly between two angles, turning counter-clockwise."""
        sweep = (end - start) % (2 * math.pi)
        if sweep > math.pi + 1e-6:
            # parallel rays, rounded past a full turn
            sweep = 0.0
        steps = math.ceil(sweep / ARC_STEP)
        return [Point(point.x + radius * math.cos(start + sweep * k / steps),
                      point.y + radius * math.sin(start + sweep * k / steps))
                for k in range(1, steps)]

    def cells(self, monitor: Optional[ProgressMonitor] = None) -> Dict[Point, List[Point]]:
        """
        Cells for every input point.

        Progress advances by ``1 / len(points)`` per cell and cancellation is
        checked before each one.

        :param monitor: Progress and cancellation monitor.
        :type monitor: Optional[ProgressMonitor]
        :return: Mapping from input point to its clipped cell boundary.
        :rtype: Dict[Point, List[Point]]
        """
        step = 1.0 / len(self.points) if self.points else 0.0
        result: Dict[Point, List[Point]] = {}
        for p in self.points:
            check_cancelled(monitor)
            result[p] = self.cell(p)
            report_progress(monitor, step)

        logger.info("Voronoi cells extracted", cells=len(result),
                    width=self.width, height=self.height)
        return result

    def owner_of(self, query) -> Point:
        """
        Input point whose cell contains ``query`` (the nearest site).

        :raises InvalidArgumentError: If the diagram has no points.
        """
        if self._tree is None:
            raise InvalidArgumentError("Voronoi diagram has no sites")
        _, index = nearest_neighbors(self._tree, [as_point(query)])
        return self.points[int(index[0])]


def voronoi_cells(points: Iterable, width: float, height: float,
                  monitor: Optional[ProgressMonitor] = None) -> Dict[Point, List[Point]]:
    """
    Compute clipped Voronoi cells for a point set.

    Half of the reported progress covers the triangulation, the other half
    the cell extraction.

    :param points: (N, 2) array-like of input points.
    :type points: Iterable
    :param width: Canvas width.
    :type width: float
    :param height: Canvas height.
    :type height: float
    :param monitor: Progress and cancellation monitor.
    :type monitor: Optional[ProgressMonitor]
    :return: Mapping from each distinct input point to its cell boundary.
    :rtype: Dict[Point, List[Point]]
    """
    pts = as_points(points)
    build_monitor = monitor.scaled(0.5) if monitor is not None else None
    cell_monitor = monitor.scaled(0.5) if monitor is not None else None

    diagram = VoronoiDiagram(pts, width, height, monitor=build_monitor)
    return diagram.cells(monitor=cell_monitor)
