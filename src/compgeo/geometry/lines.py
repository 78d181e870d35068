# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Parametric lines and their intersections.

A line is stored as ``L(s) = origin + s * direction``. Circumcenters are found
by intersecting the perpendicular bisectors of two triangle edges.
"""

from typing import Optional, Tuple

from ..errors import InvalidArgumentError
from .spatial import Point, as_point


class ParametricLine:
    """
    Infinite line through ``origin`` along ``direction``.

    :param origin: A point on the line (s = 0).
    :type origin: Point
    :param direction: Direction vector (dx, dy), must be non-zero.
    :type direction: Tuple[float, float]
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point, direction: Tuple[float, float]):
        dx, dy = float(direction[0]), float(direction[1])
        if dx == 0 and dy == 0:
            raise InvalidArgumentError("Line direction must be non-zero")
        self.origin = as_point(origin)
        self.direction = (dx, dy)

    @classmethod
    def through(cls, a: Point, b: Point) -> 'ParametricLine':
        """Line through a (s = 0) and b (s = 1)."""
        return cls(a, (b.x - a.x, b.y - a.y))

    @classmethod
    def bisector(cls, a: Point, b: Point) -> 'ParametricLine':
        """
        Perpendicular bisector of segment ab.

        The origin is the midpoint of ab; the direction is ab rotated by 90
        degrees.

        :raises InvalidArgumentError: If a and b coincide.
        """
        midpoint = Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)
        return cls(midpoint, (-(b.y - a.y), b.x - a.x))

    def point_at(self, s: float) -> Point:
        """Evaluate the line at parameter s."""
        return Point(self.origin.x + s * self.direction[0],
                     self.origin.y + s * self.direction[1])

    def intersection(self, other: 'ParametricLine') -> Optional[Point]:
        """
        Intersection point with another line.

        Solves ``origin + s * direction = other.origin + u * other.direction``
        for s by crossing both sides with ``other.direction``.

        :return: The unique intersection, or None for parallel lines.
        :rtype: Optional[Point]
        """
        d1x, d1y = self.direction
        d2x, d2y = other.direction
        denom = d1x * d2y - d1y * d2x
        if denom == 0:
            return None
        ox = other.origin.x - self.origin.x
        oy = other.origin.y - self.origin.y
        s = (ox * d2y - oy * d2x) / denom
        return self.point_at(s)

    def __repr__(self) -> str:
        return f"ParametricLine(origin={self.origin}, direction={self.direction})"
