# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Geometry module for points, predicates, lines, triangles and clipping."""

from .spatial import (
    Point,
    as_point,
    as_points,
    points_to_array,
    orientation,
    canonical_orientation,
    distance,
    build_kdtree,
    nearest_neighbors
)

from .lines import ParametricLine

from .triangle import (
    Triangle,
    edge_key
)

from .boundaries import (
    compute_bounding_box,
    compute_super_triangle,
    clip_polygon_to_rectangle
)

__all__ = [
    # Spatial
    'Point',
    'as_point',
    'as_points',
    'points_to_array',
    'orientation',
    'canonical_orientation',
    'distance',
    'build_kdtree',
    'nearest_neighbors',
    # Lines
    'ParametricLine',
    # Triangles
    'Triangle',
    'edge_key',
    # Boundaries
    'compute_bounding_box',
    'compute_super_triangle',
    'clip_polygon_to_rectangle',
]
