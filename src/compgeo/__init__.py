# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
CompGeo Package

A planar computational geometry kernel for interactive visualization. Builds
Delaunay triangulations by incremental insertion with edge flipping, derives
per-point Voronoi cells from the triangulation, and samples Bezier curves
adaptively within a point-to-point error bound.

Modules:
--------
- geometry: Points, orientation predicate, lines, triangles and clipping
- tessellation: Delaunay triangulation builder and Voronoi dual extractor
- curves: Bezier curves and binomial coefficients
- utils: Progress monitoring and background workers
- config: Kernel settings, canvas preferences and logging setup

Example Usage:
--------------
    import compgeo

    # Delaunay triangulation
    tri = compgeo.tessellation.triangulate([(0, 0), (4, 0), (2, 4)])

    # Voronoi cells clipped to a 100 x 100 canvas
    cells = compgeo.tessellation.voronoi_cells(points, width=100, height=100)

    # Adaptive Bezier polyline
    curve = compgeo.curves.BezierCurve([(0, 0), (5, 10), (10, 0)])
    polyline = curve.sample_adaptive(max_point_difference=0.5)
"""

__version__ = '0.1.0'
__author__ = 'CompGeo Team'

from . import errors
from . import config
from . import geometry
from . import tessellation
from . import curves
from . import utils

__all__ = [
    'errors',
    'config',
    'geometry',
    'tessellation',
    'curves',
    'utils',
]
