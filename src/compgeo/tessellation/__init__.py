# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Tessellation module for Delaunay triangulations and their Voronoi duals."""

from .delaunay import (
    DelaunayTriangulation,
    triangulate
)

from .voronoi import (
    VoronoiDiagram,
    voronoi_cells
)

__all__ = [
    # Delaunay
    'DelaunayTriangulation',
    'triangulate',
    # Voronoi
    'VoronoiDiagram',
    'voronoi_cells',
]
