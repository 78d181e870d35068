# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import numpy as np
import pytest
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from compgeo.errors import ComputationCancelled, InvalidArgumentError
from compgeo.geometry import Point
from compgeo.tessellation import VoronoiDiagram, triangulate, voronoi_cells
from compgeo.utils import ProgressMonitor

"""Unit tests for Voronoi cells derived from the Delaunay triangulation.

Cells are compared through shapely polygons: clipped cells of a point set
must tile the canvas, and each canvas location must fall in the cell of its
nearest site.
"""


def as_polygon(cell):
    return Polygon([(p.x, p.y) for p in cell])


def test_square_gives_quadrants():
    cells = voronoi_cells([(0, 0), (10, 0), (10, 10), (0, 10)], 10, 10)
    assert len(cells) == 4
    for site, cell in cells.items():
        poly = as_polygon(cell)
        assert poly.area == pytest.approx(25.0)
        centroid = poly.centroid
        assert centroid.x == pytest.approx((site.x + 5) / 2)
        assert centroid.y == pytest.approx((site.y + 5) / 2)


def test_single_point_owns_the_canvas():
    cells = voronoi_cells([(30, 20)], 100, 50)
    (cell,) = cells.values()
    assert as_polygon(cell).area == pytest.approx(5000.0)


def test_two_points_split_along_bisector():
    cells = voronoi_cells([(25, 50), (75, 50)], 100, 100)
    left = as_polygon(cells[Point(25, 50)])
    right = as_polygon(cells[Point(75, 50)])
    assert left.area == pytest.approx(5000.0)
    assert right.area == pytest.approx(5000.0)
    assert left.bounds == pytest.approx((0.0, 0.0, 50.0, 100.0))


def test_cells_are_counter_clockwise():
    cells = voronoi_cells([(10, 10), (80, 20), (40, 70)], 100, 100)
    for cell in cells.values():
        assert as_polygon(cell).exterior.is_ccw


@pytest.mark.parametrize("seed, count", [(1, 15), (2, 15), (16, 60), (27, 60)])
def test_random_cells_tile_the_canvas(seed, count):
    rng = np.random.default_rng(seed)
    pts = rng.uniform([1, 1], [99, 79], size=(count, 2))
    diagram = VoronoiDiagram(pts, 100, 80)
    cells = diagram.cells()

    polygons = {site: as_polygon(cell) for site, cell in cells.items()}
    assert sum(p.area for p in polygons.values()) == pytest.approx(8000.0)
    for site, poly in polygons.items():
        assert poly.is_valid
        assert poly.covers(ShapelyPoint(site))

    for x in np.linspace(0.5, 99.5, 12):
        for y in np.linspace(0.5, 79.5, 10):
            owner = diagram.owner_of((x, y))
            nearest = min(diagram.points, key=lambda s: np.hypot(s.x - x, s.y - y))
            assert owner == nearest
            assert polygons[owner].buffer(1e-7).covers(ShapelyPoint(x, y))


def test_collinear_points_give_strips():
    sites = [(10, 50), (30, 50), (50, 50), (70, 50), (90, 50)]
    cells = voronoi_cells(sites, 100, 100)
    for site in sites:
        poly = as_polygon(cells[Point(*site)])
        assert poly.area == pytest.approx(2000.0)
        assert poly.bounds == pytest.approx((max(site[0] - 10, 0), 0.0, min(site[0] + 10, 100), 100.0))


def test_diagram_reuses_triangulation():
    pts = [(10, 10), (80, 20), (40, 70)]
    tri = triangulate(pts, width=100, height=100)
    diagram = VoronoiDiagram(pts, 100, 100, triangulation=tri)
    assert diagram.triangulation is tri
    assert diagram.points == tri.points


@pytest.mark.parametrize("sites", [[], [(30, 40)], [(10, 10), (80, 20)]])
def test_diagram_reuses_triangulation_without_real_triangles(sites):
    tri = triangulate(sites, width=100, height=100)
    assert len(tri) == 0
    diagram = VoronoiDiagram(sites, 100, 100, triangulation=tri)
    assert diagram.triangulation is tri


def test_duplicates_collapse_to_one_cell():
    cells = voronoi_cells([(10, 10), (10, 10), (60, 60)], 100, 100)
    assert set(cells) == {Point(10, 10), Point(60, 60)}


def test_empty_input():
    assert voronoi_cells([], 10, 10) == {}
    diagram = VoronoiDiagram([], 10, 10)
    with pytest.raises(InvalidArgumentError):
        diagram.owner_of((1, 1))


def test_invalid_canvas_and_unknown_site():
    with pytest.raises(InvalidArgumentError):
        voronoi_cells([(1, 1)], 0, 10)

    diagram = VoronoiDiagram([(1, 1), (5, 5)], 10, 10)
    with pytest.raises(InvalidArgumentError):
        diagram.cell((3, 3))


def test_progress_and_cancellation():
    monitor = ProgressMonitor()
    voronoi_cells([(10, 10), (80, 20), (40, 70)], 100, 100, monitor=monitor)
    assert monitor.progress == pytest.approx(1.0)

    cancelled = ProgressMonitor()
    cancelled.cancel()
    with pytest.raises(ComputationCancelled):
        voronoi_cells([(10, 10), (80, 20)], 100, 100, monitor=cancelled)
