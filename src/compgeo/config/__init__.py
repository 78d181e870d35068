# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Configuration module for kernel settings, canvas preferences and logging."""

from .settings import (
    KernelSettings,
    settings
)

from .preferences import (
    Preference,
    PreferenceStore,
    POINT_RADIUS,
    RANDOM_POINT_COUNT,
    CONVEX_HULL_COLOR,
    DRAW_POINTS,
    SMOOTH_EDGES,
    COLOR_VORONOI_CELL_REGIONS,
    SHOW_POINTS_LABEL,
    ALL_PREFERENCES
)

from .log_setup import configure_logging

__all__ = [
    # Settings
    'KernelSettings',
    'settings',
    # Preferences
    'Preference',
    'PreferenceStore',
    'POINT_RADIUS',
    'RANDOM_POINT_COUNT',
    'CONVEX_HULL_COLOR',
    'DRAW_POINTS',
    'SMOOTH_EDGES',
    'COLOR_VORONOI_CELL_REGIONS',
    'SHOW_POINTS_LABEL',
    'ALL_PREFERENCES',
    # Logging
    'configure_logging',
]
