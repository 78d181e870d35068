# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Utils module for progress reporting and background workers."""

from .helpers import (
    ProgressMonitor,
    report_progress,
    check_cancelled,
    print_progress
)

from .worker import (
    KernelWorker,
    TaskOutcome,
    TaskStatus,
    triangulation_job,
    voronoi_job,
    bezier_job
)

__all__ = [
    # Helpers
    'ProgressMonitor',
    'report_progress',
    'check_cancelled',
    'print_progress',
    # Worker
    'KernelWorker',
    'TaskOutcome',
    'TaskStatus',
    'triangulation_job',
    'voronoi_job',
    'bezier_job',
]
