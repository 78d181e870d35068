# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Curves module for Bezier evaluation and adaptive sampling."""

from .binomial import Binomial

from .bezier import (
    BezierCurve,
    validate_parametric_values,
    sample_bezier
)

__all__ = [
    'Binomial',
    'BezierCurve',
    'validate_parametric_values',
    'sample_bezier',
]
