# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Exceptions raised by the geometry kernel."""


class GeometryError(Exception):
    """Base class for kernel errors."""


class InvalidArgumentError(GeometryError, ValueError):
    """Invalid construction input: collinear triangle, bad control points or bounds."""


class ComputationFailedError(GeometryError, RuntimeError):
    """A computation could not converge or locate a point."""


class ComputationCancelled(Exception):
    """
    Raised when a monitor reports cancellation between units of work.

    Not a :class:`GeometryError`: the computation produced no result and
    released its working state.
    """
