# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Kernel settings pulled from ``COMPGEO_*`` environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KernelSettings(BaseSettings):
    """Tunable constants of the geometry kernel."""

    model_config = SettingsConfigDict(env_prefix="COMPGEO_", extra="forbid")

    # Bezier sampling
    bezier_steps_per_sample: int = Field(
        default=10, ge=1, description="Fixed step count used for each adaptive sub-range")
    bezier_max_point_difference: float = Field(
        default=0.5, gt=0, description="Max distance between consecutive adaptive samples")
    bezier_min_parametric_range: float = Field(
        default=1e-9, gt=0, description="Narrowest sub-range the adaptive sampler may split")

    # Delaunay triangulation
    super_triangle_scale: float = Field(
        default=100.0, ge=10.0, description="Super-triangle size as a multiple of the input extent")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Logging format (console or json)")


# Instantiate singleton settings object
settings = KernelSettings()
