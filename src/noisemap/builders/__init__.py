"""Noise map builders for plane, cylinder and sphere projections."""

from .base import NoiseMapBuilder, sample_axis
from .cylinder import CylinderMapBuilder
from .plane import (
    PlaneMapBuilder,
    ProgressCallback,
    ProgressCallbackConfig,
    normalize_granularity,
)
from .sphere import SphereMapBuilder

__all__ = [
    "CylinderMapBuilder",
    "NoiseMapBuilder",
    "PlaneMapBuilder",
    "ProgressCallback",
    "ProgressCallbackConfig",
    "SphereMapBuilder",
    "normalize_granularity",
    "sample_axis",
]
