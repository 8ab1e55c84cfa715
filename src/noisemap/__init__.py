"""Project noise sources onto 2D noise maps.

Builders sample a noise source over a plane, cylinder or sphere surface
and return a NoiseMap grid suitable for heightmaps and textures.
"""

from .builders import (
    CylinderMapBuilder,
    NoiseMapBuilder,
    PlaneMapBuilder,
    ProgressCallbackConfig,
    SphereMapBuilder,
)
from .config import (
    CylinderMapConfig,
    MapConfig,
    PlaneMapConfig,
    SphereMapConfig,
    load_config,
)
from .exceptions import DimensionMismatchError, GridIndexError, NoiseMapError
from .sources import NoiseFnWrapper, NoiseSource
from .types import Bounds, NoiseMap, Point

__all__ = [
    # Types
    "Bounds",
    "NoiseMap",
    "Point",
    # Sources
    "NoiseSource",
    "NoiseFnWrapper",
    # Builders
    "NoiseMapBuilder",
    "PlaneMapBuilder",
    "CylinderMapBuilder",
    "SphereMapBuilder",
    "ProgressCallbackConfig",
    # Config
    "MapConfig",
    "PlaneMapConfig",
    "CylinderMapConfig",
    "SphereMapConfig",
    "load_config",
    # Exceptions
    "NoiseMapError",
    "DimensionMismatchError",
    "GridIndexError",
]
