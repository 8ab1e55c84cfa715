"""Sphere projection: maps the noise map onto latitude/longitude of a unit sphere."""

from typing import TYPE_CHECKING, Self

import structlog

from ..interpolate import lat_lon_to_xyz
from ..sources import NoiseSource
from ..types import Bounds, NoiseMap
from .base import NoiseMapBuilder, sample_axis

if TYPE_CHECKING:
    from ..config import SphereMapConfig

logger = structlog.get_logger()


class SphereMapBuilder(NoiseMapBuilder):
    """Builds noise maps from the surface of a unit sphere in a 3D source.

    Rows sweep ``latitude_bounds`` and columns sweep ``longitude_bounds``,
    both in degrees. Bounds are stored in the order given; a reversed pair
    flips the map along that axis.
    """

    latitude_bounds: Bounds = (-1.0, 1.0)
    longitude_bounds: Bounds = (-1.0, 1.0)

    @classmethod
    def from_config(
        cls, source_module: NoiseSource, config: "SphereMapConfig"
    ) -> "SphereMapBuilder":
        """Create a builder from a declarative sphere configuration."""
        return (
            cls(source_module)
            .set_size(config.width, config.height)
            .set_bounds(*config.latitude_bounds, *config.longitude_bounds)
        )

    @property
    def source_dimension(self) -> int:
        return 3

    def set_latitude_bounds(self, min_lat_bound: float, max_lat_bound: float) -> Self:
        return self.model_copy(update={"latitude_bounds": (min_lat_bound, max_lat_bound)})

    def set_longitude_bounds(self, min_lon_bound: float, max_lon_bound: float) -> Self:
        return self.model_copy(update={"longitude_bounds": (min_lon_bound, max_lon_bound)})

    def set_bounds(
        self,
        min_lat_bound: float,
        max_lat_bound: float,
        min_lon_bound: float,
        max_lon_bound: float,
    ) -> Self:
        """Set latitude and longitude bounds in one call."""
        return self.model_copy(
            update={
                "latitude_bounds": (min_lat_bound, max_lat_bound),
                "longitude_bounds": (min_lon_bound, max_lon_bound),
            }
        )

    def build(self) -> NoiseMap:
        width, height = self.size

        logger.debug(
            "noise_map_build_started", projection="sphere", width=width, height=height
        )

        result_map = NoiseMap(width, height)

        latitudes = sample_axis(self.latitude_bounds[0], self.latitude_bounds[1], height)
        longitudes = sample_axis(self.longitude_bounds[0], self.longitude_bounds[1], width)

        get = self.source_module.get
        for y in range(height):
            current_lat = latitudes[y]
            for x in range(width):
                result_map[x, y] = get(lat_lon_to_xyz(current_lat, longitudes[x]))

        logger.debug("noise_map_built", projection="sphere", width=width, height=height)
        return result_map
