"""Cylinder projection: wraps the noise map around a unit cylinder."""

from typing import TYPE_CHECKING, Self

import structlog

from ..interpolate import cylinder_to_xyz
from ..sources import NoiseSource
from ..types import Bounds, NoiseMap
from .base import NoiseMapBuilder, sample_axis

if TYPE_CHECKING:
    from ..config import CylinderMapConfig

logger = structlog.get_logger()


def _ordered(lower_bound: float, upper_bound: float) -> Bounds:
    if lower_bound >= upper_bound:
        return (upper_bound, lower_bound)
    return (lower_bound, upper_bound)


class CylinderMapBuilder(NoiseMapBuilder):
    """Builds noise maps from the surface of a unit cylinder in a 3D source.

    Columns sweep ``angle_bounds`` (degrees) around the y axis and rows
    climb ``height_bounds`` along it. Both bound pairs are kept ordered
    lower-first whatever order the setters receive them in.
    """

    angle_bounds: Bounds = (-90.0, 90.0)
    height_bounds: Bounds = (-1.0, 1.0)

    @classmethod
    def from_config(
        cls, source_module: NoiseSource, config: "CylinderMapConfig"
    ) -> "CylinderMapBuilder":
        """Create a builder from a declarative cylinder configuration."""
        return (
            cls(source_module)
            .set_size(config.width, config.height)
            .set_angle_bounds(*config.angle_bounds)
            .set_height_bounds(*config.height_bounds)
        )

    @property
    def source_dimension(self) -> int:
        return 3

    def set_angle_bounds(self, lower_bound: float, upper_bound: float) -> Self:
        return self.model_copy(update={"angle_bounds": _ordered(lower_bound, upper_bound)})

    def set_height_bounds(self, lower_bound: float, upper_bound: float) -> Self:
        return self.model_copy(update={"height_bounds": _ordered(lower_bound, upper_bound)})

    def build(self) -> NoiseMap:
        width, height = self.size

        logger.debug(
            "noise_map_build_started", projection="cylinder", width=width, height=height
        )

        result_map = NoiseMap(width, height)

        angles = sample_axis(self.angle_bounds[0], self.angle_bounds[1], width)
        heights = sample_axis(self.height_bounds[0], self.height_bounds[1], height)

        get = self.source_module.get
        for y in range(height):
            current_height = heights[y]
            for x in range(width):
                result_map[x, y] = get(cylinder_to_xyz(angles[x], current_height))

        logger.debug("noise_map_built", projection="cylinder", width=width, height=height)
        return result_map
