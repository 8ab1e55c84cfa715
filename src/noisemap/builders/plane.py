"""Plane projection: maps grid cells linearly onto a rectangle of the source."""

from typing import TYPE_CHECKING, Callable, Literal, Self

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, field_validator

from .. import interpolate
from ..sources import NoiseFnWrapper, NoiseSource
from ..types import Bounds, NoiseMap, Point
from .base import NoiseMapBuilder, sample_axis

if TYPE_CHECKING:
    from ..config import PlaneMapConfig

logger = structlog.get_logger()

PlaneDimension = Literal[2, 3, 4]

# Fixed trailing coordinates appended to (x, y) for each source dimension
_EXTRA_COORDINATES: dict[int, tuple[float, ...]] = {
    2: (),
    3: (0.0,),
    4: (0.0, 0.5),
}

MAX_GRANULARITY = 10

# Called with (total_cells, cells_done)
ProgressCallback = Callable[[int, int], None]


def normalize_granularity(granularity: int) -> int:
    """Collapse a requested granularity into [1, 10].

    Values up to 10 are kept. Larger values become their base-10 digit
    count, i.e. ``floor(log10(granularity)) + 1``, so 37 becomes 2 and 255
    becomes 3.

    Raises:
        ValueError: If granularity is below 1.
    """
    if granularity < 1:
        raise ValueError(f"Granularity must be at least 1, got {granularity}")
    while granularity > MAX_GRANULARITY:
        granularity = len(str(granularity))
    return granularity


class ProgressCallbackConfig(BaseModel):
    """Progress notification settings for a plane build.

    The callback fires for every processed cell whose progress point is a
    multiple of ``granularity`` (1 = every cell).
    """

    model_config = ConfigDict(frozen=True)

    callback: ProgressCallback
    granularity: int = 1

    @field_validator("granularity")
    @classmethod
    def _collapse_granularity(cls, value: int) -> int:
        return normalize_granularity(value)


def seamless_blend(
    coords: NDArray[np.float64], lower: float, upper: float
) -> NDArray[np.float64]:
    """Blend factors ``1 - (coord - lower) / extent`` for seamless tiling."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        extent = np.float64(upper) - np.float64(lower)
        return 1.0 - (coords - np.float64(lower)) / extent


class PlaneMapBuilder(NoiseMapBuilder):
    """Builds noise maps from a rectangular region of a 2, 3 or 4D source.

    Cell (x, y) samples the source at ``(current_x, current_y)`` padded to
    the builder's dimension with 0.0 (3D) or 0.0, 0.5 (4D). Bounds are
    stored in the order given.
    """

    dimension: PlaneDimension = 3
    is_seamless: bool = False
    x_bounds: Bounds = (-1.0, 1.0)
    y_bounds: Bounds = (-1.0, 1.0)
    progress_callback: ProgressCallbackConfig | None = None

    @classmethod
    def new_fn(
        cls, source_fn: Callable[[Point], float], dimension: PlaneDimension = 3
    ) -> "PlaneMapBuilder":
        """Create a builder around a bare ``point -> float`` function."""
        return cls(NoiseFnWrapper(source_fn, dimension), dimension=dimension)

    @classmethod
    def from_config(
        cls, source_module: NoiseSource, config: "PlaneMapConfig"
    ) -> "PlaneMapBuilder":
        """Create a builder from a declarative plane configuration."""
        return (
            cls(source_module, dimension=config.dimension)
            .set_size(config.width, config.height)
            .set_x_bounds(*config.x_bounds)
            .set_y_bounds(*config.y_bounds)
            .set_is_seamless(config.seamless)
        )

    @property
    def source_dimension(self) -> int:
        return self.dimension

    def set_is_seamless(self, is_seamless: bool) -> Self:
        return self.model_copy(update={"is_seamless": is_seamless})

    def set_x_bounds(self, lower_x_bound: float, upper_x_bound: float) -> Self:
        return self.model_copy(update={"x_bounds": (lower_x_bound, upper_x_bound)})

    def set_y_bounds(self, lower_y_bound: float, upper_y_bound: float) -> Self:
        return self.model_copy(update={"y_bounds": (lower_y_bound, upper_y_bound)})

    def set_progress_callback(self, granularity: int, callback: ProgressCallback) -> Self:
        """Return a builder that reports build progress through callback.

        Args:
            granularity: How often to call back, collapsed into [1, 10].
            callback: Called as ``callback(total_cells, progress_point)``.
        """
        config = ProgressCallbackConfig(callback=callback, granularity=granularity)
        return self.model_copy(update={"progress_callback": config})

    def _point(self, x: float, y: float) -> Point:
        return (x, y, *_EXTRA_COORDINATES[self.dimension])

    def _make_sampler(
        self, x_coords: NDArray[np.float64], y_coords: NDArray[np.float64]
    ) -> Callable[[int, int], float]:
        """Return a function computing the value of cell (x, y)."""
        get = self.source_module.get
        point = self._point

        if not self.is_seamless:
            def sample(x: int, y: int) -> float:
                return get(point(float(x_coords[x]), float(y_coords[y])))

            return sample

        x_extent = float(self.x_bounds[1]) - float(self.x_bounds[0])
        y_extent = float(self.y_bounds[1]) - float(self.y_bounds[0])
        x_blends = seamless_blend(x_coords, *self.x_bounds)
        y_blends = seamless_blend(y_coords, *self.y_bounds)

        def sample_seamless(x: int, y: int) -> float:
            current_x = float(x_coords[x])
            current_y = float(y_coords[y])

            sw_value = get(point(current_x, current_y))
            se_value = get(point(current_x + x_extent, current_y))
            nw_value = get(point(current_x, current_y + y_extent))
            ne_value = get(point(current_x + x_extent, current_y + y_extent))

            x_blend = float(x_blends[x])
            y_blend = float(y_blends[y])

            y0 = interpolate.linear(sw_value, se_value, x_blend)
            y1 = interpolate.linear(nw_value, ne_value, x_blend)

            return interpolate.linear(y0, y1, y_blend)

        return sample_seamless

    def build(self) -> NoiseMap:
        width, height = self.size

        logger.debug(
            "noise_map_build_started",
            projection="plane",
            width=width,
            height=height,
            dimension=self.dimension,
            seamless=self.is_seamless,
        )

        result_map = NoiseMap(width, height)

        x_coords = sample_axis(self.x_bounds[0], self.x_bounds[1], width)
        y_coords = sample_axis(self.y_bounds[0], self.y_bounds[1], height)
        sample = self._make_sampler(x_coords, y_coords)

        if self.progress_callback is None:
            self._fill(result_map, sample)
        else:
            self._fill_with_progress(result_map, sample, self.progress_callback)

        logger.debug("noise_map_built", projection="plane", width=width, height=height)
        return result_map

    @staticmethod
    def _fill(result_map: NoiseMap, sample: Callable[[int, int], float]) -> None:
        width, height = result_map.size
        for y in range(height):
            for x in range(width):
                result_map[x, y] = sample(x, y)

    @staticmethod
    def _fill_with_progress(
        result_map: NoiseMap,
        sample: Callable[[int, int], float],
        progress: ProgressCallbackConfig,
    ) -> None:
        width, height = result_map.size
        total = width * height
        for y in range(height):
            for x in range(width):
                result_map[x, y] = sample(x, y)

                # Reported as y * x, not the linear index; callers rely on this cadence
                progress_pt = y * x
                if progress_pt % progress.granularity == 0:
                    progress.callback(total, progress_pt)
