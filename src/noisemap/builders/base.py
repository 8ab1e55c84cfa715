"""Builder contract shared by every projection."""

from abc import ABC, abstractmethod
from typing import Any, Self

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, NonNegativeInt

from ..sources import NoiseSource, check_source_dimension
from ..types import NoiseMap


def sample_axis(lower: float, upper: float, count: int) -> NDArray[np.float64]:
    """Positions ``lower + step * i`` for i in range(count).

    ``step`` is ``(upper - lower) / count``. Degenerate inputs follow float
    semantics (a zero count yields an empty axis, infinities propagate)
    rather than raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        step = (np.float64(upper) - np.float64(lower)) / np.float64(count)
        return np.float64(lower) + step * np.arange(count, dtype=np.float64)


class NoiseMapBuilder(BaseModel, ABC):
    """Immutable configuration for projecting a noise source onto a noise map.

    Every setter returns a new builder; the receiver is left untouched, so
    configuration chains read fluently and two builders never share a map.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source_module: Any
    size: tuple[NonNegativeInt, NonNegativeInt] = (100, 100)

    def __init__(self, source_module: NoiseSource, **data: Any):
        super().__init__(source_module=source_module, **data)
        check_source_dimension(self.source_module, self.source_dimension)

    @property
    @abstractmethod
    def source_dimension(self) -> int:
        """Dimension of the points this builder hands to its source."""

    def set_size(self, width: int, height: int) -> Self:
        """Return a builder producing width x height maps.

        Raises:
            ValueError: If either dimension is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Size must be non-negative, got {width}x{height}")
        return self.model_copy(update={"size": (width, height)})

    def set_source_module(self, source_module: NoiseSource) -> Self:
        """Return a builder sampling a different source.

        Raises:
            DimensionMismatchError: If the source declares another dimension.
        """
        check_source_dimension(source_module, self.source_dimension)
        return self.model_copy(update={"source_module": source_module})

    @abstractmethod
    def build(self) -> NoiseMap:
        """Sample the source into a freshly allocated noise map."""
