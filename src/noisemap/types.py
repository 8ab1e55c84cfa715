"""Core types: the noise map grid and bound pairs."""

from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from .exceptions import GridIndexError

# (lower, upper) pair along one axis
Bounds = tuple[float, float]

# A sample point handed to a noise source; length matches the source's dimension
Point = tuple[float, ...]


class NoiseMap:
    """Dense 2D grid of float64 values addressed by (x, y).

    Storage is a numpy array of shape (height, width), so row y of the
    grid is ``values[y]``. Cells start at 0.0.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Noise map size must be non-negative, got {width}x{height}")
        self._data: NDArray[np.float64] = np.zeros((height, width), dtype=np.float64)

    @classmethod
    def from_array(cls, array: NDArray) -> "NoiseMap":
        """Create a noise map from a (height, width) array.

        The array is copied.

        Raises:
            ValueError: If the array isn't 2D.
        """
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        noise_map = cls(array.shape[1], array.shape[0])
        noise_map._data[...] = array
        return noise_map

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in cells."""
        return (self.width, self.height)

    @property
    def values(self) -> NDArray[np.float64]:
        """Read-only view of the underlying (height, width) array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> NDArray[np.float64]:
        """Return an independent copy of the grid as a (height, width) array."""
        return self._data.copy()

    def _check_index(self, key: tuple[int, int]) -> tuple[int, int]:
        x, y = key
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise GridIndexError(
                f"Cell ({x}, {y}) out of range for {self.width}x{self.height} noise map"
            )
        return x, y

    def __getitem__(self, key: tuple[int, int]) -> float:
        x, y = self._check_index(key)
        return float(self._data[y, x])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        x, y = self._check_index(key)
        self._data[y, x] = value

    def __iter__(self) -> Iterator[float]:
        """Iterate cell values in row-major order (y outer, x inner)."""
        for value in self._data.flat:
            yield float(value)

    def __len__(self) -> int:
        return self._data.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoiseMap):
            return NotImplemented
        return self.size == other.size and np.array_equal(
            self._data, other._data, equal_nan=True
        )

    def __repr__(self) -> str:
        return f"NoiseMap(width={self.width}, height={self.height})"
