"""Shared fixtures for noise map tests."""

import math
import tempfile
from pathlib import Path

import pytest

from noisemap.sources import NoiseFnWrapper
from noisemap.types import Point


class RecordingSource:
    """Source that remembers every point it was asked for.

    Returns ``value_fn(point)``, or the first coordinate if none is given.
    """

    def __init__(self, dimension: int = 3, value_fn=None):
        self.dimension = dimension
        self.points: list[Point] = []
        self._value_fn = value_fn or (lambda point: point[0])

    def get(self, point: Point) -> float:
        self.points.append(point)
        return self._value_fn(point)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def first_coordinate() -> NoiseFnWrapper:
    """3D source returning the x coordinate unchanged."""
    return NoiseFnWrapper(lambda point: point[0], 3)


@pytest.fixture
def recording_source() -> RecordingSource:
    """3D source that records sampled points and returns x."""
    return RecordingSource(dimension=3)


@pytest.fixture
def periodic_source() -> NoiseFnWrapper:
    """3D source with period 2 along x and y."""
    return NoiseFnWrapper(
        lambda point: math.sin(math.pi * point[0]) * math.cos(math.pi * point[1]), 3
    )


@pytest.fixture
def sample_config_toml():
    """Sample map config as TOML string."""
    return """
[plane]
width = 64
height = 32
dimension = 2
x_bounds = [0.0, 4.0]
y_bounds = [2.0, -2.0]
seamless = true

[cylinder]
width = 90
height = 45
angle_bounds = [180.0, -180.0]
height_bounds = [1.0, -1.0]

[sphere]
width = 128
height = 64
latitude_bounds = [90.0, -90.0]
longitude_bounds = [-180.0, 180.0]
"""


@pytest.fixture
def config_file(temp_dir, sample_config_toml):
    """Write sample config to a temp file."""
    config_path = temp_dir / "maps.toml"
    config_path.write_text(sample_config_toml)
    return config_path


@pytest.fixture
def make_recording_source():
    """Factory for RecordingSource with a custom dimension or value function."""
    return RecordingSource
