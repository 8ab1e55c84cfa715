"""Noise map configuration loading from TOML files."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, NonNegativeInt


class PlaneMapConfig(BaseModel):
    """Plane projection settings."""

    width: NonNegativeInt = 100
    height: NonNegativeInt = 100
    dimension: Literal[2, 3, 4] = Field(default=3, description="Source point dimension")
    x_bounds: tuple[float, float] = (-1.0, 1.0)
    y_bounds: tuple[float, float] = (-1.0, 1.0)
    seamless: bool = Field(default=False, description="Blend edges so the map tiles")


class CylinderMapConfig(BaseModel):
    """Cylinder projection settings."""

    width: NonNegativeInt = 100
    height: NonNegativeInt = 100
    angle_bounds: tuple[float, float] = Field(
        default=(-90.0, 90.0), description="Angular sweep in degrees"
    )
    height_bounds: tuple[float, float] = (-1.0, 1.0)


class SphereMapConfig(BaseModel):
    """Sphere projection settings."""

    width: NonNegativeInt = 100
    height: NonNegativeInt = 100
    latitude_bounds: tuple[float, float] = Field(
        default=(-1.0, 1.0), description="Latitude range in degrees"
    )
    longitude_bounds: tuple[float, float] = Field(
        default=(-1.0, 1.0), description="Longitude range in degrees"
    )


class MapConfig(BaseModel):
    """Complete configuration: one optional section per projection."""

    plane: PlaneMapConfig | None = None
    cylinder: CylinderMapConfig | None = None
    sphere: SphereMapConfig | None = None


def load_config(config_path: Path) -> MapConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed MapConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If a value is out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return MapConfig.model_validate(data)
