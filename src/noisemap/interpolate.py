"""Interpolation and surface projection helpers shared by the builders.

Projection math runs through numpy so that non-finite coordinates
degrade to NaN instead of raising.
"""

import numpy as np


def linear(a: float, b: float, t: float) -> float:
    """Linearly interpolate between a and b.

    t is not clamped, so values outside [0, 1] extrapolate.
    """
    return a + t * (b - a)


def lat_lon_to_xyz(lat: float, lon: float) -> tuple[float, float, float]:
    """Convert latitude/longitude in degrees to a point on the unit sphere.

    Args:
        lat: Latitude in degrees.
        lon: Longitude in degrees.

    Returns:
        (x, y, z) with y as the polar axis.
    """
    lat_rad = np.radians(lat)
    lon_rad = np.radians(lon)

    r = np.cos(lat_rad)
    x = r * np.cos(lon_rad)
    y = np.sin(lat_rad)
    z = r * np.sin(lon_rad)

    return (float(x), float(y), float(z))


def cylinder_to_xyz(angle: float, height: float) -> tuple[float, float, float]:
    """Convert an angle in degrees and a height to a point on the unit cylinder.

    The cylinder's axis is the y axis.
    """
    angle_rad = np.radians(angle)
    return (float(np.cos(angle_rad)), float(height), float(np.sin(angle_rad)))
