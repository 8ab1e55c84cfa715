"""Tests for interpolation and projection helpers."""

import math

import pytest

from noisemap.interpolate import cylinder_to_xyz, lat_lon_to_xyz, linear


class TestLinear:
    """Tests for linear interpolation."""

    def test_endpoints(self) -> None:
        """t=0 gives a and t=1 gives b."""
        assert linear(2.0, 6.0, 0.0) == 2.0
        assert linear(2.0, 6.0, 1.0) == 6.0

    def test_midpoint(self) -> None:
        """t=0.5 is the average."""
        assert linear(2.0, 6.0, 0.5) == 4.0

    def test_extrapolates(self) -> None:
        """t outside [0, 1] is not clamped."""
        assert linear(0.0, 1.0, 2.0) == 2.0
        assert linear(0.0, 1.0, -1.0) == -1.0


class TestLatLonToXyz:
    """Tests for the unit sphere projection."""

    def test_origin(self) -> None:
        """Latitude 0, longitude 0 is (1, 0, 0)."""
        assert lat_lon_to_xyz(0.0, 0.0) == pytest.approx((1.0, 0.0, 0.0))

    def test_north_pole(self) -> None:
        """Latitude 90 is the pole on the y axis."""
        assert lat_lon_to_xyz(90.0, 0.0) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)

    def test_longitude_90(self) -> None:
        """Longitude 90 on the equator is (0, 0, 1)."""
        assert lat_lon_to_xyz(0.0, 90.0) == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)

    def test_unit_length(self) -> None:
        """Projected points lie on the unit sphere."""
        x, y, z = lat_lon_to_xyz(37.0, -122.0)
        assert math.sqrt(x * x + y * y + z * z) == pytest.approx(1.0)

    def test_nan_propagates(self) -> None:
        """Non-finite input yields NaN rather than an error."""
        assert all(math.isnan(c) for c in lat_lon_to_xyz(float("nan"), 0.0))


class TestCylinderToXyz:
    """Tests for the unit cylinder projection."""

    def test_angle_zero(self) -> None:
        """Angle 0 at height h is (1, h, 0)."""
        assert cylinder_to_xyz(0.0, 0.3) == pytest.approx((1.0, 0.3, 0.0))

    def test_angle_90(self) -> None:
        """Angle 90 at height h is (0, h, 1)."""
        assert cylinder_to_xyz(90.0, -0.7) == pytest.approx((0.0, -0.7, 1.0), abs=1e-12)
