"""Tests for WarpConfig."""
import dataclasses
import math

import pytest

from radial_warp import CallableFalloff, LinearFalloff, Point2D, QuadraticFalloff, WarpConfig


class TestWarpConfig:
    def test_center_tuple_is_normalized(self):
        config = WarpConfig(center=(2, 3), angle_radians=1, radius_px=4)
        assert config.center == Point2D(2.0, 3.0)
        assert isinstance(config.center, Point2D)

    def test_defaults(self):
        config = WarpConfig(center=(0, 0), angle_radians=0.5, radius_px=10)
        assert isinstance(config.falloff, LinearFalloff)
        assert config.copy_input_first is False

    def test_is_immutable(self):
        config = WarpConfig(center=(0, 0), angle_radians=0.5, radius_px=10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.radius_px = 3

    def test_from_degrees(self):
        config = WarpConfig.from_degrees((1, 1), 180, 5)
        assert config.angle_radians == pytest.approx(math.pi)
        assert config.angle_degrees == pytest.approx(180)
        assert isinstance(config.falloff, LinearFalloff)

    def test_negative_angle_allowed(self):
        config = WarpConfig.from_degrees((1, 1), -90, 5)
        assert config.angle_radians == pytest.approx(-math.pi / 2)

    def test_falloff_by_name(self):
        config = WarpConfig(center=(0, 0), angle_radians=1, radius_px=1, falloff="quadratic")
        assert isinstance(config.falloff, QuadraticFalloff)

    def test_falloff_callable_is_wrapped(self):
        config = WarpConfig(center=(0, 0), angle_radians=1, radius_px=1, falloff=lambda d: d)
        assert isinstance(config.falloff, CallableFalloff)
        assert config.falloff.scale(0.25) == 0.25

    def test_bad_falloff_type(self):
        with pytest.raises(TypeError):
            WarpConfig(center=(0, 0), angle_radians=1, radius_px=1, falloff=3)
