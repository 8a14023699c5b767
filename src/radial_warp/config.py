"""Warp configuration and shared defaults"""
import math
from dataclasses import dataclass, field

from radial_warp.falloff import CallableFalloff, FalloffFunction, LinearFalloff, get_falloff
from radial_warp.geometry import Point2D, as_point

# Defaults for the command line and the Warp facade
WARP_SETTINGS = {
    "angle_degrees": 90.0,
    "radius_fraction": 0.5,
    "falloff": "linear",
    "copy_input_first": True,
    "workers": 1,
}


def _resolve_falloff(falloff) -> FalloffFunction:
    if falloff is None:
        return LinearFalloff()
    if isinstance(falloff, FalloffFunction):
        return falloff
    if isinstance(falloff, str):
        return get_falloff(falloff)
    if callable(falloff):
        return CallableFalloff(falloff)
    raise TypeError(f"falloff must be a FalloffFunction, name or callable, got {type(falloff).__name__}")


@dataclass(frozen=True)
class WarpConfig:
    """
    Parameters for one swirl pass.

    Args:
        center: (x, y) of the swirl center in source coordinates.
        angle_radians: Rotation at full falloff. Negative swirls the other way.
        radius_px: Radius of the affected disc. Values <= 0 touch no pixels.
        falloff: FalloffFunction, built-in falloff name or plain ``f(d)`` callable.
        copy_input_first: Seed the destination with the source before warping.
    """
    center: Point2D
    angle_radians: float
    radius_px: float
    falloff: FalloffFunction = field(default_factory=LinearFalloff)
    copy_input_first: bool = False

    def __post_init__(self):
        # frozen dataclass, so normalize through object.__setattr__
        object.__setattr__(self, "center", as_point(self.center))
        object.__setattr__(self, "angle_radians", float(self.angle_radians))
        object.__setattr__(self, "radius_px", float(self.radius_px))
        object.__setattr__(self, "falloff", _resolve_falloff(self.falloff))

    @classmethod
    def from_degrees(cls, center, angle_degrees: float, radius_px: float,
                     falloff=None, copy_input_first: bool = False) -> "WarpConfig":
        """Build a config from an angle in degrees."""
        return cls(
            center=center,
            angle_radians=angle_degrees * math.pi / 180,
            radius_px=radius_px,
            falloff=falloff,
            copy_input_first=copy_input_first,
        )

    @property
    def angle_degrees(self) -> float:
        return self.angle_radians * 180 / math.pi
