"""Radial swirl deformation for RGBA pixel buffers"""
from radial_warp.geometry import Point2D, ViewportOffset, distance_to_center, to_source_space
from radial_warp.falloff import (
    FALLOFFS,
    CallableFalloff,
    FalloffFunction,
    LinearFalloff,
    QuadraticFalloff,
    SmoothstepFalloff,
    StepFalloff,
    get_falloff,
)
from radial_warp.buffer import InvalidBufferError, PixelBuffer, seed_from_source
from radial_warp.config import WarpConfig
from radial_warp.kernel import RadialRemapKernel, WarpStats, apply, remap_coordinates, sample_position
from radial_warp.warp import Warp

__all__ = [
    "Point2D",
    "ViewportOffset",
    "distance_to_center",
    "to_source_space",
    "FALLOFFS",
    "CallableFalloff",
    "FalloffFunction",
    "LinearFalloff",
    "QuadraticFalloff",
    "SmoothstepFalloff",
    "StepFalloff",
    "get_falloff",
    "InvalidBufferError",
    "PixelBuffer",
    "seed_from_source",
    "WarpConfig",
    "RadialRemapKernel",
    "WarpStats",
    "apply",
    "remap_coordinates",
    "sample_position",
    "Warp",
]
