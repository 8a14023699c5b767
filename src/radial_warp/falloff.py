"""
Falloff functions for the swirl effect.

A falloff maps a normalized distance ``d`` (0.0 at the center, 1.0 at the
edge of the warp radius) to a rotation scale factor. The kernel multiplies
that factor by the configured angle. Output is not clamped, so a falloff
may return values outside [0, 1] to over-rotate or reverse the swirl.

Subclasses only need ``scale``, which works on one float at a time. The
kernel calls ``scale_array`` on whole coordinate arrays; its default
vectorizes ``scale`` and the built-in falloffs override it with numpy math.
"""
import math
from typing import Callable, Dict

import numpy as np


class FalloffFunction:
    """Base class: subclasses implement ``scale(normalized_distance) -> float``."""

    name = "base"

    def scale(self, d: float) -> float:
        raise NotImplementedError

    def scale_array(self, d: np.ndarray) -> np.ndarray:
        """Apply ``scale`` to every element of ``d``."""
        return np.vectorize(self.scale, otypes=[np.float64])(d)

    def __call__(self, d):
        if np.ndim(d) == 0:
            return self.scale(d)
        return self.scale_array(np.asarray(d, dtype=np.float64))

    def __repr__(self):
        return f"{type(self).__name__}()"


class LinearFalloff(FalloffFunction):
    """Full rotation at the center, none at the radius."""

    name = "linear"

    def scale(self, d):
        return 1.0 - d

    def scale_array(self, d):
        return 1.0 - d


class QuadraticFalloff(FalloffFunction):
    """Rotation decays with the square of the remaining distance."""

    name = "quadratic"

    def scale(self, d):
        factor = 1.0 - d
        return factor * factor

    def scale_array(self, d):
        factor = 1.0 - d
        return factor * factor


class SmoothstepFalloff(FalloffFunction):
    """Eased version of the linear falloff with flat ends."""

    name = "smoothstep"

    def scale(self, d):
        t = 1.0 - d
        return t * t * (3.0 - 2.0 * t)

    def scale_array(self, d):
        t = 1.0 - d
        return t * t * (3.0 - 2.0 * t)


class StepFalloff(FalloffFunction):
    """Linear falloff quantized into ``levels`` bands (terraced swirl)."""

    name = "step"

    def __init__(self, levels: int = 4):
        if levels < 1:
            raise ValueError(f"levels must be >= 1, got {levels}")
        self.levels = levels

    def scale(self, d):
        return math.ceil((1.0 - d) * self.levels) / self.levels

    def scale_array(self, d):
        return np.ceil((1.0 - d) * self.levels) / self.levels

    def __repr__(self):
        return f"StepFalloff(levels={self.levels})"


class CallableFalloff(FalloffFunction):
    """Wraps a plain ``f(d) -> float`` as a falloff."""

    name = "custom"

    def __init__(self, func: Callable[[float], float]):
        self.func = func

    def scale(self, d):
        return float(self.func(float(d)))

    def __repr__(self):
        return f"CallableFalloff({self.func!r})"


FALLOFFS: Dict[str, type] = {
    LinearFalloff.name: LinearFalloff,
    QuadraticFalloff.name: QuadraticFalloff,
    SmoothstepFalloff.name: SmoothstepFalloff,
    StepFalloff.name: StepFalloff,
}


def get_falloff(name: str) -> FalloffFunction:
    """Look up a built-in falloff by name."""
    try:
        return FALLOFFS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown falloff '{name}'. Available: {', '.join(sorted(FALLOFFS))}"
        ) from None
