"""
Image-level swirl facade.

Holds an input image and a viewport (the visible output surface) that may be
a different size and scrolled by ``left``/``top`` relative to the input.
The viewport keeps its pixels between calls, so successive deformations
without ``copy_input`` draw over what was there before.
"""
from typing import Optional, Tuple

import numpy as np

from radial_warp.buffer import PixelBuffer
from radial_warp.config import WarpConfig
from radial_warp.falloff import FalloffFunction, LinearFalloff
from radial_warp.geometry import ViewportOffset
from radial_warp.kernel import WarpStats, apply


class Warp:
    """Swirls an input image into a viewport image."""

    # Default falloff; override per instance or per deform() call
    func: FalloffFunction = LinearFalloff()

    def __init__(
        self,
        input_image: np.ndarray,
        viewport_size: Optional[Tuple[int, int]] = None,
        left: int = 0,
        top: int = 0,
    ):
        """
        Initialize the warp surfaces.

        Args:
            input_image: OpenCV image to sample from (gray, BGR or BGRA).
            viewport_size: (width, height) of the output. Defaults to the input size.
            left: Viewport x position over the input image.
            top: Viewport y position over the input image.
        """
        self.input = PixelBuffer.from_image(input_image)
        self.channels = 1 if input_image.ndim == 2 else input_image.shape[2]
        self.w = self.input.width
        self.h = self.input.height

        if viewport_size is None:
            viewport_size = (self.w, self.h)
        self.output_w, self.output_h = viewport_size
        self.offset = ViewportOffset(left, top)

        self.viewport = PixelBuffer(self.output_w, self.output_h)
        self.last_stats: Optional[WarpStats] = None

    def clear(self):
        """Reset the viewport to transparent black."""
        self.viewport.data[:] = 0

    def deform(
        self,
        center: Tuple[float, float],
        angle: float,
        radius: float,
        func=None,
        copy_input: bool = False,
        workers: int = 1,
    ) -> np.ndarray:
        """
        Swirl the input image into the viewport.

        Args:
            center: (x, y) swirl center in input image coordinates.
            angle: Rotation at the center, in degrees.
            radius: Radius of the swirl in pixels.
            func: Optional falloff overriding ``self.func``.
            copy_input: Copy the input into the viewport first so pixels
                outside the swirl show the original image.
            workers: Threads used by the kernel.

        Returns:
            The viewport as an image with the same channel count as the input.
        """
        config = WarpConfig.from_degrees(
            center,
            angle,
            radius,
            falloff=func or self.func,
            copy_input_first=copy_input,
        )
        self.last_stats = apply(self.input, self.viewport, self.offset, config, workers=workers)
        return self.viewport.to_image(self.channels)
