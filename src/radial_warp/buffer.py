"""
RGBA pixel buffers.

A PixelBuffer is a flat ``uint8`` array of ``width * height * 4`` bytes, one
(R, G, B, A) run per pixel, rows top-to-bottom and pixels left-to-right.
The kernel reads the source buffer and writes the destination buffer in
place; it never allocates or keeps either of them.
"""
from typing import Tuple

import cv2
import numpy as np

from radial_warp.geometry import ViewportOffset

CHANNELS = 4


class InvalidBufferError(ValueError):
    """Raised when a buffer's data does not match its declared shape."""


def _as_byte_array(data) -> np.ndarray:
    if isinstance(data, np.ndarray):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        # bytearray stays shared with the caller, bytes comes back read-only
        return np.frombuffer(data, dtype=np.uint8)
    return np.asarray(data, dtype=np.uint8)


class PixelBuffer:
    """A width x height grid of RGBA pixels stored row-major in one flat array."""

    def __init__(self, width: int, height: int, data=None):
        self.width = width
        self.height = height
        if data is None:
            data = np.zeros(max(width, 0) * max(height, 0) * CHANNELS, dtype=np.uint8)
        self.data = _as_byte_array(data)

    @classmethod
    def blank(cls, width: int, height: int, fill: Tuple[int, int, int, int] = (0, 0, 0, 0)) -> "PixelBuffer":
        """Create a buffer with every pixel set to ``fill``."""
        data = np.tile(np.asarray(fill, dtype=np.uint8), width * height)
        return cls(width, height, data)

    @classmethod
    def from_image(cls, image: np.ndarray) -> "PixelBuffer":
        """
        Build a buffer from an OpenCV image.

        Args:
            image: Grayscale (H, W), BGR (H, W, 3) or BGRA (H, W, 4) array.
                16-bit images are scaled down to 8 bits and float images are
                read as 0.0-1.0 intensities.

        Returns:
            A new PixelBuffer holding the image as RGBA.
        """
        if image is None:
            raise InvalidBufferError("image is None")
        if image.dtype == np.uint16:
            image = cv2.convertScaleAbs(image, alpha=255.0 / 65535.0)
        elif image.dtype in (np.float32, np.float64):
            image = cv2.convertScaleAbs(image, alpha=255.0)
        elif image.dtype != np.uint8:
            raise InvalidBufferError(f"Unsupported image dtype: {image.dtype}")

        if image.ndim == 2:
            rgba = cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
        elif image.ndim == 3 and image.shape[2] == 3:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
        elif image.ndim == 3 and image.shape[2] == 4:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
        else:
            raise InvalidBufferError(f"Unsupported image shape: {image.shape}")

        height, width = rgba.shape[:2]
        return cls(width, height, np.ascontiguousarray(rgba).reshape(-1))

    def to_image(self, channels: int = 4) -> np.ndarray:
        """Convert back to an OpenCV image with 1, 3 (BGR) or 4 (BGRA) channels."""
        rgba = self.as_array()
        if channels == 4:
            return cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)
        if channels == 3:
            return cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGR)
        if channels == 1:
            return cv2.cvtColor(rgba, cv2.COLOR_RGBA2GRAY)
        raise ValueError(f"channels must be 1, 3 or 4, got {channels}")

    def as_array(self) -> np.ndarray:
        """(height, width, 4) view over the flat data. Writes go to the buffer."""
        return self.data.reshape(self.height, self.width, CHANNELS)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        i = (y * self.width + x) * CHANNELS
        return tuple(int(v) for v in self.data[i:i + CHANNELS])

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.data.copy())

    def validate(self, role: str = "buffer", writable: bool = False):
        """
        Check that the data matches the declared dimensions.

        Raises:
            InvalidBufferError: On the first mismatch found.
        """
        if self.width < 0 or self.height < 0:
            raise InvalidBufferError(
                f"{role} has negative size {self.width}x{self.height}"
            )
        if self.data.ndim != 1 or self.data.dtype != np.uint8:
            raise InvalidBufferError(
                f"{role} data must be a flat uint8 array, got {self.data.dtype} with shape {self.data.shape}"
            )
        expected = self.width * self.height * CHANNELS
        if self.data.size != expected:
            raise InvalidBufferError(
                f"{role} data has {self.data.size} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )
        if not self.data.flags.c_contiguous:
            raise InvalidBufferError(f"{role} data must be contiguous")
        if writable and not self.data.flags.writeable:
            raise InvalidBufferError(f"{role} data is read-only")

    def __repr__(self):
        return f"PixelBuffer(width={self.width}, height={self.height})"


def seed_from_source(source: PixelBuffer, destination: PixelBuffer,
                     offset: ViewportOffset = ViewportOffset()):
    """
    Copy source pixels into the destination at the viewport offset.

    Destination pixel (x, y) receives source pixel (x + left, y + top);
    anything that falls outside the source is left untouched.
    """
    left, top = offset
    x0 = max(0, -left)
    y0 = max(0, -top)
    x1 = min(destination.width, source.width - left)
    y1 = min(destination.height, source.height - top)
    if x0 >= x1 or y0 >= y1:
        return

    src = source.as_array()
    dst = destination.as_array()
    dst[y0:y1, x0:x1] = src[y0 + top:y1 + top, x0 + left:x1 + left]
