import numpy as np
import pytest

from radial_warp import PixelBuffer


@pytest.fixture
def gradient_buffer():
    """Factory for buffers whose pixel (x, y) is (x, y, 7, 255)."""

    def make(width, height):
        ys, xs = np.mgrid[0:height, 0:width]
        rgba = np.stack(
            [xs, ys, np.full_like(xs, 7), np.full_like(xs, 255)], axis=-1
        ).astype(np.uint8)
        return PixelBuffer(width, height, rgba.reshape(-1))

    return make
