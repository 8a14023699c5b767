"""
Radial remap kernel.

For every destination pixel inside the warp radius, the kernel rotates the
pixel's source-space position around the center by
``angle_radians * falloff(dist / radius_px)`` while keeping its distance to
the center, truncates the result to an integer source pixel and copies that
pixel's four RGBA bytes. Pixels outside the radius, and pixels whose sample
lands outside the source buffer, are left untouched.

Rows are independent of each other, so the destination can be split into
row bands and warped on several threads.
"""
import math
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, Optional, Tuple

import numpy as np

from radial_warp.buffer import PixelBuffer, seed_from_source
from radial_warp.config import WarpConfig
from radial_warp.geometry import ViewportOffset, distance_to_center


class WarpStats(NamedTuple):
    """Per-pixel outcome counts for one pass."""
    processed: int = 0
    written: int = 0
    skipped_radius: int = 0
    skipped_bounds: int = 0

    def __add__(self, other):
        return WarpStats(*(a + b for a, b in zip(self, other)))


def sample_position(sx: float, sy: float, config: WarpConfig,
                    dist: Optional[float] = None) -> Tuple[int, int]:
    """
    Source pixel sampled for the source-space point (sx, sy).

    Only meaningful for points strictly inside ``config.radius_px``. A radius
    <= 0 applies no rotation, so the point maps onto its own pixel.
    """
    center = config.center
    r = distance_to_center((sx, sy), center) if dist is None else dist

    rotation = 0.0
    if config.radius_px > 0:
        rotation = config.angle_radians * config.falloff.scale(r / config.radius_px)
    angle = math.atan2(sy - center.y, sx - center.x) + rotation

    # int() truncates toward zero
    return int(center.x + math.cos(angle) * r), int(center.y + math.sin(angle) * r)


def remap_coordinates(width: int, row_start: int, row_stop: int,
                      offset: ViewportOffset, config: WarpConfig):
    """
    Vectorized sample positions for destination rows [row_start, row_stop).

    Returns:
        (dest_x, dest_y, src_x, src_y) integer arrays, one entry per
        destination pixel strictly inside the warp radius.
    """
    ys, xs = np.mgrid[row_start:row_stop, 0:width]
    cx, cy = config.center

    dx = (xs + offset.left) - cx
    dy = (ys + offset.top) - cy
    dist = np.sqrt(dx * dx + dy * dy)

    inside = dist < config.radius_px
    r = dist[inside]

    rotation = config.angle_radians * np.asarray(
        config.falloff.scale_array(r / config.radius_px), dtype=np.float64
    )
    angle = np.arctan2(dy[inside], dx[inside]) + rotation

    src_x = np.trunc(cx + np.cos(angle) * r).astype(np.int64)
    src_y = np.trunc(cy + np.sin(angle) * r).astype(np.int64)
    return xs[inside], ys[inside], src_x, src_y


def _warp_rows(source: PixelBuffer, destination: PixelBuffer, offset: ViewportOffset,
               config: WarpConfig, row_start: int, row_stop: int) -> WarpStats:
    dest_x, dest_y, src_x, src_y = remap_coordinates(
        destination.width, row_start, row_stop, offset, config
    )

    # Check each axis separately so samples never wrap across rows
    valid = (src_x >= 0) & (src_x < source.width) & (src_y >= 0) & (src_y < source.height)

    dst = destination.as_array()
    src = source.as_array()
    dst[dest_y[valid], dest_x[valid]] = src[src_y[valid], src_x[valid]]

    processed = (row_stop - row_start) * destination.width
    written = int(np.count_nonzero(valid))
    return WarpStats(
        processed=processed,
        written=written,
        skipped_radius=processed - dest_x.size,
        skipped_bounds=dest_x.size - written,
    )


def _row_bands(height: int, workers: int):
    bands = min(workers, height)
    edges = np.linspace(0, height, bands + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(edges[:-1], edges[1:]) if b > a]


def apply(source: PixelBuffer, destination: PixelBuffer, offset: ViewportOffset,
          config: WarpConfig, workers: int = 1) -> WarpStats:
    """
    Swirl ``source`` into ``destination`` in place.

    Args:
        source: Buffer to sample from. Never modified.
        destination: Buffer to write to.
        offset: Added to destination coordinates to get source coordinates.
        config: Warp parameters.
        workers: Number of threads; rows are split into that many bands.

    Returns:
        WarpStats with the number of pixels written and skipped.

    Raises:
        InvalidBufferError: If either buffer's data does not match its size.
    """
    source.validate("source")
    destination.validate("destination", writable=True)
    offset = ViewportOffset(int(offset[0]), int(offset[1]))

    if config.copy_input_first:
        seed_from_source(source, destination, offset)

    total = destination.width * destination.height
    if config.radius_px <= 0 or total == 0:
        return WarpStats(processed=total, skipped_radius=total)

    if workers <= 1:
        return _warp_rows(source, destination, offset, config, 0, destination.height)

    stats = WarpStats()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_warp_rows, source, destination, offset, config, start, stop)
            for start, stop in _row_bands(destination.height, workers)
        ]
        for future in futures:
            stats = stats + future.result()
    return stats


class RadialRemapKernel:
    """A WarpConfig bound to the kernel, callable once per frame."""

    def __init__(self, config: WarpConfig, workers: int = 1):
        self.config = config
        self.workers = workers

    def __call__(self, source: PixelBuffer, destination: PixelBuffer,
                 offset: ViewportOffset = ViewportOffset()) -> WarpStats:
        return apply(source, destination, offset, self.config, workers=self.workers)
