"""Point types and the coordinate mapping used by the swirl kernel."""
import math
from typing import NamedTuple, Tuple, Union


class Point2D(NamedTuple):
    """Pixel-space coordinates. May be fractional."""
    x: float
    y: float


class ViewportOffset(NamedTuple):
    """Translation from destination-buffer coordinates into source-buffer coordinates."""
    left: int = 0
    top: int = 0


PointLike = Union[Point2D, Tuple[float, float]]


def as_point(value: PointLike) -> Point2D:
    if isinstance(value, Point2D):
        return value
    x, y = value
    return Point2D(float(x), float(y))


def to_source_space(x, y, offset: ViewportOffset) -> Tuple[float, float]:
    """Map a destination pixel (x, y) into source-buffer coordinates."""
    return x + offset.left, y + offset.top


def distance_to_center(px: PointLike, center: PointLike) -> float:
    """Euclidean distance between a point and the warp center."""
    xd = center[0] - px[0]
    yd = center[1] - px[1]
    return math.sqrt(xd * xd + yd * yd)
