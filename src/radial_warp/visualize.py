"""Preview helpers for swirl results."""
from typing import Optional

import cv2
import matplotlib.pyplot as plt
import numpy as np

from radial_warp.config import WarpConfig
from radial_warp.geometry import ViewportOffset


def _to_rgb(img: np.ndarray) -> np.ndarray:
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def draw_warp_region(
    image: np.ndarray,
    config: WarpConfig,
    offset: ViewportOffset = ViewportOffset(),
    color=(0, 0, 255),
    thickness: int = 1,
) -> np.ndarray:
    """
    Draw the swirl center and radius onto a copy of a viewport image.

    The center is given in source coordinates, so it is shifted back by the
    viewport offset before drawing.
    """
    vis = image.copy()
    cx = int(config.center.x - offset.left)
    cy = int(config.center.y - offset.top)
    radius = max(int(config.radius_px), 0)

    if vis.ndim == 3 and vis.shape[2] == 4:
        color = tuple(color) + (255,)
    cv2.circle(vis, (cx, cy), radius, color, thickness)
    cv2.drawMarker(vis, (cx, cy), color, cv2.MARKER_CROSS, 6, thickness)
    return vis


def show_comparison(
    before: np.ndarray,
    after: np.ndarray,
    title: str = "Swirl",
    save_path: Optional[str] = None,
):
    """
    Show the original and swirled images side by side.

    If ``save_path`` is given the figure is written there instead of shown.
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    for ax, img, label in zip(axes, (before, after), ("Original", title)):
        ax.imshow(_to_rgb(img), cmap="gray" if img.ndim == 2 else None)
        ax.set_title(label, fontsize=14)
        ax.axis('off')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path)
        plt.close(fig)
        print(f"Comparison saved to {save_path}")
    else:
        plt.show()
