"""Swirl command line interface"""
import argparse
import sys

import cv2

from radial_warp.config import WARP_SETTINGS, WarpConfig
from radial_warp.falloff import FALLOFFS
from radial_warp.warp import Warp


def main(argv=None):
    """Swirl an image file and write the result."""
    parser = argparse.ArgumentParser(description="Apply a radial swirl to an image")
    parser.add_argument("input", type=str, help="Path to input image")
    parser.add_argument("output", type=str, help="Path to write the swirled image")
    parser.add_argument(
        "--center-x",
        type=float,
        default=None,
        help="Swirl center x in input pixels (default: image center)",
    )
    parser.add_argument(
        "--center-y",
        type=float,
        default=None,
        help="Swirl center y in input pixels (default: image center)",
    )
    parser.add_argument(
        "--angle",
        type=float,
        default=WARP_SETTINGS["angle_degrees"],
        help="Rotation at the center in degrees (negative reverses the swirl)",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=None,
        help="Swirl radius in pixels (default: half the smaller image side)",
    )
    parser.add_argument(
        "--falloff",
        choices=sorted(FALLOFFS),
        default=WARP_SETTINGS["falloff"],
        help="How rotation decays from center to radius",
    )
    parser.add_argument(
        "--no-copy-input",
        action="store_true",
        help="Leave pixels outside the swirl transparent instead of copying the input",
    )
    parser.add_argument("--left", type=int, default=0, help="Viewport x offset over the input")
    parser.add_argument("--top", type=int, default=0, help="Viewport y offset over the input")
    parser.add_argument("--viewport-width", type=int, default=None, help="Output width (default: input width)")
    parser.add_argument("--viewport-height", type=int, default=None, help="Output height (default: input height)")
    parser.add_argument(
        "--workers",
        type=int,
        default=WARP_SETTINGS["workers"],
        help="Threads used to warp row bands",
    )
    parser.add_argument("--show", action="store_true", help="Show a before/after comparison")

    args = parser.parse_args(argv)
    for name in ("viewport_width", "viewport_height"):
        value = getattr(args, name)
        if value is not None and value <= 0:
            parser.error(f"--{name.replace('_', '-')} must be positive, got {value}")

    image = cv2.imread(args.input, cv2.IMREAD_UNCHANGED)
    if image is None:
        print(f"✗ Failed to load image: {args.input}")
        sys.exit(1)

    h, w = image.shape[:2]
    center = (
        args.center_x if args.center_x is not None else w / 2,
        args.center_y if args.center_y is not None else h / 2,
    )
    radius = args.radius if args.radius is not None else min(w, h) * WARP_SETTINGS["radius_fraction"]
    viewport_size = (
        args.viewport_width if args.viewport_width is not None else w,
        args.viewport_height if args.viewport_height is not None else h,
    )

    warp = Warp(image, viewport_size=viewport_size, left=args.left, top=args.top)
    print(f"Warping {args.input} ({w}x{h}) -> viewport {viewport_size[0]}x{viewport_size[1]}")
    print(f"  - Center: ({center[0]:.1f}, {center[1]:.1f})")
    print(f"  - Angle: {args.angle:.1f} deg, radius: {radius:.1f} px, falloff: {args.falloff}")

    result = warp.deform(
        center,
        args.angle,
        radius,
        func=FALLOFFS[args.falloff](),
        copy_input=WARP_SETTINGS["copy_input_first"] and not args.no_copy_input,
        workers=args.workers,
    )

    if not cv2.imwrite(args.output, result):
        print(f"✗ Failed to write image: {args.output}")
        sys.exit(1)

    stats = warp.last_stats
    print(f"\n✓ Saved {args.output}")
    print(f"  - Pixels written: {stats.written}")
    print(f"  - Outside radius: {stats.skipped_radius}")
    print(f"  - Sample outside input: {stats.skipped_bounds}")

    if args.show:
        from radial_warp.visualize import draw_warp_region, show_comparison

        config = WarpConfig.from_degrees(center, args.angle, radius)
        show_comparison(image, draw_warp_region(result, config, warp.offset))


if __name__ == "__main__":
    main()
