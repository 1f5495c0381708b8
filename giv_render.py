"""Headless renderer: place an image in a view of a given size and save a PNG.

Usage:
    python giv_render.py photo.jpg -o out.png --width 400 --height 300 \\
        --gravity top|right --scale-mode crop
"""

import argparse
import logging
import os
import sys

app_dir = os.path.dirname(os.path.abspath(__file__))
if app_dir not in sys.path:
    sys.path.insert(0, app_dir)

from export.view_renderer import load_image, paint_image
from models.gravity import Gravity, ScaleMode, Size
from models.view_config import ImageViewConfig
from utils.image_utils import compute_transform

logger = logging.getLogger(__name__)


def _gravity_arg(value: str) -> Gravity:
    try:
        return Gravity.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _scale_mode_arg(value: str) -> ScaleMode:
    try:
        return ScaleMode.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Render an image into a view using gravity and scale mode.',
    )
    parser.add_argument('input_file', help='Image to place.')
    parser.add_argument('-o', '--output', required=True, help='PNG file to write.')
    parser.add_argument('--width', type=int, required=True, help='View width in pixels.')
    parser.add_argument('--height', type=int, required=True, help='View height in pixels.')
    parser.add_argument(
        '--config',
        help='JSON view config; --gravity and --scale-mode override it.',
    )
    parser.add_argument(
        '--gravity', type=_gravity_arg, default=None,
        help='Gravity flags joined with "|", e.g. "top|left" (default: center).',
    )
    parser.add_argument(
        '--scale-mode', type=_scale_mode_arg, default=None,
        help='none, inside or crop (default: none).',
    )
    parser.add_argument(
        '--rtl', action='store_true',
        help='Resolve START/END for a right-to-left layout.',
    )
    parser.add_argument(
        '--background', default='white',
        help='Fill color for uncovered parts of the view.',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    input_path = os.path.abspath(args.input_file)
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}")
        return 1
    if args.width < 0 or args.height < 0:
        print("Error: View size must be non-negative")
        return 1

    config = ImageViewConfig()
    if args.config:
        try:
            config = ImageViewConfig.load_json(args.config)
        except (OSError, ValueError) as e:
            print(f"Error: Could not load config {args.config}: {e}")
            return 1
    if args.gravity is not None:
        config.image_gravity = args.gravity
    if args.scale_mode is not None:
        config.image_scale_mode = args.scale_mode

    try:
        image = load_image(input_path)
    except OSError as e:
        print(f"Error: Could not open image {input_path}: {e}")
        return 1

    matrix = compute_transform(
        Size(args.width, args.height),
        Size(image.width, image.height),
        config.image_scale_mode,
        config.image_gravity,
        args.rtl,
    )
    rendered = paint_image(image, args.width, args.height, matrix, args.background)
    logger.debug("Saving %sx%s render to %s", args.width, args.height, args.output)
    rendered.save(args.output, format="PNG")

    print(f"Image:     {image.width}x{image.height}")
    print(f"View:      {args.width}x{args.height}")
    print(f"Gravity:   {config.image_gravity.to_string() or 'none'}")
    print(f"Scale:     {config.image_scale_mode.name.lower()}")
    print(f"Transform: scale=({matrix.a:g}, {matrix.e:g}) translate=({matrix.c:g}, {matrix.f:g})")
    print(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
