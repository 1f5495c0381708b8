"""Renders an image into a view-sized bitmap using Pillow."""

import logging
from typing import Optional, Union

from PIL import Image

from models.gravity import Size
from models.view_config import ImageViewConfig
from utils.affine import AffineTransform
from utils.image_utils import compute_transform

logger = logging.getLogger(__name__)

Color = Union[str, tuple]


def load_image(path: str) -> Image.Image:
    """Open an image file as RGBA. Raises OSError if it cannot be read."""
    with Image.open(path) as img:
        return img.convert("RGBA")


def paint_image(
    image: Image.Image,
    view_width: int,
    view_height: int,
    matrix: AffineTransform,
    background: Color = "white",
) -> Image.Image:
    """Draw ``image`` through ``matrix`` onto a new view-sized canvas.

    Anything mapped outside the view is clipped.
    """
    canvas = Image.new("RGBA", (view_width, view_height), background)
    if view_width <= 0 or view_height <= 0:
        return canvas
    if image.width == 0 or image.height == 0 or matrix.determinant == 0:
        logger.debug("Nothing to paint for %sx%s image", image.width, image.height)
        return canvas

    placed = image.convert("RGBA").transform(
        (view_width, view_height),
        Image.Transform.AFFINE,
        matrix.to_pil_data(),
        resample=Image.Resampling.BICUBIC,
        fillcolor=(0, 0, 0, 0),
    )
    canvas.alpha_composite(placed)
    return canvas


def render_view(
    image: Optional[Image.Image],
    view_size: Size,
    config: ImageViewConfig,
    is_rtl: bool = False,
    background: Color = "white",
) -> Image.Image:
    """Render what a view of ``view_size`` shows for ``image``.

    Args:
        image: Source bitmap, or None when no image is assigned.
        view_size: Drawable area of the view.
        config: Gravity and scale mode for the image.
        is_rtl: Layout direction, used to resolve START/END.
        background: Fill for the parts of the view the image leaves uncovered.

    Returns:
        RGBA image exactly the size of the view.
    """
    width = int(round(view_size.width))
    height = int(round(view_size.height))
    if image is None or view_size.is_empty:
        return Image.new("RGBA", (width, height), background)

    matrix = compute_transform(
        view_size,
        Size(image.width, image.height),
        config.image_scale_mode,
        config.image_gravity,
        is_rtl,
    )
    return paint_image(image, width, height, matrix, background)
