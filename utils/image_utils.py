"""Transform calculation and coordinate conversion for placing an image in a view."""

import logging
from typing import Tuple

from models.gravity import Gravity, ScaleMode, Size
from utils.affine import AffineTransform, RectF

logger = logging.getLogger(__name__)


def scale_ratio(view_size: Size, image_size: Size, scale_mode: ScaleMode) -> float:
    """Uniform scale factor the given mode applies to the image.

    NONE never scales. An image with a zero dimension has no area to fit,
    so it is left unscaled rather than dividing by zero.
    """
    if scale_mode == ScaleMode.NONE:
        return 1.0
    if image_size.width <= 0 or image_size.height <= 0:
        return 1.0
    width_ratio = view_size.width / image_size.width
    height_ratio = view_size.height / image_size.height
    if scale_mode == ScaleMode.INSIDE:
        return min(width_ratio, height_ratio)
    return max(width_ratio, height_ratio)


def _apply_center_and_scale_mode(
    view_size: Size, image_size: Size, scale_mode: ScaleMode
) -> AffineTransform:
    center_x = view_size.width / 2
    center_y = view_size.height / 2

    # Center the image in the middle of the view.
    matrix = AffineTransform.identity().post_translate(
        center_x - image_size.width / 2, center_y - image_size.height / 2
    )
    if scale_mode == ScaleMode.NONE:
        return matrix

    ratio = scale_ratio(view_size, image_size, scale_mode)
    return matrix.post_scale(ratio, ratio, center_x, center_y)


def _apply_gravity(
    matrix: AffineTransform,
    view_size: Size,
    image_size: Size,
    gravity: Gravity,
    is_rtl: bool,
) -> AffineTransform:
    image_rect = matrix.map_rect(RectF.from_size(image_size.width, image_size.height))

    horizontal_shift = view_size.width / 2 - image_rect.width / 2
    vertical_shift = view_size.height / 2 - image_rect.height / 2

    if Gravity.LEFT in gravity or (is_rtl and Gravity.END in gravity):
        matrix = matrix.post_translate(-horizontal_shift, 0)
    elif Gravity.RIGHT in gravity or (is_rtl and Gravity.START in gravity):
        matrix = matrix.post_translate(horizontal_shift, 0)

    if Gravity.TOP in gravity:
        matrix = matrix.post_translate(0, -vertical_shift)
    elif Gravity.BOTTOM in gravity:
        matrix = matrix.post_translate(0, vertical_shift)

    return matrix


def compute_transform(
    view_size: Size,
    image_size: Size,
    scale_mode: ScaleMode,
    gravity: Gravity,
    is_rtl: bool = False,
) -> AffineTransform:
    """Map image coordinates into view coordinates.

    The image is first centered in the view, then scaled about the view
    center according to ``scale_mode``, then pushed towards the edges named
    by ``gravity``. Horizontal and vertical gravity resolve independently;
    within an axis LEFT beats RIGHT and TOP beats BOTTOM. START/END only
    take effect for right-to-left layouts, where END means LEFT and START
    means RIGHT.
    """
    gravity = Gravity.parse(gravity)
    scale_mode = ScaleMode.parse(scale_mode)
    matrix = _apply_center_and_scale_mode(view_size, image_size, scale_mode)
    matrix = _apply_gravity(matrix, view_size, image_size, gravity, is_rtl)
    logger.debug(
        "transform view=%sx%s image=%sx%s mode=%s gravity=%s rtl=%s -> %s",
        view_size.width, view_size.height, image_size.width, image_size.height,
        scale_mode.name, int(gravity), is_rtl, matrix,
    )
    return matrix


def image_to_view(x: float, y: float, matrix: AffineTransform) -> Tuple[float, float]:
    """Convert image coordinates to view coordinates."""
    return matrix.map_point(x, y)


def view_to_image(vx: float, vy: float, matrix: AffineTransform) -> Tuple[float, float]:
    """Convert view coordinates back to image coordinates."""
    if matrix.determinant == 0:
        return (0.0, 0.0)
    return matrix.invert().map_point(vx, vy)
