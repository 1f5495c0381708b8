"""Placeholder bitmaps for the sample window, generated with Pillow."""

import logging
import os
from typing import List

from PIL import Image, ImageDraw

from export.view_renderer import load_image

logger = logging.getLogger(__name__)

# Same sizes the sample cycles through: tiny, huge, tiny, medium.
SAMPLE_SIZES = (160, 2000, 120, 700)

_PALETTE = ["#2e7d32", "#1565c0", "#ef6c00", "#6a1b9a"]


def make_sample_image(size: int, color: str = "#2e7d32") -> Image.Image:
    """Draw a square test card: solid fill, border, diagonals, centre dot.

    The border and diagonals make it obvious which edge of the image is
    pinned and whether the aspect ratio survived scaling.
    """
    img = Image.new("RGBA", (size, size), color)
    draw = ImageDraw.Draw(img)
    line = max(1, size // 40)
    draw.rectangle((0, 0, size - 1, size - 1), outline="white", width=line)
    draw.line((0, 0, size - 1, size - 1), fill="white", width=line)
    draw.line((0, size - 1, size - 1, 0), fill="white", width=line)
    r = max(2, size // 10)
    c = size // 2
    draw.ellipse((c - r, c - r, c + r, c + r), fill="#ffeb3b")
    draw.text((line * 2, line * 2), f"{size}px", fill="white")
    return img


def sample_images() -> List[Image.Image]:
    return [
        make_sample_image(size, _PALETTE[i % len(_PALETTE)])
        for i, size in enumerate(SAMPLE_SIZES)
    ]


def images_from_directory(path: str) -> List[Image.Image]:
    """Load every readable image in ``path``, sorted by file name."""
    images = []
    for name in sorted(os.listdir(path)):
        full = os.path.join(path, name)
        if not os.path.isfile(full):
            continue
        try:
            images.append(load_image(full))
        except OSError:
            logger.debug("Skipping unreadable file %s", full)
            continue
    return images
