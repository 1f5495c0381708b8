"""Image view whose bitmap follows its own gravity and scale mode."""

import logging
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Any, Callable, Optional, Union

from export.view_renderer import paint_image
from models.gravity import Gravity, ScaleMode, Size
from models.view_config import ImageViewConfig
from utils.affine import AffineTransform
from utils.image_utils import compute_transform

logger = logging.getLogger(__name__)


class GravityImageView(ttk.Frame):
    """Canvas that positions and scales an image inside its own bounds.

    The image gets its own ``image_gravity`` and ``image_scale_mode``,
    separate from how the frame itself is packed into its parent. Any
    change of size, image or configuration recomputes ``image_matrix``.
    """

    def __init__(self, parent, config: Optional[ImageViewConfig] = None,
                 width: int = 200, height: int = 150, is_rtl: bool = False,
                 background: str = "#ffffff", **kwargs):
        super().__init__(parent, **kwargs)
        self.config = config or ImageViewConfig()
        # Layout direction is fixed for the lifetime of the view.
        self.is_rtl = is_rtl
        self.background = background

        # Callbacks
        self.on_click: Optional[Callable[["GravityImageView"], None]] = None
        self.on_context: Optional[Callable[["GravityImageView"], None]] = None
        self.on_matrix_changed: Optional[Callable[["GravityImageView"], None]] = None

        # Free slot for callers, e.g. which sample image is showing
        self.tag: Any = None

        # Display state
        self._image: Optional[Image.Image] = None
        self._photo: Optional[ImageTk.PhotoImage] = None
        self.image_matrix: Optional[AffineTransform] = None

        self._build_ui(width, height)

    def _build_ui(self, width: int, height: int):
        self.canvas = tk.Canvas(
            self,
            width=width,
            height=height,
            bg=self.background,
            highlightthickness=0,
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<Button-3>", self._on_context)
        self.canvas.bind("<Configure>", self._on_canvas_resize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_image(self, img: Optional[Image.Image]):
        """Set the displayed image (PIL Image), or clear it with None."""
        self._image = img
        if img is None:
            self.image_matrix = None
            self.canvas.delete("image")
            self._photo = None
            return
        self.update_matrix(*self.view_size())

    @property
    def image(self) -> Optional[Image.Image]:
        return self._image

    def set_image_gravity(self, gravity_flags: Union[Gravity, int, str]):
        self.config.image_gravity = Gravity.parse(gravity_flags)
        self.update_matrix(*self.view_size())

    def set_image_scale_mode(self, scale_mode: Union[ScaleMode, int, str]):
        self.config.image_scale_mode = ScaleMode.parse(scale_mode)
        self.update_matrix(*self.view_size())

    @property
    def image_gravity(self) -> Gravity:
        return self.config.image_gravity

    @property
    def image_scale_mode(self) -> ScaleMode:
        return self.config.image_scale_mode

    def view_size(self):
        """Current canvas size, falling back to the requested size before mapping."""
        if not self.canvas.winfo_ismapped():
            return int(self.canvas.cget("width")), int(self.canvas.cget("height"))
        return self.canvas.winfo_width(), self.canvas.winfo_height()

    def update_matrix(self, view_width: int, view_height: int):
        """Recompute the image matrix for the given view size and redraw."""
        # Nothing to place until an image is assigned.
        if self._image is None:
            logger.debug("No image set, skipping matrix update")
            return

        self.image_matrix = compute_transform(
            Size(view_width, view_height),
            Size(self._image.width, self._image.height),
            self.config.image_scale_mode,
            self.config.image_gravity,
            self.is_rtl,
        )
        self._redraw(view_width, view_height)

        if self.on_matrix_changed:
            self.on_matrix_changed(self)

    def _redraw(self, view_width: int, view_height: int):
        self.canvas.delete("image")
        if view_width <= 0 or view_height <= 0:
            self._photo = None
            return
        rendered = paint_image(
            self._image, view_width, view_height, self.image_matrix, self.background
        )
        self._photo = ImageTk.PhotoImage(rendered)
        self.canvas.create_image(0, 0, image=self._photo, anchor=tk.NW, tags="image")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _on_release(self, event):
        if self.on_click:
            self.on_click(self)

    def _on_context(self, event):
        if self.on_context:
            self.on_context(self)

    def _on_canvas_resize(self, event):
        """Recompute when the canvas is resized."""
        self.update_matrix(event.width, event.height)
