"""Sample window: a grid of gravity image views that cycle images on click."""

import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox
from typing import List, Optional

from PIL import Image

from export.view_renderer import load_image
from gui.dialogs import ImageOptionsDialog
from gui.gravity_image_view import GravityImageView
from models.gravity import Gravity, ScaleMode
from models.view_config import SampleLayout
from utils.sample_images import sample_images
from utils.widget_tree import find_widgets

logger = logging.getLogger(__name__)


class SampleWindow:
    """Top-level sample window."""

    def __init__(self, root: tk.Tk, layout: Optional[SampleLayout] = None,
                 images: Optional[List[Image.Image]] = None):
        self.root = root
        self.root.title("Gravity Image View Sample")
        self.root.minsize(480, 360)

        self.layout = layout or SampleLayout.default()
        self.images: List[Image.Image] = images or sample_images()
        self.views: List[GravityImageView] = []

        self._build_menu()
        self._build_status_bar()
        self._build_grid()

    # ------------------------------------------------------------------
    # UI Construction
    # ------------------------------------------------------------------

    def _build_menu(self):
        menubar = tk.Menu(self.root)
        self.root.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Open Image...", command=self._open_image)
        file_menu.add_separator()
        file_menu.add_command(label="Load Layout...", command=self._load_layout)
        file_menu.add_command(label="Save Layout...", command=self._save_layout)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.root.quit)
        menubar.add_cascade(label="File", menu=file_menu)

    def _build_status_bar(self):
        status_frame = ttk.Frame(self.root, style="Status.TFrame")
        status_frame.pack(fill=tk.X, side=tk.BOTTOM)
        self.status_bar = ttk.Label(
            status_frame, text="Click a view to cycle images, right-click for options",
            style="Status.TLabel", padding=(8, 4)
        )
        self.status_bar.pack(fill=tk.X)

    def _build_grid(self):
        self.container = ttk.Frame(self.root)
        self.container.pack(fill=tk.BOTH, expand=True, padx=6, pady=6)

        columns = max(1, self.layout.columns)
        for idx, spec in enumerate(self.layout.views):
            cell = ttk.Frame(self.container)
            cell.grid(row=idx // columns, column=idx % columns, padx=4, pady=4, sticky="nsew")
            ttk.Label(cell, text=spec.name, style="Header.TLabel").pack(anchor=tk.W)
            GravityImageView(
                cell, config=spec.config, width=spec.width, height=spec.height,
                is_rtl=self.layout.is_rtl, background="#d6d6d6",
            ).pack(fill=tk.BOTH, expand=True)

        for c in range(columns):
            self.container.columnconfigure(c, weight=1)
        rows = (len(self.layout.views) + columns - 1) // columns
        for r in range(rows):
            self.container.rowconfigure(r, weight=1)

        # Views are nested inside labelled cells; collect them from the tree.
        self.views = find_widgets(
            self.container, lambda w: isinstance(w, GravityImageView)
        )
        for view in self.views:
            view.on_click = self.cycle_image
            view.on_context = self._show_options
            view.on_matrix_changed = self._on_matrix_changed
            # Initial image only; the click cycle still starts from the last one.
            if self.images:
                view.set_image(self.images[0])

    def _rebuild_grid(self):
        self.container.destroy()
        self._build_grid()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def cycle_image(self, view: GravityImageView):
        """Show the next image; the first click on a view shows the last one."""
        if not self.images:
            return
        tag_index = len(self.images) - 1 if view.tag is None else view.tag
        array_index = tag_index % len(self.images)
        view.tag = array_index + 1
        view.set_image(self.images[array_index])

    def _show_options(self, view: GravityImageView):
        def apply(gravity: Gravity, mode: ScaleMode):
            view.set_image_gravity(gravity)
            view.set_image_scale_mode(mode)

        ImageOptionsDialog(self.root, view.config, apply)

    def _on_matrix_changed(self, view: GravityImageView):
        m = view.image_matrix
        self._set_status(
            f"{view.image_gravity.to_string() or 'none'} / "
            f"{view.image_scale_mode.name.lower()}: "
            f"scale={m.a:.3f} translate=({m.c:.1f}, {m.f:.1f})"
        )

    def _open_image(self):
        path = filedialog.askopenfilename(
            title="Select Image",
            filetypes=[
                ("Image files", "*.png *.jpg *.jpeg *.bmp *.tiff *.gif"),
                ("All files", "*.*"),
            ],
        )
        if not path:
            return
        try:
            img = load_image(path)
        except Exception as e:
            messagebox.showerror("Error", f"Could not open image:\n{e}")
            return

        self.images.append(img)
        for view in self.views:
            view.tag = len(self.images)
            view.set_image(img)
        self._set_status(f"Image loaded: {path} ({img.width}x{img.height})")

    def _load_layout(self):
        path = filedialog.askopenfilename(
            title="Load Layout",
            filetypes=[("JSON files", "*.json"), ("All files", "*.*")],
        )
        if not path:
            return
        try:
            self.layout = SampleLayout.load_json(path)
        except Exception as e:
            messagebox.showerror("Error", f"Could not load layout:\n{e}")
            return
        self._rebuild_grid()
        self._set_status(f"Layout loaded: {path}")

    def _save_layout(self):
        path = filedialog.asksaveasfilename(
            title="Save Layout",
            defaultextension=".json",
            filetypes=[("JSON files", "*.json")],
        )
        if not path:
            return
        try:
            self.layout.save_json(path)
            self._set_status(f"Layout saved: {path}")
        except Exception as e:
            messagebox.showerror("Error", f"Could not save layout:\n{e}")

    def _set_status(self, text: str):
        self.status_bar.config(text=text)
