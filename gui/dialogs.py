"""Dialog for editing one view's image gravity and scale mode."""

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

from models.gravity import Gravity, ScaleMode
from models.view_config import ImageViewConfig

_HORIZONTAL = [
    ("Left", Gravity.LEFT), ("Center", Gravity.CENTER_HORIZONTAL),
    ("Right", Gravity.RIGHT), ("Start", Gravity.START), ("End", Gravity.END),
]
_VERTICAL = [
    ("Top", Gravity.TOP), ("Center", Gravity.CENTER_VERTICAL), ("Bottom", Gravity.BOTTOM),
]


class ImageOptionsDialog(tk.Toplevel):
    """Checkboxes for gravity flags and radio buttons for the scale mode.

    Changes apply live through ``on_apply``; Close just dismisses.
    """

    def __init__(self, parent, config: ImageViewConfig,
                 on_apply: Callable[[Gravity, ScaleMode], None],
                 title: Optional[str] = None, **kwargs):
        super().__init__(parent, **kwargs)
        self.title(title or "Image Options")
        self.resizable(False, False)
        self.transient(parent)

        self._on_apply = on_apply
        self._flag_vars: Dict[Gravity, tk.BooleanVar] = {}
        self._mode_var = tk.StringVar(value=config.image_scale_mode.name)

        self.update_idletasks()
        px = parent.winfo_rootx() + 40
        py = parent.winfo_rooty() + 40
        self.geometry(f"+{px}+{py}")

        self._build_ui(config.image_gravity)

    def _build_ui(self, gravity: Gravity):
        frame = ttk.Frame(self)
        frame.pack(fill=tk.BOTH, expand=True, padx=12, pady=10)

        h_box = ttk.LabelFrame(frame, text="Horizontal")
        h_box.grid(row=0, column=0, sticky="nsew", padx=(0, 6))
        for label, flag in _HORIZONTAL:
            self._add_flag(h_box, label, flag, gravity)

        v_box = ttk.LabelFrame(frame, text="Vertical")
        v_box.grid(row=0, column=1, sticky="nsew", padx=(6, 0))
        for label, flag in _VERTICAL:
            self._add_flag(v_box, label, flag, gravity)

        mode_box = ttk.LabelFrame(frame, text="Scale Mode")
        mode_box.grid(row=1, column=0, columnspan=2, sticky="ew", pady=(8, 0))
        for mode in ScaleMode:
            ttk.Radiobutton(
                mode_box, text=mode.name.title(), value=mode.name,
                variable=self._mode_var, command=self._apply,
            ).pack(side=tk.LEFT, padx=6, pady=4)

        ttk.Button(frame, text="Close", command=self.destroy).grid(
            row=2, column=0, columnspan=2, pady=(10, 0)
        )

    def _add_flag(self, parent, label: str, flag: Gravity, gravity: Gravity):
        var = tk.BooleanVar(value=flag in gravity)
        self._flag_vars[flag] = var
        ttk.Checkbutton(parent, text=label, variable=var, command=self._apply).pack(
            anchor=tk.W, padx=6, pady=1
        )

    def selected_gravity(self) -> Gravity:
        flags = Gravity(0)
        for flag, var in self._flag_vars.items():
            if var.get():
                flags |= flag
        return flags

    def _apply(self):
        self._on_apply(self.selected_gravity(), ScaleMode[self._mode_var.get()])
