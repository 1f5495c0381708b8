"""Gravity Image View Sample - Entry Point."""

import argparse
import logging
import sys
import os
import tkinter as tk
from tkinter import ttk

# Ensure the app directory is on the import path
app_dir = os.path.dirname(os.path.abspath(__file__))
if app_dir not in sys.path:
    sys.path.insert(0, app_dir)

from gui.sample_window import SampleWindow
from models.view_config import SampleLayout
from utils.sample_images import images_from_directory

# Colors used throughout the app
COLORS = {
    "bg": "#f0f0f0",
    "accent": "#0078D4",
    "status_bg": "#e0e0e0",
    "panel_bg": "#f5f5f5",
    "text": "#1a1a1a",
    "text_secondary": "#555555",
}


def configure_styles():
    """Set up ttk theme and custom styles."""
    style = ttk.Style()
    style.theme_use("clam")

    style.configure(".", font=("Segoe UI", 9), background=COLORS["bg"],
                    foreground=COLORS["text"])

    style.configure("TFrame", background=COLORS["bg"])
    style.configure("Status.TFrame", background=COLORS["status_bg"])

    style.configure("TLabel", background=COLORS["bg"], foreground=COLORS["text"])
    style.configure("Status.TLabel", background=COLORS["status_bg"],
                    foreground=COLORS["text_secondary"], font=("Segoe UI", 8))
    style.configure("Header.TLabel", font=("Segoe UI", 9, "bold"))

    style.configure("TButton", padding=(8, 4), font=("Segoe UI", 9))

    style.configure("TLabelframe", background=COLORS["panel_bg"],
                    foreground=COLORS["text"])
    style.configure("TLabelframe.Label", background=COLORS["panel_bg"],
                    foreground=COLORS["accent"], font=("Segoe UI", 9, "bold"))
    style.configure("TCheckbutton", background=COLORS["panel_bg"])
    style.configure("TRadiobutton", background=COLORS["panel_bg"])


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Show a grid of image views with different gravity and scale modes.",
    )
    parser.add_argument(
        '--layout',
        help='JSON sample layout to show instead of the built-in grid.',
    )
    parser.add_argument(
        '--images',
        help='Directory of images to cycle through instead of generated samples.',
    )
    parser.add_argument(
        '--rtl',
        action='store_true',
        help='Lay the views out right-to-left (affects START/END gravity).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        layout = SampleLayout.load_json(args.layout) if args.layout else SampleLayout.default()
    except (OSError, ValueError) as e:
        print(f"Error: Could not load layout {args.layout}: {e}")
        sys.exit(1)
    if args.rtl:
        layout.is_rtl = True

    images = None
    if args.images:
        if not os.path.isdir(args.images):
            print(f"Error: Image directory not found: {args.images}")
            sys.exit(1)
        images = images_from_directory(args.images)
        if not images:
            print(f"Error: No readable images in {args.images}")
            sys.exit(1)

    root = tk.Tk()
    root.configure(bg=COLORS["bg"])
    configure_styles()
    SampleWindow(root, layout=layout, images=images)
    root.mainloop()


if __name__ == "__main__":
    main()
