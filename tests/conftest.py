"""
Shared fixtures for Gravity Image View tests.

Puts the repository root on the path and provides solid-colour images and
a Tk root for widget tests.
"""
import sys
import os
import pytest

# Ensure the repository root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from PIL import Image


@pytest.fixture
def red_square():
    """50x50 opaque red image"""
    return Image.new("RGBA", (50, 50), (255, 0, 0, 255))


@pytest.fixture
def wide_image():
    """200x100 opaque blue image"""
    return Image.new("RGBA", (200, 100), (0, 0, 255, 255))


@pytest.fixture
def tk_root():
    """Hidden Tk root; skips the test when no display is available"""
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()
