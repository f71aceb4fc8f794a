"""
Image Editor - raster pixel transforms.

The transform engine lives in image_editor.image; the FastAPI front end in
image_editor.main.
"""

from image_editor.image import (
    Pixel,
    PixelBuffer,
    adjust_brightness,
    blur,
    flip_horizontal,
    flip_vertical,
    grayscale,
    rotate_left,
    rotate_right,
)

__version__ = "1.0.0"

__all__ = [
    "Pixel",
    "PixelBuffer",
    "adjust_brightness",
    "blur",
    "flip_horizontal",
    "flip_vertical",
    "grayscale",
    "rotate_left",
    "rotate_right",
]
