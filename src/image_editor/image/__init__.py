"""
Pixel Transform Engine - functional architecture.

This package provides the pixel buffer model and pure transform functions:
- buffer: Pixel and PixelBuffer data model
- photometric: grayscale, adjust_brightness
- geometry: rotate_right, rotate_left, flip_horizontal, flip_vertical
- blur: block-average blur
- converters: codec (decode/encode, load/save, base64)
- diagnostics: pixel dump
- operations: named operations and registry

All utilities are re-exported from this module for convenient access.
"""

# Blur
from image_editor.image.blur import blur

# Data model
from image_editor.image.buffer import Pixel, PixelBuffer, require_buffer

# Codec
from image_editor.image.converters import decode, encode, load_image, save_image, to_base64

# Diagnostics
from image_editor.image.diagnostics import format_pixel_values, print_pixel_values

# Geometric transforms
from image_editor.image.geometry import flip_horizontal, flip_vertical, rotate_left, rotate_right

# Operation registry
from image_editor.image.operations import OperationRegistry, PixelOperation

# Photometric transforms
from image_editor.image.photometric import adjust_brightness, grayscale

__all__ = [
    # Data model
    "Pixel",
    "PixelBuffer",
    "require_buffer",
    # Transforms
    "grayscale",
    "adjust_brightness",
    "rotate_right",
    "rotate_left",
    "flip_horizontal",
    "flip_vertical",
    "blur",
    # Codec
    "decode",
    "encode",
    "load_image",
    "save_image",
    "to_base64",
    # Diagnostics
    "format_pixel_values",
    "print_pixel_values",
    # Operations
    "OperationRegistry",
    "PixelOperation",
]
