"""
Centralized enums for the image editor.

This module contains all enumeration types used throughout the system,
providing a single source of truth for enum definitions.
"""

from enum import Enum


class OperationType(str, Enum):
    """Pixel transforms available to callers."""

    GRAYSCALE = "grayscale"
    BRIGHTNESS = "brightness"
    ROTATE_RIGHT = "rotate_right"
    ROTATE_LEFT = "rotate_left"
    FLIP_HORIZONTAL = "flip_horizontal"
    FLIP_VERTICAL = "flip_vertical"
    BLUR = "blur"


class BlurEdgeMode(str, Enum):
    """How block-average blur treats trailing rows/columns smaller than a block."""

    SHRINK = "shrink"  # Average the partial block over its own pixels
    PRESERVE = "preserve"  # Copy trailing pixels from the input
    REJECT = "reject"  # Refuse dimensions not divisible by the block size


class ImageFormat(str, Enum):
    """Output formats supported by the codec."""

    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"
    BMP = "bmp"
    TIFF = "tiff"


class PixelDumpFormat(str, Enum):
    """Representation used by the pixel dump diagnostic."""

    PACKED = "packed"
    RGB = "rgb"
