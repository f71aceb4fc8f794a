"""
Pixel dump diagnostic.

Prints every pixel in row-major order, one row per line, values separated
by spaces. This is an inspection utility; it produces no new buffer.
"""

import sys
from typing import List, Optional, TextIO, Union

from image_editor.common.enums import PixelDumpFormat
from image_editor.common.exceptions import InvalidParameterError
from image_editor.image.buffer import PixelBuffer, require_buffer


def _coerce_dump_format(fmt: Union[PixelDumpFormat, str]) -> PixelDumpFormat:
    try:
        return PixelDumpFormat(fmt)
    except ValueError:
        valid = [f.value for f in PixelDumpFormat]
        raise InvalidParameterError("format", fmt, f"must be one of {valid}")


def format_pixel_values(
    image: PixelBuffer, fmt: Union[PixelDumpFormat, str] = PixelDumpFormat.PACKED
) -> List[str]:
    """
    Render pixel values as text, one string per row.

    Args:
        image: Buffer to inspect (grayscale pixels are shown channel-equal)
        fmt: packed -> 0xRRGGBB integers, rgb -> "(r,g,b)" triples

    Returns:
        List of row strings, top row first
    """
    image = require_buffer(image, "format_pixel_values")
    fmt = _coerce_dump_format(fmt)

    if fmt == PixelDumpFormat.PACKED:
        return [" ".join(str(pixel.packed) for pixel in row) for row in image.rows()]

    return [" ".join(f"({r},{g},{b})" for r, g, b in row) for row in image.rows()]


def print_pixel_values(
    image: PixelBuffer,
    fmt: Union[PixelDumpFormat, str] = PixelDumpFormat.PACKED,
    stream: Optional[TextIO] = None,
) -> None:
    """Print pixel values to stream (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for line in format_pixel_values(image, fmt):
        print(line, file=out)
