"""
Geometric transforms: quarter-turn rotation and mirroring.

Each is a single index-remapping pass over the backing array. Arrays are
indexed [row, column] = [y, x], so the mappings below are written in (x, y)
and implemented with np.rot90 / np.flip on axes 0 (rows) and 1 (columns).
"""

import logging

import numpy as np

from image_editor.common.constants import TransformConstants
from image_editor.image.buffer import PixelBuffer, require_buffer

logger = logging.getLogger(__name__)


def rotate_right(image: PixelBuffer) -> PixelBuffer:
    """
    Rotate 90 degrees clockwise.

    out(x, y) = in(y, height_in - 1 - x); output is height_in wide and
    width_in tall.

    Raises:
        NullInputError: If image is None
    """
    image = require_buffer(image, "rotate_right")
    rotated = np.rot90(image.array, k=TransformConstants.CLOCKWISE_QUARTER_TURN, axes=(0, 1))
    logger.debug(f"Rotated {image.width}x{image.height} image clockwise")
    return PixelBuffer(np.ascontiguousarray(rotated))


def rotate_left(image: PixelBuffer) -> PixelBuffer:
    """
    Rotate 90 degrees counter-clockwise.

    out(x, y) = in(width_in - 1 - y, x); output is height_in wide and
    width_in tall.

    Raises:
        NullInputError: If image is None
    """
    image = require_buffer(image, "rotate_left")
    rotated = np.rot90(
        image.array, k=TransformConstants.COUNTER_CLOCKWISE_QUARTER_TURN, axes=(0, 1)
    )
    logger.debug(f"Rotated {image.width}x{image.height} image counter-clockwise")
    return PixelBuffer(np.ascontiguousarray(rotated))


def flip_horizontal(image: PixelBuffer) -> PixelBuffer:
    """
    Mirror left-right: out(x, y) = in(width - 1 - x, y).

    Raises:
        NullInputError: If image is None
    """
    image = require_buffer(image, "flip_horizontal")
    return PixelBuffer(np.ascontiguousarray(np.flip(image.array, axis=1)))


def flip_vertical(image: PixelBuffer) -> PixelBuffer:
    """
    Mirror top-bottom: out(x, y) = in(x, height - 1 - y).

    Raises:
        NullInputError: If image is None
    """
    image = require_buffer(image, "flip_vertical")
    return PixelBuffer(np.ascontiguousarray(np.flip(image.array, axis=0)))
