"""
Photometric transforms: grayscale conversion and brightness adjustment.

Both preserve width and height and never mutate their input.
"""

import logging

import cv2
import numpy as np

from image_editor.common.constants import PixelConstants, TransformConstants
from image_editor.common.exceptions import InvalidParameterError
from image_editor.image.buffer import PixelBuffer, require_buffer

logger = logging.getLogger(__name__)


def grayscale(image: PixelBuffer) -> PixelBuffer:
    """
    Convert an image to a single-channel grayscale buffer.

    Luma follows ITU-R BT.601 (0.299 R + 0.587 G + 0.114 B), the weighting
    OpenCV uses for COLOR_RGB2GRAY. A grayscale input yields an equal copy.

    Args:
        image: Input buffer (RGB or grayscale)

    Returns:
        Grayscale buffer with the same dimensions

    Raises:
        NullInputError: If image is None
    """
    image = require_buffer(image, "grayscale")

    if image.is_grayscale:
        return PixelBuffer(image.array)

    luma = cv2.cvtColor(image.array, cv2.COLOR_RGB2GRAY)
    logger.debug(f"Converted {image.width}x{image.height} image to grayscale")
    return PixelBuffer(luma)


def adjust_brightness(image: PixelBuffer, percentage: int) -> PixelBuffer:
    """
    Scale every channel by a percentage.

    For each channel: new = old + (old * percentage) / 100, with the division
    truncating toward zero, then clamped to [0, 255]. Extreme percentages
    saturate instead of being rejected.

    Args:
        image: Input buffer (RGB or grayscale)
        percentage: Signed 32-bit percentage (-100 darkens to black, +100 doubles)

    Returns:
        Adjusted buffer with the same dimensions and variant

    Raises:
        NullInputError: If image is None
        InvalidParameterError: If percentage is not an integer or outside
            the signed 32-bit range
    """
    image = require_buffer(image, "adjust_brightness")

    if isinstance(percentage, bool) or not isinstance(percentage, (int, np.integer)):
        raise InvalidParameterError("percentage", percentage, "must be an integer")
    if not TransformConstants.PERCENTAGE_MIN <= percentage <= TransformConstants.PERCENTAGE_MAX:
        raise InvalidParameterError(
            "percentage", percentage, "must fit in a signed 32-bit integer"
        )

    channels = image.array.astype(np.int64)
    scaled = channels * int(percentage)
    # Truncate toward zero, unlike floor division on negative values
    delta = np.sign(scaled) * (np.abs(scaled) // TransformConstants.PERCENT_DIVISOR)
    result = np.clip(channels + delta, PixelConstants.CHANNEL_MIN, PixelConstants.CHANNEL_MAX)

    logger.debug(
        f"Adjusted brightness by {percentage}% on {image.width}x{image.height} image"
    )
    return PixelBuffer(result.astype(np.uint8))
