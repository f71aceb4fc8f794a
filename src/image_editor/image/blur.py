"""
Block-average blur.

The image is partitioned into non-overlapping block_size x block_size
blocks starting at the origin. Every pixel of a block receives the block's
per-channel mean, truncated to an integer.
"""

import logging
from typing import Tuple, Union

import numpy as np

from image_editor.common.constants import TransformConstants
from image_editor.common.enums import BlurEdgeMode
from image_editor.common.exceptions import InvalidParameterError
from image_editor.image.buffer import PixelBuffer, require_buffer

logger = logging.getLogger(__name__)


def _block_layout(length: int, block_size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Start index and size of each block along one axis (last block may be short)."""
    starts = np.arange(0, length, block_size)
    sizes = np.diff(np.append(starts, length))
    return starts, sizes


def _block_means(values: np.ndarray, block_size: int) -> np.ndarray:
    """Replace every block of values with its truncated mean, partial edge blocks included."""
    row_starts, row_sizes = _block_layout(values.shape[0], block_size)
    col_starts, col_sizes = _block_layout(values.shape[1], block_size)

    sums = np.add.reduceat(np.add.reduceat(values, row_starts, axis=0), col_starts, axis=1)
    counts = np.outer(row_sizes, col_sizes)
    if values.ndim == 3:
        counts = counts[:, :, np.newaxis]

    means = sums // counts
    return np.repeat(np.repeat(means, row_sizes, axis=0), col_sizes, axis=1)


def _coerce_edge_mode(edge_mode: Union[BlurEdgeMode, str]) -> BlurEdgeMode:
    try:
        return BlurEdgeMode(edge_mode)
    except ValueError:
        valid = [mode.value for mode in BlurEdgeMode]
        raise InvalidParameterError("edge_mode", edge_mode, f"must be one of {valid}")


def blur(
    image: PixelBuffer,
    block_size: int,
    edge_mode: Union[BlurEdgeMode, str] = BlurEdgeMode.SHRINK,
) -> PixelBuffer:
    """
    Apply block-average blur.

    Args:
        image: Input buffer (RGB or grayscale)
        block_size: Edge length of the square blocks; 1 is the identity
        edge_mode: Treatment of trailing rows/columns that do not fill a
            whole block (shrink, preserve or reject)

    Returns:
        Blurred buffer with the same dimensions and variant

    Raises:
        NullInputError: If image is None
        InvalidParameterError: If block_size is not an integer, is < 1 or
            exceeds either dimension, or if edge_mode is reject and the
            dimensions are not multiples of block_size
    """
    image = require_buffer(image, "blur")
    edge_mode = _coerce_edge_mode(edge_mode)

    if isinstance(block_size, bool) or not isinstance(block_size, (int, np.integer)):
        raise InvalidParameterError("block_size", block_size, "must be an integer")
    if block_size < TransformConstants.MIN_BLUR_BLOCK_SIZE:
        raise InvalidParameterError("block_size", block_size, "must be >= 1")
    if block_size > image.width or block_size > image.height:
        raise InvalidParameterError(
            "block_size",
            block_size,
            f"exceeds image dimensions {image.width}x{image.height}",
        )

    block_size = int(block_size)
    if block_size == 1:
        return PixelBuffer(image.array)

    values = image.array.astype(np.int64)
    full_height = (image.height // block_size) * block_size
    full_width = (image.width // block_size) * block_size
    has_partial = full_height != image.height or full_width != image.width

    if edge_mode == BlurEdgeMode.REJECT and has_partial:
        raise InvalidParameterError(
            "block_size",
            block_size,
            f"does not evenly divide image dimensions {image.width}x{image.height}",
        )

    if edge_mode == BlurEdgeMode.PRESERVE and has_partial:
        result = values.copy()
        result[:full_height, :full_width] = _block_means(
            values[:full_height, :full_width], block_size
        )
    else:
        result = _block_means(values, block_size)

    logger.debug(
        f"Blurred {image.width}x{image.height} image with block size {block_size} "
        f"({edge_mode.value} edges)"
    )
    return PixelBuffer(result.astype(np.uint8))
