"""
Image codec: conversions between encoded image bytes and PixelBuffers.

Handles conversions using OpenCV:
- Encoded bytes (JPEG, PNG, BMP, TIFF) <-> PixelBuffer (RGB order)
- Files on disk <-> PixelBuffer
- PixelBuffer -> base64 string for API responses

OpenCV works in BGR order; buffers are RGB, so every crossing swaps channels.
Alpha channels are discarded on decode.
"""

import base64
import logging
from pathlib import Path
from typing import List, Optional, Union

import cv2
import numpy as np

from image_editor.common.constants import CodecConstants
from image_editor.common.enums import ImageFormat
from image_editor.common.exceptions import DecodeError, EncodeError, InvalidParameterError
from image_editor.image.buffer import PixelBuffer, require_buffer

logger = logging.getLogger(__name__)


def normalize_format(image_format: Union[ImageFormat, str]) -> ImageFormat:
    """
    Normalize a format name or file suffix ("PNG", ".jpg", ImageFormat.BMP).

    Raises:
        InvalidParameterError: If the format is not supported
    """
    value = image_format.value if isinstance(image_format, ImageFormat) else str(image_format)
    value = value.lower().lstrip(".")
    if value == "tif":
        value = ImageFormat.TIFF.value
    try:
        return ImageFormat(value)
    except ValueError:
        raise InvalidParameterError(
            "format", image_format, f"must be one of {CodecConstants.SUPPORTED_FORMATS}"
        )


def decode(data: bytes, source: Optional[str] = None) -> PixelBuffer:
    """
    Decode encoded image bytes into an RGB PixelBuffer.

    Decoding always yields the RGB variant: single-channel images come back
    with the luma replicated into all three channels and alpha is dropped.

    Args:
        data: Encoded image (any format OpenCV can read)
        source: Optional origin (file path) used in error details

    Returns:
        RGB PixelBuffer

    Raises:
        DecodeError: If data is empty or not a recognized image
    """
    if not data:
        raise DecodeError("no image data", source)

    try:
        nparr = np.frombuffer(data, np.uint8)
        image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)
    except cv2.error as e:
        logger.error(f"OpenCV failed to decode image: {e}")
        raise DecodeError(str(e), source)

    if image is None:
        logger.error(f"Unrecognized image data ({len(data)} bytes)")
        raise DecodeError("unrecognized image format", source)

    return PixelBuffer(cv2.cvtColor(image, cv2.COLOR_BGR2RGB))


def _encode_params(image_format: ImageFormat, quality: int, png_compression: int) -> List[int]:
    if image_format in (ImageFormat.JPG, ImageFormat.JPEG):
        return [cv2.IMWRITE_JPEG_QUALITY, int(quality)]
    if image_format == ImageFormat.PNG:
        return [cv2.IMWRITE_PNG_COMPRESSION, int(png_compression)]
    return []


def encode(
    image: PixelBuffer,
    image_format: Union[ImageFormat, str] = CodecConstants.DEFAULT_FORMAT,
    quality: int = CodecConstants.DEFAULT_JPEG_QUALITY,
    png_compression: int = CodecConstants.DEFAULT_PNG_COMPRESSION,
) -> bytes:
    """
    Encode a PixelBuffer to image bytes.

    Args:
        image: Buffer to encode (grayscale buffers stay single-channel)
        image_format: Target format (jpg, jpeg, png, bmp, tiff)
        quality: JPEG quality (1-100, ignored for other formats)
        png_compression: PNG compression level (0-9, ignored for other formats)

    Returns:
        Encoded bytes

    Raises:
        NullInputError: If image is None
        InvalidParameterError: If the format is not supported
        EncodeError: If OpenCV fails to encode
    """
    image = require_buffer(image, "encode")
    fmt = normalize_format(image_format)

    if image.is_grayscale:
        native = image.array
    else:
        native = cv2.cvtColor(image.array, cv2.COLOR_RGB2BGR)

    params = _encode_params(fmt, quality, png_compression)

    try:
        success, buffer = cv2.imencode(f".{fmt.value}", native, params)
    except cv2.error as e:
        logger.error(f"OpenCV failed to encode image as {fmt.value}: {e}")
        raise EncodeError(fmt.value, str(e))

    if not success:
        raise EncodeError(fmt.value, "encoder reported failure")

    return buffer.tobytes()


def load_image(file_path: Union[str, Path]) -> PixelBuffer:
    """
    Read and decode an image file.

    The result is always the RGB variant (see decode), so a grayscale buffer
    written with save_image loads back as its to_rgb() equivalent.

    Raises:
        FileNotFoundError: If the path does not exist or is not a file
        DecodeError: If the file is not a recognized image
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Image file not found: {path}")

    return decode(path.read_bytes(), source=str(path))


def save_image(
    image: PixelBuffer,
    file_path: Union[str, Path],
    image_format: Optional[Union[ImageFormat, str]] = None,
    quality: int = CodecConstants.DEFAULT_JPEG_QUALITY,
    png_compression: int = CodecConstants.DEFAULT_PNG_COMPRESSION,
) -> Path:
    """
    Encode a buffer and write it to disk.

    The format defaults to the file suffix, then to JPEG when the path has
    no suffix. Parent directories are created as needed.

    Returns:
        Path written
    """
    path = Path(file_path)
    fmt = image_format or path.suffix or CodecConstants.DEFAULT_FORMAT

    data = encode(image, fmt, quality=quality, png_compression=png_compression)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return path


def to_base64(
    image: PixelBuffer,
    image_format: Union[ImageFormat, str] = ImageFormat.PNG,
    quality: int = CodecConstants.DEFAULT_JPEG_QUALITY,
) -> str:
    """Encode a buffer and return it as a base64 string."""
    return base64.b64encode(encode(image, image_format, quality=quality)).decode("utf-8")
