"""
Constants and configuration values for the Image Editor.
Centralizes all magic numbers and configuration constants.
"""


# Pixel Constants
class PixelConstants:
    """Constants related to pixel storage and channel arithmetic."""

    # Channel range (8 bits per channel)
    CHANNEL_MIN = 0
    CHANNEL_MAX = 255

    # Buffer layouts
    RGB_CHANNELS = 3
    GRAYSCALE_CHANNELS = 1

    # Packed integer layout: 0xRRGGBB
    RED_SHIFT = 16
    GREEN_SHIFT = 8
    BLUE_SHIFT = 0
    CHANNEL_MASK = 0xFF


# Transform Constants
class TransformConstants:
    """Constants for pixel transforms."""

    # Brightness: percentage is a signed 32-bit integer
    PERCENT_DIVISOR = 100
    PERCENTAGE_MIN = -(2**31)
    PERCENTAGE_MAX = 2**31 - 1

    # Blur
    DEFAULT_BLUR_BLOCK_SIZE = 5
    MIN_BLUR_BLOCK_SIZE = 1

    # Rotation: number of quarter turns for np.rot90
    CLOCKWISE_QUARTER_TURN = -1
    COUNTER_CLOCKWISE_QUARTER_TURN = 1


# Codec Constants
class CodecConstants:
    """Constants for image encoding and decoding."""

    DEFAULT_OUTPUT_PATH = "output.jpg"
    DEFAULT_FORMAT = "jpg"
    SUPPORTED_FORMATS = ["jpg", "jpeg", "png", "bmp", "tiff"]

    DEFAULT_JPEG_QUALITY = 95
    MIN_JPEG_QUALITY = 1
    MAX_JPEG_QUALITY = 100

    DEFAULT_PNG_COMPRESSION = 3
    MIN_PNG_COMPRESSION = 0
    MAX_PNG_COMPRESSION = 9


# API Constants
class APIConstants:
    """Constants for API configuration."""

    API_VERSION = "1.0.0"
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000


# System Constants
class SystemConstants:
    """System-wide constants."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    VALID_ENVIRONMENTS = ["development", "staging", "production", "test"]
