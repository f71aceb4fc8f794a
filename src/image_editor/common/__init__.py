"""
Common package - fundamental types without project dependencies.

- Enums (OperationType, BlurEdgeMode, ...)
- Constants (PixelConstants, TransformConstants, ...)
- Exceptions (ImageEditorException and subclasses)

IMPORTANT: This package must NOT import from any other project packages
(image, services, schemas, api) to avoid circular dependencies.
"""

from image_editor.common.constants import (
    APIConstants,
    CodecConstants,
    PixelConstants,
    SystemConstants,
    TransformConstants,
)
from image_editor.common.enums import BlurEdgeMode, ImageFormat, OperationType, PixelDumpFormat
from image_editor.common.exceptions import (
    DecodeError,
    EncodeError,
    ImageEditorException,
    InvalidParameterError,
    NullInputError,
)

__all__ = [
    # Enums
    "BlurEdgeMode",
    "ImageFormat",
    "OperationType",
    "PixelDumpFormat",
    # Constants
    "APIConstants",
    "CodecConstants",
    "PixelConstants",
    "SystemConstants",
    "TransformConstants",
    # Exceptions
    "DecodeError",
    "EncodeError",
    "ImageEditorException",
    "InvalidParameterError",
    "NullInputError",
]
