"""
API schemas for the Image Editor.
"""

from .transform import (
    ImageInfo,
    OperationInfo,
    OperationsResponse,
    PixelDumpRequest,
    PixelDumpResponse,
    TransformRequest,
    TransformResponse,
)

__all__ = [
    "ImageInfo",
    "OperationInfo",
    "OperationsResponse",
    "PixelDumpRequest",
    "PixelDumpResponse",
    "TransformRequest",
    "TransformResponse",
]
