"""
Exception hierarchy for the Image Editor.

Transforms, the codec and the service raise these; the API layer renders
them as JSON with the carried status code (see api.exceptions).

IMPORTANT: This module must NOT import from image, services or api
to avoid circular dependencies.
"""

from typing import Any, Dict, Optional


class ImageEditorException(Exception):
    """Base exception for the Image Editor."""

    def __init__(self, message: str, status_code: int = 500, details: Optional[Dict] = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NullInputError(ImageEditorException):
    """Exception raised when no buffer is supplied where one is required."""

    def __init__(self, operation: str):
        super().__init__(
            message=f"No input buffer supplied to {operation}",
            status_code=400,
            details={"operation": operation},
        )


class InvalidParameterError(ImageEditorException):
    """Exception raised when a parameter is outside its documented domain."""

    def __init__(self, param: str, value: Any, reason: str):
        super().__init__(
            message=f"Invalid parameter {param}={value!r}: {reason}",
            status_code=400,
            details={"param": param, "value": repr(value), "reason": reason},
        )


class DecodeError(ImageEditorException):
    """Exception raised when bytes are not a recognized image format."""

    def __init__(self, reason: str, source: Optional[str] = None):
        details = {"reason": reason}
        if source is not None:
            details["source"] = source
        super().__init__(
            message=f"Could not decode image: {reason}",
            status_code=422,
            details=details,
        )


class EncodeError(ImageEditorException):
    """Exception raised when a buffer cannot be serialized."""

    def __init__(self, image_format: str, reason: str):
        super().__init__(
            message=f"Could not encode image as {image_format}: {reason}",
            status_code=500,
            details={"format": image_format, "reason": reason},
        )
