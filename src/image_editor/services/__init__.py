"""
Service layer for the Image Editor.
"""

from .transform_service import TransformService

__all__ = ["TransformService"]
