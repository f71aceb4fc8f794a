"""
API Routers for the Image Editor
"""

from . import transform

__all__ = ["transform"]
