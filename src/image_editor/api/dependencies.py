"""
Shared FastAPI dependencies for the Image Editor.
"""

import logging

from fastapi import HTTPException, Request

from image_editor.services.transform_service import TransformService

logger = logging.getLogger(__name__)


def get_transform_service(request: Request) -> TransformService:
    """
    Get the TransformService instance from app state.

    Args:
        request: FastAPI request object

    Returns:
        TransformService shared by all requests

    Raises:
        HTTPException: If the service is not initialized
    """
    try:
        return request.app.state.transform_service
    except AttributeError as e:
        logger.error(f"Transform service not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Transform service not initialized"
        )
