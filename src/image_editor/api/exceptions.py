"""
Exception handlers for the Image Editor API.

ImageEditorException subclasses carry their own status code and are
rendered by image_editor_exception_handler. The few builtin exceptions that
file I/O can raise are translated to HTTPException by safe_endpoint.
"""

import logging
import traceback
from functools import wraps
from typing import Dict, Tuple, Type

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from image_editor.common.exceptions import ImageEditorException

logger = logging.getLogger(__name__)

# Builtin exceptions an endpoint may let escape: (status code, error message)
EXCEPTION_MAPPING: Dict[Type[Exception], Tuple[int, str]] = {
    FileNotFoundError: (status.HTTP_404_NOT_FOUND, "File not found"),
    IsADirectoryError: (status.HTTP_400_BAD_REQUEST, "Path is a directory"),
    ValueError: (status.HTTP_400_BAD_REQUEST, "Invalid value"),
}


def _error_body(error: str, details, error_type: str) -> Dict:
    return {"error": error, "details": details, "type": error_type}


async def image_editor_exception_handler(
    request: Request, exc: ImageEditorException
) -> JSONResponse:
    """Render an Image Editor exception with the status code it carries."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(f"{request.method} {request.url.path}: {exc.__class__.__name__}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.details, exc.__class__.__name__),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Render request body validation errors as a flat field list.

    The leading "body" element of each location is dropped, so a bad
    operation name is reported against field "operation".
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"][1:]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body("Validation failed", errors, "ValidationError"),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler for unexpected exceptions.

    Stack traces are only included when the app runs in debug mode.
    """
    logger.error(f"Unexpected error on {request.url.path}: {exc}", exc_info=True)

    details = {}
    if getattr(request.app.state, "debug", False):
        details = {
            "exception": str(exc),
            "type": exc.__class__.__name__,
            "traceback": traceback.format_exc(),
        }

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", details, "InternalError"),
    )


def safe_endpoint(func):
    """
    Decorator for async endpoints.

    Image Editor exceptions and HTTPExceptions pass through unchanged;
    builtin exceptions listed in EXCEPTION_MAPPING become HTTPExceptions
    with {"error", "details"} as detail. Anything else propagates to
    generic_exception_handler.
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (ImageEditorException, HTTPException):
            raise
        except tuple(EXCEPTION_MAPPING) as e:
            mapped = next(cls for cls in type(e).__mro__ if cls in EXCEPTION_MAPPING)
            status_code, error_msg = EXCEPTION_MAPPING[mapped]
            logger.error(f"{type(e).__name__} in {func.__name__}: {e}")
            raise HTTPException(
                status_code=status_code, detail={"error": error_msg, "details": str(e)}
            )

    return wrapper


def register_exception_handlers(app):
    """Register the Image Editor exception handlers with a FastAPI app."""
    app.add_exception_handler(ImageEditorException, image_editor_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
