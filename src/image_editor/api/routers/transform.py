"""
Transform API Router - Pixel transform operations
"""

import logging

from fastapi import APIRouter, Depends

from image_editor.api.dependencies import get_transform_service
from image_editor.api.exceptions import safe_endpoint
from image_editor.image.converters import to_base64
from image_editor.schemas import (
    ImageInfo,
    OperationInfo,
    OperationsResponse,
    PixelDumpRequest,
    PixelDumpResponse,
    TransformRequest,
    TransformResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/operations")
@safe_endpoint
async def list_operations(transform_service=Depends(get_transform_service)) -> OperationsResponse:
    """List the available operations and their parameters."""
    return OperationsResponse(
        operations=[OperationInfo(**info) for info in transform_service.list_operations()]
    )


@router.post("/apply")
@safe_endpoint
async def apply_transform(
    request: TransformRequest, transform_service=Depends(get_transform_service)
) -> TransformResponse:
    """
    Apply one operation to an image file.

    Loads the image from the file system, applies the requested operation
    and writes the result to output_path (or the configured default).

    Args:
        request: Transform request with file path, operation and parameters
        transform_service: Transform service dependency

    Returns:
        TransformResponse with input/output dimensions and output path

    Raises:
        HTTPException 404: If file not found
        400: If a parameter is invalid
        422: If the file cannot be decoded as an image
    """
    result, metadata = transform_service.transform_file(
        request.file_path,
        request.operation,
        percentage=request.percentage,
        block_size=request.block_size,
        edge_mode=request.edge_mode,
        output_path=request.output_path,
        output_format=request.output_format,
    )

    return TransformResponse(
        operation=metadata["operation"],
        source_path=metadata["source_path"],
        output_path=metadata["output_path"],
        input=ImageInfo(**metadata["input"]),
        output=ImageInfo(**metadata["output"]),
        processing_time_ms=metadata["processing_time_ms"],
        image_base64=to_base64(result) if request.include_image else None,
    )


@router.post("/pixels")
@safe_endpoint
async def dump_pixels(
    request: PixelDumpRequest, transform_service=Depends(get_transform_service)
) -> PixelDumpResponse:
    """
    Return the pixel values of an image file, one row per line.

    This is a diagnostic; nothing is written.
    """
    image, rows = transform_service.dump_pixels(request.file_path, request.format)

    logger.info(f"Dumped {image.width}x{image.height} pixels from {request.file_path}")

    return PixelDumpResponse(
        width=image.width, height=image.height, format=request.format, rows=rows
    )
