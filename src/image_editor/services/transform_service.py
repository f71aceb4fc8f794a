"""
Transform Service - Business logic for file-based pixel transforms.

This service loads an image, applies exactly one named operation, writes
the result and reports metadata. It is the layer the API calls into.
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from image_editor.common.enums import BlurEdgeMode, ImageFormat, OperationType, PixelDumpFormat
from image_editor.config import Settings, get_settings
from image_editor.image.buffer import PixelBuffer
from image_editor.image.converters import load_image, save_image
from image_editor.image.diagnostics import format_pixel_values
from image_editor.image.operations import OperationRegistry

logger = logging.getLogger(__name__)


def _image_info(image: PixelBuffer) -> Dict[str, Any]:
    return {
        "width": image.width,
        "height": image.height,
        "channels": image.channels,
        "mode": image.mode,
    }


class TransformService:
    """
    Service for loading, transforming and saving images.

    Holds no per-request state; one instance may serve concurrent requests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[OperationRegistry] = None,
    ):
        """
        Initialize transform service.

        Args:
            settings: Application settings (cached global settings by default)
            registry: Operation registry (all built-in operations by default)
        """
        self.settings = settings or get_settings()
        self.registry = registry or OperationRegistry()

    def load(self, file_path: Union[str, Path]) -> PixelBuffer:
        """
        Load an image file.

        Raises:
            FileNotFoundError: If the file does not exist
            DecodeError: If the file is not a recognized image
        """
        image = load_image(file_path)
        logger.debug(f"Loaded {file_path} ({image.width}x{image.height})")
        return image

    def apply(
        self,
        image: PixelBuffer,
        operation: Union[OperationType, str],
        percentage: Optional[int] = None,
        block_size: Optional[int] = None,
        edge_mode: Optional[Union[BlurEdgeMode, str]] = None,
    ) -> PixelBuffer:
        """
        Apply one named operation to a buffer.

        Blur falls back to the configured block size and edge mode.

        Args:
            image: Input buffer
            operation: Operation name
            percentage: Brightness percentage (brightness only)
            block_size: Blur block size (blur only)
            edge_mode: Blur edge mode (blur only)

        Returns:
            New buffer
        """
        params: Dict[str, Any] = {"percentage": percentage}

        if self.registry.get(operation).name == OperationType.BLUR.value:
            params["block_size"] = (
                block_size if block_size is not None
                else self.settings.transform.default_blur_block_size
            )
            params["edge_mode"] = edge_mode or self.settings.transform.blur_edge_mode

        return self.registry.apply(operation, image, params)

    def resolve_output(
        self,
        output_path: Optional[Union[str, Path]] = None,
        output_format: Optional[Union[ImageFormat, str]] = None,
    ) -> Tuple[Path, Optional[Union[ImageFormat, str]]]:
        """Pick the output path and format, falling back to configuration."""
        codec = self.settings.codec
        path = Path(output_path) if output_path else Path(codec.output_path)
        return path, output_format or codec.output_format

    def transform_file(
        self,
        file_path: Union[str, Path],
        operation: Union[OperationType, str],
        percentage: Optional[int] = None,
        block_size: Optional[int] = None,
        edge_mode: Optional[Union[BlurEdgeMode, str]] = None,
        output_path: Optional[Union[str, Path]] = None,
        output_format: Optional[Union[ImageFormat, str]] = None,
    ) -> Tuple[PixelBuffer, Dict[str, Any]]:
        """
        Load an image, apply one operation and write the result.

        Args:
            file_path: Path to the source image
            operation: Operation name
            percentage: Brightness percentage (brightness only)
            block_size: Blur block size (blur only)
            edge_mode: Blur edge mode (blur only)
            output_path: Destination path (configured default when None)
            output_format: Destination format (inferred from suffix when None)

        Returns:
            Tuple of (result buffer, metadata)

        Raises:
            FileNotFoundError: If the source does not exist
            DecodeError: If the source is not a recognized image
            InvalidParameterError: If the operation or a parameter is invalid
        """
        start_time = time.time()

        source = self.load(file_path)
        result = self.apply(
            source, operation, percentage=percentage, block_size=block_size, edge_mode=edge_mode
        )

        path, fmt = self.resolve_output(output_path, output_format)
        written = save_image(
            result,
            path,
            image_format=fmt,
            quality=self.settings.codec.jpeg_quality,
            png_compression=self.settings.codec.png_compression,
        )

        processing_time_ms = int((time.time() - start_time) * 1000)
        operation_name = self.registry.get(operation).name

        metadata = {
            "operation": operation_name,
            "source_path": str(file_path),
            "output_path": str(written),
            "input": _image_info(source),
            "output": _image_info(result),
            "processing_time_ms": processing_time_ms,
        }

        logger.info(
            f"Applied {operation_name} to {file_path}: "
            f"{source.width}x{source.height} -> {result.width}x{result.height}, "
            f"saved to {written} ({processing_time_ms} ms)"
        )

        return result, metadata

    def dump_pixels(
        self,
        file_path: Union[str, Path],
        fmt: Union[PixelDumpFormat, str] = PixelDumpFormat.PACKED,
    ) -> Tuple[PixelBuffer, List[str]]:
        """
        Load an image and render its pixel values, one string per row.

        Returns:
            Tuple of (loaded buffer, row strings)
        """
        image = self.load(file_path)
        return image, format_pixel_values(image, fmt)

    def list_operations(self) -> List[Dict[str, Any]]:
        """Describe the available operations."""
        return self.registry.describe()
