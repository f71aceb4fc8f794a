"""
Named pixel operations with a registry for dispatch.

Each transform is wrapped in a strategy class so a front end can pick one
operation by name and hand over a parameter dict. Exactly one operation is
applied per call; there is no chaining.

Usage:
    registry = OperationRegistry()
    result = registry.apply("blur", image, {"block_size": 4})
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Union

from image_editor.common.enums import BlurEdgeMode, OperationType
from image_editor.common.exceptions import InvalidParameterError
from image_editor.image.blur import blur
from image_editor.image.buffer import PixelBuffer
from image_editor.image.geometry import flip_horizontal, flip_vertical, rotate_left, rotate_right
from image_editor.image.photometric import adjust_brightness, grayscale

logger = logging.getLogger(__name__)


class PixelOperation(ABC):
    """Abstract base class for named pixel operations."""

    required_params: Tuple[str, ...] = ()
    optional_params: Tuple[str, ...] = ()

    @abstractmethod
    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        """
        Apply operation to image.

        Args:
            image: Input buffer
            params: Operation parameters

        Returns:
            New buffer
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Operation name for dispatch and logging."""
        pass

    def check_params(self, params: Dict[str, Any]) -> None:
        """Raise InvalidParameterError if a required parameter is missing."""
        for param in self.required_params:
            if params.get(param) is None:
                raise InvalidParameterError(param, None, f"required by {self.name}")


class GrayscaleOperation(PixelOperation):
    """Convert image to grayscale."""

    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        return grayscale(image)

    @property
    def name(self) -> str:
        return OperationType.GRAYSCALE.value


class BrightnessOperation(PixelOperation):
    """Scale channels by a signed percentage."""

    required_params = ("percentage",)

    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        return adjust_brightness(image, params["percentage"])

    @property
    def name(self) -> str:
        return OperationType.BRIGHTNESS.value


class RotateRightOperation(PixelOperation):
    """Rotate 90 degrees clockwise."""

    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        return rotate_right(image)

    @property
    def name(self) -> str:
        return OperationType.ROTATE_RIGHT.value


class RotateLeftOperation(PixelOperation):
    """Rotate 90 degrees counter-clockwise."""

    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        return rotate_left(image)

    @property
    def name(self) -> str:
        return OperationType.ROTATE_LEFT.value


class FlipHorizontalOperation(PixelOperation):
    """Mirror left-right."""

    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        return flip_horizontal(image)

    @property
    def name(self) -> str:
        return OperationType.FLIP_HORIZONTAL.value


class FlipVerticalOperation(PixelOperation):
    """Mirror top-bottom."""

    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        return flip_vertical(image)

    @property
    def name(self) -> str:
        return OperationType.FLIP_VERTICAL.value


class BlurOperation(PixelOperation):
    """Block-average blur."""

    required_params = ("block_size",)
    optional_params = ("edge_mode",)

    def apply(self, image: PixelBuffer, params: Dict[str, Any]) -> PixelBuffer:
        edge_mode = params.get("edge_mode") or BlurEdgeMode.SHRINK
        return blur(image, params["block_size"], edge_mode=edge_mode)

    @property
    def name(self) -> str:
        return OperationType.BLUR.value


class OperationRegistry:
    """
    Lookup table of pixel operations by name.

    The registry is immutable after construction and safe to share.
    """

    def __init__(self, operations: Optional[List[PixelOperation]] = None):
        """Initialize registry with the given operations (all built-ins by default)."""
        if operations is None:
            operations = [
                GrayscaleOperation(),
                BrightnessOperation(),
                RotateRightOperation(),
                RotateLeftOperation(),
                FlipHorizontalOperation(),
                FlipVerticalOperation(),
                BlurOperation(),
            ]
        self._operations: Dict[str, PixelOperation] = {op.name: op for op in operations}

    def get(self, name: Union[OperationType, str]) -> PixelOperation:
        """
        Get operation by name.

        Raises:
            InvalidParameterError: If no operation has that name
        """
        key = name.value if isinstance(name, OperationType) else name
        operation = self._operations.get(key)
        if operation is None:
            raise InvalidParameterError(
                "operation", name, f"must be one of {self.get_available_operations()}"
            )
        return operation

    def apply(
        self,
        name: Union[OperationType, str],
        image: PixelBuffer,
        params: Optional[Dict[str, Any]] = None,
    ) -> PixelBuffer:
        """
        Apply a single named operation.

        Args:
            name: Operation name
            image: Input buffer
            params: Operation parameters

        Returns:
            New buffer produced by the operation
        """
        if params is None:
            params = {}

        operation = self.get(name)
        operation.check_params(params)

        try:
            result = operation.apply(image, params)
        except Exception as e:
            logger.error(f"Failed to apply {operation.name}: {e}")
            raise

        logger.debug(f"Applied operation: {operation.name}")
        return result

    def get_available_operations(self) -> List[str]:
        """Get list of available operation names."""
        return list(self._operations)

    def describe(self) -> List[Dict[str, Any]]:
        """Describe each operation with its required and optional parameters."""
        return [
            {
                "name": op.name,
                "required_params": list(op.required_params),
                "optional_params": list(op.optional_params),
                "description": (op.__doc__ or "").strip(),
            }
            for op in self._operations.values()
        ]
