"""
Tests for image.operations module.

Tests the named operations and the registry dispatcher.
"""

import pytest

from image_editor.common.enums import OperationType
from image_editor.common.exceptions import InvalidParameterError
from image_editor.image.blur import blur
from image_editor.image.buffer import PixelBuffer
from image_editor.image.geometry import rotate_right
from image_editor.image.operations import (
    BlurOperation,
    BrightnessOperation,
    GrayscaleOperation,
    OperationRegistry,
    PixelOperation,
)
from image_editor.image.photometric import adjust_brightness, grayscale


@pytest.fixture
def registry():
    """Create registry with all built-in operations"""
    return OperationRegistry()


# =============================================================================
# Operation Tests
# =============================================================================


class TestOperations:
    """Tests for individual operation strategies."""

    def test_grayscale_operation(self, gradient_image):
        """Test grayscale operation ignores params."""
        op = GrayscaleOperation()

        assert op.name == "grayscale"
        assert op.apply(gradient_image, {}) == grayscale(gradient_image)

    def test_brightness_requires_percentage(self, gradient_image):
        """Test missing percentage is reported as an invalid parameter."""
        op = BrightnessOperation()

        with pytest.raises(InvalidParameterError) as exc_info:
            op.check_params({"percentage": None})

        assert exc_info.value.details["param"] == "percentage"

    def test_blur_defaults_to_shrink(self, wide_image):
        """Test blur without edge_mode uses shrink."""
        op = BlurOperation()

        assert op.apply(wide_image, {"block_size": 2}) == blur(wide_image, 2, "shrink")

    def test_custom_operation(self, primary_image):
        """Test registries accept custom operations."""

        class IdentityOperation(PixelOperation):
            def apply(self, image, params):
                return image

            @property
            def name(self):
                return "identity"

        registry = OperationRegistry([IdentityOperation()])

        assert registry.get_available_operations() == ["identity"]
        assert registry.apply("identity", primary_image) is primary_image


# =============================================================================
# Registry Tests
# =============================================================================


class TestOperationRegistry:
    """Tests for OperationRegistry dispatch."""

    def test_all_operations_registered(self, registry):
        """Test every operation type is available."""
        assert set(registry.get_available_operations()) == {op.value for op in OperationType}

    def test_get_by_enum_or_name(self, registry):
        """Test lookup accepts enum members and plain names."""
        assert registry.get(OperationType.BLUR) is registry.get("blur")

    def test_unknown_operation(self, registry):
        """Test unknown names are rejected."""
        with pytest.raises(InvalidParameterError) as exc_info:
            registry.get("sharpen")

        assert exc_info.value.details["param"] == "operation"

    def test_apply_rotate(self, registry, wide_image):
        """Test dispatch to a parameterless operation."""
        assert registry.apply("rotate_right", wide_image) == rotate_right(wide_image)

    def test_apply_brightness(self, registry, gradient_image):
        """Test dispatch with a parameter."""
        result = registry.apply(OperationType.BRIGHTNESS, gradient_image, {"percentage": 25})

        assert result == adjust_brightness(gradient_image, 25)

    def test_apply_missing_required_param(self, registry, gradient_image):
        """Test missing required params raise before the transform runs."""
        with pytest.raises(InvalidParameterError):
            registry.apply("blur", gradient_image, {})

    def test_apply_propagates_transform_errors(self, registry, uniform_image):
        """Test errors from the transform reach the caller."""
        with pytest.raises(InvalidParameterError):
            registry.apply("blur", uniform_image, {"block_size": 10})

    def test_apply_passes_edge_mode(self, registry):
        """Test optional params reach the transform."""
        image = PixelBuffer([[0, 4, 9], [2, 6, 3]])

        result = registry.apply("blur", image, {"block_size": 2, "edge_mode": "preserve"})

        assert result.array.tolist() == [[3, 3, 9], [3, 3, 3]]

    def test_describe(self, registry):
        """Test operation descriptions list parameters."""
        described = {info["name"]: info for info in registry.describe()}

        assert described["brightness"]["required_params"] == ["percentage"]
        assert described["blur"]["required_params"] == ["block_size"]
        assert described["blur"]["optional_params"] == ["edge_mode"]
        assert described["flip_vertical"]["required_params"] == []
        assert described["rotate_left"]["description"]
