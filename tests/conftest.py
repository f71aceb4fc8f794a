"""
Pytest configuration and fixtures for Image Editor tests
"""

import numpy as np
import pytest

from image_editor.config import CodecConfig, Settings, TransformConfig
from image_editor.image import PixelBuffer, save_image
from image_editor.services.transform_service import TransformService


@pytest.fixture
def gradient_image():
    """Create a 10x10 RGB gradient (red varies with x, green with y)"""
    ys, xs = np.mgrid[0:10, 0:10]
    pixels = np.stack(
        [(xs * 25) % 256, (ys * 25) % 256, ((xs + ys) * 12) % 256],
        axis=2,
    )
    return PixelBuffer(pixels)


@pytest.fixture
def primary_image():
    """Create a 2x2 image: red, green / blue, white"""
    return PixelBuffer.from_rows(
        [
            [(255, 0, 0), (0, 255, 0)],
            [(0, 0, 255), (255, 255, 255)],
        ]
    )


@pytest.fixture
def wide_image():
    """Create a 3 wide x 2 tall RGB image with distinct pixels"""
    pixels = np.arange(3 * 2 * 3).reshape(2, 3, 3) * 10
    return PixelBuffer(pixels)


@pytest.fixture
def uniform_image():
    """Create a 4x4 image of a single color"""
    return PixelBuffer.filled(4, 4, (120, 60, 30))


@pytest.fixture
def image_file(tmp_path, gradient_image):
    """Write the gradient image as a lossless PNG and return its path"""
    path = tmp_path / "gradient.png"
    save_image(gradient_image, path)
    return path


@pytest.fixture
def settings(tmp_path):
    """Create settings that write output into the temporary directory"""
    return Settings(
        transform=TransformConfig(default_blur_block_size=2),
        codec=CodecConfig(output_path=str(tmp_path / "output.png")),
    )


@pytest.fixture
def transform_service(settings):
    """Create TransformService instance for testing"""
    return TransformService(settings=settings)
