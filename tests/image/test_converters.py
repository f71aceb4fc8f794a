"""
Tests for image.converters module (codec).
"""

import base64

import cv2
import numpy as np
import pytest

from image_editor.common.enums import ImageFormat
from image_editor.common.exceptions import DecodeError, InvalidParameterError, NullInputError
from image_editor.image.buffer import Pixel, PixelBuffer
from image_editor.image.converters import (
    decode,
    encode,
    load_image,
    normalize_format,
    save_image,
    to_base64,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8"


class TestNormalizeFormat:
    """Tests for format name normalization."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("png", ImageFormat.PNG),
            ("PNG", ImageFormat.PNG),
            (".jpg", ImageFormat.JPG),
            ("jpeg", ImageFormat.JPEG),
            (".tif", ImageFormat.TIFF),
            (ImageFormat.BMP, ImageFormat.BMP),
        ],
    )
    def test_known_formats(self, value, expected):
        """Test case, leading dots and aliases."""
        assert normalize_format(value) == expected

    def test_unknown_format(self):
        """Test unsupported formats are rejected."""
        with pytest.raises(InvalidParameterError):
            normalize_format("gif")


class TestEncodeDecode:
    """Tests for in-memory encode and decode."""

    def test_png_is_lossless(self, gradient_image):
        """Test PNG preserves every pixel and the RGB channel order."""
        data = encode(gradient_image, "png")

        assert data.startswith(PNG_SIGNATURE)
        assert decode(data) == gradient_image

    def test_jpeg_signature(self, gradient_image):
        """Test JPEG output starts with the SOI marker."""
        data = encode(gradient_image, ImageFormat.JPG, quality=80)

        assert data.startswith(JPEG_SIGNATURE)
        decoded = decode(data)
        assert (decoded.width, decoded.height) == (10, 10)

    def test_grayscale_decodes_as_rgb(self):
        """Test grayscale buffers come back channel-equal RGB."""
        image = PixelBuffer([[0, 50], [200, 255]])

        decoded = decode(encode(image, "png"))

        assert not decoded.is_grayscale
        assert decoded.pixel(1, 0) == Pixel.gray(50)
        assert decoded.pixel(0, 1) == Pixel.gray(200)

    def test_decode_empty(self):
        """Test empty input raises DecodeError."""
        with pytest.raises(DecodeError):
            decode(b"")

    def test_decode_garbage(self):
        """Test non-image bytes raise DecodeError with the source in details."""
        with pytest.raises(DecodeError) as exc_info:
            decode(b"definitely not an image", source="notes.txt")

        assert exc_info.value.status_code == 422
        assert exc_info.value.details["source"] == "notes.txt"

    def test_encode_none(self):
        """Test encoding None raises NullInputError."""
        with pytest.raises(NullInputError):
            encode(None, "png")

    def test_encode_unknown_format(self, primary_image):
        """Test unsupported formats are rejected before encoding."""
        with pytest.raises(InvalidParameterError):
            encode(primary_image, "webm")

    def test_to_base64(self, primary_image):
        """Test base64 output decodes to a PNG of the same image."""
        encoded = to_base64(primary_image)

        raw = base64.b64decode(encoded)
        assert raw.startswith(PNG_SIGNATURE)
        assert decode(raw) == primary_image


class TestFileIO:
    """Tests for load_image and save_image."""

    def test_save_and_load_png(self, tmp_path, gradient_image):
        """Test a PNG written to disk loads back identically."""
        path = save_image(gradient_image, tmp_path / "out.png")

        assert path.read_bytes().startswith(PNG_SIGNATURE)
        assert load_image(path) == gradient_image

    def test_format_from_suffix(self, tmp_path, primary_image):
        """Test the file suffix picks the format."""
        path = save_image(primary_image, tmp_path / "out.jpg")

        assert path.read_bytes().startswith(JPEG_SIGNATURE)

    def test_explicit_format_overrides_suffix(self, tmp_path, primary_image):
        """Test an explicit format wins over the suffix."""
        path = save_image(primary_image, tmp_path / "out.jpg", image_format="png")

        assert path.read_bytes().startswith(PNG_SIGNATURE)

    def test_no_suffix_defaults_to_jpeg(self, tmp_path, primary_image):
        """Test paths without a suffix are written as JPEG."""
        path = save_image(primary_image, tmp_path / "output")

        assert path.read_bytes().startswith(JPEG_SIGNATURE)

    def test_creates_parent_directories(self, tmp_path, primary_image):
        """Test missing parent directories are created."""
        path = save_image(primary_image, tmp_path / "a" / "b" / "out.png")

        assert path.is_file()

    def test_grayscale_file_loads_as_rgb(self, tmp_path):
        """Test a saved grayscale buffer loads back as its RGB equivalent."""
        gray = PixelBuffer([[0, 64], [128, 255]])
        path = save_image(gray, tmp_path / "gray.png")

        loaded = load_image(path)

        assert loaded.channels == 3
        assert loaded == gray.to_rgb()

    def test_load_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_image(tmp_path / "missing.png")

    def test_load_directory(self, tmp_path):
        """Test a directory is not treated as an image file."""
        with pytest.raises(FileNotFoundError):
            load_image(tmp_path)

    def test_load_non_image(self, tmp_path):
        """Test a file that is not an image raises DecodeError."""
        path = tmp_path / "fake.png"
        path.write_bytes(b"plain text")

        with pytest.raises(DecodeError):
            load_image(path)

    def test_alpha_discarded(self, tmp_path):
        """Test four-channel PNGs load as RGB."""
        bgra = np.zeros((2, 2, 4), dtype=np.uint8)
        bgra[:, :] = (255, 0, 0, 128)
        path = tmp_path / "alpha.png"
        cv2.imwrite(str(path), bgra)

        image = load_image(path)

        assert image.channels == 3
        assert image.pixel(0, 0) == Pixel(0, 0, 255)
