"""
Pixel buffer data model.

A PixelBuffer is an immutable rectangular grid of 8-bit pixels backed by a
NumPy array:
- RGB variant: shape (height, width, 3), RGB channel order
- Grayscale variant: shape (height, width), single luma channel

Coordinates are (x, y) with x the column and y the row. The backing array
is copied on construction and flagged read-only, so a buffer handed to a
transform can never be mutated by it.
"""

import logging
from typing import Any, Iterable, Iterator, List, NamedTuple, Tuple, Union

import numpy as np

from image_editor.common.constants import PixelConstants
from image_editor.common.exceptions import InvalidParameterError, NullInputError

logger = logging.getLogger(__name__)


class Pixel(NamedTuple):
    """One RGB pixel with named channel accessors."""

    red: int
    green: int
    blue: int

    @property
    def packed(self) -> int:
        """Pixel as a packed 0xRRGGBB integer."""
        return (
            (self.red << PixelConstants.RED_SHIFT)
            | (self.green << PixelConstants.GREEN_SHIFT)
            | (self.blue << PixelConstants.BLUE_SHIFT)
        )

    @property
    def is_gray(self) -> bool:
        """True if all three channels are equal."""
        return self.red == self.green == self.blue

    @classmethod
    def from_packed(cls, value: int) -> "Pixel":
        """Create a pixel from a packed 0xRRGGBB integer (higher bits ignored)."""
        mask = PixelConstants.CHANNEL_MASK
        return cls(
            red=(value >> PixelConstants.RED_SHIFT) & mask,
            green=(value >> PixelConstants.GREEN_SHIFT) & mask,
            blue=(value >> PixelConstants.BLUE_SHIFT) & mask,
        )

    @classmethod
    def gray(cls, value: int) -> "Pixel":
        """Create a channel-equal pixel."""
        return cls(value, value, value)


class PixelBuffer:
    """
    Immutable rectangular pixel grid.

    Construct from any integer array-like of shape (height, width) or
    (height, width, 3) with values in [0, 255]. Width and height must be > 0.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: Any):
        """
        Args:
            pixels: Array-like pixel data, grayscale (H, W) or RGB (H, W, 3)

        Raises:
            NullInputError: If pixels is None
            InvalidParameterError: If the data is ragged, empty, wrongly
                shaped, non-integer or outside the channel range
        """
        if pixels is None:
            raise NullInputError("PixelBuffer")

        try:
            array = np.asarray(pixels)
        except ValueError as e:
            raise InvalidParameterError("pixels", type(pixels).__name__, f"not rectangular: {e}")

        # Collapse explicit single-channel layout to the 2D grayscale variant
        if array.ndim == 3 and array.shape[2] == PixelConstants.GRAYSCALE_CHANNELS:
            array = array[:, :, 0]

        if array.ndim not in (2, 3) or (
            array.ndim == 3 and array.shape[2] != PixelConstants.RGB_CHANNELS
        ):
            raise InvalidParameterError(
                "pixels", array.shape, "expected shape (height, width) or (height, width, 3)"
            )

        if array.shape[0] == 0 or array.shape[1] == 0:
            raise InvalidParameterError("pixels", array.shape, "width and height must be > 0")

        if array.dtype != np.uint8:
            if not np.issubdtype(array.dtype, np.integer):
                raise InvalidParameterError(
                    "pixels", str(array.dtype), "channel values must be integers"
                )
            if array.min() < PixelConstants.CHANNEL_MIN or array.max() > PixelConstants.CHANNEL_MAX:
                raise InvalidParameterError(
                    "pixels",
                    (int(array.min()), int(array.max())),
                    "channel values must be within [0, 255]",
                )

        stored = np.array(array, dtype=np.uint8, copy=True)
        stored.setflags(write=False)
        self._pixels = stored

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Union[Pixel, Tuple[int, int, int], int]]]):
        """
        Create a buffer from rows of pixels in row-major order.

        Each row holds RGB triples (or Pixel values) for the RGB variant, or
        plain ints for the grayscale variant.
        """
        if rows is None:
            raise NullInputError("PixelBuffer.from_rows")
        return cls([list(row) for row in rows])

    @classmethod
    def filled(
        cls, width: int, height: int, color: Union[Pixel, Tuple[int, int, int], int]
    ) -> "PixelBuffer":
        """Create a buffer of the given size with every pixel set to color."""
        if width <= 0 or height <= 0:
            raise InvalidParameterError(
                "size", (width, height), "width and height must be > 0"
            )
        if isinstance(color, int):
            return cls(np.full((height, width), color, dtype=np.int64))
        return cls(np.tile(np.asarray(color, dtype=np.int64), (height, width, 1)))

    # ------------------------------------------------------------------
    # Geometry and layout
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def channels(self) -> int:
        if self._pixels.ndim == 2:
            return PixelConstants.GRAYSCALE_CHANNELS
        return PixelConstants.RGB_CHANNELS

    @property
    def is_grayscale(self) -> bool:
        return self._pixels.ndim == 2

    @property
    def mode(self) -> str:
        """'grayscale' or 'rgb'."""
        return "grayscale" if self.is_grayscale else "rgb"

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the backing array (rows first)."""
        return self._pixels

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------

    def pixel(self, x: int, y: int) -> Pixel:
        """
        Get the pixel at column x, row y.

        Grayscale buffers return a channel-equal Pixel.

        Raises:
            InvalidParameterError: If (x, y) is outside the buffer
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidParameterError(
                "coordinate", (x, y), f"outside {self.width}x{self.height} buffer"
            )

        value = self._pixels[y, x]
        if self.is_grayscale:
            return Pixel.gray(int(value))
        return Pixel(int(value[0]), int(value[1]), int(value[2]))

    def __getitem__(self, key: Tuple[int, int]) -> Pixel:
        x, y = key
        return self.pixel(x, y)

    def rows(self) -> Iterator[List[Pixel]]:
        """Yield each row as a list of Pixels, top to bottom."""
        for y in range(self.height):
            yield [self.pixel(x, y) for x in range(self.width)]

    def to_rgb(self) -> "PixelBuffer":
        """Return the RGB variant (grayscale luma replicated into all channels)."""
        if not self.is_grayscale:
            return self
        return PixelBuffer(np.repeat(self._pixels[:, :, np.newaxis], 3, axis=2))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(
            np.array_equal(self._pixels, other._pixels)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, mode={self.mode!r})"


def require_buffer(buffer: Any, operation: str) -> PixelBuffer:
    """
    Check that an operation received a usable buffer.

    Raises:
        NullInputError: If buffer is None
        InvalidParameterError: If buffer is not a PixelBuffer
    """
    if buffer is None:
        logger.warning(f"{operation} called without an input buffer")
        raise NullInputError(operation)
    if not isinstance(buffer, PixelBuffer):
        raise InvalidParameterError("input", type(buffer).__name__, "expected a PixelBuffer")
    return buffer
