"""
ASCII Glyph Renderer - Pixel Buffer
===================================
Read-only RGBA sample grid handed between pipeline stages.
"""

from typing import Iterable, Tuple, Union

import numpy as np
from PIL import Image

from ascii_glyph_renderer.errors import DimensionMismatch


class PixelBuffer:
    """
    A width x height grid of 8-bit RGBA samples.

    The underlying array has shape ``(height, width, 4)`` and is marked
    read-only. Filters never write into a buffer they were given; they
    return a new one.
    """

    __slots__ = ('_data',)

    def __init__(self, data: Union[bytes, bytearray, Iterable[int], np.ndarray],
                 width: int, height: int):
        """
        Args:
            data: Flat RGBA values (row-major, 4 per pixel) or an array
                of shape ``(height, width, 4)``
            width: Width in pixels
            height: Height in pixels

        Raises:
            DimensionMismatch: If the sample count is not ``width * height * 4``
        """
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise DimensionMismatch(0, 0, width, height)
        if width <= 0 or height <= 0:
            raise DimensionMismatch(max(0, width * height * 4), _length(data), width, height)

        if isinstance(data, (bytes, bytearray, memoryview)):
            arr = np.frombuffer(bytes(data), dtype=np.uint8)
        elif isinstance(data, np.ndarray):
            arr = data
        else:
            arr = np.asarray(list(data))

        expected = width * height * 4
        if arr.size != expected:
            raise DimensionMismatch(expected, int(arr.size), width, height)

        arr = np.clip(arr, 0, 255).astype(np.uint8).reshape(height, width, 4)
        arr.flags.writeable = False
        self._data = arr

    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'PixelBuffer':
        """Wrap an ``(height, width, 4)`` array (copied)."""
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise DimensionMismatch(0, int(arr.size), 0, 0)
        height, width = arr.shape[:2]
        return cls(np.array(arr, copy=True), width, height)

    @classmethod
    def from_image(cls, image: Image.Image) -> 'PixelBuffer':
        """Wrap an already-resampled PIL image, converting it to RGBA."""
        rgba = image if image.mode == 'RGBA' else image.convert('RGBA')
        return cls(np.array(rgba, dtype=np.uint8), rgba.width, rgba.height)

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def array(self) -> np.ndarray:
        """Read-only ``(height, width, 4)`` view of the samples."""
        return self._data

    def copy_array(self) -> np.ndarray:
        """Writable copy of the samples for a filter to work on."""
        return self._data.copy()

    def ensure_size(self, width: int, height: int) -> None:
        """Raise DimensionMismatch unless this buffer is ``width`` x ``height``."""
        if (width, height) != self.size:
            raise DimensionMismatch(width * height * 4, len(self), width, height)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self._data[y, x]
        return int(r), int(g), int(b), int(a)

    def tobytes(self) -> bytes:
        return self._data.tobytes()

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self._data))

    def __len__(self) -> int:
        return self._data.size

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"


def _length(data) -> int:
    try:
        return len(data)
    except TypeError:
        return 0
