"""Immutable RGBA pixel buffer handed to the conversion core."""

from dataclasses import dataclass
from typing import Union

import numpy as np
from PIL import Image

from luma_ascii.constants import BYTES_PER_PIXEL
from luma_ascii.errors import InvalidInputError


@dataclass(frozen=True)
class PixelBuffer:
    """A width x height grid of RGBA bytes in row-major order. Alpha is ignored."""

    width: int
    height: int
    data: bytes

    def __post_init__(self):
        if isinstance(self.data, (bytearray, memoryview)):
            object.__setattr__(self, 'data', bytes(self.data))
        elif not isinstance(self.data, bytes):
            raise InvalidInputError(f"pixel data must be bytes, got {type(self.data).__name__}")

        if self.width < 1 or self.height < 1:
            raise InvalidInputError(
                f"pixel buffer dimensions must be positive, got {self.width}x{self.height}")

        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.data) != expected:
            raise InvalidInputError(
                f"pixel buffer of {self.width}x{self.height} needs {expected} bytes, "
                f"got {len(self.data)}")

    @classmethod
    def from_image(cls, image: Image.Image) -> 'PixelBuffer':
        """Snapshot a PIL image as RGBA bytes."""
        rgba = image if image.mode == 'RGBA' else image.convert('RGBA')
        return cls(rgba.width, rgba.height, rgba.tobytes())

    @classmethod
    def from_array(cls, arr: Union[np.ndarray, list]) -> 'PixelBuffer':
        """Build a buffer from an (H, W, 3) or (H, W, 4) array of byte values."""
        arr = np.asarray(arr, dtype=np.uint8)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise InvalidInputError(f"expected an (H, W, 3|4) array, got shape {arr.shape}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr, alpha], axis=2)
        height, width = arr.shape[:2]
        return cls(width, height, np.ascontiguousarray(arr).tobytes())

    @property
    def size(self):
        return self.width, self.height

    def to_array(self) -> np.ndarray:
        """Read-only (H, W, 4) uint8 view of the pixel data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, BYTES_PER_PIXEL)
