"""
Image Model
===========

In-memory representation of a decoded BMP file.

Design Rules:
    - Pixels live in ONE contiguous uint8 buffer of shape (height, width, 3)
    - Channel order is the on-disk order: blue, green, red
    - Row index is the file row order; the codec applies no vertical flip
    - File row padding never appears in memory
    - Headers are pass-through; dimensions never change after decode
"""

from dataclasses import dataclass

import numpy as np

from bmp_editor.models.header import FileHeader, InfoHeader


# Channel positions inside a BGR pixel
CHANNEL_INDEX = {
    "blue": 0,
    "green": 1,
    "red": 2,
}


@dataclass(slots=True)
class Image:
    """
    Decoded BMP image.

    Constructed once by the codec, mutated in place by at most one
    operation, then consumed by the encoder.

    Attributes:
        file_header: Decoded BITMAPFILEHEADER
        info_header: Decoded BITMAPINFOHEADER
        pixels: (height, width, 3) uint8 array in BGR order
    """

    file_header: FileHeader
    info_header: InfoHeader
    pixels: np.ndarray

    def __post_init__(self) -> None:
        """Validate buffer shape against the header dimensions."""
        expected = (self.info_header.height, self.info_header.width, 3)
        if self.pixels.shape != expected:
            raise ValueError(
                f"Pixel buffer shape {self.pixels.shape} does not match "
                f"header dimensions {expected}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Pixel buffer must be uint8, got {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def height(self) -> int:
        return self.info_header.height

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the pixel buffer."""
        return (
            f"Image(width={self.width}, height={self.height}, "
            f"bpp={self.info_header.bits_per_pixel})"
        )
