"""
Canvas
======

Pixel addressing layer over an Image's BGR buffer.

Coordinates:
    x is the column, y is the buffer row (file row order).
    No vertical flip is applied here; rasterizers decide their own
    vertical convention.

Writes outside the frame are silently dropped. Rasterizers may probe
coordinates beyond the edges (e.g. thick grid lines), so an out-of-range
write is never a fault.
"""

import numpy as np

from bmp_editor.models.color import Color
from bmp_editor.models.image import Image


class Canvas:
    """
    Get/set access to an Image's pixels by (x, y).

    Mutations go straight to the image buffer; the canvas holds no copy.

    Attributes:
        image: The image being drawn on
    """

    def __init__(self, image: Image) -> None:
        self.image = image
        self._pixels = image.pixels

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the frame."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color:
        """
        Read the pixel at column x, row y.

        Raises:
            IndexError: If (x, y) is outside the frame
        """
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return Color.from_bgr(self._pixels[y, x])

    def set(self, x: int, y: int, color: Color) -> None:
        """Write the pixel at column x, row y. No-op outside the frame."""
        if not self.contains(x, y):
            return
        self._pixels[y, x] = color.to_bgr()

    def fill_rect(self, top: int, bottom: int, left: int, right: int, color: Color) -> None:
        """
        Paint rows [top, bottom) and columns [left, right).

        The rectangle is clipped to the frame; parts outside are dropped.
        """
        top, bottom = max(top, 0), min(bottom, self.height)
        left, right = max(left, 0), min(right, self.width)
        if top >= bottom or left >= right:
            return
        self._pixels[top:bottom, left:right] = color.to_bgr()

    def paint_mask(self, top: int, left: int, mask: np.ndarray, color: Color) -> None:
        """
        Paint every pixel where mask is True.

        The mask's [0, 0] element maps to (left, top). The mask must lie
        inside the frame.
        """
        rows, cols = mask.shape
        region = self._pixels[top:top + rows, left:left + cols]
        region[mask] = color.to_bgr()
