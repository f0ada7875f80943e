"""
Raster Module
=============

Drawing operations on a decoded image.

Components:
    - Canvas: (x, y) pixel addressing over the BGR buffer
    - circle: Annulus with optional fill
    - grid: Axis-aligned divider lines
    - channel: Single-channel override
"""

from bmp_editor.raster import channel, circle, grid
from bmp_editor.raster.canvas import Canvas

__all__ = [
    "Canvas",
    "channel",
    "circle",
    "grid",
]
