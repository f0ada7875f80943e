"""
Circle Rasterizer
=================

Draws an annular ring, optionally filled.

Geometry:
    inner_radius = max(0, radius - thickness // 2)
    outer_radius = radius + thickness // 2

Membership Rules (intentionally different):
    Ring: squared distance band, inclusive
        inner_radius**2 <= d2 <= outer_radius**2
    Fill: true Euclidean distance, strict
        sqrt(d2) < inner_radius

    The ring rule is not a true-distance annulus; the exact boundary
    pixels it produces are part of the output contract.

Coordinates:
    center is in buffer coordinates (column, row). Callers holding a
    conventional bottom-left-origin center translate it first.
"""

import logging
from typing import Optional

import numpy as np

from bmp_editor.errors import ArgumentError
from bmp_editor.models.color import Color
from bmp_editor.models.operations import Point
from bmp_editor.raster.canvas import Canvas


logger = logging.getLogger(__name__)


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
# Keeps squared distances inside the ring box below 2**63
MAX_EXTENT = 2 ** 30


def annulus_radii(radius: int, thickness: int) -> tuple[int, int]:
    """Return (inner_radius, outer_radius) for a ring."""
    half = thickness // 2
    return max(0, radius - half), radius + half


def check_annulus_arguments(
    center: Point,
    radius: int,
    thickness: int,
    fill: bool = False,
    fill_color: Optional[Color] = None,
) -> None:
    """
    Validate ring parameters before drawing.

    Raises:
        ArgumentError: If the center lies outside the signed 32-bit
            range, radius or thickness is not positive or exceeds
            MAX_EXTENT, or fill is requested without a fill color
    """
    if not (INT32_MIN <= center.x <= INT32_MAX and INT32_MIN <= center.y <= INT32_MAX):
        raise ArgumentError(f"circle center ({center.x}, {center.y}) out of range")
    if radius <= 0:
        raise ArgumentError("circle radius must be positive")
    if thickness <= 0:
        raise ArgumentError("thickness must be positive")
    if radius > MAX_EXTENT or thickness > MAX_EXTENT:
        raise ArgumentError(f"circle radius and thickness must not exceed {MAX_EXTENT}")
    if fill and fill_color is None:
        raise ArgumentError("no fill color given")


def draw_annulus(
    canvas: Canvas,
    center: Point,
    radius: int,
    thickness: int,
    line_color: Color,
    fill: bool = False,
    fill_color: Optional[Color] = None,
) -> None:
    """
    Draw a ring of the given radius and band thickness.

    Args:
        canvas: Canvas to draw on
        center: Ring center in buffer coordinates
        radius: Ring radius in pixels (> 0)
        thickness: Band width in pixels (> 0)
        line_color: Ring color
        fill: Also paint the inside of the ring
        fill_color: Inside color, required when fill is set

    Raises:
        ArgumentError: If the parameters are invalid
    """
    check_annulus_arguments(center, radius, thickness, fill, fill_color)

    inner, outer = annulus_radii(radius, thickness)
    logger.debug(
        f"Annulus at ({center.x}, {center.y}): inner={inner}, outer={outer}, fill={fill}"
    )

    _paint_ring(canvas, center, inner, outer, line_color)
    if fill:
        _paint_fill(canvas, center, inner, fill_color)


def _squared_distances(center: Point, top: int, bottom: int, left: int, right: int) -> np.ndarray:
    """Squared distance from center for rows [top, bottom) x columns [left, right)."""
    ys = np.arange(top, bottom, dtype=np.int64)[:, np.newaxis]
    xs = np.arange(left, right, dtype=np.int64)[np.newaxis, :]
    return (xs - center.x) ** 2 + (ys - center.y) ** 2


def _paint_ring(canvas: Canvas, center: Point, inner: int, outer: int, color: Color) -> None:
    """Paint pixels whose squared distance lies in [inner**2, outer**2]."""
    left = max(center.x - outer - 1, 0)
    right = min(center.x + outer + 1, canvas.width)
    top = max(center.y - outer - 1, 0)
    bottom = min(center.y + outer + 1, canvas.height)
    if left >= right or top >= bottom:
        return

    d2 = _squared_distances(center, top, bottom, left, right)
    mask = (d2 <= outer * outer) & (d2 >= inner * inner)
    canvas.paint_mask(top, left, mask, color)


def _paint_fill(canvas: Canvas, center: Point, inner: int, color: Color) -> None:
    """Paint pixels strictly closer than inner to the center."""
    left = max(center.x - inner, 0)
    right = min(center.x + inner + 1, canvas.width)
    top = max(center.y - inner, 0)
    bottom = min(center.y + inner + 1, canvas.height)
    if left >= right or top >= bottom:
        return

    d2 = _squared_distances(center, top, bottom, left, right)
    mask = np.sqrt(d2) < inner
    canvas.paint_mask(top, left, mask, color)
