"""
Grid Rasterizer
===============

Divides an image with axis-aligned divider lines.

Placement:
    count_x - 1 vertical lines at x = k * (width // count_x)
    count_y - 1 horizontal lines at y = k * (height // count_y)

    Integer division: parts are uneven when the extent is not a
    multiple of the count.

Line Semantics:
    Line coordinates use a bottom-left origin. draw_line maps a y
    coordinate to buffer row (height - y). Thickness t paints t + 1
    parallel one-pixel passes: leftward from a vertical line's column,
    downward in buffer rows from a horizontal line's row.

    Only vertical (x0 == x1) and horizontal (y0 == y1) segments are
    drawn. Anything else, a negative coordinate, or thickness <= 0
    leaves the canvas untouched without raising.
"""

import logging

from bmp_editor.errors import ArgumentError
from bmp_editor.models.color import Color
from bmp_editor.raster.canvas import Canvas


logger = logging.getLogger(__name__)


def check_divide_arguments(count_x: int, count_y: int, thickness: int) -> None:
    """
    Validate grid parameters before drawing.

    Raises:
        ArgumentError: If a count is not greater than 1 or thickness
            is not positive
    """
    if count_x <= 1:
        raise ArgumentError("--number_x argument must be greater than 1")
    if count_y <= 1:
        raise ArgumentError("--number_y argument must be greater than 1")
    if thickness <= 0:
        raise ArgumentError("thickness must be positive")


def divider_positions(extent: int, count: int) -> list[int]:
    """Positions of the count - 1 dividers splitting extent into count parts."""
    step = extent // count
    return [k * step for k in range(1, count)]


def divide(
    canvas: Canvas,
    width: int,
    height: int,
    count_x: int,
    count_y: int,
    thickness: int,
    line_color: Color,
) -> None:
    """
    Draw the divider grid splitting the image into count_x by count_y parts.

    Args:
        canvas: Canvas to draw on
        width: Image width in pixels
        height: Image height in pixels
        count_x: Number of columns (> 1)
        count_y: Number of rows (> 1)
        thickness: Line thickness (> 0)
        line_color: Line color

    Raises:
        ArgumentError: If the parameters are invalid or width and height
            do not match the canvas
    """
    if (width, height) != (canvas.width, canvas.height):
        raise ArgumentError(
            f"grid size {width}x{height} does not match image {canvas.width}x{canvas.height}"
        )
    check_divide_arguments(count_x, count_y, thickness)

    xs = divider_positions(width, count_x)
    ys = divider_positions(height, count_y)
    logger.debug(f"Grid {count_x}x{count_y}: vertical at {xs}, horizontal at {ys}")

    for x in xs:
        draw_line(canvas, x, height, x, 0, thickness, line_color)
    for y in ys:
        draw_line(canvas, 0, y, width, y, thickness, line_color)


def draw_line(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    thickness: int,
    color: Color,
) -> None:
    """
    Draw an axis-aligned segment from (x0, y0) to (x1, y1), endpoints included.

    Pixels falling outside the frame are skipped.
    """
    if min(x0, y0, x1, y1) < 0 or thickness <= 0:
        return

    height = canvas.height

    if x0 == x1:
        y_min, y_max = min(y0, y1), max(y0, y1)
        # rows height - y for y in [y_min, y_max]; columns x0 - j for j in [0, thickness]
        canvas.fill_rect(
            top=height - y_max,
            bottom=height - y_min + 1,
            left=x0 - thickness,
            right=x0 + 1,
            color=color,
        )
    elif y0 == y1:
        x_min, x_max = min(x0, x1), max(x0, x1)
        # rows height - y0 + j for j in [0, thickness]
        canvas.fill_rect(
            top=height - y0,
            bottom=height - y0 + thickness + 1,
            left=x_min,
            right=x_max + 1,
            color=color,
        )
