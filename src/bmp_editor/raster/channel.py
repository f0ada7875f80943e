"""
Channel Filter
==============

Overwrites one color channel across the whole image.
"""

import logging

from bmp_editor.errors import ArgumentError
from bmp_editor.models.image import CHANNEL_INDEX
from bmp_editor.raster.canvas import Canvas


logger = logging.getLogger(__name__)


def check_channel_arguments(channel: str, value: int) -> None:
    """
    Validate filter parameters before any pixel is touched.

    Raises:
        ArgumentError: If value is outside 0-255 or channel is not
            'red', 'green' or 'blue'
    """
    if not 0 <= value <= 255:
        raise ArgumentError("Color values must be between 0 and 255")
    if channel not in CHANNEL_INDEX:
        raise ArgumentError("Invalid component name (red, green, or blue expected)")


def apply(canvas: Canvas, width: int, height: int, channel: str, value: int) -> None:
    """
    Set the named channel of every pixel to value.

    The other two channels are left untouched. A 0x0 image is a no-op.

    Args:
        canvas: Canvas to filter
        width: Image width in pixels
        height: Image height in pixels
        channel: 'red', 'green' or 'blue'
        value: New channel value (0-255)

    Raises:
        ArgumentError: If the parameters are invalid
    """
    check_channel_arguments(channel, value)

    logger.debug(f"Setting {channel} to {value} on {width}x{height} pixels")
    canvas.image.pixels[:height, :width, CHANNEL_INDEX[channel]] = value
