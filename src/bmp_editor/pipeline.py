"""
Editing Pipeline
================

Runs one EditRequest: decode -> one operation -> encode.

Flow:
    1. Decode the input file (errors propagate, nothing is written)
    2. Dispatch on the operation variant
         InfoOperation    -> return a HeaderReport, no mutation, no encode
         CircleOperation  -> flip center y into buffer rows, draw annulus
         DivideOperation  -> draw divider grid
         FilterOperation  -> override one channel
    3. Encode to the output path

Each operation validates its parameters before touching the buffer, so
a rejected request never opens the output file.

Example:
    from bmp_editor.models import EditRequest, FilterOperation
    from bmp_editor.pipeline import process

    process(EditRequest("in.bmp", "out.bmp", FilterOperation("green", 128)))
"""

import logging
from typing import Optional

from bmp_editor.codec import decode, encode
from bmp_editor.models.image import Image
from bmp_editor.models.operations import (
    CircleOperation,
    DivideOperation,
    EditRequest,
    FilterOperation,
    InfoOperation,
    Operation,
    Point,
)
from bmp_editor.models.output import HeaderReport
from bmp_editor.raster import channel, circle, grid
from bmp_editor.raster.canvas import Canvas


logger = logging.getLogger(__name__)


def process(request: EditRequest) -> Optional[HeaderReport]:
    """
    Execute a single editing request.

    Args:
        request: Input/output paths and the operation to run

    Returns:
        HeaderReport for an info request, None otherwise

    Raises:
        BmpEditorError: Any fatal error kind (see bmp_editor.errors)
    """
    image = decode(request.input_path)

    match request.operation:
        case InfoOperation():
            logger.info(f"Reporting headers of {request.input_path}")
            return HeaderReport.from_image(image)
        case operation:
            apply_operation(image, operation)
            encode(request.output_path, image)
            return None


def apply_operation(image: Image, operation: Operation) -> None:
    """
    Mutate image in place with one drawing/filter operation.

    Raises:
        ArgumentError: If the operation's parameters are invalid
    """
    canvas = Canvas(image)
    logger.info(f"Applying {type(operation).__name__} to {image!r}")

    match operation:
        case CircleOperation(
            center=center,
            radius=radius,
            thickness=thickness,
            line_color=line_color,
            fill=fill,
            fill_color=fill_color,
        ):
            # Conventional (bottom-left origin) center to buffer row
            buffer_center = Point(center.x, image.height - center.y)
            circle.draw_annulus(
                canvas,
                buffer_center,
                radius,
                thickness,
                line_color,
                fill=fill,
                fill_color=fill_color,
            )
        case DivideOperation(
            count_x=count_x,
            count_y=count_y,
            thickness=thickness,
            line_color=line_color,
        ):
            grid.divide(
                canvas,
                image.width,
                image.height,
                count_x,
                count_y,
                thickness,
                line_color,
            )
        case FilterOperation(channel=name, value=value):
            channel.apply(canvas, image.width, image.height, name, value)
        case _:
            raise TypeError(f"Unknown operation: {operation!r}")
