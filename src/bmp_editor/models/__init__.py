"""
Data Models
===========

Value types shared by the codec, rasterizers and pipeline.

Models:
    - Color: RGB byte triplet
    - FileHeader, InfoHeader: BMP header layouts
    - Image: Headers plus contiguous BGR pixel buffer
    - Point and the operation variants: request parameters
    - HeaderReport: Info request output
"""

from bmp_editor.models.color import Color
from bmp_editor.models.header import FileHeader, InfoHeader
from bmp_editor.models.image import CHANNEL_INDEX, Image
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

__all__ = [
    "Color",
    "FileHeader",
    "InfoHeader",
    "Image",
    "CHANNEL_INDEX",
    "Point",
    "InfoOperation",
    "CircleOperation",
    "DivideOperation",
    "FilterOperation",
    "Operation",
    "EditRequest",
    "HeaderReport",
]
