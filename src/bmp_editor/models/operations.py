"""
Operation Models
================

Tagged variant describing the single operation a request performs.

Each variant carries its own parameters. The pipeline consumes them with
structural pattern matching; there is no shared "selected option" state.

Variants:
    - InfoOperation: Report header fields, no mutation
    - CircleOperation: Draw an annulus, optionally filled
    - DivideOperation: Divide the image with a grid of lines
    - FilterOperation: Override one color channel

Coordinates:
    CircleOperation.center is in conventional coordinates (origin at
    the bottom-left, y increasing upward). The pipeline translates it
    into buffer rows before drawing.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from bmp_editor.errors import ArgumentError
from bmp_editor.models.color import Color


_POINT_PATTERN = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class Point:
    """Integer pixel coordinate."""

    x: int
    y: int

    @classmethod
    def parse(cls, text: Optional[str]) -> "Point":
        """
        Parse a point from "X.Y" notation, e.g. "100.50".

        Raises:
            ArgumentError: If the string is missing or malformed
        """
        match = _POINT_PATTERN.match(text) if text is not None else None
        if match is None:
            raise ArgumentError("wrong center coordinates")
        return cls(int(match.group(1)), int(match.group(2)))


@dataclass(frozen=True, slots=True)
class InfoOperation:
    """Report header fields of the input file."""


@dataclass(frozen=True, slots=True)
class CircleOperation:
    """
    Draw an annular ring.

    Attributes:
        center: Circle center (conventional coordinates)
        radius: Ring radius in pixels
        thickness: Ring band width in pixels
        line_color: Ring color
        fill: Whether to fill the inside of the ring
        fill_color: Fill color, required when fill is set
    """

    center: Point
    radius: int
    thickness: int
    line_color: Color
    fill: bool = False
    fill_color: Optional[Color] = None


@dataclass(frozen=True, slots=True)
class DivideOperation:
    """Divide the image into count_x by count_y parts with divider lines."""

    count_x: int
    count_y: int
    thickness: int
    line_color: Color


@dataclass(frozen=True, slots=True)
class FilterOperation:
    """Set one channel ('red', 'green' or 'blue') to value image-wide."""

    channel: str
    value: int


Operation = Union[InfoOperation, CircleOperation, DivideOperation, FilterOperation]


@dataclass(frozen=True, slots=True)
class EditRequest:
    """
    One editing request: read input_path, run operation, write output_path.

    output_path is ignored by InfoOperation.
    """

    input_path: str
    output_path: str
    operation: Operation
