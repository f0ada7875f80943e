"""
Color Model
===========

Byte triplet used both as a pixel value and as a drawing parameter.

Colors are immutable values passed by value to drawing operations.
The on-disk pixel order (blue, green, red) is a codec/canvas concern;
a Color always names its components explicitly.
"""

import re
from dataclasses import dataclass
from typing import Optional

from bmp_editor.errors import ArgumentError


# Leading "R.G.B" integers; trailing text is ignored
_COLOR_PATTERN = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)\.\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class Color:
    """
    RGB color with 8-bit components.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ArgumentError("Color values must be between 0 and 255")

    @classmethod
    def parse(cls, text: Optional[str]) -> "Color":
        """
        Parse a color from "RRR.GGG.BBB" notation.

        Args:
            text: Color string, e.g. "255.0.0" for red

        Returns:
            Parsed Color

        Raises:
            ArgumentError: If the string is missing, malformed, or a
                component is outside 0-255
        """
        if text is None:
            raise ArgumentError("no color given")

        match = _COLOR_PATTERN.match(text)
        if match is None:
            raise ArgumentError('invalid color format (expected "RRR.GGG.BBB")')

        r, g, b = (int(group) for group in match.groups())
        return cls(r, g, b)

    def to_bgr(self) -> tuple[int, int, int]:
        """Return components in on-disk (blue, green, red) order."""
        return (self.b, self.g, self.r)

    @classmethod
    def from_bgr(cls, bgr) -> "Color":
        """Build a Color from an on-disk (blue, green, red) triplet."""
        b, g, r = (int(v) for v in bgr)
        return cls(r, g, b)

    def __str__(self) -> str:
        return f"{self.r}.{self.g}.{self.b}"
