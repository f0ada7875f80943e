"""
Header Report
=============

Output contract of the info request.

Output Contract:
    {
        "file_header": {
            "signature": 19778,
            "file_size": 360054,
            ...
        },
        "info_header": {
            "header_size": 40,
            "width": 400,
            ...
        }
    }

The text rendering is the classic "label:<TAB>hex (decimal)" dump using
the camelCase labels of the header structures (see TEXT_LABELS).
"""

from typing import Dict

from pydantic import BaseModel, Field

from bmp_editor.models.header import header_items
from bmp_editor.models.image import Image


# Field name -> text label, padding included
TEXT_LABELS = {
    "signature": "signature:",
    "file_size": "filesize:",
    "reserved1": "reserved1:",
    "reserved2": "reserved2:",
    "pixel_offset": "pixelArrOffset:",
    "header_size": "headerSize:",
    "width": "width:     ",
    "height": "height:    ",
    "planes": "planes:    ",
    "bits_per_pixel": "bitsPerPixel:",
    "compression": "compression:",
    "image_size": "imageSize:",
    "x_pixels_per_meter": "xPixelsPerMeter:",
    "y_pixels_per_meter": "yPixelsPerMeter:",
    "colors_in_color_table": "colorsInColorTable:",
    "important_color_count": "importantColorCount:",
}


class HeaderReport(BaseModel):
    """
    Header field values of a decoded image.

    Field order follows the on-disk layout.

    Attributes:
        file_header: BITMAPFILEHEADER field values
        info_header: BITMAPINFOHEADER field values
    """

    file_header: Dict[str, int] = Field(
        ...,
        description="BITMAPFILEHEADER fields in on-disk order",
    )

    info_header: Dict[str, int] = Field(
        ...,
        description="BITMAPINFOHEADER fields in on-disk order",
    )

    @classmethod
    def from_image(cls, image: Image) -> "HeaderReport":
        """Build a report from a decoded image."""
        return cls(
            file_header=dict(header_items(image.file_header)),
            info_header=dict(header_items(image.info_header)),
        )

    def to_text(self) -> str:
        """Render as "label:<TAB>hex (decimal)" lines."""
        lines = []
        for section in (self.file_header, self.info_header):
            for name, value in section.items():
                lines.append(f"{TEXT_LABELS[name]}\t{value:x} ({value})")
        return "\n".join(lines)
