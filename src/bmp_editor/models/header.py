"""
BMP Header Models
=================

Fixed-layout file header and info header of a BMP v3 file.

Layouts (little-endian, no inter-field padding):

    BITMAPFILEHEADER (14 bytes)   "<HIHHI"
        signature, file_size, reserved1, reserved2, pixel_offset

    BITMAPINFOHEADER (40 bytes)   "<IIIHHIIIIII"
        header_size, width, height, planes, bits_per_pixel,
        compression, image_size, x_pixels_per_meter,
        y_pixels_per_meter, colors_in_color_table, important_color_count

All fields are kept exactly as decoded. Nothing here is recomputed from
the pixel buffer, so packing a decoded header reproduces its bytes.
"""

import struct
from dataclasses import astuple, dataclass, fields


# "BM" read as a little-endian unsigned short
BMP_SIGNATURE = 0x4D42
INFO_HEADER_SIZE = 40
SUPPORTED_BITS_PER_PIXEL = 24
COMPRESSION_NONE = 0


@dataclass(frozen=True, slots=True)
class FileHeader:
    """
    BITMAPFILEHEADER fields.

    Attributes:
        signature: File type magic, 0x4D42 for BMP
        file_size: Total file size in bytes (not recomputed on encode)
        reserved1: Unused, preserved verbatim
        reserved2: Unused, preserved verbatim
        pixel_offset: Byte offset of the pixel array
    """

    signature: int
    file_size: int
    reserved1: int
    reserved2: int
    pixel_offset: int

    FORMAT = struct.Struct("<HIHHI")

    @classmethod
    def unpack(cls, data: bytes) -> "FileHeader":
        return cls(*cls.FORMAT.unpack(data))

    def pack(self) -> bytes:
        return self.FORMAT.pack(*astuple(self))


@dataclass(frozen=True, slots=True)
class InfoHeader:
    """
    BITMAPINFOHEADER fields.

    Only width and height drive the codec; every other field is
    read-only pass-through.
    """

    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_in_color_table: int
    important_color_count: int

    FORMAT = struct.Struct("<IIIHHIIIIII")

    @classmethod
    def unpack(cls, data: bytes) -> "InfoHeader":
        return cls(*cls.FORMAT.unpack(data))

    def pack(self) -> bytes:
        return self.FORMAT.pack(*astuple(self))


def header_items(header) -> list[tuple[str, int]]:
    """Return (field name, value) pairs in on-disk order."""
    return [(f.name, getattr(header, f.name)) for f in fields(header)]
