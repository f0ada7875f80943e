"""
Codec Module
============

Binary BMP decoding and encoding.

Example:
    from bmp_editor.codec import decode, encode

    image = decode("input.bmp")
    encode("output.bmp", image)
"""

from bmp_editor.codec.bmp import decode, encode, row_padding

__all__ = [
    "decode",
    "encode",
    "row_padding",
]
