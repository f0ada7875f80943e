"""
Test Configuration
==================

Pytest fixtures and test configuration for the BMP editor.
"""

import struct

import numpy as np
import pytest


def build_bmp_bytes(
    width: int,
    height: int,
    pixels: np.ndarray = None,
    signature: int = 0x4D42,
    header_size: int = 40,
    bits_per_pixel: int = 24,
    compression: int = 0,
    file_size: int = None,
    pixel_offset: int = 54,
    padding_byte: int = 0,
    declared_width: int = None,
    declared_height: int = None,
) -> bytes:
    """
    Build a BMP file from a (height, width, 3) BGR array.

    declared_width/declared_height override the header dimensions
    without changing the pixel data written.
    """
    if pixels is None:
        pixels = np.zeros((height, width, 3), dtype=np.uint8)
    padding = (4 - (width * 3) % 4) % 4
    body = b"".join(
        pixels[row].tobytes() + bytes([padding_byte]) * padding
        for row in range(height)
    )
    if file_size is None:
        file_size = 54 + len(body)

    file_header = struct.pack("<HIHHI", signature, file_size, 0, 0, pixel_offset)
    info_header = struct.pack(
        "<IIIHHIIIIII",
        header_size,
        width if declared_width is None else declared_width,
        height if declared_height is None else declared_height,
        1, bits_per_pixel, compression,
        len(body), 2835, 2835, 0, 0,
    )
    return file_header + info_header + body


@pytest.fixture
def make_bmp(tmp_path):
    """Write a BMP file under tmp_path and return its path as a string."""
    def _make(name="input.bmp", **kwargs):
        path = tmp_path / name
        path.write_bytes(build_bmp_bytes(**kwargs))
        return str(path)
    return _make


@pytest.fixture
def gradient_pixels():
    """Provide a 5x3 BGR buffer with distinct values per pixel."""
    values = np.arange(3 * 5 * 3, dtype=np.uint8)
    return values.reshape(3, 5, 3)


@pytest.fixture
def blank_image():
    """Provide a factory for all-white in-memory images."""
    from bmp_editor.models.header import FileHeader, InfoHeader
    from bmp_editor.models.image import Image

    def _make(width: int, height: int) -> Image:
        padding = (4 - (width * 3) % 4) % 4
        image_size = (width * 3 + padding) * height
        return Image(
            file_header=FileHeader(0x4D42, 54 + image_size, 0, 0, 54),
            info_header=InfoHeader(40, width, height, 1, 24, 0, image_size, 2835, 2835, 0, 0),
            pixels=np.full((height, width, 3), 255, dtype=np.uint8),
        )
    return _make
