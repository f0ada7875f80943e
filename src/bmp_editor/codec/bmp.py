"""
BMP Codec
=========

Decodes and encodes uncompressed 24-bit BMP v3 files.

Design Rules:
    - This is the ONLY place in the codebase that touches BMP bytes
    - Headers are validated once, at decode time, and never recomputed
    - Row padding exists only during I/O; encode always writes zero padding
    - Rows are kept in file order (no vertical flip)
    - Fails fast: malformed input never produces an output file

File Layout:
    [14-byte file header][40-byte info header][rows...]

    Each row holds width * 3 bytes (B, G, R per pixel) followed by
    (4 - (width * 3) % 4) % 4 padding bytes.
"""

import logging

import numpy as np

from bmp_editor.errors import FileError, FormatError, ResourceError
from bmp_editor.models.header import (
    BMP_SIGNATURE,
    COMPRESSION_NONE,
    INFO_HEADER_SIZE,
    SUPPORTED_BITS_PER_PIXEL,
    FileHeader,
    InfoHeader,
)
from bmp_editor.models.image import Image


logger = logging.getLogger(__name__)


def row_padding(width: int) -> int:
    """
    Number of padding bytes after each row of the given pixel width.

    Always in {0, 1, 2, 3}.
    """
    return (4 - (width * 3) % 4) % 4


def decode(path: str) -> Image:
    """
    Decode a BMP file into an Image.

    Args:
        path: Path to the input file

    Returns:
        Decoded Image with a (height, width, 3) BGR buffer

    Raises:
        FileError: If the file cannot be opened or read
        FormatError: If the headers are unsupported or data is truncated
        ResourceError: If the pixel buffer cannot be allocated
    """
    try:
        with open(path, "rb") as f:
            file_header, info_header = _read_headers(f, path)
            _validate_headers(file_header, info_header, path)
            pixels = _read_pixels(f, info_header, path)
    except OSError as e:
        raise FileError(f"file reading error: {path}: {e}") from e

    image = Image(file_header=file_header, info_header=info_header, pixels=pixels)
    logger.info(f"Decoded {path}: {image.width}x{image.height}")
    return image


def encode(path: str, image: Image) -> None:
    """
    Encode an Image to a BMP file.

    Both headers are written exactly as decoded. Each row is followed
    by freshly zeroed padding bytes.

    Args:
        path: Path to the output file (created or truncated)
        image: Image to write

    Raises:
        FileError: If the file cannot be opened or written
        ResourceError: If the row buffer cannot be allocated
    """
    height, width = image.height, image.width
    row_bytes = width * 3
    stride = row_bytes + row_padding(width)

    try:
        rows = np.zeros((height, stride), dtype=np.uint8)
    except (MemoryError, ValueError) as e:
        raise ResourceError(f"memory allocation error: {e}") from e
    rows[:, :row_bytes] = image.pixels.reshape(height, row_bytes)

    try:
        with open(path, "wb") as f:
            f.write(image.file_header.pack())
            f.write(image.info_header.pack())
            f.write(rows.tobytes())
    except OSError as e:
        raise FileError(f"file writing error: {path}: {e}") from e

    logger.info(f"Encoded {path}: {width}x{height}, stride={stride}")


def _read_headers(f, path: str) -> tuple[FileHeader, InfoHeader]:
    """Read the fixed-size file and info headers."""
    file_data = f.read(FileHeader.FORMAT.size)
    info_data = f.read(InfoHeader.FORMAT.size)

    if len(file_data) < FileHeader.FORMAT.size or len(info_data) < InfoHeader.FORMAT.size:
        raise FormatError(f"unsupported file format: {path}: header truncated")

    return FileHeader.unpack(file_data), InfoHeader.unpack(info_data)


def _validate_headers(file_header: FileHeader, info_header: InfoHeader, path: str) -> None:
    """Reject anything other than an uncompressed 24-bit BITMAPINFOHEADER file."""
    if file_header.signature != BMP_SIGNATURE:
        raise FormatError(
            f"unsupported file format: {path}: bad signature 0x{file_header.signature:04x}"
        )
    if info_header.header_size != INFO_HEADER_SIZE:
        raise FormatError(
            f"unsupported file format: {path}: header size {info_header.header_size}"
        )
    if info_header.bits_per_pixel != SUPPORTED_BITS_PER_PIXEL:
        raise FormatError(
            f"unsupported file format: {path}: {info_header.bits_per_pixel} bits per pixel"
        )
    if info_header.compression != COMPRESSION_NONE:
        raise FormatError(
            f"unsupported file format: {path}: compression {info_header.compression}"
        )


def _read_pixels(f, info_header: InfoHeader, path: str) -> np.ndarray:
    """Read height padded rows into a contiguous (height, width, 3) buffer."""
    height, width = info_header.height, info_header.width
    row_bytes = width * 3
    padding = row_padding(width)

    try:
        pixels = np.empty((height, width, 3), dtype=np.uint8)
    except (MemoryError, ValueError) as e:
        raise ResourceError(f"memory allocation error: {e}") from e

    for row in range(height):
        chunk = f.read(row_bytes)
        if len(chunk) < row_bytes:
            raise FormatError(
                f"unsupported file format: {path}: pixel data truncated at row {row}"
            )
        pixels[row] = np.frombuffer(chunk, dtype=np.uint8).reshape(width, 3)
        f.read(padding)

    return pixels
