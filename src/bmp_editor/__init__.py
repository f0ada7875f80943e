"""
BMP Editor
==========

Raster editing core for uncompressed 24-bit BMP images.

A request decodes one BMP file into an in-memory pixel buffer, applies
exactly one operation, and re-encodes the result:

Components:
    - codec: BMP header and pixel array decoding/encoding
    - raster: Canvas addressing, annulus, grid lines, channel filter
    - pipeline: Decode -> dispatch one operation -> encode
    - cli: Command-line front end

Example:
    from bmp_editor.models import Color, DivideOperation, EditRequest
    from bmp_editor.pipeline import process

    process(EditRequest(
        input_path="in.bmp",
        output_path="out.bmp",
        operation=DivideOperation(
            count_x=4, count_y=3, thickness=10, line_color=Color(0, 0, 0),
        ),
    ))
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
