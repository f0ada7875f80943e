"""
Error Taxonomy
==============

Fatal error kinds raised by the editor.

Every error carries the process exit status the command-line front end
terminates with. There is no retry and no partial recovery: the first
error aborts the request, and no output file is written unless all
validation for the selected operation has already passed.

Exit Codes:
    FileError      41  open/read/write failure on the input or output path
    OptionError    42  option or config misuse, no operation selected
    ArgumentError  43  operation parameter outside its domain
    ResourceError  44  pixel buffer allocation failure
    FormatError    45  unsupported or malformed BMP data
"""


class BmpEditorError(Exception):
    """Base class for all fatal editor errors."""

    exit_code: int = 1


class FileError(BmpEditorError):
    """Raised when an input or output file cannot be opened or read."""

    exit_code = 41


class OptionError(BmpEditorError):
    """Raised when command-line options or configuration values are malformed."""

    exit_code = 42


class ArgumentError(BmpEditorError):
    """Raised when an operation parameter is outside its required domain."""

    exit_code = 43


class ResourceError(BmpEditorError):
    """Raised when the pixel buffer cannot be allocated."""

    exit_code = 44


class FormatError(BmpEditorError):
    """Raised when the file is not an uncompressed 24-bit BMP v3 image."""

    exit_code = 45
