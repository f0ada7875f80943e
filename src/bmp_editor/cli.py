"""
Command-Line Front End
======================

Parses options into an EditRequest and runs it through the pipeline.

Usage:
    bmp-editor [options] <input.bmp>

Examples:
    # Red ring, radius 50, thickness 3, centered at (100, 50)
    bmp-editor -o out.bmp -c --center 100.50 --radius 50 --thickness 3 \\
        --color 255.0.0 input.bmp

    # Set every green value to 128
    bmp-editor -o out.bmp -f --component_name green --component_value 128 input.bmp

    # Divide into 4x3 parts with black lines of thickness 10
    bmp-editor -o out.bmp -s --number_x 4 --number_y 3 --thickness 10 \\
        --color 0.0.0 input.bmp

    # Print header fields
    bmp-editor --info input.bmp

Exit Status:
    0 on success, otherwise the exit code of the error kind raised
    (see bmp_editor.errors).
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from bmp_editor import __version__
from bmp_editor.config import Settings, load_config, setup_logging
from bmp_editor.errors import ArgumentError, BmpEditorError, OptionError
from bmp_editor.models.color import Color
from bmp_editor.models.operations import (
    CircleOperation,
    DivideOperation,
    EditRequest,
    FilterOperation,
    InfoOperation,
    Point,
)
from bmp_editor.models.output import HeaderReport
from bmp_editor.pipeline import process


logger = logging.getLogger(__name__)


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises OptionError instead of exiting."""

    def error(self, message: str) -> None:
        raise OptionError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _OptionParser(
        prog="bmp-editor",
        description="Edit uncompressed 24-bit BMP images: draw a ring, "
        "divide into a grid, or override one color channel.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Input BMP file (used when --input is not given)",
    )
    parser.add_argument("-I", "--input", help="Input BMP file")
    parser.add_argument("-o", "--output", help="Output BMP file (default: output.bmp)")
    parser.add_argument(
        "-i", "--info",
        action="store_true",
        help="Print header fields of the input file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the --info report as JSON",
    )

    operations = parser.add_argument_group("operations (the last one given wins)")
    operations.add_argument(
        "-c", "--circle",
        dest="operation", action="store_const", const="circle",
        help="Draw a circle",
    )
    operations.add_argument(
        "-f", "--rgbfilter",
        dest="operation", action="store_const", const="filter",
        help="Set one RGB component across the whole image",
    )
    operations.add_argument(
        "-s", "--split",
        dest="operation", action="store_const", const="split",
        help="Divide the image into N*M parts",
    )

    shared = parser.add_argument_group("shared arguments")
    shared.add_argument(
        "-T", "--thickness",
        type=int,
        help="Line thickness (positive integer)",
    )
    shared.add_argument(
        "-C", "--color",
        help="Line color as RRR.GGG.BBB, e.g. 255.0.0",
    )

    circle = parser.add_argument_group("circle arguments")
    circle.add_argument("-O", "--center", help="Center as X.Y, e.g. 100.50")
    circle.add_argument("-r", "--radius", type=int, help="Radius (positive integer)")
    circle.add_argument("-F", "--fill", action="store_true", help="Fill the circle")
    circle.add_argument("-P", "--fill_color", help="Fill color as RRR.GGG.BBB")

    rgbfilter = parser.add_argument_group("rgbfilter arguments")
    rgbfilter.add_argument(
        "-N", "--component_name",
        help="Component to modify: red, green or blue",
    )
    rgbfilter.add_argument(
        "-V", "--component_value",
        type=int,
        help="New component value (0-255)",
    )

    split = parser.add_argument_group("split arguments")
    split.add_argument("-x", "--number_x", type=int, help="Number of parts along x (> 1)")
    split.add_argument("-y", "--number_y", type=int, help="Number of parts along y (> 1)")

    return parser


def _require(value, option: str):
    if value is None:
        raise ArgumentError(f"{option} is required")
    return value


def build_request(args: argparse.Namespace, settings: Settings) -> EditRequest:
    """
    Turn parsed options into a validated EditRequest.

    Raises:
        OptionError: If no input file or no operation is given
        ArgumentError: If an operation's companion value is missing or malformed
    """
    input_path = args.input or args.input_file
    if input_path is None:
        raise OptionError("no input file given")
    output_path = args.output or settings.editor.default_output

    if args.info:
        operation = InfoOperation()
    elif args.operation == "circle":
        operation = CircleOperation(
            center=Point.parse(args.center),
            radius=_require(args.radius, "--radius"),
            thickness=_require(args.thickness, "--thickness"),
            line_color=Color.parse(args.color),
            fill=args.fill,
            fill_color=Color.parse(args.fill_color) if args.fill and args.fill_color else None,
        )
    elif args.operation == "filter":
        operation = FilterOperation(
            channel=args.component_name,
            value=_require(args.component_value, "--component_value"),
        )
    elif args.operation == "split":
        operation = DivideOperation(
            count_x=_require(args.number_x, "--number_x"),
            count_y=_require(args.number_y, "--number_y"),
            thickness=_require(args.thickness, "--thickness"),
            line_color=Color.parse(args.color),
        )
    else:
        raise OptionError("no option selected")

    return EditRequest(input_path=input_path, output_path=output_path, operation=operation)


def format_report(report: HeaderReport, as_json: bool) -> str:
    if as_json:
        return report.model_dump_json(indent=2)
    return report.to_text()


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    """
    Run the editor with the given arguments.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        settings: Configuration (loaded from file and environment if None)

    Returns:
        Process exit status
    """
    try:
        settings = settings or load_config()
        setup_logging(settings)
        args = build_parser().parse_args(argv)
        request = build_request(args, settings)
        report = process(request)
    except BmpEditorError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    if report is not None:
        as_json = args.json or settings.editor.info_format == "json"
        print(format_report(report, as_json))

    return 0


if __name__ == "__main__":
    sys.exit(main())
