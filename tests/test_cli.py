"""
CLI Tests
=========

Option parsing, request building and exit status.
"""

import json

import numpy as np
import pytest

from bmp_editor.cli import build_parser, build_request, main
from bmp_editor.codec import decode
from bmp_editor.config import Settings
from bmp_editor.errors import ArgumentError, OptionError
from bmp_editor.models import (
    CircleOperation,
    Color,
    DivideOperation,
    FilterOperation,
    InfoOperation,
    Point,
)


def _request(argv, settings=None):
    return build_request(build_parser().parse_args(argv), settings or Settings())


class TestBuildRequest:
    """Tests for option-to-request translation."""

    def test_circle(self):
        """Circle options become a CircleOperation."""
        request = _request([
            "-c", "--center", "100.50", "--radius", "50", "--thickness", "3",
            "--color", "255.0.0", "-F", "--fill_color", "0.0.255", "in.bmp",
        ])

        assert request.input_path == "in.bmp"
        assert request.output_path == "output.bmp"
        assert request.operation == CircleOperation(
            center=Point(100, 50),
            radius=50,
            thickness=3,
            line_color=Color(255, 0, 0),
            fill=True,
            fill_color=Color(0, 0, 255),
        )

    def test_split(self):
        """Split options become a DivideOperation."""
        request = _request([
            "-I", "in.bmp", "-o", "out.bmp", "-s", "-x", "4", "-y", "3",
            "-T", "10", "-C", "0.0.0",
        ])

        assert request.output_path == "out.bmp"
        assert request.operation == DivideOperation(4, 3, 10, Color(0, 0, 0))

    def test_filter(self):
        """Filter options become a FilterOperation."""
        request = _request(["-f", "-N", "green", "-V", "128", "in.bmp"])

        assert request.operation == FilterOperation("green", 128)

    def test_info_wins(self):
        """--info short-circuits any selected operation."""
        request = _request(["-i", "-f", "in.bmp"])

        assert request.operation == InfoOperation()

    def test_last_operation_wins(self):
        """The last operation flag selects the operation."""
        request = _request(["-c", "-f", "-N", "red", "-V", "1", "in.bmp"])

        assert isinstance(request.operation, FilterOperation)

    def test_default_output_from_settings(self):
        """The default output path comes from configuration."""
        settings = Settings.model_validate({"editor": {"default_output": "edited.bmp"}})

        request = _request(["-i", "in.bmp"], settings)

        assert request.output_path == "edited.bmp"

    def test_no_operation(self):
        """No operation flag is an OptionError."""
        with pytest.raises(OptionError):
            _request(["in.bmp"])

    def test_no_input(self):
        """A missing input file is an OptionError."""
        with pytest.raises(OptionError):
            _request(["-i"])

    def test_unknown_option(self):
        """Unknown options are an OptionError."""
        with pytest.raises(OptionError):
            build_parser().parse_args(["--bogus", "in.bmp"])

    @pytest.mark.parametrize(
        "argv",
        [
            ["-c", "--radius", "5", "-T", "2", "-C", "1.2.3", "in.bmp"],
            ["-c", "-O", "1.2", "-T", "2", "-C", "1.2.3", "in.bmp"],
            ["-c", "-O", "1.2", "-r", "5", "-T", "2", "-C", "1.2", "in.bmp"],
            ["-c", "-O", "1.2", "-r", "5", "-T", "2", "-C", "1.2.300", "in.bmp"],
            ["-s", "-x", "2", "-y", "2", "-T", "1", "in.bmp"],
            ["-f", "-N", "red", "in.bmp"],
        ],
    )
    def test_missing_or_malformed_arguments(self, argv):
        """Missing or malformed companion values are ArgumentErrors."""
        with pytest.raises(ArgumentError):
            _request(argv)


class TestMain:
    """Tests for main() exit status and output."""

    def test_info_text(self, make_bmp, capsys):
        """Info prints label, hex and decimal per field in on-disk order."""
        path = make_bmp(width=400, height=300)

        assert main(["--info", path]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "signature:\t4d42 (19778)",
            "filesize:\t57e76 (360054)",
            "reserved1:\t0 (0)",
            "reserved2:\t0 (0)",
            "pixelArrOffset:\t36 (54)",
            "headerSize:\t28 (40)",
            "width:     \t190 (400)",
            "height:    \t12c (300)",
            "planes:    \t1 (1)",
            "bitsPerPixel:\t18 (24)",
            "compression:\t0 (0)",
            "imageSize:\t57e40 (360000)",
            "xPixelsPerMeter:\tb13 (2835)",
            "yPixelsPerMeter:\tb13 (2835)",
            "colorsInColorTable:\t0 (0)",
            "importantColorCount:\t0 (0)",
        ]

    def test_info_json(self, make_bmp, capsys):
        """--json prints the report as JSON."""
        path = make_bmp(width=4, height=2)

        assert main(["--info", "--json", path]) == 0

        report = json.loads(capsys.readouterr().out)
        assert report["info_header"]["bits_per_pixel"] == 24

    def test_filter_writes_output(self, make_bmp, tmp_path):
        """A successful edit exits 0 and writes the output file."""
        path = make_bmp(width=4, height=2)
        out = tmp_path / "out.bmp"

        status = main(["-f", "-N", "blue", "-V", "200", "-o", str(out), path])

        assert status == 0
        assert (decode(str(out)).pixels[..., 0] == 200).all()

    @pytest.mark.parametrize(
        "argv, expected",
        [
            (["-f", "-N", "blue", "-V", "1", "{missing}"], 41),
            (["{path}"], 42),
            (["-f", "-N", "purple", "-V", "1", "{path}"], 43),
            (["-f", "-N", "blue", "-V", "1", "{bad}"], 45),
            (["-f", "-N", "blue", "-V", "1", "{huge}"], 44),
            (
                ["-c", "-O", "10000000000000000000.5", "-r", "10000000000000000000",
                 "-T", "2", "-C", "1.2.3", "{path}"],
                43,
            ),
        ],
    )
    def test_exit_codes(self, make_bmp, tmp_path, capsys, argv, expected):
        """Each error kind has its own exit status and no output is written."""
        paths = {
            "path": make_bmp(width=4, height=2),
            "bad": make_bmp(name="bad.bmp", width=4, height=2, bits_per_pixel=8),
            "missing": str(tmp_path / "missing.bmp"),
            "huge": make_bmp(
                name="huge.bmp", width=1, height=1,
                declared_width=0xFFFFFFFF, declared_height=0xFFFFFFFF,
            ),
        }
        out = tmp_path / "out.bmp"
        argv = [arg.format(**paths) for arg in argv] + ["-o", str(out)]

        assert main(argv) == expected
        assert capsys.readouterr().err.startswith("Error: ")
        assert not out.exists()

    def test_invalid_config(self, make_bmp, tmp_path, monkeypatch, capsys):
        """A rejected configuration value exits 42 instead of crashing."""
        path = make_bmp(width=4, height=2)
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("BMP_EDITOR_CONFIG", raising=False)
        monkeypatch.setenv("BMP_EDITOR_INFO_FORMAT", "xml")

        assert main(["--info", path]) == 42
        assert capsys.readouterr().err.startswith("Error: invalid configuration")

    def test_circle_end_to_end(self, make_bmp, tmp_path):
        """The circle example from the help text runs."""
        path = make_bmp(width=200, height=120)
        out = tmp_path / "out.bmp"

        status = main([
            "-o", str(out), "-c", "--center", "100.50", "--radius", "50",
            "--thickness", "3", "--color", "255.0.0", path,
        ])

        assert status == 0
        pixels = decode(str(out)).pixels
        # center row is 120 - 50 = 70
        assert pixels[70, 150].tolist() == [0, 0, 255]
        assert pixels[70, 100].tolist() == [0, 0, 0]
        assert np.count_nonzero(pixels[..., 2]) > 0
