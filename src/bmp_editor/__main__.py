"""Entry point for ``python -m bmp_editor``."""

import sys

from bmp_editor.cli import main


if __name__ == "__main__":
    sys.exit(main())
