"""Run the command-line interface with `python -m color_theme`."""

import sys

from color_theme.main import main

sys.exit(main())
