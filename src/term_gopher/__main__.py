"""Allow running as ``python -m term_gopher``."""

import sys

from .cli import main

sys.exit(main())
