"""Entry point for ``python -m passmint``."""

import sys

from passmint.cli import main

sys.exit(main())
