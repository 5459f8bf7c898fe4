"""Allow running the package with ``python -m ctf_leaders``."""

import sys

from .cli import main

sys.exit(main())
