#!/usr/bin/env python3
"""
ytscribe v1.0.0 — Main entry point.
Same as the installed `ytscribe` console script, runnable from a checkout.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ytscribe.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
