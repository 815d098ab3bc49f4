"""
Entry point for module execution (``python -m strip_ts``).

This module delegates execution to the CLI handler in ``strip_ts.cli.__main__``.
"""

import sys
from strip_ts.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
