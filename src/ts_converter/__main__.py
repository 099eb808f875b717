"""
Entry point for module execution (``python -m ts_converter``).

This module delegates execution to the CLI handler in ``ts_converter.cli.__main__``.
"""

import sys
from ts_converter.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
