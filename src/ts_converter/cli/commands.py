"""
CLI Command Handlers Facade.

Re-exports handlers from `ts_converter.cli.handlers` so the entry point (and
tests patching it) have a single stable import location.
"""

from ts_converter.cli.handlers.convert import (
  handle_convert,
  _convert_single_file,
  _print_batch_summary,
)

__all__ = [
  "_convert_single_file",
  "_print_batch_summary",
  "handle_convert",
]
