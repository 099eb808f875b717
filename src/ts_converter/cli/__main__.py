"""
Main Entry Point for the ts-converter CLI.

This module handles argument parsing and dispatches to the conversion handler
in `ts_converter.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ts_converter.cli import commands
from ts_converter import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (1 for usage errors, 0 once a run has started).
  """
  parser = argparse.ArgumentParser(
    prog="ts-converter",
    description="ts-converter: Annotate JavaScript sources as TypeScript",
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("path", nargs="?", type=Path, help="Input source file or directory")
  parser.add_argument("--out-root", default=None, help="Output directory name (default: tsConverter)")
  parser.add_argument(
    "--skip",
    nargs="+",
    default=None,
    help="Additional path segments to exclude (default list: node_modules public web_pack .erb)",
  )
  parser.add_argument(
    "--json-trace",
    action="store_true",
    default=None,
    help="Write a <output>.trace.json with the conversion events next to every output file",
  )

  args = parser.parse_args(argv)

  if args.path is None:
    parser.print_usage(sys.stderr)
    return 1

  return commands.handle_convert(args.path, args.out_root, args.skip, args.json_trace)


if __name__ == "__main__":
  sys.exit(main())
