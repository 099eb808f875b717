"""
Convert Command Handler.

This module implements the logic for the `ts-converter PATH` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Input resolution (single file or directory walk with skip list).
3. AST conversion via the Engine, one file at a time.
4. Output writing (``.ts`` / ``.tsx``) and optional trace dumps.
5. A batch summary.

A file that is not valid UTF-8 or fails to parse is reported and skipped; the
rest of the batch still runs. File system errors (unreadable input, unwritable
output) are not caught here and abort the run.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from ts_converter.config import ConverterConfig
from ts_converter.core.conversion_result import ConversionResult
from ts_converter.core.discovery import ConversionContext, resolve_context
from ts_converter.core.engine import ASTEngine
from ts_converter.errors import UnsupportedInputError
from ts_converter.utils.console import console, log_error, log_info, log_success, log_warning


def handle_convert(
  input_path: Path,
  out_root: Optional[str] = None,
  skip_dirs: Optional[List[str]] = None,
  json_trace: Optional[bool] = None,
) -> int:
  """
  Handles the conversion command execution.

  Args:
      input_path: Path to the source file or directory to convert.
      out_root: Override for the output directory name.
      skip_dirs: Extra path segments to exclude from directory walks.
      json_trace: If True, writes a ``.trace.json`` next to every output file.

  Returns:
      int: Exit code. Always 0 once the run started; per-file failures are
      reported, not signalled.
  """
  try:
    config = ConverterConfig.load(
      out_root=out_root,
      extra_skip_dirs=skip_dirs,
      trace=json_trace,
      search_path=input_path if input_path.is_dir() else input_path.parent,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  try:
    context = resolve_context(input_path, config)
  except UnsupportedInputError as e:
    log_warning(f"Skipped: {escape(str(e))}")
    return 0

  engine = ASTEngine()
  batch_results: Dict[str, ConversionResult] = {}

  if input_path.is_dir():
    log_info(f"Converting [path]{escape(str(input_path))}[/path] into [path]{escape(str(context.out_dir))}[/path]")

  for src_file in context.sources():
    result = _convert_single_file(src_file, engine, context)
    batch_results[str(src_file.relative_to(context.root))] = result

  _print_batch_summary(batch_results)
  return 0


def _convert_single_file(input_path: Path, engine: ASTEngine, context: ConversionContext) -> ConversionResult:
  """
  Converts one file and persists the result.

  Args:
      input_path: Source file path.
      engine: Shared engine instance.
      context: Run context (conversion root, output root, config).

  Returns:
      ConversionResult: Result object containing status and code.

  Raises:
      OSError: If the input cannot be read or the output cannot be written.
  """
  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      code = f.read()
  except UnicodeDecodeError as e:
    result = ConversionResult(code="", errors=[f"Decode Error: {e}"], success=False)
  else:
    result = engine.run(code)

  if not result.success:
    reason = "; ".join(result.errors)
    log_error(f"Failed: [path]{escape(str(input_path))}[/path]: {escape(reason)}")
    return result

  output_path = context.output_path_for(input_path, result.output_suffix)
  output_path.parent.mkdir(parents=True, exist_ok=True)
  with open(output_path, "wt", encoding="utf-8") as f:
    f.write(result.code)
  log_success(f"Converted: [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")

  if context.config.trace and result.trace_events:
    trace_path = output_path.with_name(f"{output_path.name}.trace.json")
    with open(trace_path, "wt", encoding="utf-8") as f:
      json.dump(result.trace_events, f, indent=2)

  return result


def _print_batch_summary(results: Dict[str, ConversionResult]) -> None:
  """
  Renders a summary of conversion results to the console.

  Args:
      results: Dictionary mapping relative file names to conversion results.
  """
  total = len(results)
  if total == 0:
    log_warning("No convertible files found.")
    return

  successes = sum(1 for r in results.values() if r.success)
  failures = total - successes

  if failures == 0:
    log_success(f"Batch Complete: {successes}/{total} files converted.")
    return

  table = Table(title="Conversion Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="red")

  for filename, res in results.items():
    if res.success:
      continue
    issues = "; ".join(res.errors) if res.errors else "Unknown Error"
    table.add_row(escape(filename), "Failed", escape(issues))

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {successes} Converted, {failures} Failed.")
