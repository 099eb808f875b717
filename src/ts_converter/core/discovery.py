"""
Input Discovery and Output Placement.

Resolves what a conversion run operates on and where its results go:

* A directory input is walked depth-first, pre-order (entries sorted by name),
  excluding every path whose segments relative to the directory contain a
  configured skip segment.
* A single file input is converted on its own, relative to its parent directory.

Output files mirror the input's path relative to the conversion root, placed
under ``<root>/<out_root>/``, with the suffix replaced by ``.ts`` or ``.tsx``.

The root is resolved once per run and travels in a frozen `ConversionContext`
value passed to every file-level call.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ts_converter.config import ConverterConfig
from ts_converter.errors import UnsupportedInputError


@dataclass(frozen=True)
class ConversionContext:
  """
  Per-run placement information.

  Attributes:
      input_path (Path): What the user asked to convert (file or directory).
      root (Path): Directory that output paths are computed relative to.
      config (ConverterConfig): Active configuration.
  """

  input_path: Path
  root: Path
  config: ConverterConfig

  @property
  def out_dir(self) -> Path:
    return self.root / self.config.out_root

  def is_skipped(self, path: Path) -> bool:
    """
    Checks a path against the skip list.

    Args:
        path: A path under ``root``.

    Returns:
        bool: True if any of its segments relative to the root is a skip segment.
    """
    skip = self.config.effective_skip_dirs
    return any(part in skip for part in path.relative_to(self.root).parts)

  def output_path_for(self, source: Path, suffix: str) -> Path:
    """
    Computes where the converted text of ``source`` is written.

    Args:
        source: The input file.
        suffix: ``.ts`` or ``.tsx`` (see `ConversionResult.output_suffix`).

    Returns:
        Path: ``<root>/<out_root>/<relative path>.ts[x]``.
    """
    return (self.out_dir / source.relative_to(self.root)).with_suffix(suffix)

  def sources(self) -> Iterator[Path]:
    """Yields the files to convert, in walk order."""
    if self.input_path.is_dir():
      yield from self._walk(self.input_path)
    else:
      yield self.input_path

  def _walk(self, directory: Path) -> Iterator[Path]:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
      if self.is_skipped(entry):
        continue
      if entry.is_dir():
        yield from self._walk(entry)
      elif entry.is_file() and self.config.accepts(entry):
        yield entry


def resolve_context(input_path: Path, config: ConverterConfig) -> ConversionContext:
  """
  Builds the run context for a CLI input.

  Args:
      input_path: File or directory given on the command line.
      config: Active configuration.

  Returns:
      ConversionContext: The resolved context.

  Raises:
      UnsupportedInputError: If the path is missing, not a regular file or
          directory, or a file with an unsupported suffix.
  """
  if input_path.is_dir():
    return ConversionContext(input_path=input_path, root=input_path, config=config)

  if input_path.is_file():
    if not config.accepts(input_path):
      raise UnsupportedInputError(input_path, f"unsupported extension '{input_path.suffix}'")
    return ConversionContext(input_path=input_path, root=input_path.parent, config=config)

  if not input_path.exists():
    raise UnsupportedInputError(input_path, "no such file or directory")
  raise UnsupportedInputError(input_path, "not a regular file or directory")
