"""
Runtime Configuration Store.

Settings can come from three places, applied in order:
1. Built-in defaults (output root ``tsConverter``, the default skip list).
2. A ``[tool.ts_converter]`` table in the nearest ``pyproject.toml``.
3. Command line overrides.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_OUT_ROOT = "tsConverter"
DEFAULT_SKIP_DIRS = ("node_modules", "public", "web_pack", ".erb")
DEFAULT_SOURCE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")
PLAIN_EXTENSION = ".ts"
MARKUP_EXTENSION = ".tsx"


class ConverterConfig(BaseModel):
  """
  Configuration container for a conversion run.
  """

  out_root: str = Field(DEFAULT_OUT_ROOT, description="Name of the output directory created under the conversion root.")
  skip_dirs: List[str] = Field(
    default_factory=lambda: list(DEFAULT_SKIP_DIRS),
    description="Path segments excluded from directory conversion.",
  )
  source_extensions: List[str] = Field(
    default_factory=lambda: list(DEFAULT_SOURCE_EXTENSIONS),
    description="File suffixes accepted as conversion input.",
  )
  trace: bool = Field(False, description="If True, write a JSON trace next to every output file.")

  @field_validator("out_root")
  @classmethod
  def validate_out_root(cls, v: str) -> str:
    """
    Ensures the output root is a single directory name.

    Raises:
        ValueError: If empty or containing a path separator.
    """
    v_clean = v.strip()
    if not v_clean or "/" in v_clean or "\\" in v_clean or v_clean in (".", ".."):
      raise ValueError(f"Output root must be a plain directory name, got: '{v}'")
    return v_clean

  @field_validator("source_extensions")
  @classmethod
  def normalize_extensions(cls, v: List[str]) -> List[str]:
    return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

  @property
  def effective_skip_dirs(self) -> Set[str]:
    """
    Skip segments including the output root, so a second run never converts
    its own output.
    """
    return set(self.skip_dirs) | {self.out_root}

  def accepts(self, path: Path) -> bool:
    """True if ``path`` has a convertible suffix."""
    return path.suffix.lower() in self.source_extensions

  @classmethod
  def load(
    cls,
    out_root: Optional[str] = None,
    extra_skip_dirs: Optional[List[str]] = None,
    trace: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "ConverterConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        out_root (Optional[str]): Override for the output directory name.
        extra_skip_dirs (Optional[List[str]]): Segments added to the skip list.
        trace (Optional[bool]): Override for trace dumping.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        ConverterConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    final_out_root = out_root or toml_config.get("out_root", DEFAULT_OUT_ROOT)

    final_skip = list(toml_config.get("skip_dirs", DEFAULT_SKIP_DIRS))
    for segment in extra_skip_dirs or []:
      if segment not in final_skip:
        final_skip.append(segment)

    final_extensions = list(toml_config.get("source_extensions", DEFAULT_SOURCE_EXTENSIONS))

    if trace is not None:
      final_trace = trace
    else:
      final_trace = toml_config.get("trace", False)

    return cls(
      out_root=final_out_root,
      skip_dirs=final_skip,
      source_extensions=final_extensions,
      trace=final_trace,
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError:
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("ts_converter", {}), parent

  return {}, None
