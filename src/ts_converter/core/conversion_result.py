"""
Outcome of converting one source text.

`ASTEngine.run` always returns a `ConversionResult`; parse failures are reported
through ``success`` and ``errors`` instead of being raised.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from ts_converter.config import MARKUP_EXTENSION, PLAIN_EXTENSION


class ConversionResult(BaseModel):
  """
  Converted text plus what the caller needs to persist it.

  On failure ``code`` holds the unchanged input.
  """

  code: str = Field(default="", description="TypeScript output, or the original input on failure.")
  errors: List[str] = Field(default_factory=list, description="Reasons the conversion failed.")
  success: bool = Field(default=True, description="False if the source did not parse.")
  has_markup: bool = Field(default=False, description="True if at least one JSX element was visited.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Exported TraceLogger events.")

  @property
  def has_errors(self) -> bool:
    return bool(self.errors)

  @property
  def output_suffix(self) -> str:
    """``.tsx`` when the source contained markup, ``.ts`` otherwise."""
    return MARKUP_EXTENSION if self.has_markup else PLAIN_EXTENSION
