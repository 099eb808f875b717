"""
Exception hierarchy for ts-converter.

Parse and input errors are recoverable at file granularity: the CLI logs them and
moves on to the next file. File system failures are plain ``OSError`` and are
not wrapped here.
"""

from pathlib import Path
from typing import Optional, Union


class ConverterError(Exception):
  """Base class for all conversion failures."""


class ParseError(ConverterError):
  """
  Raised when source text cannot be parsed into a syntax tree.

  Attributes:
      message (str): Human readable description of the problem.
      line (Optional[int]): 1-based line of the first offending token.
      column (Optional[int]): 1-based column of the first offending token.
  """

  def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
    self.message = message
    self.line = line
    self.column = column
    super().__init__(str(self))

  def __str__(self) -> str:
    if self.line is None:
      return self.message
    return f"{self.message} ({self.line}:{self.column})"


class UnsupportedInputError(ConverterError):
  """
  Raised for inputs the converter does not handle (wrong extension, missing path,
  special files).
  """

  def __init__(self, path: Union[str, Path], reason: str) -> None:
    self.path = Path(path)
    self.reason = reason
    super().__init__(f"{self.path}: {reason}")
