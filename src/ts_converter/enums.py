"""
Enumerations for ts-converter.
"""

from enum import Enum


class AnnotationKind(str, Enum):
  """
  The closed set of annotations the converter can infer.

  The value is the TypeScript type text emitted after the colon.
  """

  UNKNOWN = "any"
  NUMBER = "number"
  STRING = "string"
  BOOLEAN = "boolean"
  UNKNOWN_ARRAY = "any[]"
  UNKNOWN_RECORD = "Record<string, any>"
