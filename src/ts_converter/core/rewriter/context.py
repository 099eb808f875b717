"""
Transform Context Module.

Holds the state shared by all handlers during the traversal of one tree.
"""

from typing import Optional

from ts_converter.core.tracer import TraceLogger


class TransformContext:
  """
  Shared state container for one conversion run.

  Attributes:
      tracer (TraceLogger): Event log for the run.
  """

  def __init__(self, tracer: Optional[TraceLogger] = None) -> None:
    self.tracer = tracer or TraceLogger()
