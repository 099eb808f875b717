"""
Conversion Trace Logger.

Keeps an ordered record of what one engine run did to one source text:

* phases (Parsing, Transforming, Printing), nested through ``phase()``;
* edits, each with the node text before and after the change;
* rewritten module specifiers;
* decisions where a handler looked at a node and left it alone;
* errors that ended the run.

Event ids are sequence numbers, so two runs over the same input export the same
ids and parent links. Only the timestamps differ.
"""

import itertools
import time
from collections import Counter
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  EDIT = "edit"
  SPECIFIER = "specifier"
  DECISION = "decision"
  ERROR = "error"


@dataclass
class TraceEvent:
  id: int
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[int] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Event log owned by a single conversion run.

  The engine creates one per `run` and hands it to the handlers through the
  transform context.
  """

  def __init__(self) -> None:
    self._events: List[TraceEvent] = []
    self._open: List[int] = []
    self._ids = itertools.count(1)

  @property
  def current_phase(self) -> Optional[int]:
    return self._open[-1] if self._open else None

  @contextmanager
  def phase(self, name: str, detail: str = "") -> Iterator[int]:
    """
    Brackets a block of work with start and end events.

    The end event is written even when the block returns early or raises.

    Yields:
        int: The id of the start event. Events recorded inside the block use it
        as their parent.
    """
    start = self._append(TraceEventType.PHASE_START, name, {"detail": detail})
    self._open.append(start.id)
    try:
      yield start.id
    finally:
      self._open.pop()
      self._append(TraceEventType.PHASE_END, name, {}, parent_id=start.id)

  def record_edit(self, node_kind: str, before: str, after: str) -> None:
    self._append(TraceEventType.EDIT, f"Rewrote {node_kind}", {"before": before, "after": after})

  def record_specifier(self, before: str, after: str) -> None:
    self._append(TraceEventType.SPECIFIER, f"Normalized {before}", {"before": before, "after": after})

  def record_decision(self, subject: str, outcome: str, reason: str = "") -> None:
    """Notes a node a handler inspected without changing it."""
    self._append(TraceEventType.DECISION, f"Left '{subject}' as is", {"outcome": outcome, "reason": reason})

  def record_error(self, message: str) -> None:
    self._append(TraceEventType.ERROR, message, {})

  def counts(self) -> Dict[str, int]:
    """Number of events per type value, phases excluded."""
    skip = {TraceEventType.PHASE_START, TraceEventType.PHASE_END}
    return dict(Counter(e.type.value for e in self._events if e.type not in skip))

  def export(self) -> List[Dict[str, Any]]:
    """Plain dictionaries, ready for ``json.dump``."""
    return [asdict(e) for e in self._events]

  def _append(
    self, evt_type: TraceEventType, description: str, metadata: Dict[str, Any], parent_id: Optional[int] = None
  ) -> TraceEvent:
    event = TraceEvent(
      id=next(self._ids),
      type=evt_type,
      timestamp=time.time(),
      description=description,
      parent_id=parent_id if parent_id is not None else self.current_phase,
      metadata=metadata,
    )
    self._events.append(event)
    return event
