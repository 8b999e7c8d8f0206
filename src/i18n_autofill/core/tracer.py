"""
Build Trace Logger.

Records the decisions taken by the autofill pass:
1. Lifecycle phases (per-file import phase, call phase).
2. Bindings found for the recognized exports.
3. Call sites inspected but left alone, with the reason.
4. Rewrites, injected loader modules and diagnostics.

The output is a list of event dictionaries suitable for JSON serialization.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  BINDING = "binding"
  INSPECTION = "inspection"
  REWRITE = "rewrite"
  MODULE_INJECTED = "module_injected"
  DIAGNOSTIC = "diagnostic"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Records pass events for one build. Owned by the `Compilation`.
  """

  def __init__(self):
    self._events: List[TraceEvent] = []
    self._active_phases: List[str] = []  # Stack of phase IDs

  def start_phase(self, name: str, description: str = "") -> str:
    """Starts a nested phase (e.g. 'Calls /src/Header.tsx'). Returns Phase ID."""
    phase_id = str(uuid.uuid4())
    parent = self._active_phases[-1] if self._active_phases else None

    self._events.append(
      TraceEvent(
        id=phase_id,
        type=TraceEventType.PHASE_START,
        timestamp=time.time(),
        description=name,
        parent_id=parent,
        metadata={"detail": description},
      )
    )
    self._active_phases.append(phase_id)
    return phase_id

  def end_phase(self):
    """Ends the current active phase."""
    if not self._active_phases:
      return

    phase_id = self._active_phases.pop()
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=TraceEventType.PHASE_END,
        timestamp=time.time(),
        description="End Phase",
        parent_id=phase_id,
      )
    )

  def log_binding(self, file_path: str, export_name: str, local_name: str):
    self._log_simple(
      TraceEventType.BINDING,
      f"{export_name} imported as {local_name}",
      {"file": file_path, "export": export_name, "local": local_name},
    )

  def log_inspection(self, subject: str, outcome: str, detail: str = ""):
    """Logs a decision point where no change occurred."""
    self._log_simple(TraceEventType.INSPECTION, f"Inspecting '{subject}'", {"outcome": outcome, "detail": detail})

  def log_rewrite(self, file_path: str, identifier: str, replacement: str):
    self._log_simple(
      TraceEventType.REWRITE,
      f"Filled arguments of {identifier}()",
      {"file": file_path, "identifier": identifier, "after": replacement},
    )

  def log_module(self, path: str, source: str):
    self._log_simple(TraceEventType.MODULE_INJECTED, f"Injected {path}", {"path": path, "size": len(source)})

  def log_diagnostic(self, message: str):
    self._log_simple(TraceEventType.DIAGNOSTIC, message, {"level": "error"})

  def _log_simple(self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any]):
    parent = self._active_phases[-1] if self._active_phases else None
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()), type=evt_type, timestamp=time.time(), description=desc, parent_id=parent, metadata=meta
      )
    )

  def events_of(self, evt_type: TraceEventType) -> List[TraceEvent]:
    return [e for e in self._events if e.type == evt_type]

  def export(self) -> List[Dict[str, Any]]:
    """Returns list of dicts for JSON serialization."""
    return [asdict(e) for e in self._events]
