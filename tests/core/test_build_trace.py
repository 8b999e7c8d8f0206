"""
Tests for the Build Trace Logger.
"""

from i18n_autofill.core.tracer import TraceEventType, TraceLogger


def test_phase_nesting():
  logger = TraceLogger()

  p1 = logger.start_phase("Imports")
  logger.start_phase("Nested")
  logger.end_phase()
  logger.end_phase()

  events = logger.export()

  assert len(events) == 4
  assert events[0]["type"] == TraceEventType.PHASE_START
  assert events[1]["parent_id"] == p1
  assert events[2]["type"] == TraceEventType.PHASE_END


def test_end_phase_without_start_is_noop():
  logger = TraceLogger()
  logger.end_phase()
  assert logger.export() == []


def test_events_attach_to_active_phase():
  logger = TraceLogger()
  phase = logger.start_phase("Calls", "/a.tsx")
  logger.log_rewrite("/a.tsx", "useI18n", "({})")

  rewrite = logger.events_of(TraceEventType.REWRITE)[0]
  assert rewrite.parent_id == phase
  assert rewrite.metadata["after"] == "({})"


def test_inspection_metadata():
  logger = TraceLogger()
  logger.log_inspection("useI18n()", "skipped", "no translation files")

  event = logger.export()[0]
  assert event["type"] == TraceEventType.INSPECTION
  assert event["metadata"] == {"outcome": "skipped", "detail": "no translation files"}
