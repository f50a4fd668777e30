"""Tests for logging helpers and trace context."""

import pytest
from structlog.testing import capture_logs

from flowform.observability.logging import FileOutputProcessor, _event_category_processor, _plain_console_renderer
from flowform.observability.tracing import TraceContext


def test_plain_renderer_formats_event_and_pairs():
    line = _plain_console_renderer(None, "info", {"event": "turn_rejected", "level": "warning", "error_code": "UNKNOWN_FIELD"})

    assert "[TURN_REJECTED] [WARNING] error_code=UNKNOWN_FIELD" in line


def test_event_category():
    event = _event_category_processor(None, "info", {"event": "llm_call"})
    assert event["_event_category"] == "llm"

    other = _event_category_processor(None, "info", {"event": "something_else"})
    assert other["_event_category"] is None
    assert other["_event_color"] == ""


def test_file_output_processor_writes_plain_lines(tmp_path):
    path = tmp_path / "flowform.log"
    processor = FileOutputProcessor(path)

    event = {"event": "form_complete", "level": "info", "form_id": "form1"}
    assert processor(None, "info", dict(event)) == event
    processor._cleanup()

    content = path.read_text(encoding="utf-8")
    assert "[FORM_COMPLETE] [INFO] form_id=form1" in content
    assert "\033[" not in content


def test_trace_context_logs_start_and_end():
    with capture_logs() as logs:
        with TraceContext("turn", session_id="s1"):
            pass

    assert [entry["event"] for entry in logs] == ["trace_start", "trace_end"]
    assert logs[0]["session_id"] == "s1"


def test_trace_context_logs_error_and_reraises():
    with capture_logs() as logs:
        with pytest.raises(KeyError):
            with TraceContext("turn"):
                raise KeyError("boom")

    assert logs[-1]["event"] == "trace_error"
    assert logs[-1]["exc_type"] == "KeyError"


def test_trace_context_reports_duration_and_outcome():
    with capture_logs() as logs:
        with TraceContext("turn", session_id="s1", turn=2) as trace:
            trace.annotate(rejected=True, error_code="UNKNOWN_FIELD")

    end = logs[-1]
    assert end["event"] == "trace_end"
    assert end["turn"] == 2
    assert end["rejected"] is True
    assert end["error_code"] == "UNKNOWN_FIELD"
    assert end["duration_ms"] >= 0
