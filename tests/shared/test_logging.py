# tests\shared\test_logging.py
import json

import structlog
from opentelemetry.sdk.trace import TracerProvider

from lexis.shared.logging_config import add_open_telemetry_spans, configure_logging

class TestOpenTelemetryProcessor:
    def test_no_active_span(self):
        event = add_open_telemetry_spans(None, "info", {"event": "grouping_started"})
        assert event["trace_id"] is None
        assert event["span_id"] is None

    def test_active_span_ids_are_injected(self):
        tracer = TracerProvider().get_tracer(__name__)
        with tracer.start_as_current_span("use_case.group_for_display") as span:
            event = add_open_telemetry_spans(None, "info", {"event": "grouping_started"})
            ctx = span.get_span_context()

        assert event["trace_id"] == format(ctx.trace_id, "032x")
        assert event["span_id"] == format(ctx.span_id, "016x")
        assert len(event["trace_id"]) == 32


class TestConfigureLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_output(self, capsys):
        configure_logging(log_format="json", log_level="info")

        structlog.get_logger().info("grouping_completed", root_groups=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "grouping_completed"
        assert record["root_groups"] == 2
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters_events(self, capsys):
        configure_logging(log_format="json", log_level="warning")

        structlog.get_logger().info("grouping_started")

        assert "grouping_started" not in capsys.readouterr().out
