"""Tests for request tracing middleware and log filter."""

import logging

from src.api.middleware import RequestIDLogFilter, request_id_var


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)


class TestRequestIDLogFilter:
    """Tests for the request ID log filter."""

    def test_outside_request_uses_placeholder(self):
        record = _record()

        assert RequestIDLogFilter().filter(record) is True
        assert record.request_id == "-"

    def test_uses_current_request_id(self):
        token = request_id_var.set("req-42")
        try:
            record = _record()
            RequestIDLogFilter().filter(record)
        finally:
            request_id_var.reset(token)

        assert record.request_id == "req-42"

    def test_formatter_prints_request_id(self):
        formatter = logging.Formatter("[%(request_id)s] %(message)s")
        token = request_id_var.set("req-7")
        try:
            record = _record("Processing classify request")
            RequestIDLogFilter().filter(record)
        finally:
            request_id_var.reset(token)

        assert formatter.format(record) == "[req-7] Processing classify request"


class TestRequestIDMiddleware:
    """Tests for request ID propagation through a request."""

    def test_client_request_id_is_echoed(self, client):
        response = client.post(
            "/spam-detector",
            json={"text": "hello", "action": "classify"},
            headers={"X-Request-ID": "trace-abc"},
        )

        assert response.headers["x-request-id"] == "trace-abc"

    def test_generated_request_id_when_missing(self, client):
        response = client.post("/spam-detector", json={"text": "hello", "action": "classify"})

        assert len(response.headers["x-request-id"]) == 36

    def test_handler_log_lines_carry_request_id(self, client, caplog):
        caplog.set_level(logging.INFO)
        caplog.handler.addFilter(RequestIDLogFilter())

        client.post(
            "/spam-detector",
            json={"text": "hello", "action": "classify"},
            headers={"X-Request-ID": "trace-xyz"},
        )

        processing = [
            r for r in caplog.records if r.getMessage().startswith("Processing classify request")
        ]
        assert processing
        assert processing[0].request_id == "trace-xyz"

        completed = [r for r in caplog.records if r.getMessage().startswith("Request completed")]
        assert completed
        assert "POST /spam-detector -> 200" in completed[0].getMessage()
        assert completed[0].request_id == "trace-xyz"
