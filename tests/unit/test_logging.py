"""Unit tests for structured logging"""

import json
import logging
from inbank_gateway.infrastructure.observability.logging import CustomJsonFormatter


def test_json_formatter_adds_service_metadata():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("inbank", logging.WARNING, __file__, 1, "No valid loan", None, None)
    record.request_id = "req-1"

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "No valid loan"
    assert payload["level"] == "WARNING"
    assert payload["service"] == "inbank-gateway"
    assert payload["request_id"] == "req-1"
    assert "timestamp" in payload
