"""Tests for JSON and console log formatters."""

import json
import logging
import sys

import pytest

from zoho_oauth2.logging.context import clear_log_context, set_log_context
from zoho_oauth2.logging.formatters import ConsoleFormatter, JSONFormatter
from zoho_oauth2.regions import Region


def _make_record(
    msg="test message",
    level=logging.INFO,
    name="test.logger",
    exc_info=None,
    **extras,
):
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def clear_context():
    clear_log_context()
    yield
    clear_log_context()


class TestJSONFormatter:
    def test_formats_basic_json_with_required_fields(self):
        output = json.loads(JSONFormatter().format(_make_record()))

        assert output["level"] == "INFO"
        assert output["logger"] == "test.logger"
        assert output["message"] == "test message"
        assert output["ts"].endswith("Z")

    def test_includes_provider_and_region_from_context(self):
        set_log_context(provider="zoho", region=Region.EU)
        output = json.loads(JSONFormatter().format(_make_record()))

        assert output["provider"] == "zoho"
        assert output["region"] == "EU"

    def test_omits_empty_context(self):
        output = json.loads(JSONFormatter().format(_make_record()))
        assert "provider" not in output
        assert "trace_id" not in output

    def test_extra_fields_included(self):
        record = _make_record(error="invalid_grant", status_code=400, client_id="cid")
        output = json.loads(JSONFormatter().format(record))

        assert output["error"] == "invalid_grant"
        assert output["status_code"] == 400
        assert output["client_id"] == "cid"

    def test_unknown_extra_fields_dropped(self):
        record = _make_record(client_secret="test-cs")
        output = json.loads(JSONFormatter().format(record))
        assert "client_secret" not in output

    def test_region_enum_serialized_as_value(self):
        output = json.loads(JSONFormatter().format(_make_record(region=Region.CN)))
        assert output["region"] == "CN"

    def test_numeric_fields_coerced(self):
        output = json.loads(JSONFormatter().format(_make_record(status_code="401")))
        assert output["status_code"] == 401

    def test_invalid_numeric_becomes_null(self):
        output = json.loads(JSONFormatter().format(_make_record(status_code="n/a")))
        assert output["status_code"] is None

    def test_sanitizes_code_and_state_in_urls(self):
        url = "https://app.example.com/cb?code=1000.secret&state=abc&location=eu"
        output = json.loads(JSONFormatter().format(_make_record(authorization_url=url)))

        assert output["authorization_url"] == (
            "https://app.example.com/cb?code=[REDACTED]&state=[REDACTED]&location=eu"
        )

    def test_sanitizes_tokens_in_urls(self):
        url = "https://accounts.zoho.com/oauth/v2/token?refresh_token=1000.r&client_secret=cs"
        output = json.loads(JSONFormatter().format(_make_record(token_url=url)))

        assert "1000.r" not in output["token_url"]
        assert "client_secret=[REDACTED]" in output["token_url"]

    def test_source_location_for_debug(self):
        output = json.loads(JSONFormatter().format(_make_record(level=logging.DEBUG)))
        assert output["file"] == "test.py:42"

    def test_no_source_location_for_info(self):
        output = json.loads(JSONFormatter().format(_make_record()))
        assert "file" not in output

    def test_structured_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _make_record(level=logging.ERROR, exc_info=sys.exc_info())

        output = json.loads(JSONFormatter().format(record))

        assert output["exception"]["type"] == "ValueError"
        assert output["exception"]["message"] == "boom"
        assert "Traceback" in output["exception"]["stacktrace"]


class TestConsoleFormatter:
    @pytest.fixture
    def formatter(self):
        formatter = ConsoleFormatter()
        formatter._use_colors = False
        return formatter

    def test_plain_message(self, formatter):
        line = formatter.format(_make_record())
        assert line.endswith(" - INFO - test message")

    def test_context_prefix(self, formatter):
        set_log_context(provider="zoho", region="IN")
        line = formatter.format(_make_record())
        assert "INFO - [zoho] - [IN] - test message" in line

    def test_trace_id_tag(self, formatter):
        set_log_context(trace_id="abcdef1234567890")
        line = formatter.format(_make_record())
        assert line.endswith("[abcdef12] test message")

    def test_colors_when_tty(self):
        formatter = ConsoleFormatter()
        formatter._use_colors = True
        line = formatter.format(_make_record(level=logging.ERROR))
        assert "\033[31mERROR\033[0m" in line
