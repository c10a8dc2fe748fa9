"""Tests for log formatters"""

import json
from datetime import datetime, timezone

import pytest

from swiss_log import (
    LogLevel,
    InvalidFormatterInput,
    ConsoleFormatter,
    JSONFormatter,
    CloudRunFormatter,
)
from swiss_log.core.log_entry import LogEntry
from swiss_log.formatters.base_formatter import BaseFormatter

TIMESTAMP = datetime(2024, 3, 29, 17, 18, 12, 505000, tzinfo=timezone.utc)


def make_entry(**kwargs):
    values = {"message": "started server", "level": LogLevel.INFO, "timestamp": TIMESTAMP}
    values.update(kwargs)
    return LogEntry(**values)


class TestBaseFormatter:
    """Test formatter interface."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseFormatter()

    def test_callable(self):
        formatter = JSONFormatter()
        entry = make_entry()
        assert formatter(entry) == formatter.format(entry)


class TestConsoleFormatter:
    """Test human-readable console output."""

    def test_plain_line(self):
        formatter = ConsoleFormatter(colored=False)
        line = formatter.format(make_entry(body={"port": 3030}))
        assert line == '[2024-03-29T17:18:12.505Z] INFO  [NoContext] started server {"port":3030}'

    def test_plain_line_without_body(self):
        formatter = ConsoleFormatter(colored=False)
        line = formatter.format(make_entry(level=LogLevel.ERROR, context="db"))
        assert line == "[2024-03-29T17:18:12.505Z] ERROR [db] started server"

    def test_colored_output(self):
        formatter = ConsoleFormatter()
        line = formatter.format(make_entry(level=LogLevel.WARN, body={"a": 1}))
        assert "\033[33mWARN \033[39m" in line
        assert "\033[90m" in line
        assert "started server" in line

    def test_levels_have_distinct_colors(self):
        formatter = ConsoleFormatter()
        lines = {
            level: formatter.format(make_entry(level=level, message="m"))
            for level in [LogLevel.TRACE, LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL]
        }
        assert len(set(lines.values())) == len(lines)

    def test_pretty_body(self):
        formatter = ConsoleFormatter(pretty=True, colored=False)
        line = formatter.format(make_entry(body={"hello": "World", "you": ["are", 3]}))
        assert '\n  "hello": "World"' in line
        assert line.startswith("[2024-03-29T17:18:12.505Z] INFO ")

    def test_uses_entry_timestamp(self):
        formatter = ConsoleFormatter(colored=False)
        entry = make_entry()
        assert formatter.format(entry) == formatter.format(entry)
        assert "2024-03-29T17:18:12.505Z" in formatter.format(entry)

    def test_silent_rejected(self):
        with pytest.raises(InvalidFormatterInput):
            ConsoleFormatter().format(make_entry(level=LogLevel.SILENT))


class TestJSONFormatter:
    """Test JSON formatter."""

    def test_full_entry(self):
        entry = make_entry(
            body={"port": 3030},
            context="http",
            correlation_id="req-1",
            additional_properties={"service": "api"},
        )
        data = json.loads(JSONFormatter().format(entry))
        assert data == {
            "message": "started server",
            "level": 2,
            "body": {"port": 3030},
            "context": "http",
            "correlationId": "req-1",
            "timestamp": "2024-03-29T17:18:12.505Z",
            "additionalProperties": {"service": "api"},
        }

    def test_absent_keys_omitted(self):
        data = json.loads(JSONFormatter().format(make_entry()))
        assert set(data) == {"message", "level", "timestamp"}

    def test_compact_single_line(self):
        text = JSONFormatter().format(make_entry(body={"a": [1, 2]}))
        assert "\n" not in text
        assert '"body":{"a":[1,2]}' in text

    def test_indent(self):
        text = JSONFormatter(indent=2).format(make_entry())
        assert '\n  "message": "started server"' in text

    def test_non_ascii_kept(self):
        text = JSONFormatter().format(make_entry(message="héllo"))
        assert "héllo" in text

    def test_does_not_mutate_entry(self):
        body = {"nested": {"when": TIMESTAMP}}
        entry = make_entry(body=body)
        JSONFormatter().format(entry)
        assert entry.body["nested"]["when"] is TIMESTAMP


class TestCloudRunFormatter:
    """Test structured cloud formatter."""

    def test_fields(self):
        entry = make_entry(
            level=LogLevel.WARN,
            body={"port": 3030},
            context="http",
            correlation_id="req-1",
            additional_properties={"service": "api", "version": 3},
        )
        data = json.loads(CloudRunFormatter().format(entry))
        assert data == {
            "severity": "warn",
            "message": "started server",
            "body": {"port": 3030},
            "context": "http",
            "correlationId": "req-1",
            "timestamp": "2024-03-29T17:18:12.505Z",
            "service": "api",
            "version": 3,
        }

    def test_absent_keys_omitted(self):
        data = json.loads(CloudRunFormatter().format(make_entry()))
        assert data == {
            "severity": "info",
            "message": "started server",
            "timestamp": "2024-03-29T17:18:12.505Z",
        }

    def test_null_properties_kept(self):
        entry = make_entry(additional_properties={"region": None})
        text = CloudRunFormatter().format(entry)
        assert json.loads(text)["region"] is None
        assert '"region":null' in text

    def test_fixed_keys_win_on_collision(self):
        entry = make_entry(additional_properties={"severity": "debug", "message": "x", "team": "core"})
        data = json.loads(CloudRunFormatter().format(entry))
        assert data["severity"] == "info"
        assert data["message"] == "started server"
        assert data["team"] == "core"

    def test_silent_rejected(self):
        with pytest.raises(InvalidFormatterInput):
            CloudRunFormatter().format(make_entry(level=LogLevel.SILENT))
