"""Unit tests for the syslog adapter."""

from __future__ import annotations

import json
import logging
import logging.handlers
from typing import Any
from unittest.mock import MagicMock

import pytest

from logext.adapters.syslog import JSONEncoder, KeyValueEncoder, SysLogHandlerWriter, SyslogCore
from logext.core import Entry, Level
from logext.core import field as f
from logext.kernel.errors import DeliveryError, EncodingError, UnknownLevelError
from logext.testing import RecordingSyslogWriter


@pytest.fixture()
def writer() -> RecordingSyslogWriter:
    return RecordingSyslogWriter()


@pytest.fixture()
def core(writer: RecordingSyslogWriter) -> SyslogCore:
    return SyslogCore(Level.DEBUG, JSONEncoder(), writer)


class TestPriorities:
    @pytest.mark.parametrize(
        ("level", "priority"),
        [
            (Level.DEBUG, "debug"),
            (Level.INFO, "info"),
            (Level.WARN, "warning"),
            (Level.ERROR, "err"),
            (Level.DPANIC, "crit"),
            (Level.PANIC, "crit"),
            (Level.FATAL, "crit"),
        ],
    )
    def test_level_maps_to_priority(
        self, core: SyslogCore, writer: RecordingSyslogWriter, level: Level, priority: str
    ) -> None:
        core.write(Entry(level, "m"), [])
        assert writer.messages[0][0] == priority

    def test_unknown_level(self, core: SyslogCore, writer: RecordingSyslogWriter) -> None:
        with pytest.raises(UnknownLevelError):
            core.write(Entry(7, "m"), [])  # type: ignore[arg-type]
        assert writer.messages == []


class TestEncoding:
    def test_json_message(self, core: SyslogCore, writer: RecordingSyslogWriter) -> None:
        core.write(Entry(Level.ERROR, "nuked", logger_name="example"), [f.string("subsystem", "example")])
        payload = json.loads(writer.messages[0][1])
        assert payload["event"] == "nuked"
        assert payload["level"] == "error"
        assert payload["logger"] == "example"
        assert payload["subsystem"] == "example"
        assert "timestamp" in payload

    def test_key_value_message(self, writer: RecordingSyslogWriter) -> None:
        core = SyslogCore(Level.DEBUG, KeyValueEncoder(), writer)
        core.write(Entry(Level.INFO, "hello"), [f.integer("n", 3)])
        message = writer.messages[0][1]
        assert "level='info'" in message
        assert "event='hello'" in message
        assert message.endswith("n=3")

    def test_encoding_failure(self, core: SyslogCore, writer: RecordingSyslogWriter) -> None:
        class Broken:
            def marshal_log_object(self, enc: Any) -> None:
                raise RuntimeError("nope")

        with pytest.raises(EncodingError):
            core.write(Entry(Level.ERROR, "m"), [f.obj("thing", Broken())])
        assert writer.messages == []

    @pytest.mark.parametrize("key", ["event", "level", "timestamp", "logger"])
    def test_clashing_field_keeps_entry_value(
        self, core: SyslogCore, writer: RecordingSyslogWriter, key: str
    ) -> None:
        core.write(Entry(Level.ERROR, "nuked", logger_name="svc"), [f.string(key, "spoofed")])
        payload = json.loads(writer.messages[0][1])
        assert payload["event"] == "nuked"
        assert payload["level"] == "error"
        assert payload["logger"] == "svc"
        assert payload["timestamp"] != "spoofed"
        assert payload["fields." + key] == "spoofed"

    def test_bound_clashing_field_is_prefixed(self, core: SyslogCore, writer: RecordingSyslogWriter) -> None:
        core.with_fields([f.string("event", "bound")]).write(Entry(Level.INFO, "m"), [])
        payload = json.loads(writer.messages[0][1])
        assert payload["event"] == "m"
        assert payload["fields.event"] == "bound"

    def test_renderer_failure(self, writer: RecordingSyslogWriter) -> None:
        core = SyslogCore(Level.DEBUG, JSONEncoder(default=None), writer)
        with pytest.raises(EncodingError):
            core.write(Entry(Level.ERROR, "m"), [f.reflected("obj", object())])


class TestWithFields:
    def test_fields_are_bound(self, core: SyslogCore, writer: RecordingSyslogWriter) -> None:
        core.with_fields([f.string("service", "api")]).write(Entry(Level.INFO, "m"), [])
        assert json.loads(writer.messages[0][1])["service"] == "api"

    def test_parent_encoder_untouched(self, core: SyslogCore, writer: RecordingSyslogWriter) -> None:
        core.with_fields([f.string("service", "api")])
        core.write(Entry(Level.INFO, "m"), [])
        assert "service" not in json.loads(writer.messages[0][1])

    def test_call_fields_override_bound(self, core: SyslogCore, writer: RecordingSyslogWriter) -> None:
        derived = core.with_fields([f.string("service", "api")])
        derived.write(Entry(Level.INFO, "m"), [f.string("service", "worker")])
        assert json.loads(writer.messages[0][1])["service"] == "worker"

    def test_check_uses_enabler(self, writer: RecordingSyslogWriter) -> None:
        core = SyslogCore(Level.ERROR, JSONEncoder(), writer)
        assert core.check(Entry(Level.INFO, "m")) is None
        core.sync()


class TestSysLogHandlerWriter:
    @pytest.mark.parametrize(
        ("method", "levelno"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("err", logging.ERROR),
            ("crit", logging.CRITICAL),
        ],
    )
    def test_emits_record_at_level(self, method: str, levelno: int) -> None:
        handler = MagicMock(spec=logging.handlers.SysLogHandler)
        writer = SysLogHandlerWriter(handler, tag="app")
        getattr(writer, method)("hello")
        record = handler.emit.call_args.args[0]
        assert record.levelno == levelno
        assert record.getMessage() == "hello"
        assert handler.ident == "app: "

    def test_close_closes_handler(self) -> None:
        handler = MagicMock(spec=logging.handlers.SysLogHandler)
        SysLogHandlerWriter(handler).close()
        handler.close.assert_called_once()

    def test_handler_failure_is_raised(self) -> None:
        handler = MagicMock(spec=logging.handlers.SysLogHandler)

        def emit(record: logging.LogRecord) -> None:
            try:
                raise OSError("socket closed")
            except OSError:
                handler.handleError(record)

        handler.emit.side_effect = emit
        writer = SysLogHandlerWriter(handler)
        with pytest.raises(DeliveryError) as exc_info:
            writer.err("hello")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_socket_failure_fails_core_write(self) -> None:
        handler = logging.handlers.SysLogHandler(address=("127.0.0.1", 9))
        handler.socket.close()
        handler.socket = MagicMock()
        handler.socket.sendto.side_effect = OSError("network unreachable")
        core = SyslogCore(Level.DEBUG, JSONEncoder(), SysLogHandlerWriter(handler))

        with pytest.raises(DeliveryError):
            core.write(Entry(Level.ERROR, "nuked"), [])
        assert handler.socket.sendto.call_count == 1
