"""Syslog adapter – writers that deliver encoded messages to syslog."""
from __future__ import annotations

import logging
import logging.handlers
from typing import Any, Protocol

from logext.kernel.errors import DeliveryError


class SyslogWriter(Protocol):
    """One method per syslog priority used by :class:`SyslogCore`.

    A failed write raises; :class:`SyslogCore` passes the error on.
    """

    def debug(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def err(self, message: str) -> None: ...
    def crit(self, message: str) -> None: ...


def _reraise(record: logging.LogRecord) -> None:  # noqa: ARG001
    # called by Handler.emit from inside its except block
    raise  # noqa: PLE0704


class SysLogHandlerWriter:
    """:class:`SyslogWriter` over the stdlib :class:`~logging.handlers.SysLogHandler`.

    The handler maps record level names onto syslog priorities, so each
    method emits a record at the matching stdlib level. Socket failures
    that the handler would only print are raised as :class:`DeliveryError`.
    """

    def __init__(
        self,
        handler: logging.handlers.SysLogHandler | None = None,
        *,
        tag: str = "logext",
        **handler_kw: Any,
    ) -> None:
        self._handler = handler or logging.handlers.SysLogHandler(**handler_kw)
        self._handler.handleError = _reraise  # type: ignore[method-assign]
        if tag:
            self._handler.ident = f"{tag}: "
        self._tag = tag

    def _emit(self, levelno: int, message: str) -> None:
        record = logging.LogRecord(self._tag, levelno, __file__, 0, message, None, None)
        try:
            self._handler.emit(record)
        except Exception as exc:
            raise DeliveryError(f"failed to write to syslog: {exc}", cause=exc) from exc

    def debug(self, message: str) -> None:
        self._emit(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._emit(logging.WARNING, message)

    def err(self, message: str) -> None:
        self._emit(logging.ERROR, message)

    def crit(self, message: str) -> None:
        self._emit(logging.CRITICAL, message)

    def close(self) -> None:
        self._handler.close()


__all__ = ["SysLogHandlerWriter", "SyslogWriter"]
