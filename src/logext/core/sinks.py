"""Core – DiscardingWriteSyncer."""
from __future__ import annotations


class DiscardingWriteSyncer:
    """File-like object that accepts every write and keeps nothing.

    Handy as the output of a structlog ``PrintLoggerFactory`` when all
    entries are meant to go to cores only::

        structlog.configure(
            processors=[..., CoreProcessor(core)],
            logger_factory=structlog.PrintLoggerFactory(DiscardingWriteSyncer()),
        )
    """

    def write(self, data: str | bytes) -> int:
        return len(data)

    def flush(self) -> None:
        pass

    def sync(self) -> None:
        pass


__all__ = ["DiscardingWriteSyncer"]
