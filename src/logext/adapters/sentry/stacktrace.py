"""Sentry adapter – exception and stack trace resolution.

Call-stack introspection lives behind :class:`FrameSource` so that the
filtering policy in :func:`filter_frames` does not depend on how frames are
captured.
"""
from __future__ import annotations

import dataclasses
import os
import sys
import traceback
from types import FrameType
from typing import Any, Iterable, Protocol, Sequence

FRONT_END_PREFIXES: tuple[str, ...] = ("structlog", "logging")
OWN_PREFIX = "logext"


@dataclasses.dataclass(frozen=True)
class Frame:
    function: str
    module: str
    filename: str
    lineno: int | None

    @classmethod
    def from_frame(cls, frame: FrameType, lineno: int | None = None) -> Frame:
        code = frame.f_code
        return cls(
            function=getattr(code, "co_qualname", code.co_name),
            module=frame.f_globals.get("__name__", ""),
            filename=code.co_filename,
            lineno=frame.f_lineno if lineno is None else lineno,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "function": self.function,
            "module": self.module,
            "filename": os.path.basename(self.filename),
            "abs_path": self.filename,
            "lineno": self.lineno,
        }


@dataclasses.dataclass(frozen=True)
class ExceptionRecord:
    """One entry of the event's exception interface. Frames are oldest first."""

    value: str
    type: str | None = None
    module: str | None = None
    frames: tuple[Frame, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"value": self.value}
        if self.type is not None:
            payload["type"] = self.type
        if self.module is not None:
            payload["module"] = self.module
        payload["stacktrace"] = {"frames": [f.to_dict() for f in self.frames]}
        return payload


class FrameSource(Protocol):
    """Captures frames for the resolver."""

    def current_frames(self, skip: int = 0) -> list[Frame]:
        """Frames of the caller's stack, oldest first, minus the *skip* innermost."""
        ...

    def error_frames(self, error: BaseException) -> list[Frame] | None:
        """Frames captured by *error*, or ``None`` when it carries none."""
        ...


class InspectFrameSource:
    """:class:`FrameSource` backed by interpreter frames and tracebacks."""

    def current_frames(self, skip: int = 0) -> list[Frame]:
        frame: FrameType | None = sys._getframe(1)
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back
        frames: list[Frame] = []
        while frame is not None:
            frames.append(Frame.from_frame(frame))
            frame = frame.f_back
        frames.reverse()
        return frames

    def error_frames(self, error: BaseException) -> list[Frame] | None:
        if error.__traceback__ is None:
            return None
        return [Frame.from_frame(f, lineno) for f, lineno in traceback.walk_tb(error.__traceback__)]


DEFAULT_FRAME_SOURCE = InspectFrameSource()


def root_cause(error: BaseException) -> BaseException:
    """Follow ``__cause__`` links down to the innermost error."""
    seen = {id(error)}
    while error.__cause__ is not None and id(error.__cause__) not in seen:
        error = error.__cause__
        seen.add(id(error))
    return error


def _under(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def _is_test_module(module: str) -> bool:
    parts = module.split(".")
    last = parts[-1]
    return "tests" in parts or last.startswith("test_") or last.endswith("_test") or last == "conftest"


def filter_frames(
    frames: Iterable[Frame],
    front_end_prefixes: Sequence[str] = FRONT_END_PREFIXES,
    own_prefix: str = OWN_PREFIX,
) -> list[Frame]:
    """Drop logging front-end frames and our own frames, except our tests."""
    kept: list[Frame] = []
    for frame in frames:
        if any(_under(frame.module, prefix) for prefix in front_end_prefixes):
            continue
        if _under(frame.module, own_prefix) and not _is_test_module(frame.module):
            continue
        kept.append(frame)
    return kept


def resolve(
    error: BaseException | None,
    message: str,
    skip: int = 0,
    frame_source: FrameSource | None = None,
) -> ExceptionRecord:
    """Describe *error* (or, without one, the current call site) as an exception record.

    With an error, type and value come from its root cause while the frames
    come from the outermost error's traceback, falling back to the filtered
    current stack minus *skip* frames. Without an error the record carries
    *message* and the filtered current stack; *skip* does not apply
    there. Never raises.
    """
    source = frame_source or DEFAULT_FRAME_SOURCE

    if error is not None:
        frames = source.error_frames(error)
        if frames is None:
            frames = filter_frames(source.current_frames(skip + 1))
        cause = root_cause(error)
        return ExceptionRecord(
            value=str(cause),
            type=type(cause).__qualname__,
            module=type(cause).__module__,
            frames=tuple(frames),
        )

    frames = filter_frames(source.current_frames())
    return ExceptionRecord(value=message, frames=tuple(frames))


__all__ = [
    "DEFAULT_FRAME_SOURCE",
    "ExceptionRecord",
    "Frame",
    "FrameSource",
    "InspectFrameSource",
    "filter_frames",
    "resolve",
    "root_cause",
]
