"""Testing fakes – in-memory doubles for transports, writers and frame capture."""
from logext.testing.fakes.frames import StaticFrameSource
from logext.testing.fakes.syslog import RecordingSyslogWriter
from logext.testing.fakes.transport import RecordingTransport

__all__ = ["RecordingSyslogWriter", "RecordingTransport", "StaticFrameSource"]
