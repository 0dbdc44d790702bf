"""Testing support – fakes for exercising cores without external services."""

from logext.testing.fakes import RecordingSyslogWriter, RecordingTransport, StaticFrameSource

__all__ = ["RecordingSyslogWriter", "RecordingTransport", "StaticFrameSource"]
