"""Syslog adapter – writes encoded entries to the local syslog daemon."""
from logext.adapters.syslog.core import SyslogCore
from logext.adapters.syslog.encoders import CLASH_PREFIX, Encoder, JSONEncoder, KeyValueEncoder, RendererEncoder
from logext.adapters.syslog.writer import SysLogHandlerWriter, SyslogWriter

__all__ = [
    "CLASH_PREFIX",
    "Encoder",
    "JSONEncoder",
    "KeyValueEncoder",
    "RendererEncoder",
    "SysLogHandlerWriter",
    "SyslogCore",
    "SyslogWriter",
]
