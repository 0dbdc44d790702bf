"""
logext – sinks for structured logging.

Import path convention::

    from logext.core import Entry, Field, Level
    from logext.adapters.sentry import SentryCore
    from logext.adapters.syslog import SyslogCore
    from logext.middleware import FilteringCore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
