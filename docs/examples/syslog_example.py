"""Write a JSON-encoded entry to the local syslog daemon.

Run with::

    python docs/examples/syslog_example.py --syslog-tag myapp
"""
from __future__ import annotations

import argparse
import logging.handlers
import sys

from logext.adapters.syslog import JSONEncoder, SysLogHandlerWriter, SyslogCore
from logext.core import Entry, Level
from logext.core.field import string


def run() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--syslog-tag", default="logext", help="syslog tag")
    parser.add_argument("--address", default="/dev/log", help="syslog socket")
    args = parser.parse_args()

    try:
        writer = SysLogHandlerWriter(
            tag=args.syslog_tag,
            address=args.address,
            facility=logging.handlers.SysLogHandler.LOG_LOCAL0,
        )
    except OSError as exc:
        print(f"Error: failed to set up syslog: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    core = SyslogCore(Level.ERROR, JSONEncoder(), writer)
    checked = core.check(Entry(Level.ERROR, "nuked", logger_name="example"))
    if checked is not None:
        checked.write(string("subsystem", "example"))
    core.sync()
    writer.close()
    return 0


if __name__ == "__main__":
    sys.exit(run())
