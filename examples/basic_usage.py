#!/usr/bin/env python3
"""Basic usage example"""

import io

from log_dispatch import LoggerBuilder, LogLevel
from log_dispatch.writers import ConsoleWriter


class FullDisk(ConsoleWriter):
    """Writer that always fails, to show escalation."""

    def write_text(self, text):
        raise OSError("no more space")


def main():
    audit = io.StringIO()

    # Console gets INFO and up, the audit stream only errors
    logger = (LoggerBuilder()
        .with_name("example")
        .with_console(LogLevel.INFO)
        .add_writer(LogLevel.ERROR, ConsoleWriter(stream=audit))
        .add_writer(LogLevel.TRACE, FullDisk())
        .build())

    logger.trace("This is trace")
    logger.info("Application started on port %d", 8080)
    logger.errorf("Request %s failed", "GET /")
    logger.error(ValueError("100% of retries used"))

    print("audit:", audit.getvalue().splitlines())
    print("metrics:", logger.get_metrics())


if __name__ == "__main__":
    main()
