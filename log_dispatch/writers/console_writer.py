"""Console writer for stderr output"""

import io
import sys
import threading
from typing import Optional, TextIO

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.writer import LogWriter


class ConsoleWriter(LogWriter):
    """
    Write log message text to a console stream, one line per entry.

    Only the message is written: level and timestamp are not added, so
    callers that want them must put them into the text.

    Thread Safety:
        This class is thread-safe. The reused buffer and the stream write
        share one lock.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stderr)
        """
        self.stream = stream or sys.stderr
        self._buffer = io.StringIO()
        self._lock = threading.Lock()

    def write(self, entry: LogEntry) -> None:
        """Write log entry text to the stream."""
        self.write_text(entry.message)

    def write_text(self, text: str) -> None:
        """
        Write raw text as one line.

        A trailing newline is added unless the text already ends with one.

        Raises:
            OSError: If the stream write fails
            ValueError: If the stream is closed
        """
        with self._lock:
            self._buffer.seek(0)
            self._buffer.truncate()
            self._buffer.write(text)
            if not text.endswith("\n"):
                self._buffer.write("\n")
            self.stream.write(self._buffer.getvalue())
            self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        with self._lock:
            self.stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleWriter(stream={getattr(self.stream, 'name', self.stream)!r})"
