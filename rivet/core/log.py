"""
System log: the most recent log lines, readable by applications.
"""

from __future__ import annotations

import logging
from collections import deque

LOG_RETENTION_DEFAULT = 200


class SystemLog:
    """Bounded ring of log lines. Oldest entries are evicted first."""

    def __init__(self, retention: int = LOG_RETENTION_DEFAULT):
        if retention <= 0:
            raise ValueError(f"Log retention must be positive, got {retention}")
        self._lines: deque[str] = deque(maxlen=retention)

    @property
    def retention(self) -> int:
        return self._lines.maxlen

    def write(self, entry: str) -> None:
        self._lines.append(entry)

    def read(self) -> list[str]:
        """Copy of the retained lines, oldest first."""
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)


class SystemLogHandler(logging.Handler):
    """Logging handler that appends formatted records to a SystemLog."""

    def __init__(self, system_log: SystemLog, level: int = logging.INFO):
        super().__init__(level)
        self.system_log = system_log
        self.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.system_log.write(self.format(record))
        except Exception:
            self.handleError(record)
