"""LogBuffer — a bounded in-memory log of recent server activity."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque

DEFAULT_CAPACITY = 100


class LogBuffer(logging.Handler):
    """Keeps the last *capacity* records as ``[HH:MM:SS.fff] message`` lines.

    The oldest line is evicted once the buffer is full.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, level: int = logging.NOTSET) -> None:
        if capacity <= 0:
            msg = f"capacity must be positive, got {capacity}"
            raise ValueError(msg)
        super().__init__(level)
        self._lines: deque[str] = deque(maxlen=capacity)
        self._guard = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._lines.maxlen or 0

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = f"[{_timestamp(record.created)}] {record.getMessage()}"
        except Exception:
            self.handleError(record)
            return
        with self._guard:
            self._lines.append(line)

    @property
    def messages(self) -> list[str]:
        """Buffered lines, oldest first."""
        with self._guard:
            return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def clear(self) -> None:
        with self._guard:
            self._lines.clear()


def _timestamp(created: float) -> str:
    millis = int((created % 1) * 1000)
    return f"{time.strftime('%H:%M:%S', time.localtime(created))}.{millis:03d}"
