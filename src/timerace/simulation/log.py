"""Bounded history of race actions."""

import logging
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger(__name__)


@dataclass
class LogEntry:
    """A single timestamped race log entry."""

    timestamp: datetime
    message: str

    def __str__(self) -> str:
        return f"{self.timestamp:%H:%M:%S} - {self.message}"


class RaceLog:
    """Keeps the most recent race log entries, oldest evicted first."""

    def __init__(
        self,
        capacity: int = 10,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the race log.

        Args:
            capacity: Maximum number of entries kept
            clock: Returns the timestamp for new entries (defaults to datetime.now)
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.clock = clock if clock is not None else datetime.now
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    def log(self, message: str) -> LogEntry:
        """Append a message, evicting the oldest entry when full."""
        entry = LogEntry(timestamp=self.clock(), message=message)
        self._entries.append(entry)
        logger.info(message)
        return entry

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    def text(self) -> str:
        """Rendered log, newest entry last."""
        return "\n".join(str(entry) for entry in self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))
