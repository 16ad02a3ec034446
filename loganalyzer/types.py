from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional, Tuple


class LogLevel(str, Enum):
    """
    Severity levels, in display order.

    The report printer relies on declaration order, so do not reorder.
    """
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"

    @classmethod
    def from_name(cls, name: str) -> Optional["LogLevel"]:
        if not name.isascii():
            return None
        return cls.__members__.get(name.upper())


@dataclass(frozen=True)
class LogEntry:
    """
    One accepted log line.

    `message` is kept verbatim: no trimming, no case change.
    """
    timestamp: datetime
    level: LogLevel
    message: str


@dataclass(frozen=True)
class LogReport:
    """
    Point-in-time snapshot of an aggregation run.

    This is the ONLY structure the printer relies on.
    """
    total_count: int
    level_counts: Mapping[LogLevel, int]
    malformed_count: int
    most_recent_error_message: str
    top_info_words: Tuple[str, ...]
