from datetime import datetime, timezone
from typing import Optional

from .types import LogEntry, LogLevel


def parse_timestamp(raw: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp.

    A trailing 'Z' means UTC and naive timestamps are assumed to be UTC.
    Explicit offsets are kept as-is.
    """
    if raw[-1:] in ("Z", "z"):
        raw = raw[:-1] + "+00:00"

    try:
        timestamp = datetime.fromisoformat(raw)
    except ValueError:
        return None

    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)

    return timestamp


def parse_line(line: str) -> Optional[LogEntry]:
    """
    Parse lines like:
      2025-09-18T14:32:10Z INFO User logged in

    The line is split on the first two spaces only, so the message keeps
    its inner whitespace.

    This function must:
      - never throw
      - return None on malformed input
    """
    if not line or line.isspace():
        return None

    parts = line.split(" ", 2)
    if len(parts) < 3 or not parts[2]:
        return None

    raw_ts, raw_level, message = parts

    timestamp = parse_timestamp(raw_ts)
    if timestamp is None:
        return None

    level = LogLevel.from_name(raw_level)
    if level is None:
        return None

    return LogEntry(
        timestamp=timestamp,
        level=level,
        message=message,
    )
