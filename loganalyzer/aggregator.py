import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .parsers import parse_line
from .types import LogEntry, LogLevel, LogReport
from .words import get_valid_words


logger = logging.getLogger(__name__)

NO_ERROR_MESSAGE = "N/A"
TOP_WORDS_LIMIT = 3


class LogAggregator:
    """
    Folds raw log lines into running counts.

    Lines must be fed in input order: the most recent error tie-break and
    the word ranking both depend on it. Not safe for concurrent use.
    """

    def __init__(self):
        self.total_count = 0
        self.malformed_count = 0
        self.most_recent_error: Optional[LogEntry] = None

        self._level_counts: Dict[LogLevel, int] = {level: 0 for level in LogLevel}
        self._info_word_counts: Dict[str, int] = {}

    @classmethod
    def analyze(cls, lines: Iterable[str]) -> LogReport:
        aggregator = cls()
        for line in lines:
            aggregator.process_line(line)
        return aggregator.create_report()

    # ---------- Write API ----------

    def process_line(self, line: str):
        entry = parse_line(line)
        if entry is None:
            self.malformed_count += 1
            logger.debug("Skipping malformed line: %r", line)
            return

        self.total_count += 1
        self._level_counts[entry.level] += 1

        if entry.level == LogLevel.ERROR:
            self._update_most_recent_error(entry)

        if entry.level == LogLevel.INFO:
            for word in get_valid_words(entry.message):
                self._info_word_counts[word] = self._info_word_counts.get(word, 0) + 1

    def _update_most_recent_error(self, entry: LogEntry):
        # >= so that the last of several equal timestamps wins
        current = self.most_recent_error
        if current is None or entry.timestamp >= current.timestamp:
            self.most_recent_error = entry

    # ---------- Read APIs ----------

    def get_level_counts(self) -> Mapping[LogLevel, int]:
        return MappingProxyType(self._level_counts)

    def get_top_info_words(self, limit: int = TOP_WORDS_LIMIT) -> List[str]:
        """
        Most frequent INFO words, count descending then alphabetical.
        """
        ranked = sorted(
            self._info_word_counts.items(),
            key=lambda item: (-item[1], item[0]),
        )
        return [word for word, _ in ranked[:limit]]

    def create_report(self) -> LogReport:
        error_message = (
            self.most_recent_error.message
            if self.most_recent_error
            else NO_ERROR_MESSAGE
        )

        return LogReport(
            total_count=self.total_count,
            level_counts=MappingProxyType(dict(self._level_counts)),
            malformed_count=self.malformed_count,
            most_recent_error_message=error_message,
            top_info_words=tuple(self.get_top_info_words(TOP_WORDS_LIMIT)),
        )


def analyze(lines: Iterable[str]) -> LogReport:
    """
    Run a fresh aggregator over `lines` and return its report.
    """
    return LogAggregator.analyze(lines)
