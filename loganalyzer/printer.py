import sys
from typing import List, TextIO

from .types import LogLevel, LogReport


def format_report(report: LogReport) -> List[str]:
    lines = [f"Total Entries: {report.total_count}"]

    # Always every level, in declaration order
    for level in LogLevel:
        lines.append(f"{level.value}: {report.level_counts.get(level, 0)}")

    lines.append(f"Malformed: {report.malformed_count}")
    lines.append(f"Most Recent ERROR: {report.most_recent_error_message}")
    lines.append(
        f"Top 3 Frequent Words (INFO): {', '.join(report.top_info_words)}"
    )
    return lines


def write_report(stream: TextIO, report: LogReport):
    for line in format_report(report):
        stream.write(line + "\n")


def print_report(report: LogReport):
    write_report(sys.stdout, report)
