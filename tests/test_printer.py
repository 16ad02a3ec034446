import io

from loganalyzer.aggregator import analyze
from loganalyzer.printer import format_report, print_report, write_report
from loganalyzer.types import LogLevel, LogReport


def make_report(**overrides):
    fields = dict(
        total_count=4,
        level_counts={level: 0 for level in LogLevel},
        malformed_count=1,
        most_recent_error_message="Connection lost",
        top_info_words=("hello", "world"),
    )
    fields["level_counts"].update({LogLevel.INFO: 2, LogLevel.ERROR: 2})
    fields.update(overrides)
    return LogReport(**fields)


def test_format_report_layout():
    assert format_report(make_report()) == [
        "Total Entries: 4",
        "TRACE: 0",
        "DEBUG: 0",
        "INFO: 2",
        "WARN: 0",
        "ERROR: 2",
        "FATAL: 0",
        "Malformed: 1",
        "Most Recent ERROR: Connection lost",
        "Top 3 Frequent Words (INFO): hello, world",
    ]


def test_empty_report():
    lines = format_report(analyze([]))
    assert lines[0] == "Total Entries: 0"
    assert lines[-2] == "Most Recent ERROR: N/A"
    assert lines[-1] == "Top 3 Frequent Words (INFO): "


def test_levels_in_declaration_order_regardless_of_counts():
    counts = {LogLevel.FATAL: 9, LogLevel.TRACE: 1}
    lines = format_report(make_report(level_counts=counts))
    assert lines[1:7] == [
        "TRACE: 1",
        "DEBUG: 0",
        "INFO: 0",
        "WARN: 0",
        "ERROR: 0",
        "FATAL: 9",
    ]


def test_write_report():
    buf = io.StringIO()
    write_report(buf, make_report())
    text = buf.getvalue()
    assert text.endswith("Top 3 Frequent Words (INFO): hello, world\n")
    assert text.count("\n") == 10


def test_print_report(capsys):
    print_report(make_report(top_info_words=("solo",)))
    out = capsys.readouterr().out
    assert "Top 3 Frequent Words (INFO): solo\n" in out
