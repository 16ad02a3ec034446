import argparse
import logging
import sys
from pathlib import Path

from config import load_settings
from loganalyzer.aggregator import analyze
from loganalyzer.printer import print_report
from loganalyzer.source import STDIN_PATH, read_lines


logger = logging.getLogger(__name__)

USAGE = "Usage: log-analyzer <path-to-logfile>"

EXIT_OK = 0
EXIT_IO_ERROR = 2


# ---------------- CLI ----------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="log-analyzer",
        description="Summarize a plain-text log file by severity and INFO word frequency",
    )
    parser.add_argument(
        "log_file",
        nargs="?",
        help="Path to the log file, or - for stdin",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging on stderr (lists every malformed line)",
    )
    return parser.parse_args(argv)


# ---------------- Main ----------------

def main(argv=None) -> int:
    args = parse_args(argv)
    settings = load_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.log_file:
        print(USAGE)
        return EXIT_OK

    path = args.log_file
    if path != STDIN_PATH and not Path(path).is_file():
        print(f"Error: File not found at {path}", file=sys.stderr)
        return EXIT_IO_ERROR

    logger.info("Analyzing %s", path)

    try:
        report = analyze(read_lines(path, encoding=settings.encoding))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", path, e)
        print(f"Error reading file: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    logger.info(
        "Parsed %d entries, %d malformed",
        report.total_count,
        report.malformed_count,
    )

    print_report(report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
