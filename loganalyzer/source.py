import sys
from pathlib import Path
from typing import Iterator, Union


STDIN_PATH = "-"


def read_lines(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    """
    Lazily yield the lines of a log file without their terminators.

    `-` reads from stdin, decoded with `encoding` like a regular file.
    I/O and decode errors propagate to the caller.
    """
    if str(path) == STDIN_PATH:
        sys.stdin.reconfigure(encoding=encoding)
        for line in sys.stdin:
            yield line.rstrip("\r\n")
        return

    with open(path, encoding=encoding) as f:
        for line in f:
            yield line.rstrip("\r\n")
