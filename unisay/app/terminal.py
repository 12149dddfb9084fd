"""Terminal access: size queries, message input and output.

Everything that touches the real terminal lives here so the rendering
code can take plain values and stay testable without one attached.
"""

import os
import sys
from typing import List, Optional, Tuple

from app.log import log

DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 24


def _env_size(name: str) -> int:
    """Read a positive integer from COLUMNS or LINES, 0 when unset or invalid."""
    try:
        value = int(os.environ.get(name, ""))
    except ValueError:
        return 0
    return max(value, 0)


def _query_size() -> Optional[Tuple[int, int]]:
    """Ask the terminal behind stdout, then stderr, for its size."""
    for stream in (sys.stdout, sys.stderr):
        try:
            size = os.get_terminal_size(stream.fileno())
        except (AttributeError, ValueError, OSError):
            continue
        if size.columns > 0 and size.lines > 0:
            return size.columns, size.lines
    return None


def terminal_size() -> Tuple[int, int]:
    """Return (columns, rows) of the terminal.

    COLUMNS and LINES win when set, like shutil.get_terminal_size. Otherwise
    stdout is queried, then stderr, so piping the output into another
    program still renders at the terminal width. Falls back to 80x24.
    """
    columns = _env_size("COLUMNS")
    rows = _env_size("LINES")
    if columns and rows:
        return columns, rows
    queried = _query_size() or (DEFAULT_COLUMNS, DEFAULT_ROWS)
    return columns or queried[0], rows or queried[1]


def terminal_width() -> int:
    return terminal_size()[0]


def terminal_height() -> int:
    return terminal_size()[1]


def read_message(words: List[str], stdin=None) -> Optional[str]:
    """Get the message from command-line words or piped stdin.

    Words are joined with single spaces. Without words, stdin is read when
    it is not interactive. Returns None when no message was given.
    """
    if words:
        message = " ".join(words)
    else:
        stdin = stdin if stdin is not None else sys.stdin
        if stdin is None or not hasattr(stdin, "read") or stdin.isatty():
            log("input", "No message argument and stdin is interactive")
            return None
        message = stdin.read()
        log("input", f"Read {len(message)} characters from stdin")
    if not message.strip():
        return None
    return message


def write_lines(lines: List[str], stream=None) -> None:
    """Write rendered rows to stdout, one per line."""
    stream = stream if stream is not None else sys.stdout
    for line in lines:
        stream.write(f"{line}\n")
    stream.flush()
