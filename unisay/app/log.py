"""Colored log output for unisay.

Each category gets its own ANSI color prefix for easy visual scanning.

Categories:
  config   (yellow)        — config file problems, ignored settings
  layout   (cyan)          — layout decisions (debug only)
  input    (blue)          — message input handling (debug only)

Usage:
    from app.log import log
    log("config", f"Ignoring invalid value for 'art': {value!r}")

Output goes to stderr so it never mixes with the rendered bubble on
stdout. Debug categories print only when UNISAY_DEBUG is set.
"""

import os
import sys

# ANSI escape codes
_RESET = "\033[0m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"
_CYAN = "\033[36m"
_WHITE = "\033[37m"

_COLORS = {
    "config": _YELLOW,
    "layout": _CYAN,
    "input": _BLUE,
}

_DEFAULT_COLOR = _WHITE

_DEBUG_CATEGORIES = {"layout", "input"}


def _use_color() -> bool:
    """Check if log output should use ANSI colors.

    Checks stderr (our output target) for TTY status, with
    UNISAY_FORCE_COLOR env var override for pipe contexts.
    """
    if os.environ.get("UNISAY_FORCE_COLOR", ""):
        return True
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def _debug_enabled() -> bool:
    return bool(os.environ.get("UNISAY_DEBUG", ""))


def log(category: str, message: str) -> None:
    """Print a log line to stderr: [category] message.

    Colors are only applied when stderr is a TTY (or UNISAY_FORCE_COLOR is set).
    """
    if category in _DEBUG_CATEGORIES and not _debug_enabled():
        return
    if _use_color():
        color = _COLORS.get(category, _DEFAULT_COLOR)
        print(f"{color}[{category}]{_RESET} {message}", file=sys.stderr)
    else:
        print(f"[{category}] {message}", file=sys.stderr)
