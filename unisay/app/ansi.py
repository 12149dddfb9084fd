"""ANSI escape helpers shared by the wrapping and layout code."""

import re
from typing import Iterator, Tuple

# ANSI escape pattern for visible-width calculation
_ANSI_RE = re.compile(r"\033\[[0-9;?]*[A-Za-z]")

# One escape sequence or one visible character
_TOKEN_RE = re.compile(r"\033\[[0-9;?]*[A-Za-z]|.", re.DOTALL)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    """Return the visible length of a string, ignoring ANSI escape codes."""
    return len(strip_ansi(text))


def tokens(text: str) -> Iterator[Tuple[str, bool]]:
    """Yield (token, is_escape) pairs: whole escape sequences or single characters."""
    for match in _TOKEN_RE.finditer(text):
        token = match.group(0)
        yield token, len(token) > 1
