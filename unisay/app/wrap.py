"""Word wrapping for bubble messages.

Two strategies are available:
  greedy  (default) — pack words onto a line while they fit; a word longer
          than the width keeps its own line, unshortened.
  fold    — behaves like ``fold -s``: break at whitespace where possible,
          hard-split words longer than the width onto lines of their own.

Explicit line breaks are kept: each input line is wrapped on its own, so
blank lines in the message stay blank lines in the bubble.

Widths are visible widths: ANSI escape sequences count as zero columns and
are never split.
"""

import re
from typing import List

from app.ansi import tokens, visible_len

GREEDY = "greedy"
FOLD = "fold"

_LINE_BREAK_RE = re.compile(r"\r?\n")


def _wrap_greedy(paragraph: str, width: int) -> List[str]:
    words = paragraph.split()
    if not words:
        return [""]
    lines = []
    current = words[0]
    for word in words[1:]:
        if visible_len(current) + 1 + visible_len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


def _chop(word: str, width: int) -> List[str]:
    """Split a word into pieces of `width` visible characters.

    Escape sequences stay whole and travel with the character after them
    (or with the last piece when they end the word).
    """
    pieces = []
    current = ""
    used = 0
    for token, is_escape in tokens(word):
        if not is_escape:
            if used == width:
                pieces.append(current)
                current = ""
                used = 0
            used += 1
        current += token
    pieces.append(current)
    return pieces


def _wrap_fold(paragraph: str, width: int) -> List[str]:
    words = paragraph.split()
    if not words:
        return [""]
    lines = []
    current = ""
    for word in words:
        if visible_len(word) > width:
            if current:
                lines.append(current)
            pieces = _chop(word, width)
            lines.extend(pieces[:-1])
            current = pieces[-1]
        elif not current:
            current = word
        elif visible_len(current) + 1 + visible_len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines


WRAPPERS = {
    GREEDY: _wrap_greedy,
    FOLD: _wrap_fold,
}


def wrap(message: str, width: int, mode: str = GREEDY) -> List[str]:
    """Wrap a multi-line message to the given column width.

    Args:
        message: Raw message text, may contain line breaks and blank lines.
        width: Target column width. Values below 1 are treated as 1.
        mode: Wrapping strategy, one of WRAPPERS.

    Returns:
        The wrapped lines. A trailing line break in the message does not
        produce a trailing empty line.
    """
    if mode not in WRAPPERS:
        raise ValueError(f"Unknown wrap mode: {mode!r}")
    width = max(1, width)
    wrap_paragraph = WRAPPERS[mode]

    paragraphs = _LINE_BREAK_RE.split(message)
    if len(paragraphs) > 1 and paragraphs[-1] == "":
        paragraphs.pop()

    lines = []
    for paragraph in paragraphs:
        lines.extend(wrap_paragraph(paragraph, width))
    return lines
