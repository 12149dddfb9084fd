"""Speech bubble rendering: a box-drawn frame around wrapped text."""

from typing import List

from app.ansi import visible_len

# Box-drawing characters
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
HORIZONTAL = "─"
VERTICAL = "│"

MARGIN = 3  # Spaces between the frame and the text, on each side


def _body_row(line: str, content_width: int) -> str:
    padding = " " * (content_width - visible_len(line))
    margin = " " * MARGIN
    return f"{VERTICAL}{margin}{line}{padding}{margin}{VERTICAL}"


def render(wrapped: List[str]) -> List[str]:
    """Frame wrapped lines in a speech bubble.

    The content width is the visible length of the longest line. One blank
    row of padding sits above and below the text. An empty input still
    yields a bubble with a single blank text row.
    """
    lines = list(wrapped) or [""]
    content_width = max(visible_len(line) for line in lines)
    border = HORIZONTAL * (content_width + 2 * MARGIN)
    blank = _body_row("", content_width)

    rows = [f"{TOP_LEFT}{border}{TOP_RIGHT}", blank]
    rows.extend(_body_row(line, content_width) for line in lines)
    rows.append(blank)
    rows.append(f"{BOTTOM_LEFT}{border}{BOTTOM_RIGHT}")
    return rows
