"""Combining two text blocks into one: side by side or stacked."""

from typing import List

from app.ansi import visible_len
from app.art import Side


def _pad_top(block: List[str], height: int) -> List[str]:
    """Prepend empty rows so the block is `height` rows tall."""
    return [""] * (height - len(block)) + list(block)


def side_by_side(left: List[str], right: List[str]) -> List[str]:
    """Place two blocks next to each other, aligned on their last rows.

    Every row of `left` is padded with spaces to the width of its widest
    row, then the matching row of `right` follows directly.
    """
    height = max(len(left), len(right))
    widest = max((visible_len(line) for line in left), default=0)

    rows = []
    for left_line, right_line in zip(_pad_top(left, height), _pad_top(right, height)):
        padding = " " * (widest - visible_len(left_line))
        rows.append(f"{left_line}{padding}{right_line}")
    return rows


def stacked(bubble: List[str], art: List[str], side, width: int) -> List[str]:
    """Place the bubble above the art.

    For the right side, art rows are right-justified to `width` columns.
    """
    rows = list(bubble)
    if Side(side) is Side.RIGHT:
        for line in art:
            rows.append(" " * max(0, width - visible_len(line)) + line)
    else:
        rows.extend(art)
    return rows
