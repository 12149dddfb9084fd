"""Layout decisions and the full rendering pipeline.

Terminal dimensions come in as arguments; nothing here queries the
terminal, so the same inputs always give the same output.
"""

from typing import List, NamedTuple, Optional

from app.ansi import strip_ansi as strip_ansi_codes
from app.art import Side, Size, art_width, colorize_art, get_art
from app.bubble import render
from app.compose import side_by_side, stacked
from app.log import log
from app.wrap import GREEDY, wrap

SMALL_ART_BELOW_ROWS = 15  # Terminals shorter than this get the small unicorn
STACK_BELOW_COLUMNS = 60  # Terminals narrower than this stack the bubble
BUBBLE_CHROME = 9  # Frame, margins and one column of slack around the text


class LayoutDecision(NamedTuple):
    art_size: Size
    side: Side
    stacked: bool


def decide(
    columns: int,
    rows: int,
    art: Optional[str] = None,
    side: Optional[str] = None,
    above: bool = False,
) -> LayoutDecision:
    """Pick the art size, side and stacking from terminal size and flags.

    Forced values win; otherwise the size follows the terminal height and
    narrow terminals get the stacked layout.
    """
    if art is not None:
        art_size = Size(art)
    elif rows < SMALL_ART_BELOW_ROWS:
        art_size = Size.SMALL
    else:
        art_size = Size.BIG
    return LayoutDecision(
        art_size=art_size,
        side=Side(side) if side is not None else Side.LEFT,
        stacked=bool(above) or columns < STACK_BELOW_COLUMNS,
    )


def wrap_width(columns: int, decision: LayoutDecision, art_block: List[str]) -> int:
    """Column width available to the message inside the bubble."""
    offset = 0 if decision.stacked else art_width(art_block)
    return max(1, columns - BUBBLE_CHROME - offset)


def render_message(
    message: str,
    columns: int,
    rows: int,
    *,
    art: Optional[str] = None,
    side: Optional[str] = None,
    above: bool = False,
    wrap_mode: str = GREEDY,
    strip_ansi: bool = True,
    color: bool = False,
) -> List[str]:
    """Render a message with the unicorn for a terminal of the given size."""
    decision = decide(columns, rows, art=art, side=side, above=above)
    art_block = get_art(decision.art_size, decision.side)
    width = wrap_width(columns, decision, art_block)
    log(
        "layout",
        f"{columns}x{rows}: art={decision.art_size.value} side={decision.side.value} "
        f"stacked={decision.stacked} wrap={wrap_mode}@{width}",
    )

    if strip_ansi:
        message = strip_ansi_codes(message)
    bubble = render(wrap(message, width, wrap_mode))

    if color:
        art_block = colorize_art(art_block)

    if decision.stacked:
        return stacked(bubble, art_block, decision.side, columns)
    if decision.side is Side.LEFT:
        return side_by_side(art_block, bubble)
    return side_by_side(bubble, art_block)
