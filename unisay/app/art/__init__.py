"""ASCII art unicorns, in two sizes, facing either side of the bubble."""

from enum import Enum
from pathlib import Path
from typing import List

from app.ansi import visible_len

# ANSI color codes
BOLD = "\033[1m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"
YELLOW = "\033[33m"
WHITE = "\033[97m"
RESET = "\033[0m"

ART_DIR = Path(__file__).parent


class Size(str, Enum):
    BIG = "big"
    SMALL = "small"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


# The unicorn on the left faces right (towards the bubble) and vice versa.
ART_FILES = {
    (Size.BIG, Side.LEFT): "big-left.txt",
    (Size.BIG, Side.RIGHT): "big-right.txt",
    (Size.SMALL, Side.LEFT): "small-left.txt",
    (Size.SMALL, Side.RIGHT): "small-right.txt",
}


def _read_art(filename: str) -> List[str]:
    """Read an art file into rows, dropping trailing blank rows."""
    lines = (ART_DIR / filename).read_text(encoding="utf-8").split("\n")
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def get_art(size, side) -> List[str]:
    """Return the art block for a size and side.

    Accepts enum members or their string values ("big", "left", ...).
    """
    return _read_art(ART_FILES[(Size(size), Side(side))])


def art_width(block: List[str]) -> int:
    """Visible width of the widest row in an art block."""
    return max((visible_len(line) for line in block), default=0)


def _apply_replacements(line: str, replacements: dict, base_color: str) -> str:
    for text, color in replacements.items():
        if text in line:
            line = line.replace(text, f"{color}{text}{RESET}{base_color}")
    return f"{base_color}{line}{RESET}"


def colorize_art(block: List[str]) -> List[str]:
    """Apply ANSI colors to an art block: cyan eye, magenta mane, yellow slashes."""
    replacements = {
        "o": f"{BOLD}{CYAN}",
        "~": MAGENTA,
        "\\": YELLOW,
        "/": YELLOW,
    }
    return [_apply_replacements(line, replacements, WHITE) for line in block]
