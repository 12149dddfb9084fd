#!/usr/bin/env python3
"""
unisay — a unicorn says your message

Usage from shell:
    unisay "Hello there"
    echo "Hello there" | unisay --side=right
    python3 -m app.cli --above "Hello there"

Usage from Python:
    from app.cli import main
    exit_code = main(["--art=small", "Hello"])
"""

import argparse
import sys

from app.config import CHOICES, get_settings, load_config, use_color
from app.layout import render_message
from app.terminal import read_message, terminal_size, write_lines

USAGE = """\
Usage: unisay [options] [message ...]

Print a message in a speech bubble next to a unicorn.
The message can also be piped in on standard input.

Options:
  --above, --no-above  Put the bubble above the unicorn, or beside it
  --art=big|small      Unicorn size (default: picked from terminal height)
  --side=left|right    Side the unicorn stands on (default: left)
  --wrap=greedy|fold   Word wrapping strategy (default: greedy)
  --color, --no-color  Turn unicorn colors on or off
  -h, --help           Show this help and exit

Use -- before a message that starts with a dash.

Settings can also be stored in ~/.config/unisay/config.yaml.
"""

# Flags validated against config.CHOICES before anything is rendered
_CHOICE_FLAGS = ("art", "side", "wrap")


class UsageError(Exception):
    """Raised for unknown options or malformed arguments."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="unisay", add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("--above", dest="above", action="store_const", const=True)
    parser.add_argument("--no-above", dest="above", action="store_const", const=False)
    parser.add_argument("--art")
    parser.add_argument("--side")
    parser.add_argument("--wrap")
    parser.add_argument("--color", dest="color", action="store_const", const=True)
    parser.add_argument("--no-color", dest="color", action="store_const", const=False)
    parser.add_argument("message", nargs="*")
    return parser


def _check_choices(args) -> str:
    """Return an error message for the first invalid flag value, or ''."""
    for name in _CHOICE_FLAGS:
        value = getattr(args, name)
        if value is not None and value not in CHOICES[name]:
            first, second = CHOICES[name]
            return f"Error: --{name} must be '{first}' or '{second}'."
    return ""


def main(argv=None) -> int:
    """CLI entry point for unisay.

    Returns exit code (0 = success, 1 = bad arguments or no message).
    """
    try:
        args = _build_parser().parse_intermixed_args(argv)
    except UsageError as e:
        print(f"Error: {e}. Use -- before a message that starts with '-'.", file=sys.stderr)
        return 1

    if args.help:
        print(USAGE, end="")
        return 0

    error = _check_choices(args)
    if error:
        print(error, file=sys.stderr)
        return 1

    message = read_message(args.message)
    if message is None:
        print(USAGE, end="")
        return 1

    settings = get_settings(load_config())
    color = args.color if args.color is not None else use_color(settings["color"], sys.stdout)
    columns, rows = terminal_size()

    lines = render_message(
        message,
        columns,
        rows,
        art=args.art or settings["art"],
        side=args.side or settings["side"],
        above=args.above if args.above is not None else settings["above"],
        wrap_mode=args.wrap or settings["wrap"],
        strip_ansi=settings["strip_ansi"],
        color=color,
    )
    write_lines(lines)
    return 0


if __name__ == "__main__":
    sys.exit(main())
