"""User configuration for unisay.

Settings are read from an optional YAML file:
    $UNISAY_CONFIG, or $XDG_CONFIG_HOME/unisay/config.yaml
    (~/.config/unisay/config.yaml when XDG_CONFIG_HOME is unset).

Example config.yaml:
    art: small          # big | small (default: chosen from terminal height)
    side: right         # left | right (default: left)
    above: false        # always stack the bubble above the unicorn
    wrap: fold          # greedy | fold
    strip_ansi: true    # remove ANSI escapes from the message
    color: auto         # auto | always | never

Command-line flags take precedence over the file.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import yaml

from app.log import log

DEFAULTS = {
    "art": None,
    "side": None,
    "above": False,
    "wrap": "greedy",
    "strip_ansi": True,
    "color": "never",
}

CHOICES = {
    "art": ("big", "small"),
    "side": ("left", "right"),
    "wrap": ("greedy", "fold"),
    "color": ("auto", "always", "never"),
}

_BOOL_KEYS = ("above", "strip_ansi")


def config_path() -> Path:
    """Return the path of the config file (which may not exist)."""
    explicit = os.environ.get("UNISAY_CONFIG", "")
    if explicit:
        return Path(explicit).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME", "") or str(Path.home() / ".config")
    return Path(base) / "unisay" / "config.yaml"


def load_config(path: Optional[Path] = None) -> dict:
    """Load the YAML config file.

    Returns the full config dict, or empty dict if the file doesn't exist
    or can't be parsed.
    """
    path = path or config_path()
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        log("config", f"Error loading {path}: {e}")
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        log("config", f"Ignoring {path}: expected a mapping at top level")
        return {}
    return data


def get_settings(config: Optional[dict] = None) -> dict:
    """Merge config values over the defaults, dropping invalid ones."""
    settings = dict(DEFAULTS)
    for key, value in (config or {}).items():
        if key not in DEFAULTS:
            log("config", f"Unknown setting: {key!r}")
            continue
        if key in _BOOL_KEYS:
            if not isinstance(value, bool):
                log("config", f"Ignoring invalid value for {key!r}: {value!r}")
                continue
        elif value not in CHOICES[key]:
            log("config", f"Ignoring invalid value for {key!r}: {value!r}")
            continue
        settings[key] = value
    return settings


def use_color(mode: str, stream=None) -> bool:
    """Decide whether the unicorn gets ANSI colors.

    UNISAY_FORCE_COLOR forces colors on. In "auto" mode colors are used
    only when the output stream is a TTY.
    """
    if os.environ.get("UNISAY_FORCE_COLOR", ""):
        return True
    if mode == "always":
        return True
    if mode == "auto":
        stream = stream if stream is not None else sys.stdout
        return hasattr(stream, "isatty") and stream.isatty()
    return False
