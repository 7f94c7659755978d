"""Shared output utilities for CLI verbs."""

import sys
from typing import NoReturn

USAGE = """\
unum - persona launcher for claude code

Usage:
  unum <persona> [flags...]   Launch claude with the specified persona
  unum <persona> init         Create a template config for the persona

Flags are passed through to claude (e.g., --continue, --resume, -p "prompt")

Config files are stored in {config_dir}/<persona>.yaml
"""


def usage(config_dir: str = "~/.config/unum") -> NoReturn:
    """Print usage to stderr and exit 1."""
    print(USAGE.format(config_dir=config_dir), end="", file=sys.stderr)
    sys.exit(1)


def die(msg: str, code: int = 1) -> NoReturn:
    """Print error to stderr and exit."""
    print(f"Error: {msg}", file=sys.stderr)
    sys.exit(code)
