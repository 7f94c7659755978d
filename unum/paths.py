"""Path resolution for persona configs and session directories.

Provides functions to:
- Locate the config root and a persona's config file (XDG_CONFIG_HOME)
- Locate the cache root (XDG_CACHE_HOME)
- Derive the per-(persona, working directory) session directory
- Validate persona names before they become path components

Nothing here touches the filesystem; only environment variables are read.
"""

import os
from pathlib import Path

from unum.errors import InvalidPersonaName

APP_DIR = "unum"
CONFIG_SUFFIX = ".yaml"

_PATH_SEPARATORS = {os.sep} | ({os.altsep} if os.altsep else set())
_SEPARATORS = {"/", "\\"} | _PATH_SEPARATORS


def validate_persona(persona: str) -> str:
    """Reject persona names that are unsafe as a single path component.

    Args:
        persona: Name given on the command line

    Returns:
        The name, unchanged

    Raises:
        InvalidPersonaName: If the name is empty, hidden, flag-like or
            contains separators or control characters
    """
    if not persona:
        raise InvalidPersonaName(persona, "name is empty")
    if any(sep in persona for sep in _SEPARATORS):
        raise InvalidPersonaName(persona, "name must not contain path separators")
    if not persona.isprintable():
        raise InvalidPersonaName(persona, "name contains control characters")
    if persona.startswith("."):
        raise InvalidPersonaName(persona, "name must not start with '.'")
    if persona.startswith("-"):
        raise InvalidPersonaName(persona, "name must not start with '-'")
    return persona


def _xdg_dir(var: str, *fallback: str) -> Path:
    xdg = os.getenv(var)
    if xdg:
        return Path(xdg) / APP_DIR
    return Path.home().joinpath(*fallback, APP_DIR)


def config_root() -> Path:
    """Get config directory: $XDG_CONFIG_HOME/unum or ~/.config/unum."""
    return _xdg_dir("XDG_CONFIG_HOME", ".config")


def config_path(persona: str) -> Path:
    """Get the config file for a persona (e.g., ~/.config/unum/dev.yaml)."""
    validate_persona(persona)
    return config_root() / f"{persona}{CONFIG_SUFFIX}"


def cache_root() -> Path:
    """Get cache directory: $XDG_CACHE_HOME/unum or ~/.cache/unum."""
    return _xdg_dir("XDG_CACHE_HOME", ".cache")


def dasherize(work_dir: str) -> str:
    """Flatten an absolute path into one path component.

    Example:
        /home/dev/Projects/foo -> home-dev-Projects-foo

    The mapping is lossy (/a/b-c and /a/b/c both give a-b-c). It is kept
    as-is so existing session directories stay valid.
    """
    flat = work_dir[1:] if work_dir[:1] in _PATH_SEPARATORS else work_dir
    for sep in _PATH_SEPARATORS:
        flat = flat.replace(sep, "-")
    return flat


def session_directory(persona: str, work_dir: str) -> Path:
    """Get the session directory for a persona launched from work_dir.

    Args:
        persona: Persona name
        work_dir: Absolute working directory of the caller

    Returns:
        {cache_root}/{persona}/{dasherized work_dir}
    """
    validate_persona(persona)
    return cache_root() / persona / dasherize(str(work_dir))
