"""
errors.py: Typed exceptions for the persona launcher.

Every stage raises one of these instead of returning None/False.
The CLI catches UnumError, prints the message and exits 1.
"""

from pathlib import Path
from typing import Optional


class UnumError(Exception):
    """Base for all launcher errors."""


class InvalidPersonaName(UnumError):
    """Persona name cannot be used as a path component."""

    def __init__(self, persona: str, reason: str):
        self.persona = persona
        self.reason = reason
        super().__init__(f"invalid persona name {persona!r}: {reason}")


class ConfigNotFound(UnumError):
    """Persona config file could not be read."""

    def __init__(self, persona: str, path: Path):
        self.persona = persona
        self.path = path
        super().__init__(
            f"config not found: {path} (run 'unum {persona} init' to create)"
        )


class ConfigInvalid(UnumError):
    """Config file exists but does not parse into a persona config.

    Attributes:
        path: Config file that failed.
        cause: Underlying YAML or validation error.
    """

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"invalid config {path}: {_one_line(cause)}")


class ConfigAlreadyExists(UnumError):
    """init refused to overwrite an existing config."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"config already exists: {path}")


class ConfigWriteError(UnumError):
    """init could not create the config root or write the template."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot write config {path}: {cause.strerror or cause}")


class WorkingDirectoryUnavailable(UnumError):
    """The OS could not report the current working directory."""

    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(
            f"cannot determine working directory: {cause.strerror or cause}"
        )


class SessionDirCreateError(UnumError):
    """Session directory could not be created."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(
            f"cannot create session directory {path}: {cause.strerror or cause}"
        )


class AgentsEncodingError(UnumError):
    """Agent definitions could not be serialized to JSON."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"failed to encode agents: {cause}")


class ExecutableNotFound(UnumError):
    """External tool is not on PATH."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} not found in PATH")


class ChdirError(UnumError):
    """Could not change into the session directory."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot change to {path}: {cause.strerror or cause}")


class ExecReplaceError(UnumError):
    """Process replacement failed; the launcher is still running."""

    def __init__(self, path: str, cause: Optional[OSError] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause.strerror or cause}" if cause else ""
        super().__init__(f"failed to exec {path}{detail}")


def _one_line(exc: Exception) -> str:
    return " ".join(str(exc).split())
