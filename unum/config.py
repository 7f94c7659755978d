"""Persona config models, loading and init template.

Config file: {config_root}/{persona}.yaml

    name: dev
    prompt: |
      You work in {{.WorkDir}}.
    args: ["--model", "sonnet"]
    agents:
      reviewer:
        description: Reviews diffs
        prompt: You review code.

The file is re-read on every launch; nothing here caches or writes it back
(except write_template, which only ever creates a new file).
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from unum.errors import (
    ConfigAlreadyExists,
    ConfigInvalid,
    ConfigNotFound,
    ConfigWriteError,
)
from unum.paths import config_path, config_root

logger = logging.getLogger(__name__)


def _scalar_text(value: Any) -> Any:
    """Render a YAML number or bool as text; leave other values alone.

    PyYAML has already resolved the scalar, so the text is rebuilt from the
    value: `10` -> "10", `true`/`yes` -> "true", `1.50` -> "1.5".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate mapping keys."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    continue  # unhashable; SafeLoader reports it
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"mapping key {key!r} already defined",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


class AgentDefinition(BaseModel):
    """Sub-agent passed through to the tool's --agents flag."""

    description: str = ""
    prompt: str = ""

    @field_validator("description", "prompt", mode="before")
    @classmethod
    def _scalar_fields(cls, value: Any) -> Any:
        return _scalar_text(value)


class PersonaConfig(BaseModel):
    """Deserialized persona definition. Unset fields take empty values."""

    name: str = ""
    prompt: str = ""
    args: List[str] = Field(default_factory=list)
    agents: Dict[str, AgentDefinition] = Field(default_factory=dict)

    @field_validator("name", "prompt", mode="before")
    @classmethod
    def _scalar_fields(cls, value: Any) -> Any:
        return _scalar_text(value)

    @field_validator("args", mode="before")
    @classmethod
    def _scalar_args(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [_scalar_text(item) for item in value]
        return value

    @field_validator("agents", mode="before")
    @classmethod
    def _null_agents(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                str(key): ({} if agent is None else agent)
                for key, agent in value.items()
            }
        return value


def parse_config(content: str, path: Path) -> PersonaConfig:
    """Parse YAML text into a PersonaConfig.

    Args:
        content: Raw file content
        path: File the content came from (for error messages)

    Raises:
        ConfigInvalid: On YAML syntax errors or a document of the wrong shape
    """
    try:
        data = yaml.load(content, Loader=_UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise ConfigInvalid(path, e) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        err = TypeError(
            f"expected a mapping at top level, got {type(data).__name__}"
        )
        raise ConfigInvalid(path, err)

    try:
        return PersonaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigInvalid(path, e) from e


def load_config(persona: str) -> PersonaConfig:
    """Load a persona's config from disk.

    Raises:
        InvalidPersonaName: If the persona cannot be used in a path
        ConfigNotFound: If the file cannot be read
        ConfigInvalid: If the file does not parse
    """
    path = config_path(persona)
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        raise ConfigNotFound(persona, path) from e

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigInvalid(path, e) from e

    config = parse_config(content, path)
    logger.debug(
        f"Loaded persona '{persona}' from {path} "
        f"({len(config.args)} args, {len(config.agents)} agents)"
    )
    return config


_TEMPLATE_BODY = """\
prompt: |
  # {persona}

  You are {persona}. Define your persona here.

  ## Working Directory

  Your working directory is {{{{.WorkDir}}}}.
  Before your first tool use, run: cd {{{{.WorkDir}}}}
args:
  - "--model"
  - "sonnet"
# agents:
#   worker:
#     description: "A helper agent"
#     prompt: "You are a helpful assistant"
"""


def render_template(persona: str) -> str:
    """Render the starter config for a persona."""
    header = yaml.safe_dump(
        {"name": persona}, allow_unicode=True, default_flow_style=False
    )
    return header + _TEMPLATE_BODY.format(persona=persona)


def write_template(persona: str) -> Path:
    """Create a starter config for a persona.

    Creates the config root if missing. Never overwrites: the file is
    opened with exclusive create.

    Returns:
        Path of the created file

    Raises:
        ConfigAlreadyExists: If the persona already has a config
        ConfigWriteError: On any other I/O failure
    """
    path = config_path(persona)
    if path.exists():
        raise ConfigAlreadyExists(path)

    try:
        config_root().mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigWriteError(path, e) from e

    try:
        with open(path, "x", encoding="utf-8") as f:
            f.write(render_template(persona))
    except FileExistsError as e:
        raise ConfigAlreadyExists(path) from e
    except OSError as e:
        raise ConfigWriteError(path, e) from e

    logger.info(f"Created config for persona '{persona}' at {path}")
    return path
