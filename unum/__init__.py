"""unum: persona launcher for claude code.

Loads a persona from {config_root}/{persona}.yaml, expands its prompt for the
current directory and execs the tool from a per-project session directory.
"""

from unum.arguments import build_args
from unum.config import AgentDefinition, PersonaConfig, load_config, write_template
from unum.launcher import invoke
from unum.paths import cache_root, config_path, config_root, session_directory
from unum.template import expand

__version__ = "0.1.0"

__all__ = [
    "AgentDefinition",
    "PersonaConfig",
    "build_args",
    "cache_root",
    "config_path",
    "config_root",
    "expand",
    "invoke",
    "load_config",
    "session_directory",
    "write_template",
]
