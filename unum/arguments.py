"""Argument vector assembly for the external tool.

Order is fixed and each group is appended whole before the next:

    1. --system-prompt <expanded prompt>
    2. --add-dir <work dir>
    3. --agents <json>          (only when the persona defines agents)
    4. persona args             (config order)
    5. extra args               (command-line order)

Arguments are opaque: no deduplication, no flag validation.
"""

import json
from typing import Dict, List, Sequence

from unum.config import AgentDefinition, PersonaConfig
from unum.errors import AgentsEncodingError
from unum.template import expand


def encode_agents(agents: Dict[str, AgentDefinition]) -> str:
    """Encode agent definitions as compact JSON with sorted keys.

    Raises:
        AgentsEncodingError: If the mapping cannot be serialized
    """
    try:
        payload = {name: agent.model_dump() for name, agent in agents.items()}
        return json.dumps(payload, separators=(",", ":"), sort_keys=True)
    except (TypeError, ValueError) as e:
        raise AgentsEncodingError(e) from e


def build_args(
    config: PersonaConfig,
    work_dir: str,
    extra_args: Sequence[str] = (),
) -> List[str]:
    """Build the tool's argument vector (without argv[0]).

    Args:
        config: Loaded persona config
        work_dir: Caller's working directory
        extra_args: Pass-through arguments from the command line

    Returns:
        Ordered argument list
    """
    work_dir = str(work_dir)
    args = [
        "--system-prompt", expand(config.prompt, work_dir),
        "--add-dir", work_dir,
    ]

    if config.agents:
        args.extend(["--agents", encode_agents(config.agents)])

    args.extend(config.args)
    args.extend(extra_args)
    return args
