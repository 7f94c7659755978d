"""Placeholder expansion for persona prompts.

Recognised notations, all resolving against the same variable set:

    $WorkDir        shell-style name
    ${WorkDir}      shell-style braced name
    {{.WorkDir}}    Go-template-style field

Anything that is not a known variable is emitted byte-for-byte, including
unknown names in every notation and the `$$` sequence. This is a fixed
scanner, not a template engine: user prompt text is never evaluated.
"""

import re
from typing import Mapping

WORK_DIR = "WorkDir"

_TOKEN_RE = re.compile(
    r"(?P<escaped>\$\$)"
    r"|\{\{\.(?P<field>[A-Za-z_][A-Za-z0-9_]*)\}\}"
    r"|\$\{(?P<braced>[A-Za-z0-9_]+)\}"
    r"|\$(?P<bare>[A-Za-z0-9_]+)"
)


def template_variables(work_dir: str) -> dict:
    """Variables available to prompt templates."""
    return {WORK_DIR: str(work_dir)}


def substitute(template: str, variables: Mapping[str, str]) -> str:
    """Replace known placeholders in a single left-to-right pass.

    Substituted values are not re-scanned, so a value containing a
    placeholder is inserted literally.
    """

    def _replace(match: re.Match) -> str:
        if match.group("escaped"):
            return match.group(0)
        name = match.group("field") or match.group("braced") or match.group("bare")
        if name in variables:
            return variables[name]
        return match.group(0)

    return _TOKEN_RE.sub(_replace, template)


def expand(template: str, work_dir: str) -> str:
    """Expand a persona prompt for a launch from work_dir."""
    return substitute(template, template_variables(work_dir))
