"""unum <persona> init"""

from typing import Sequence

from unum.config import write_template


def handle(persona: str, extra_args: Sequence[str]) -> int:
    path = write_template(persona)
    print(f"Created {path}")
    return 0
