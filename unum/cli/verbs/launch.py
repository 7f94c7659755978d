"""unum <persona> [flags...]"""

from typing import NoReturn, Sequence

from unum.launcher import invoke


def handle(persona: str, extra_args: Sequence[str]) -> NoReturn:
    invoke(persona, extra_args)
