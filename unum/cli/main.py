"""unum entry point.

    unum <persona> [flags...]   exec the tool with the persona's context
    unum <persona> init         write a starter config for the persona
    unum -h | --help | help     usage on stderr, exit 1

Everything after <persona> is forwarded verbatim, so there is no option
parsing beyond the first two words.
"""

import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from unum.cli.output import die, usage
from unum.cli.verbs import init, launch
from unum.errors import UnumError
from unum.logger import get_logger
from unum.paths import config_root
from unum.settings import get_settings

logger = logging.getLogger(__name__)

HELP_WORDS = ("-h", "--help", "help")
INIT_VERB = "init"


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)

    if not argv or argv[0] in HELP_WORDS:
        usage(str(config_root()))

    try:
        settings = get_settings()
    except ValidationError as e:
        die(f"invalid UNUM_* environment: {e.errors()[0]['msg']}")
    get_logger("unum", debug=settings.debug)

    persona, rest = argv[0], argv[1:]
    handler = init.handle if rest[:1] == [INIT_VERB] else launch.handle

    try:
        code = handler(persona, rest)
    except UnumError as e:
        logger.debug(f"{type(e).__name__} for persona '{persona}'", exc_info=True)
        die(str(e))

    sys.exit(code)


if __name__ == "__main__":
    main()
