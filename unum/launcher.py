"""Process invoker: hand the terminal over to the external tool.

Steps, each with its own error:

    load config            ConfigNotFound / ConfigInvalid
    working directory      WorkingDirectoryUnavailable
    session directory      SessionDirCreateError
    build arguments        AgentsEncodingError
    locate executable      ExecutableNotFound
    chdir                  ChdirError
    exec                   ExecReplaceError

Nothing is retried or rolled back. A session directory created before a
later failure stays in place; creating it again is a no-op.
"""

import logging
import os
import shutil
import signal
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, NoReturn, Optional, Sequence, Tuple

from unum.arguments import build_args
from unum.config import load_config
from unum.errors import (
    ChdirError,
    ExecReplaceError,
    ExecutableNotFound,
    SessionDirCreateError,
    WorkingDirectoryUnavailable,
)
from unum.logger import close_handlers
from unum.paths import session_directory
from unum.settings import get_settings

logger = logging.getLogger(__name__)


def working_directory() -> str:
    """Get the caller's working directory.

    Prefers $PWD when it is absolute and names the same directory, so a
    project reached through a symlink keeps the same session key.

    Raises:
        WorkingDirectoryUnavailable: If the OS cannot report it
    """
    pwd = os.environ.get("PWD")
    if pwd and os.path.isabs(pwd):
        try:
            if os.path.samefile(pwd, os.curdir):
                return pwd
        except OSError:
            logger.debug(f"Ignoring stale PWD={pwd}")

    try:
        return os.getcwd()
    except OSError as e:
        raise WorkingDirectoryUnavailable(e) from e


def ensure_session_directory(persona: str, work_dir: str) -> Path:
    """Create the session directory if absent. Existing directories are fine.

    Raises:
        SessionDirCreateError: On permission or I/O failure
    """
    path = session_directory(persona, work_dir)
    try:
        path.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        raise SessionDirCreateError(path, e) from e
    return path


def find_executable(name: str) -> str:
    """Find the external tool on PATH.

    Raises:
        ExecutableNotFound: If it is not there
    """
    path = shutil.which(name)
    if not path:
        raise ExecutableNotFound(name)
    return path


def change_directory(path: Path) -> None:
    try:
        os.chdir(path)
    except OSError as e:
        raise ChdirError(path, e) from e


def replace_process(
    executable: str,
    argv: List[str],
    env: Optional[Dict[str, str]] = None,
) -> NoReturn:
    """Replace this process with executable.

    On POSIX this is execve and never returns. Windows has no real exec,
    so the tool runs as a child and its exit code becomes ours.

    Raises:
        ExecReplaceError: If the replacement could not happen
    """
    env = dict(os.environ) if env is None else env
    close_handlers()

    if os.name == "nt":
        signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            completed = subprocess.run([executable, *argv[1:]], env=env)
        except OSError as e:
            raise ExecReplaceError(executable, e) from e
        sys.exit(completed.returncode)

    try:
        os.execve(executable, argv, env)
    except OSError as e:
        raise ExecReplaceError(executable, e) from e
    raise ExecReplaceError(executable)  # NoReturn guard


def prepare(
    persona: str, extra_args: Sequence[str] = ()
) -> Tuple[Path, str, List[str]]:
    """Run every step short of chdir and exec.

    Returns:
        (session_dir, executable_path, argv) where argv includes argv[0]
    """
    config = load_config(persona)
    work_dir = working_directory()
    session_dir = ensure_session_directory(persona, work_dir)
    args = build_args(config, work_dir, extra_args)

    name = get_settings().executable
    executable = find_executable(name)
    argv = [os.path.basename(name), *args]

    logger.debug(
        f"Persona '{persona}': work_dir={work_dir} session_dir={session_dir} "
        f"executable={executable} args={len(args)}"
    )
    return session_dir, executable, argv


def invoke(persona: str, extra_args: Sequence[str] = ()) -> NoReturn:
    """Launch the external tool as persona from the current directory.

    Does not return on success: the process image is replaced.

    Raises:
        UnumError: Any step failing (see module docstring)
    """
    session_dir, executable, argv = prepare(persona, extra_args)
    change_directory(session_dir)
    logger.info(f"Launching {executable} for persona '{persona}' in {session_dir}")
    replace_process(executable, argv)
