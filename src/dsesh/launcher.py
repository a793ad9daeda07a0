"""Run a session's startup command in a shell and wait for it."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
from pathlib import Path

from dsesh.config import Session
from dsesh.errors import LaunchError
from dsesh.paths import expand_tilde


logger = logging.getLogger(__name__)


def _working_dir(session: Session) -> Path:
    if session.path is not None:
        return expand_tilde(session.path)
    try:
        return Path(os.getcwd())
    except OSError as e:
        raise LaunchError(f"Cannot determine current directory: {e}") from e


def _default_sigint() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)


def connect_session(session: Session) -> int:
    """! @brief Run @p session's startup command under `sh -c` and block until it exits.

    The command's exit status is returned for information only; a non-zero
    status is not an error here. Like os.system, SIGINT is ignored in this
    process while the child runs, so Ctrl-C belongs to the session.

    @param session Session to launch.
    @return The child's exit status.
    @throws LaunchError if the working directory or the shell is unusable.
    """
    print(f"→ {session.name}", file=sys.stderr)

    cwd = _working_dir(session)
    logger.debug("Running %r in %s", session.startup_command, cwd)
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        result = subprocess.run(session.startup_command, shell=True, cwd=str(cwd), preexec_fn=_default_sigint)
    except OSError as e:
        raise LaunchError(f"Failed to start session '{session.name}' in {cwd}: {e}") from e
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)

    logger.debug("Session '%s' exited with status %s", session.name, result.returncode)
    return result.returncode
