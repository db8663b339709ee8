"""Open-command construction and detached process launch.

Files are opened by handing their path to an open-by-association program
(``xdg-open`` by default). The spawned process is never waited on and its
failures are only logged.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OPENER = "xdg-open"


def shell_escape(text: str) -> str:
    """Escape ``text`` for embedding between single quotes in a POSIX shell word."""
    return text.replace("'", "'\\''")


def build_open_command(path: Path | str, opener: str = DEFAULT_OPENER) -> str:
    """Return ``<opener> '<escaped path>'``."""
    return f"{opener} '{shell_escape(os.fspath(path))}'"


def launch_detached(working_dir: Path | str, command: str) -> None:
    """Spawn ``command`` in ``working_dir`` without waiting for it."""
    try:
        argv = shlex.split(command)
    except ValueError as exc:
        logger.warning("cannot parse launch command %r: %s", command, exc)
        return
    if not argv:
        logger.warning("empty launch command")
        return

    logger.info("launching %s in %s", command, working_dir)
    try:
        subprocess.Popen(
            argv,
            cwd=working_dir,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.warning("failed to launch %r: %s", command, exc)


__all__ = [
    "DEFAULT_OPENER",
    "shell_escape",
    "build_open_command",
    "launch_detached",
]
