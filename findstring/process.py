"""
findstring.process
==================
Thin wrapper around :mod:`subprocess` for running the external inspection
tools (``strings``, ``nm``, ``macho``, ``rpecli``).

Both output pipes are drained concurrently by :meth:`Popen.communicate`, so a
chatty child can never block on a full pipe buffer while we wait for it.
There is no timeout: a child that never exits stalls the caller.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and captured output of one external command."""
    exit_code: int
    stdout:    bytes = b""
    stderr:    bytes = b""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def run_command(
    path: str,
    arguments: Sequence[str] = (),
    input: bytes | None = None,
) -> CommandResult | None:
    """
    Run the program at *path* with *arguments* and wait for it to exit.

    Returns ``None`` without spawning anything when *path* does not exist,
    or when the OS refuses to start it.  A non-zero exit status is still a
    :class:`CommandResult`; callers decide what it means.

    When *input* is given it is written to the child's stdin, which is then
    closed.
    """
    if not os.path.exists(path):
        logger.debug("Command not found: %s", path)
        return None

    try:
        proc = subprocess.Popen(
            [path, *arguments],
            stdin=subprocess.PIPE if input is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        logger.warning("Cannot run %s: %s", path, exc)
        return None

    stdout, stderr = proc.communicate(input)
    logger.debug(
        "%s %s exited with %d (%d bytes out, %d bytes err)",
        path, " ".join(arguments), proc.returncode, len(stdout), len(stderr),
    )
    return CommandResult(exit_code=proc.returncode, stdout=stdout, stderr=stderr)
