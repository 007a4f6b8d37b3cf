from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from wait_for.errors import SpawnFailed

logger = logging.getLogger(__name__)


def run_command(command: Sequence[str]) -> int:
    """Run the command with our stdio and return the code to exit with."""
    if not command:
        return 0

    program = command[0]
    logger.debug("running command: %s", list(command))
    try:
        proc = subprocess.run(list(command))
    except OSError as exc:
        raise SpawnFailed(program, str(exc)) from exc

    # Negative return codes mean the child was killed by a signal.
    if proc.returncode < 0:
        logger.debug("%s terminated by signal %d", program, -proc.returncode)
        return 1
    return proc.returncode
