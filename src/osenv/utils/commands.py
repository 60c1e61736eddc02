"""Run external commands and normalise their text output."""

import logging
import subprocess
from typing import Protocol

from osenv.core.models import OSFamily

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, args: list[str]) -> str:
        """Run *args* to completion and return combined stdout/stderr."""
        ...


class SubprocessRunner:
    """Runs commands with :mod:`subprocess`, blocking until they exit.

    No timeout is applied. The exit status is ignored; callers parse the
    output and fail there if it is unusable.
    """

    def run(self, args: list[str]) -> str:
        logger.debug(f"Running command: {' '.join(args)}")
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.debug(f"Command {args[0]} exited with {result.returncode}")
        return result.stdout


def trim_command_output(output: str, family: OSFamily) -> str:
    """Strip trailing newlines, plus trailing carriage returns on Windows."""
    if family == OSFamily.WINDOWS:
        return output.rstrip("\r\n")
    return output.rstrip("\n")
