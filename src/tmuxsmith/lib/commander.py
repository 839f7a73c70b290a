"""Shell command execution for before_start and stop hooks."""

import logging
import subprocess
from typing import Optional

from tmuxsmith.lib.errors import ShellCommandError

logger = logging.getLogger(__name__)


class ShellCommander:
    """Runs one-shot shell commands in a working directory"""

    def __init__(self, shell: str = "/bin/sh"):
        self.shell = shell

    def run(self, command: str, cwd: Optional[str] = None) -> str:
        """Run ``command`` through the shell and return its stripped stdout.

        Raises ShellCommandError when the command exits non-zero or the
        shell cannot be started in ``cwd``.
        """
        logger.debug(f"Running shell command in {cwd or '.'}: {command}")

        try:
            result = subprocess.run(
                [self.shell, "-c", command],
                cwd=cwd or None,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            logger.error(f"Shell command could not start: {command} ({e})")
            raise ShellCommandError(command, cwd=cwd, stderr=str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.error(f"Shell command failed with status {result.returncode}: {command}")
            raise ShellCommandError(command, cwd=cwd, returncode=result.returncode, stderr=stderr)

        return result.stdout.strip()
