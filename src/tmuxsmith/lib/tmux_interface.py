"""Synchronous tmux driver: one tmux invocation per operation."""

import logging
import subprocess
import sys
from typing import IO, Optional, Sequence

from tmuxsmith.lib.errors import (
    CommandExecutionError,
    SessionCreationError,
    SessionNotFoundError,
    TMuxNotRunningError,
)
from tmuxsmith.models.session_config import VERTICAL

logger = logging.getLogger(__name__)


class TMuxInterface:
    """Direct tmux command integration for building and tearing down sessions"""

    def __init__(self, tmux_command: str = "tmux"):
        self.tmux_command = tmux_command

    def _classify_error(self, error_msg: str):
        lowered = error_msg.lower()
        if "no server running" in lowered or "error connecting to" in lowered:
            return TMuxNotRunningError(f"tmux server not running: {error_msg}")
        if "session not found" in lowered or "can't find session" in lowered:
            return SessionNotFoundError(f"Session not found: {error_msg}")
        if "duplicate session" in lowered or "already exists" in lowered:
            return SessionCreationError(f"Session creation failed: {error_msg}")
        return CommandExecutionError(f"tmux command failed: {error_msg}")

    def _run_tmux_command(self, *args: str) -> str:
        """Execute tmux command and return output"""
        cmd = [self.tmux_command] + list(args)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            process = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            raise TMuxNotRunningError("tmux command not found")

        if process.returncode != 0:
            error = self._classify_error(process.stderr.strip())
            logger.error(str(error))
            raise error

        return process.stdout.strip()

    def session_exists(self, session_name: str) -> bool:
        """Quick check if session exists without full metadata query"""
        try:
            self._run_tmux_command("has-session", "-t", session_name)
            return True
        except (SessionNotFoundError, TMuxNotRunningError, CommandExecutionError):
            return False

    def new_session(self, name: str, root: str = "", window_name: str = "") -> str:
        """Creates a detached session and returns its target handle (``name:``)"""
        args = ["new-session", "-Pd", "-s", name, "-F", "#{session_name}:"]
        if window_name:
            args.extend(["-n", window_name])
        if root:
            args.extend(["-c", root])

        return self._run_tmux_command(*args)

    def new_window(self, session: str, name: str, root: str = "") -> str:
        """Creates a window in ``session`` and returns its window id"""
        args = ["new-window", "-Pd", "-t", session, "-n", name, "-F", "#{window_id}"]
        if root:
            args.extend(["-c", root])

        return self._run_tmux_command(*args)

    def send_keys(self, target: str, command: str) -> None:
        """Types ``command`` into ``target`` and presses Enter"""
        self._run_tmux_command("send-keys", "-t", target, command, "Enter")

    def split_window(
        self,
        target: str,
        split_type: str,
        root: str = "",
        commands: Optional[Sequence[str]] = None,
    ) -> str:
        """Splits ``target`` and runs ``commands`` in the new pane.

        ``vertical`` stacks the new pane below; anything else, including an
        empty type, places it to the right. Returns the new pane id.
        """
        args = ["split-window", "-Pd", "-t", target, "-F", "#{pane_id}"]
        args.append("-v" if split_type == VERTICAL else "-h")
        if root:
            args.extend(["-c", root])

        pane_id = self._run_tmux_command(*args)

        for command in commands or []:
            self.send_keys(pane_id, command)

        return pane_id

    def select_layout(self, target: str, layout: str) -> str:
        """Applies a named layout to ``target``"""
        return self._run_tmux_command("select-layout", "-t", target, layout)

    def kill_window(self, target: str) -> None:
        """Terminates a single ``session:window`` target"""
        self._run_tmux_command("kill-window", "-t", target)

    def stop_session(self, session_name: str) -> str:
        """Terminates specified tmux session"""
        return self._run_tmux_command("kill-session", "-t", session_name)

    def switch_client(self, target: str) -> None:
        """Switches the current tmux client to ``target``"""
        self._run_tmux_command("switch-client", "-t", target)

    def attach(
        self,
        target: str,
        stdin: Optional[IO] = None,
        stdout: Optional[IO] = None,
        stderr: Optional[IO] = None,
    ) -> None:
        """Attaches a new client to ``target``, blocking until it detaches.

        The caller's terminal streams are handed to tmux directly, so output
        is not captured and failures carry only the exit status.
        """
        cmd = [self.tmux_command, "attach", "-d", "-t", target]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            process = subprocess.run(
                cmd,
                stdin=stdin or sys.stdin,
                stdout=stdout or sys.stdout,
                stderr=stderr or sys.stderr,
            )
        except FileNotFoundError:
            raise TMuxNotRunningError("tmux command not found")

        if process.returncode != 0:
            raise CommandExecutionError(f"tmux attach to {target} exited with status {process.returncode}")
