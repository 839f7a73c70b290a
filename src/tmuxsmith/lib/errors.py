"""Exception classes raised by tmuxsmith."""

from typing import Optional


class TmuxsmithError(Exception):
    """Base exception for all tmuxsmith errors."""
    pass


class ConfigError(TmuxsmithError):
    """Raised when a project file is missing, unparsable or invalid."""
    pass


class ShellCommandError(TmuxsmithError):
    """Raised when a before_start or stop command fails or cannot be launched."""

    def __init__(
        self,
        command: str,
        cwd: Optional[str] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = command
        self.cwd = cwd
        self.returncode = returncode
        self.stderr = stderr

        if returncode is None:
            message = f"could not run '{command}'"
        else:
            message = f"'{command}' exited with status {returncode}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)


class TMuxError(TmuxsmithError):
    """Base exception for all TMux-related errors."""
    pass


class TMuxNotRunningError(TMuxError):
    """Raised when TMux is not running or not available."""
    pass


class SessionNotFoundError(TMuxError):
    """Raised when a requested TMux session cannot be found."""
    pass


class SessionCreationError(TMuxError):
    """Raised when a TMux session cannot be created."""
    pass


class CommandExecutionError(TMuxError):
    """Raised when a TMux command fails to execute properly."""
    pass
