"""Logging setup and helpers for session lifecycle events."""

import logging
import sys
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Package logger; module loggers created with getLogger(__name__) propagate here
logger = logging.getLogger("tmuxsmith")


def setup_logging(debug: bool = False, stream=None) -> None:
    """Install a single console handler on the package logger.

    Args:
        debug: Log every tmux invocation and shell command when True,
            otherwise only warnings and errors are shown
        stream: Output stream, defaults to stderr so stdout stays free for
            the attached tmux client
    """
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def log_session_operation(operation: str, session_name: str, status: str, detail: Optional[str] = None) -> None:
    """Log session operation."""
    message = f"Session {operation} {status} - {session_name}"
    if detail:
        message += f" - {detail}"

    if status == "error":
        logger.error(message)
    else:
        logger.info(message)


def log_session_attach(session_name: str, switched: bool) -> None:
    """Log session attachment."""
    how = "switched" if switched else "attached"
    logger.info(f"Session {how} - {session_name}")


def log_window_setup(session_name: str, window_name: str, created: bool, panes: int, layout: str) -> None:
    """Log window population."""
    message = (
        f"Window ready - {session_name}{window_name} "
        f"(created: {created}, panes: {panes}, layout: {layout})"
    )
    logger.info(message)


def log_skipped_windows(session_name: str, skipped: List[str]) -> None:
    """Log windows left out of a start run."""
    if skipped:
        logger.debug(f"Windows skipped - {session_name} {skipped}")
