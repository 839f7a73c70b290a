"""
Pytest configuration and shared fixtures for tmuxsmith tests.
"""

import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tmuxsmith.lib.commander import ShellCommander
from tmuxsmith.lib.orchestrator import Orchestrator
from tmuxsmith.lib.tmux_interface import TMuxInterface
from tmuxsmith.models.session_config import PaneConfig, SessionConfig, WindowConfig


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they never outlive a CliRunner stream."""
    yield
    package_logger = logging.getLogger("tmuxsmith")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def tmux():
    """Driver mock whose calls are recorded in order on ``tmux.mock_calls``."""
    driver = MagicMock(spec=TMuxInterface)
    driver.session_exists.return_value = False
    driver.new_session.return_value = "proj:"
    return driver


@pytest.fixture
def commander():
    return MagicMock(spec=ShellCommander)


@pytest.fixture
def orchestrator(tmux, commander):
    return Orchestrator(tmux, commander)


@pytest.fixture
def three_window_config():
    return SessionConfig(
        session="proj",
        root="/work/proj",
        before_start=["docker compose up -d"],
        stop=["docker compose stop"],
        windows=[
            WindowConfig(name="editor", commands=["vim ."]),
            WindowConfig(
                name="server",
                root="backend",
                commands=["make run"],
                panes=[PaneConfig(type="vertical", root="logs", commands=["tail -f app.log"])],
                layout="main-vertical",
            ),
            WindowConfig(name="shell", root="/tmp"),
        ],
    )
