"""Tests for the tmuxsmith command line."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tmuxsmith.cli.main import inside_tmux, main
from tmuxsmith.lib.errors import SessionNotFoundError, ShellCommandError


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def projects(tmp_path, monkeypatch):
    monkeypatch.setenv("TMUXSMITH_CONFIG_DIR", str(tmp_path))
    (tmp_path / "blog.yml").write_text(
        "session: ${name}\n"
        "root: /work/blog\n"
        "windows:\n"
        "  - name: code\n"
        "  - name: logs\n"
    )
    return tmp_path


@pytest.fixture
def mock_orchestrator():
    with patch("tmuxsmith.cli.main.Orchestrator") as orchestrator_class:
        yield orchestrator_class.return_value


class TestInsideTmux:

    def test_tmux_variable(self, monkeypatch):
        monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,123,0")
        monkeypatch.setenv("TERM", "tmux-256color")
        assert inside_tmux() is True

    def test_screen_term(self, monkeypatch):
        monkeypatch.delenv("TMUX", raising=False)
        monkeypatch.setenv("TERM", "screen")
        assert inside_tmux() is True

    def test_plain_terminal(self, monkeypatch):
        monkeypatch.delenv("TMUX", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert inside_tmux() is False


class TestStart:

    def test_start_project_with_settings(self, cli_runner, projects, mock_orchestrator, monkeypatch):
        monkeypatch.delenv("TMUX", raising=False)
        monkeypatch.setenv("TERM", "xterm")

        result = cli_runner.invoke(main, ["start", "blog", "name=myblog", "-w", "logs", "-a"])

        assert result.exit_code == 0, result.output
        config, windows = mock_orchestrator.start.call_args.args
        assert config.session == "myblog"
        assert windows == ["logs"]
        assert mock_orchestrator.start.call_args.kwargs == {"attach": True, "inside": False}

    def test_start_from_file(self, cli_runner, projects, mock_orchestrator):
        result = cli_runner.invoke(main, ["start", "-f", str(projects / "blog.yml"), "name=fromfile"])

        assert result.exit_code == 0, result.output
        config, windows = mock_orchestrator.start.call_args.args
        assert config.session == "fromfile"
        assert windows == []

    def test_start_requires_project_or_file(self, cli_runner, mock_orchestrator):
        result = cli_runner.invoke(main, ["start"])

        assert result.exit_code != 0
        assert "PROJECT" in result.output
        mock_orchestrator.start.assert_not_called()

    def test_unknown_project(self, cli_runner, projects, mock_orchestrator):
        result = cli_runner.invoke(main, ["start", "nope"])

        assert result.exit_code == 1
        assert "No project file for 'nope'" in result.output

    def test_failure_is_reported(self, cli_runner, projects, mock_orchestrator):
        mock_orchestrator.start.side_effect = ShellCommandError("make deps", returncode=2, stderr="missing target")

        result = cli_runner.invoke(main, ["start", "blog", "name=b"])

        assert result.exit_code == 1
        assert "'make deps' exited with status 2: missing target" in result.output


class TestStop:

    def test_stop_session(self, cli_runner, projects, mock_orchestrator):
        result = cli_runner.invoke(main, ["stop", "blog", "name=b"])

        assert result.exit_code == 0, result.output
        config, windows = mock_orchestrator.stop.call_args.args
        assert config.session == "b"
        assert windows == []

    def test_stop_windows(self, cli_runner, projects, mock_orchestrator):
        result = cli_runner.invoke(main, ["stop", "blog", "name=b", "-w", "logs", "-w", "code"])

        assert result.exit_code == 0, result.output
        assert mock_orchestrator.stop.call_args.args[1] == ["logs", "code"]

    def test_stop_missing_session(self, cli_runner, projects, mock_orchestrator):
        mock_orchestrator.stop.side_effect = SessionNotFoundError("Session not found: can't find session: b")

        result = cli_runner.invoke(main, ["stop", "blog", "name=b"])

        assert result.exit_code == 1
        assert "Session not found" in result.output


class TestList:

    def test_lists_projects(self, cli_runner, projects):
        (projects / "shop.yaml").write_text("session: shop")

        result = cli_runner.invoke(main, ["list"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["blog", "shop"]
