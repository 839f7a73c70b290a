"""Main CLI entry point"""

import os
from pathlib import Path
from typing import Optional, Tuple

import click

from tmuxsmith.lib.commander import ShellCommander
from tmuxsmith.lib.config_loader import (
    find_config,
    list_configs,
    load_config,
    parse_settings,
)
from tmuxsmith.lib.errors import TmuxsmithError
from tmuxsmith.lib.logging_utils import setup_logging
from tmuxsmith.lib.orchestrator import Orchestrator
from tmuxsmith.lib.tmux_interface import TMuxInterface
from tmuxsmith.models.session_config import SessionConfig


def inside_tmux() -> bool:
    """Whether this process runs inside a tmux client"""
    return bool(os.environ.get("TMUX")) or os.environ.get("TERM") == "screen"


def _load(project: Optional[str], file: Optional[str], settings: Tuple[str, ...]) -> SessionConfig:
    if file:
        path = Path(file)
        # With --file the first positional is a setting, not a project name
        if project:
            settings = (project,) + tuple(settings)
    elif project:
        path = find_config(project)
    else:
        raise click.UsageError("Give a PROJECT name or --file")
    return load_config(path, parse_settings(list(settings)))


def _orchestrator() -> Orchestrator:
    return Orchestrator(TMuxInterface(), ShellCommander())


project_argument = click.argument("project", required=False)
settings_argument = click.argument("settings", nargs=-1)
file_option = click.option("--file", "-f", type=click.Path(dir_okay=False), help="Project file to use instead of PROJECT")
windows_option = click.option("--windows", "-w", multiple=True, help="Only act on this window (repeatable)")
debug_option = click.option("--debug", "-d", is_flag=True, help="Log every tmux and shell command")


@click.group()
def main():
    """Start and stop tmux sessions from YAML project files"""


@main.command()
@project_argument
@settings_argument
@file_option
@windows_option
@click.option("--attach", "-a", is_flag=True, help="Switch to the session when already inside tmux")
@debug_option
def start(project, settings, file, windows, attach, debug):
    """Create the session (or missing windows) and attach to it

    SETTINGS are key=value pairs substituted for $key in the project file.
    """
    setup_logging(debug)
    try:
        config = _load(project, file, settings)
        _orchestrator().start(config, list(windows), attach=attach, inside=inside_tmux())
    except TmuxsmithError as e:
        raise click.ClickException(str(e))


@main.command()
@project_argument
@settings_argument
@file_option
@windows_option
@debug_option
def stop(project, settings, file, windows, debug):
    """Kill the session, or only the given windows"""
    setup_logging(debug)
    try:
        config = _load(project, file, settings)
        _orchestrator().stop(config, list(windows))
    except TmuxsmithError as e:
        raise click.ClickException(str(e))


@main.command(name="list")
def list_projects():
    """List project files in the config directory"""
    for name in list_configs():
        click.echo(name)


if __name__ == "__main__":
    main()
