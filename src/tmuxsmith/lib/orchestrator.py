"""Session lifecycle: decide what exists, build what is missing, attach.

Every driver or shell failure propagates unchanged and leaves tmux in
whatever state was reached. Nothing is rolled back.
"""

import logging
import sys
from typing import Sequence

from tmuxsmith.lib.commander import ShellCommander
from tmuxsmith.lib.logging_utils import (
    log_session_attach,
    log_session_operation,
    log_skipped_windows,
    log_window_setup,
)
from tmuxsmith.lib.paths import expand_path, resolve_path
from tmuxsmith.lib.tmux_interface import TMuxInterface
from tmuxsmith.models.session_config import SessionConfig, WindowConfig

logger = logging.getLogger(__name__)


def session_handle(session_name: str) -> str:
    return session_name + ":"


class Orchestrator:
    """Starts and stops the tmux session described by a SessionConfig"""

    def __init__(self, tmux: TMuxInterface, commander: ShellCommander):
        self.tmux = tmux
        self.commander = commander

    def _exec_shell_commands(self, commands: Sequence[str], path: str) -> None:
        for command in commands:
            self.commander.run(command, path)

    def switch_or_attach(self, session: str, attach: bool, inside: bool) -> None:
        """Hand the terminal to ``session``.

        Inside tmux the outer client is switched only when ``attach`` is
        requested. Outside tmux a new client is always attached, which
        blocks until the user detaches.
        """
        if inside and attach:
            self.tmux.switch_client(session)
            log_session_attach(session, switched=True)
        elif not inside:
            log_session_attach(session, switched=False)
            self.tmux.attach(session, sys.stdin, sys.stdout, sys.stderr)

    @staticmethod
    def _is_selected(window: WindowConfig, windows: Sequence[str]) -> bool:
        if not windows:
            return not window.manual
        return window.name in windows

    @staticmethod
    def _window_precreated(index: int, window: WindowConfig, windows: Sequence[str], session_created: bool) -> bool:
        """True when new_session already made this window.

        A fresh session is seeded with one window: configured index 0 when no
        windows are targeted, otherwise the first targeted name. An existing
        session never has a window made for us.
        """
        if not session_created:
            return False
        if not windows:
            return index == 0
        return window.name == windows[0]

    def start(
        self,
        config: SessionConfig,
        windows: Sequence[str] = (),
        attach: bool = False,
        inside: bool = False,
    ) -> None:
        windows = list(windows)
        session_root = expand_path(config.root)

        session_created = not self.tmux.session_exists(config.session)
        if session_created:
            self._exec_shell_commands(config.before_start, session_root)

            default_window = ""
            if windows:
                default_window = windows[0]
            elif config.windows:
                default_window = config.windows[0].name

            ses = self.tmux.new_session(config.session, session_root, default_window)
            log_session_operation("create", config.session, "success", f"root: {session_root or '.'}")
        else:
            ses = session_handle(config.session)
            if not windows:
                logger.debug(f"Session {config.session} already running, nothing to create")
                self.switch_or_attach(ses, attach, inside)
                return

        skipped = []
        for index, window in enumerate(config.windows):
            if not self._is_selected(window, windows):
                skipped.append(window.name)
                continue

            window_root = resolve_path(window.root, session_root)
            target = ses + window.name

            created = not self._window_precreated(index, window, windows, session_created)
            if created:
                self.tmux.new_window(ses, window.name, window_root)

            for command in window.commands:
                self.tmux.send_keys(target, command)

            for pane in window.panes:
                pane_root = resolve_path(pane.root, window_root)
                self.tmux.split_window(target, pane.type, pane_root, pane.commands)

            layout = window.effective_layout
            self.tmux.select_layout(target, layout)
            log_window_setup(ses, window.name, created, len(window.panes), layout)

        log_skipped_windows(ses, skipped)

        if not windows:
            self.switch_or_attach(ses, attach, inside)

    def stop(self, config: SessionConfig, windows: Sequence[str] = ()) -> None:
        if not windows:
            session_root = expand_path(config.root)
            self._exec_shell_commands(config.stop, session_root)
            self.tmux.stop_session(config.session)
            log_session_operation("stop", config.session, "success")
            return

        for window in windows:
            self.tmux.kill_window(session_handle(config.session) + window)
            log_session_operation("kill-window", config.session, "success", window)
