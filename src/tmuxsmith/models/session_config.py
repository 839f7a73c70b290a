from dataclasses import dataclass, field
from typing import List, Optional

HORIZONTAL = "horizontal"
VERTICAL = "vertical"
PANE_TYPES = (HORIZONTAL, VERTICAL)

EVEN_HORIZONTAL = "even-horizontal"
EVEN_VERTICAL = "even-vertical"
MAIN_HORIZONTAL = "main-horizontal"
MAIN_VERTICAL = "main-vertical"
TILED = "tiled"
DEFAULT_LAYOUT = EVEN_HORIZONTAL


@dataclass(frozen=True)
class PaneConfig:
    """A pane split off its window after the window is created"""

    type: str = ""
    root: str = ""
    commands: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WindowConfig:
    """A named window; manual windows start only when targeted by name"""

    name: str
    root: str = ""
    manual: bool = False
    layout: Optional[str] = None
    commands: List[str] = field(default_factory=list)
    panes: List[PaneConfig] = field(default_factory=list)

    @property
    def effective_layout(self) -> str:
        return self.layout or DEFAULT_LAYOUT


@dataclass(frozen=True)
class SessionConfig:
    """A project: one tmux session and the windows that make it up"""

    session: str
    root: str = ""
    before_start: List[str] = field(default_factory=list)
    stop: List[str] = field(default_factory=list)
    windows: List[WindowConfig] = field(default_factory=list)

    def window_names(self) -> List[str]:
        return [window.name for window in self.windows]
