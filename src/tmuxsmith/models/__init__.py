from tmuxsmith.models.session_config import (
    DEFAULT_LAYOUT,
    PANE_TYPES,
    PaneConfig,
    SessionConfig,
    WindowConfig,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "PANE_TYPES",
    "PaneConfig",
    "SessionConfig",
    "WindowConfig",
]
