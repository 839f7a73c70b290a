"""Working directory resolution for sessions, windows and panes."""

import os
import pwd


def _home_dir() -> str:
    home = os.environ.get("HOME")
    if home:
        return home
    # Falls back to the password database, raises KeyError when the uid is unknown
    return pwd.getpwuid(os.getuid()).pw_dir


def expand_path(path: str) -> str:
    """Replace a leading ``~`` with the user's home directory.

    The path is returned untouched when the home directory cannot be
    determined.
    """
    if path == "~" or path.startswith("~/"):
        try:
            home = _home_dir()
        except (KeyError, OSError):
            return path
        return home + path[1:]

    return path


def resolve_path(path: str, base: str) -> str:
    """Expand ``path`` and anchor it to ``base`` unless it is absolute.

    An empty path resolves to ``base`` itself.
    """
    expanded = expand_path(path or "")
    if expanded and os.path.isabs(expanded):
        return expanded
    if not expanded:
        return base
    return os.path.join(base, expanded)
