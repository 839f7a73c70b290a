"""Project file discovery, variable substitution and parsing."""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from tmuxsmith.lib.errors import ConfigError
from tmuxsmith.models.session_config import PANE_TYPES, PaneConfig, SessionConfig, WindowConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "TMUXSMITH_CONFIG_DIR"
CONFIG_EXTENSIONS = (".yml", ".yaml")

_VARIABLE = re.compile(r"\$(?:\{([A-Za-z_][A-Za-z0-9_]*)\}|([A-Za-z_][A-Za-z0-9_]*))")


def config_dir() -> Path:
    """Directory holding project files."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "tmuxsmith"


def find_config(project: str, directory: Optional[Path] = None) -> Path:
    directory = directory or config_dir()
    for extension in CONFIG_EXTENSIONS:
        candidate = directory / f"{project}{extension}"
        if candidate.is_file():
            return candidate
    raise ConfigError(f"No project file for '{project}' in {directory}")


def list_configs(directory: Optional[Path] = None) -> List[str]:
    """Project names available in ``directory``, sorted."""
    directory = directory or config_dir()
    if not directory.is_dir():
        return []
    return sorted(
        path.stem for path in directory.iterdir()
        if path.is_file() and path.suffix in CONFIG_EXTENSIONS
    )


def parse_settings(pairs: List[str]) -> Dict[str, str]:
    """Turn ``key=value`` arguments into a settings mapping."""
    settings = {}
    for pair in pairs:
        if "=" not in pair:
            raise ConfigError(f"Invalid setting '{pair}', expected key=value")
        key, value = pair.split("=", 1)
        settings[key] = value
    return settings


def substitute_variables(text: str, settings: Mapping[str, str]) -> str:
    """Replace ``$name`` and ``${name}`` with settings, then the environment.

    Unknown variables become the empty string.
    """
    def replace(match):
        name = match.group(1) or match.group(2)
        if name in settings:
            return settings[name]
        return os.environ.get(name, "")

    return _VARIABLE.sub(replace, text)


def _string_list(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ConfigError(f"{where} must be a list of commands")
    return [str(item) for item in value]


def _parse_pane(data: Any, where: str) -> PaneConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"{where} must be a mapping")

    pane_type = str(data.get("type") or "")
    if pane_type and pane_type not in PANE_TYPES:
        raise ConfigError(f"{where} has unknown type '{pane_type}', expected one of {list(PANE_TYPES)}")

    return PaneConfig(
        type=pane_type,
        root=str(data.get("root") or ""),
        commands=_string_list(data.get("commands"), f"{where}.commands"),
    )


def _parse_window(data: Any, index: int) -> WindowConfig:
    where = f"windows[{index}]"
    if not isinstance(data, dict):
        raise ConfigError(f"{where} must be a mapping")

    name = data.get("name")
    if not name:
        raise ConfigError(f"{where} has no name")

    panes = data.get("panes") or []
    if not isinstance(panes, list):
        raise ConfigError(f"{where}.panes must be a list")

    return WindowConfig(
        name=str(name),
        root=str(data.get("root") or ""),
        manual=bool(data.get("manual", False)),
        layout=data.get("layout") or None,
        commands=_string_list(data.get("commands"), f"{where}.commands"),
        panes=[_parse_pane(pane, f"{where}.panes[{i}]") for i, pane in enumerate(panes)],
    )


def parse_config(text: str, settings: Optional[Mapping[str, str]] = None) -> SessionConfig:
    """Build a SessionConfig from YAML text after variable substitution."""
    try:
        data = yaml.safe_load(substitute_variables(text, settings or {}))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Project file must contain a mapping")

    session = data.get("session")
    if not session:
        raise ConfigError("Project file has no session name")

    windows = data.get("windows") or []
    if not isinstance(windows, list):
        raise ConfigError("windows must be a list")

    parsed_windows = [_parse_window(window, i) for i, window in enumerate(windows)]
    seen = set()
    for window in parsed_windows:
        if window.name in seen:
            raise ConfigError(f"Duplicate window name '{window.name}'")
        seen.add(window.name)

    return SessionConfig(
        session=str(session),
        root=str(data.get("root") or ""),
        before_start=_string_list(data.get("before_start"), "before_start"),
        stop=_string_list(data.get("stop"), "stop"),
        windows=parsed_windows,
    )


def load_config(path: Path, settings: Optional[Mapping[str, str]] = None) -> SessionConfig:
    logger.debug(f"Loading project file {path}")
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read project file {path}: {e}") from e

    return parse_config(text, settings)
