"""Start, populate and tear down tmux sessions from declarative project files."""

__version__ = "0.1.0"
