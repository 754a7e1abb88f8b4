"""Layout, theme, input handling, tmux and daemon helpers for a terminal monitor of agent sessions."""

__version__ = "0.1.5"