"""Tmux integration: detecting tmux and jumping to a pane."""

from __future__ import annotations

import contextlib
import os
import subprocess


class TmuxError(Exception):
    """Base class for tmux failures."""


class NotInTmuxError(TmuxError):
    """The process is not running inside tmux."""

    def __init__(self) -> None:
        super().__init__("not running inside tmux")


class CommandFailedError(TmuxError):
    """A tmux command could not be run or reported failure."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"tmux command failed: {detail}")


class InvalidPaneIdError(TmuxError):
    """The pane identifier given is not usable."""

    def __init__(self, pane_id: str) -> None:
        self.pane_id = pane_id
        super().__init__(f"invalid pane ID: {pane_id}")


def is_in_tmux() -> bool:
    """Return whether the ``TMUX`` environment variable is set."""
    return "TMUX" in os.environ


def _tmux(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(["tmux", *args], capture_output=True, check=False)


def _text(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def jump_to_pane(pane_id: str) -> None:
    """Switch the tmux client to the session, window and pane of ``pane_id``."""
    if not is_in_tmux():
        raise NotInTmuxError()
    if not pane_id:
        raise InvalidPaneIdError(pane_id)

    try:
        listing = _tmux(
            "list-panes", "-a", "-F", "#{pane_id} #{session_name} #{window_id}"
        )
    except OSError as exc:
        raise CommandFailedError(str(exc)) from exc
    if listing.returncode != 0:
        raise CommandFailedError(
            f"list-panes failed: {_text(listing.stderr).strip()}"
        )

    pane_info = next(
        (line for line in _text(listing.stdout).splitlines() if line.startswith(pane_id)),
        None,
    )
    if pane_info is None:
        raise CommandFailedError(f"pane {pane_id} not found in any session")

    parts = pane_info.split()
    if len(parts) < 3:
        raise CommandFailedError(f"unexpected pane info format: {pane_info}")
    session_name, window_id = parts[1], parts[2]

    # Switching session and window are best effort; only the pane selection counts.
    for args in (("switch-client", "-t", session_name), ("select-window", "-t", window_id)):
        with contextlib.suppress(OSError):
            _tmux(*args)

    try:
        result = _tmux("select-pane", "-t", pane_id)
    except OSError as exc:
        raise CommandFailedError(str(exc)) from exc
    if result.returncode != 0:
        raise CommandFailedError(f"select-pane failed: {_text(result.stderr).strip()}")