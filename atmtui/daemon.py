"""Checking for the monitoring daemon and starting it when needed."""

from __future__ import annotations

import logging
import os
import re
import subprocess
import sys
import time
from pathlib import Path

log = logging.getLogger(__name__)

_STARTUP_ATTEMPTS = 30
_STARTUP_POLL_SECONDS = 0.1
_PID_PATTERN = re.compile(r"\+?[0-9]+")
_PID_MAX = 0xFFFFFFFF


class DaemonStartError(RuntimeError):
    """The daemon was not running and could not be started."""


def _state_dir() -> Path | None:
    if sys.platform == "darwin" or os.name != "posix":
        return None
    xdg = os.environ.get("XDG_STATE_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    try:
        return Path.home() / ".local" / "state"
    except RuntimeError:
        return None


def pid_file_path() -> Path:
    """Return the path of the daemon's PID file."""
    return (_state_dir() or Path("/tmp")) / "atm" / "atmd.pid"


def read_pid() -> int | None:
    """Return the PID recorded in the PID file, or ``None`` if there is none."""
    try:
        text = pid_file_path().read_text().strip()
    except (OSError, UnicodeDecodeError):
        return None
    if not _PID_PATTERN.fullmatch(text):
        return None
    pid = int(text)
    return pid if pid <= _PID_MAX else None


def is_process_running(pid: int) -> bool:
    """Return whether a process with ``pid`` exists."""
    return Path(f"/proc/{pid}").exists()


def is_daemon_running() -> bool:
    """Return whether the daemon named in the PID file is alive."""
    pid = read_pid()
    return pid is not None and is_process_running(pid)


def _atmd_path() -> str:
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0:
        candidate = Path(argv0).resolve().parent / "atmd"
        if candidate.exists():
            return str(candidate)
    return "atmd"


def spawn_daemon() -> None:
    """Start ``atmd start -d`` detached from this process.

    Raises ``OSError`` if the program cannot be started.
    """
    path = _atmd_path()
    log.debug("Starting daemon from %s", path)
    subprocess.Popen(
        [path, "start", "-d"],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def ensure_daemon_running() -> None:
    """Make sure the daemon runs, starting it and waiting up to three seconds."""
    if is_daemon_running():
        log.debug("Daemon already running")
        return

    log.info("Daemon not running, starting it...")
    try:
        spawn_daemon()
    except OSError as exc:
        raise DaemonStartError(f"Failed to start daemon: {exc}") from exc

    for attempt in range(1, _STARTUP_ATTEMPTS + 1):
        time.sleep(_STARTUP_POLL_SECONDS)
        if is_daemon_running():
            log.info("Daemon started successfully after %d attempts", attempt)
            return

    raise DaemonStartError("Daemon failed to start within 3 seconds")