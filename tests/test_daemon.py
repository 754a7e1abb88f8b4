import os
import subprocess
from unittest.mock import patch

import pytest

from atmtui.daemon import (
    DaemonStartError,
    ensure_daemon_running,
    is_daemon_running,
    is_process_running,
    pid_file_path,
    read_pid,
    spawn_daemon,
)


@pytest.fixture
def pid_file(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))
    return tmp_path / "atm" / "atmd.pid"


def _write_pid(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def test_pid_file_path():
    path = pid_file_path()
    assert path.name == "atmd.pid"
    assert path.parent.name == "atm"


def test_pid_file_path_uses_state_home(pid_file):
    assert pid_file_path() == pid_file


def test_pid_file_path_ignores_relative_state_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_STATE_HOME", "relative/dir")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert pid_file_path() == tmp_path / ".local" / "state" / "atm" / "atmd.pid"


def test_is_process_running_current():
    assert is_process_running(os.getpid()) is True


def test_is_process_running_nonexistent():
    assert is_process_running(999_999_999) is False


def test_read_pid_missing_file(pid_file):
    assert read_pid() is None


def test_read_pid_with_whitespace(pid_file):
    _write_pid(pid_file, "  1234\n")
    assert read_pid() == 1234


@pytest.mark.parametrize("text", ["abc", "-5", "", "12 34", "99999999999"])
def test_read_pid_rejects_invalid(pid_file, text):
    _write_pid(pid_file, text)
    assert read_pid() is None


def test_is_daemon_running_with_live_pid(pid_file):
    _write_pid(pid_file, str(os.getpid()))
    assert is_daemon_running() is True


def test_is_daemon_running_without_pid_file(pid_file):
    assert is_daemon_running() is False


@patch("atmtui.daemon.subprocess.Popen")
def test_spawn_daemon_arguments(popen):
    result = spawn_daemon()
    assert result is None
    assert popen.call_count == 1
    args = popen.call_args.args[0]
    assert args[0].endswith("atmd")
    assert args[1:] == ["start", "-d"]
    kwargs = popen.call_args.kwargs
    assert kwargs["stdin"] == subprocess.DEVNULL
    assert kwargs["stdout"] == subprocess.DEVNULL
    assert kwargs["stderr"] == subprocess.DEVNULL


@patch("atmtui.daemon.subprocess.Popen")
def test_ensure_when_already_running(popen, pid_file):
    _write_pid(pid_file, str(os.getpid()))
    assert ensure_daemon_running() is None
    assert popen.call_count == 0


@patch("atmtui.daemon.subprocess.Popen")
def test_ensure_spawn_failure(popen, pid_file):
    popen.side_effect = FileNotFoundError("no atmd")
    with pytest.raises(DaemonStartError, match="Failed to start daemon: no atmd"):
        ensure_daemon_running()


@patch("atmtui.daemon.time.sleep")
@patch("atmtui.daemon.subprocess.Popen")
def test_ensure_times_out(popen, sleep, pid_file):
    with pytest.raises(DaemonStartError) as info:
        ensure_daemon_running()
    assert str(info.value) == "Daemon failed to start within 3 seconds"
    assert sleep.call_count == 30
    assert popen.call_count == 1


@patch("atmtui.daemon.time.sleep")
@patch("atmtui.daemon.subprocess.Popen")
def test_ensure_waits_for_start(popen, sleep, pid_file):
    popen.side_effect = lambda *a, **k: _write_pid(pid_file, str(os.getpid()))
    assert ensure_daemon_running() is None
    assert sleep.call_count == 1