"""Errors raised by the terminal interface."""

from __future__ import annotations

import json


class TuiError(Exception):
    """Base class for every error of the terminal interface."""

    @staticmethod
    def from_exception(exc: BaseException) -> TuiError:
        """Wrap an I/O or JSON decoding error as a ``TuiError``.

        A ``TuiError`` is returned unchanged. Any other exception type
        cannot be converted and raises ``TypeError``.
        """
        if isinstance(exc, TuiError):
            return exc
        if isinstance(exc, json.JSONDecodeError):
            err: TuiError = MessageParseError(exc)
        elif isinstance(exc, OSError):
            err = TuiIOError(exc)
        else:
            raise TypeError(f"cannot convert {type(exc).__name__} to TuiError")
        err.__cause__ = exc
        return err


class _DetailError(TuiError):
    """An error whose message is a fixed label followed by a detail."""

    _label = ""

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"{self._label}: {self.detail}")


class TerminalInitError(_DetailError):
    """The terminal could not be put into the mode the interface needs."""

    _label = "Failed to initialize terminal"


class TerminalCleanupError(_DetailError):
    """The terminal could not be restored on exit."""

    _label = "Failed to restore terminal"


class DaemonConnectionError(_DetailError):
    """The daemon could not be reached."""

    _label = "Failed to connect to daemon"


class ProtocolError(_DetailError):
    """A message to or from the daemon could not be parsed or formatted."""

    _label = "Protocol error"


class TuiIOError(_DetailError):
    """A low-level I/O error on a socket or the terminal."""

    _label = "IO error"


class MessageParseError(_DetailError):
    """JSON received from the daemon could not be parsed."""

    _label = "Failed to parse message"


class VersionMismatchError(TuiError):
    """The interface and the daemon speak different protocol versions."""

    def __init__(self, client_version: str, daemon_version: str) -> None:
        self.client_version = client_version
        self.daemon_version = daemon_version
        super().__init__(
            f"Protocol version mismatch (client: {client_version}, "
            f"daemon: {daemon_version})"
        )