"""Keyboard input, interface events and the actions they lead to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Protocol, Sequence, Union


class KeyCode(Enum):
    """Keys that do not produce a character; characters are plain ``str``."""

    ENTER = "enter"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    INSERT = "insert"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a ``KeyCode`` or a single character, with modifiers."""

    code: KeyCode | str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.code, str) and len(self.code) != 1:
            raise ValueError(f"character key must be one character: {self.code!r}")


class ActionKind(Enum):
    """What the main loop should do after a key press."""

    NONE = "none"
    QUIT = "quit"
    REFRESH = "refresh"
    JUMP_TO_SESSION = "jump_to_session"


@dataclass(frozen=True)
class Action:
    """An action for the main loop; jumps carry the target session's id."""

    kind: ActionKind
    session_id: str | None = None

    NONE: ClassVar[Action]
    QUIT: ClassVar[Action]
    REFRESH: ClassVar[Action]

    def __post_init__(self) -> None:
        if self.kind is ActionKind.JUMP_TO_SESSION:
            if self.session_id is None:
                raise ValueError("a jump needs a session id")
        elif self.session_id is not None:
            raise ValueError(f"{self.kind.name} takes no session id")


Action.NONE = Action(ActionKind.NONE)
Action.QUIT = Action(ActionKind.QUIT)
Action.REFRESH = Action(ActionKind.REFRESH)


class ClientCommand(Enum):
    """Commands the main loop sends to the daemon client."""

    DISCOVER = "discover"


@dataclass(frozen=True)
class KeyPressed:
    """Keyboard input from the user."""

    key: KeyEvent


@dataclass(frozen=True)
class Resize:
    """The terminal window changed size."""

    width: int
    height: int


@dataclass(frozen=True)
class SessionUpdate:
    """Sessions from the daemon to merge into the current ones."""

    sessions: Sequence[Any] = field(default_factory=tuple)


@dataclass(frozen=True)
class SessionListReplace:
    """The full session list from the daemon, replacing all sessions."""

    sessions: Sequence[Any] = field(default_factory=tuple)


@dataclass(frozen=True)
class DaemonDisconnected:
    """The connection to the daemon was lost."""


@dataclass(frozen=True)
class SessionRemoved:
    """The daemon removed a session."""

    session_id: str


@dataclass(frozen=True)
class DiscoveryComplete:
    """A discovery run finished."""

    discovered: int
    failed: int


Event = Union[
    KeyPressed,
    Resize,
    SessionUpdate,
    SessionListReplace,
    DaemonDisconnected,
    SessionRemoved,
    DiscoveryComplete,
]


class _App(Protocol):
    def quit(self) -> None: ...

    def select_next(self) -> None: ...

    def select_previous(self) -> None: ...

    def selected_session(self) -> Any | None: ...


_QUIT_KEYS = frozenset({"q", "Q", KeyCode.ESC})
_NEXT_KEYS = frozenset({"j", KeyCode.DOWN})
_PREVIOUS_KEYS = frozenset({"k", KeyCode.UP})
_REFRESH_KEYS = frozenset({"r", "R"})


def handle_key_event(key: KeyEvent, app: _App) -> Action:
    """Apply ``key`` to ``app`` and return what the main loop should do.

    ``q``, ``Q``, Esc and Ctrl+C quit; ``j``/Down and ``k``/Up move the
    selection; Enter jumps to the selected session; ``r``/``R`` refresh.
    """
    if key.ctrl and key.code == "c":
        app.quit()
        return Action.QUIT

    code = key.code
    if code in _QUIT_KEYS:
        app.quit()
        return Action.QUIT
    if code in _NEXT_KEYS:
        app.select_next()
        return Action.NONE
    if code in _PREVIOUS_KEYS:
        app.select_previous()
        return Action.NONE
    if code is KeyCode.ENTER:
        session = app.selected_session()
        if session is None:
            return Action.NONE
        return Action(ActionKind.JUMP_TO_SESSION, str(session.id))
    if code in _REFRESH_KEYS:
        return Action.REFRESH
    return Action.NONE