"""Colours, styles and the shared status theme of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar

BOLD = "bold"
ITALIC = "italic"
MODIFIERS = frozenset({BOLD, ITALIC})


class SessionStatus(Enum):
    """What a monitored session is doing."""

    WORKING = "working"
    ATTENTION_NEEDED = "attention_needed"
    IDLE = "idle"

    def icon(self) -> str:
        """Return the one-character icon for this status."""
        return _ICONS[self]

    def should_blink(self) -> bool:
        """Return whether the icon blinks to draw attention."""
        return self is SessionStatus.ATTENTION_NEEDED


_ICONS = {
    SessionStatus.WORKING: ">",
    SessionStatus.ATTENTION_NEEDED: "!",
    SessionStatus.IDLE: "-",
}


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named palette entry or a 24-bit RGB value."""

    name: str
    rgb_value: tuple[int, int, int] | None = None

    RED: ClassVar[Color]
    YELLOW: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_MAGENTA: ClassVar[Color]

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        """Return an RGB colour; each component must be in 0..255."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB components must be in 0..255: {(r, g, b)}")
        return Color("rgb", (r, g, b))


Color.RED = Color("red")
Color.YELLOW = Color("yellow")
Color.GREEN = Color("green")
Color.BLUE = Color("blue")
Color.CYAN = Color("cyan")
Color.WHITE = Color("white")
Color.DARK_GRAY = Color("dark_gray")
Color.LIGHT_MAGENTA = Color("light_magenta")


@dataclass(frozen=True)
class Style:
    """Foreground, background and text modifiers of a piece of text."""

    fg: Color | None = None
    bg: Color | None = None
    modifiers: frozenset[str] = frozenset()

    def with_fg(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        return replace(self, bg=color)

    def with_modifier(self, modifier: str) -> Style:
        if modifier not in MODIFIERS:
            raise ValueError(f"unknown modifier: {modifier!r}")
        return replace(self, modifiers=self.modifiers | {modifier})


@dataclass(frozen=True)
class Span:
    """A run of text drawn in one style."""

    text: str
    style: Style = field(default_factory=Style)


def context_color(percentage: float, is_critical: bool) -> Color:
    """Traffic-light colour for context usage: red at 90% or when critical."""
    if is_critical or percentage >= 90.0:
        return Color.RED
    if percentage >= 50.0:
        return Color.YELLOW
    return Color.GREEN


def status_color(status: SessionStatus) -> Color:
    """Return the colour of a session status."""
    return {
        SessionStatus.WORKING: Color.BLUE,
        SessionStatus.ATTENTION_NEEDED: Color.YELLOW,
        SessionStatus.IDLE: Color.LIGHT_MAGENTA,
    }[status]


def status_icon(status: SessionStatus, blink_visible: bool) -> str:
    """Return the status icon, or a blank while a blinking icon is off."""
    if status.should_blink() and not blink_visible:
        return " "
    return status.icon()


def status_background(status: SessionStatus) -> Color | None:
    """Return the row tint for a status; only attention gets one."""
    if status is SessionStatus.ATTENTION_NEEDED:
        return Color.rgb(50, 40, 0)
    return None