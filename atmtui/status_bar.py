"""Header and footer bars: connection status, summary and key hints."""

from __future__ import annotations

import math
from enum import Enum

from atmtui.theme import BOLD, Color, Span, Style

_SEPARATOR = "  |  "


class ConnectionState(Enum):
    """State of the connection to the daemon."""

    CONNECTED = "connected"
    CONNECTING = "connecting"
    DISCONNECTED = "disconnected"


def get_status_display(state: ConnectionState, retry_count: int = 0) -> tuple[str, Style]:
    """Return the status text and style shown in the header."""
    if state is ConnectionState.CONNECTED:
        return "Connected", Style().with_fg(Color.GREEN).with_modifier(BOLD)
    if state is ConnectionState.CONNECTING:
        return "Connecting...", Style().with_fg(Color.YELLOW).with_modifier(BOLD)
    text = "Disconnected (retrying...)" if retry_count > 3 else "Disconnected"
    return text, Style().with_fg(Color.RED).with_modifier(BOLD)


def header_border_style(state: ConnectionState) -> Style:
    """Return the header border style for the connection state."""
    return Style().with_fg(
        {
            ConnectionState.CONNECTED: Color.GREEN,
            ConnectionState.CONNECTING: Color.YELLOW,
            ConnectionState.DISCONNECTED: Color.RED,
        }[state]
    )


def _whole_percent(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return 0xFFFFFFFF
    return min(int(value), 0xFFFFFFFF)


def format_stats(
    session_count: int,
    total_cost: float,
    average_context: float,
    working: int,
    attention: int,
) -> str:
    """Return the summary appended to the header, or ``""`` with no sessions."""
    if session_count <= 0:
        return ""
    cost = f"${total_cost:.2f}" if total_cost >= 1.0 else f"${total_cost:.3f}"
    plural = "" if session_count == 1 else "s"
    stats = (
        f" | {session_count} session{plural} | {cost} "
        f"| avg {_whole_percent(average_context)}%"
    )
    if working > 0:
        stats += f" | {working} working"
    if attention > 0:
        stats += f" | {attention} need input"
    return stats


def footer_hints(in_tmux: bool, pick_mode: bool) -> list[Span]:
    """Return the key hints shown in the footer."""
    key = Style().with_fg(Color.CYAN).with_modifier(BOLD)
    sep = Style().with_fg(Color.DARK_GRAY)

    hints = [
        Span(" ^/k", key),
        Span(" up"),
        Span("  ", sep),
        Span("v/j", key),
        Span(" down"),
    ]
    if in_tmux:
        hints += [Span(_SEPARATOR, sep), Span("Enter", key), Span(" jump")]
    hints += [
        Span(_SEPARATOR, sep),
        Span("r", key),
        Span(" rescan"),
        Span(_SEPARATOR, sep),
        Span("q", key),
        Span(" quit"),
    ]
    if pick_mode:
        hints += [Span(_SEPARATOR, sep), Span("[pick mode]", Style().with_fg(Color.YELLOW))]
    return hints