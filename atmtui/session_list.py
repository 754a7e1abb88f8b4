"""Rows of the session list and its empty-state message."""

from __future__ import annotations

from typing import Any

from atmtui.status_bar import ConnectionState
from atmtui.theme import (
    BOLD,
    ITALIC,
    Color,
    Span,
    Style,
    context_color,
    status_background,
    status_color,
    status_icon,
)

Line = list[Span]

_MODEL_WIDTH = 8
_CRITICAL_TINT = Color.rgb(40, 0, 0)
_SELECTED_TINT = Color.rgb(30, 30, 40)


def truncate_string(s: str, max_len: int) -> str:
    """Cut ``s`` to at most ``max_len`` characters, ending in ``...`` if cut.

    When ``max_len`` is 3 or less there is no room for the ellipsis and the
    text is simply cut.
    """
    if max_len < 0:
        raise ValueError(f"max_len must not be negative: {max_len}")
    if len(s) <= max_len:
        return s
    if max_len <= 3:
        return s[:max_len]
    return f"{s[:max_len - 3]}..."


def row_background_style(session: Any, is_selected: bool) -> Style:
    """Return the row style: status tint, then critical tint, then selection."""
    bg = status_background(session.status)
    if bg is None:
        if session.context_critical:
            bg = _CRITICAL_TINT
        elif is_selected:
            bg = _SELECTED_TINT
    return Style() if bg is None else Style().with_bg(bg)


def session_item(
    session: Any, is_selected: bool, blink_visible: bool
) -> tuple[Line, Style]:
    """Return the condensed spans of one list row and the row's style.

    The row reads ``> [icon] [percentage] [id] [model]``.
    """
    pct = session.context_percentage
    ctx_color = context_color(pct, session.context_critical)
    icon = status_icon(session.status, blink_visible)

    spans: Line = [
        Span(">" if is_selected else " ", Style().with_fg(Color.CYAN).with_modifier(BOLD)),
        Span(
            f"{icon} ",
            Style().with_fg(status_color(session.status)).with_modifier(BOLD),
        ),
        Span(f"{pct:>4.0f}%", Style().with_fg(ctx_color).with_modifier(BOLD)),
        Span(" "),
        Span(session.id_short, Style().with_fg(Color.DARK_GRAY)),
        Span(" "),
        Span(truncate_string(session.model, _MODEL_WIDTH), Style().with_fg(Color.WHITE)),
    ]
    return spans, row_background_style(session, is_selected)


def empty_state(
    state: ConnectionState, retry_count: int = 0
) -> tuple[str, list[Line], Style]:
    """Return title, lines and border style shown when there are no sessions."""
    yellow = Style().with_fg(Color.YELLOW)
    white = Style().with_fg(Color.WHITE)
    cyan = Style().with_fg(Color.CYAN)
    hint = Style().with_fg(Color.DARK_GRAY).with_modifier(ITALIC)

    if state is ConnectionState.CONNECTED:
        return (
            " No Sessions ",
            [
                [],
                [Span("No active Claude Code sessions detected", yellow)],
                [],
                [Span("To get started:")],
                [],
                [Span("  1. Open a terminal", white)],
                [Span("  2. Run: claude", cyan)],
                [Span("  3. Session will appear here automatically", white)],
                [],
                [
                    Span(
                        "Tip: Make sure Claude Code is configured with atm integration",
                        hint,
                    )
                ],
            ],
            yellow,
        )
    if state is ConnectionState.CONNECTING:
        return (
            " Connecting ",
            [
                [],
                [Span("Connecting to ATM daemon...", yellow)],
                [],
                [Span("This usually takes 1-2 seconds.")],
                [],
                [Span("If this persists, check: atmd status", hint)],
            ],
            yellow,
        )
    return (
        " Disconnected ",
        [
            [],
            [
                Span(
                    "Lost connection to daemon",
                    Style().with_fg(Color.RED).with_modifier(BOLD),
                )
            ],
            [],
            [Span(f"Retry attempt: {retry_count}")],
            [],
            [Span("Troubleshooting:")],
            [],
            [Span("  1. Check daemon: atmd status", white)],
            [Span("  2. View logs: tail ~/.local/state/atm/atm.log", white)],
            [Span("  3. Restart daemon: atmd restart", cyan)],
            [],
            [Span("Press 'q' to quit", Style().with_fg(Color.DARK_GRAY))],
        ],
        Style().with_fg(Color.RED),
    )