"""Contents of the panel that shows the selected session in detail."""

from __future__ import annotations

import math
from typing import Any

from atmtui.theme import (
    BOLD,
    ITALIC,
    Color,
    SessionStatus,
    Span,
    Style,
    context_color,
    status_color,
)

Line = list[Span]

TITLE = " Details "
_BAR_WIDTH = 20


def build_progress_bar(percentage: float, width: int) -> str:
    """Return an ASCII bar such as ``[=====     ] 50%``.

    NaN, infinite and negative percentages count as 0; the bar is capped at
    ``width`` but the number shown is not.
    """
    if math.isnan(percentage) or math.isinf(percentage) or percentage < 0.0:
        percentage = 0.0
    filled = min(math.floor(percentage / 100.0 * width + 0.5), width)
    empty = max(width - filled, 0)
    return f"[{'=' * filled}{' ' * empty}] {percentage:.0f}%"


def detail_border_color(session: Any | None) -> Color:
    """Return the panel's border colour for ``session`` (or no selection)."""
    if session is None:
        return Color.DARK_GRAY
    if session.context_critical:
        return Color.RED
    if session.context_warning or session.needs_attention:
        return Color.YELLOW
    return Color.CYAN


def build_detail_lines(session: Any) -> list[Line]:
    """Return the styled lines describing ``session``; ``[]`` is a blank line."""
    label = Style().with_fg(Color.DARK_GRAY).with_modifier(BOLD)
    value = Style().with_fg(Color.WHITE)
    dim = Style().with_fg(Color.DARK_GRAY)

    if session.activity_detail is not None:
        status_text = f"{session.status_label} ({session.activity_detail})"
    else:
        status_text = session.status_label

    status_style = Style().with_fg(status_color(session.status))
    if session.status in (SessionStatus.WORKING, SessionStatus.ATTENTION_NEEDED):
        status_style = status_style.with_modifier(BOLD)

    ctx_color = context_color(session.context_percentage, session.context_critical)

    lines: list[Line] = [
        [],
        [Span("  Status: ", label), Span(status_text, status_style)],
        [],
        [
            Span("  ID: ", label),
            Span(session.id_short, value),
            Span("  Agent: ", label),
            Span(session.agent_type, value),
            Span("  Model: ", label),
            Span(session.model, value),
        ],
        [],
        [
            Span("  Context ", label),
            Span(
                build_progress_bar(session.context_percentage, _BAR_WIDTH),
                Style().with_fg(ctx_color),
            ),
            Span(f" ({session.context_display})", dim),
        ],
        [],
        [
            Span("  Duration: ", label),
            Span(session.duration_display, value),
            Span("    Activity: ", label),
            Span(session.last_activity_display, value),
        ],
        [Span("  Lines:    ", label), Span(session.lines_display, value)],
        [],
    ]

    if session.working_directory is not None:
        lines.append([Span("  Dir: ", label), Span(session.working_directory, dim)])
        lines.append([])

    if session.is_stale:
        lines.append(
            [
                Span(
                    "  ! Session appears stale",
                    Style().with_fg(Color.YELLOW).with_modifier(ITALIC),
                )
            ]
        )
    if session.needs_attention:
        lines.append(
            [
                Span(
                    "  ! Waiting for input",
                    Style().with_fg(Color.YELLOW).with_modifier(BOLD),
                )
            ]
        )
    return lines