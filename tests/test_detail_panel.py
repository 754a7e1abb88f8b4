import math
from dataclasses import dataclass, replace

import pytest

from atmtui.detail_panel import (
    build_detail_lines,
    build_progress_bar,
    detail_border_color,
)
from atmtui.theme import BOLD, Color, SessionStatus


@dataclass
class _Session:
    id_short: str = "session-"
    agent_type: str = "general"
    model: str = "Opus 4.5"
    status: SessionStatus = SessionStatus.WORKING
    status_label: str = "working"
    activity_detail: str | None = None
    context_percentage: float = 45.0
    context_display: str = "45%"
    context_warning: bool = False
    context_critical: bool = False
    duration_display: str = "5m"
    lines_display: str = "+100 -20"
    working_directory: str | None = "/home/user/project"
    is_stale: bool = False
    needs_attention: bool = False
    last_activity_display: str = "10s ago"


def _text(line):
    return "".join(span.text for span in line)


def test_progress_bar_empty():
    assert build_progress_bar(0.0, 10) == "[          ] 0%"


def test_progress_bar_half():
    assert build_progress_bar(50.0, 10) == "[=====     ] 50%"


def test_progress_bar_full():
    assert build_progress_bar(100.0, 10) == "[==========] 100%"


def test_progress_bar_over_100():
    assert build_progress_bar(120.0, 10) == "[==========] 120%"


@pytest.mark.parametrize("value", [math.nan, math.inf, -50.0])
def test_progress_bar_invalid_treated_as_zero(value):
    assert build_progress_bar(value, 10) == "[          ] 0%"


def test_progress_bar_length_is_width_plus_brackets():
    bar = build_progress_bar(37.0, 20)
    assert bar.index("]") == 21


def test_border_colors():
    s = _Session()
    assert detail_border_color(None) == Color.DARK_GRAY
    assert detail_border_color(s) == Color.CYAN
    assert detail_border_color(replace(s, context_warning=True)) == Color.YELLOW
    assert detail_border_color(replace(s, needs_attention=True)) == Color.YELLOW
    assert (
        detail_border_color(replace(s, context_critical=True, needs_attention=True))
        == Color.RED
    )


def test_detail_lines_content():
    texts = [_text(line) for line in build_detail_lines(_Session())]
    assert texts[1] == "  Status: working"
    assert texts[3] == "  ID: session-  Agent: general  Model: Opus 4.5"
    assert texts[5] == "  Context [=========           ] 45% (45%)"
    assert texts[7] == "  Duration: 5m    Activity: 10s ago"
    assert texts[8] == "  Lines:    +100 -20"
    assert texts[10] == "  Dir: /home/user/project"
    assert len(texts) == 12


def test_detail_lines_activity_detail_and_warnings():
    s = _Session(
        activity_detail="Bash",
        working_directory=None,
        is_stale=True,
        needs_attention=True,
        status=SessionStatus.ATTENTION_NEEDED,
        status_label="needs input",
    )
    lines = build_detail_lines(s)
    texts = [_text(line) for line in lines]
    assert texts[1] == "  Status: needs input (Bash)"
    assert texts[-2:] == ["  ! Session appears stale", "  ! Waiting for input"]
    assert not any(t.startswith("  Dir:") for t in texts)
    assert BOLD in lines[1][1].style.modifiers


def test_idle_status_not_bold():
    lines = build_detail_lines(_Session(status=SessionStatus.IDLE))
    status_span = lines[1][1]
    assert status_span.style.fg == Color.LIGHT_MAGENTA
    assert BOLD not in status_span.style.modifiers


def test_context_color_applied_to_bar():
    lines = build_detail_lines(_Session(context_percentage=95.0))
    assert lines[5][1].style.fg == Color.RED