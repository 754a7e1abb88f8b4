"""Screen layout: header, session list, detail panel and footer."""

from __future__ import annotations

import math
from dataclasses import dataclass

HEADER_HEIGHT = 3
FOOTER_HEIGHT = 3
CONTENT_MIN_HEIGHT = 10
LIST_PERCENT = 30


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the terminal, in character cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class AppLayout:
    """The four areas the screen is divided into."""

    header: Rect
    list_area: Rect
    detail_area: Rect
    footer: Rect


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _vertical_heights(height: int) -> tuple[int, int, int]:
    if height >= HEADER_HEIGHT + CONTENT_MIN_HEIGHT + FOOTER_HEIGHT:
        return HEADER_HEIGHT, height - HEADER_HEIGHT - FOOTER_HEIGHT, FOOTER_HEIGHT
    # Too small for everything: the content minimum wins, the bars get what is left.
    content = min(CONTENT_MIN_HEIGHT, height)
    rest = height - content
    header = min(HEADER_HEIGHT, rest)
    footer = min(FOOTER_HEIGHT, rest - header)
    return header, content, footer


def split_layout(area: Rect) -> AppLayout:
    """Split ``area`` into a 3-line header, content and a 3-line footer.

    The content is divided horizontally into the session list (30%) and
    the detail panel (70%).
    """
    header_h, content_h, footer_h = _vertical_heights(area.height)
    header = Rect(area.x, area.y, area.width, header_h)
    content = Rect(area.x, header.bottom, area.width, content_h)
    footer = Rect(area.x, content.bottom, area.width, footer_h)

    list_width = min(area.width, _round_half_up(area.width * LIST_PERCENT / 100))
    list_area = Rect(content.x, content.y, list_width, content.height)
    detail_area = Rect(
        list_area.right, content.y, area.width - list_width, content.height
    )
    return AppLayout(header, list_area, detail_area, footer)