"""Statusline-style markup helpers.

The strip is handed to the host as one string in the ``%#Group#text`` syntax
editors use for tab lines. Literal ``%`` characters are doubled.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from rich.cells import cell_len, set_cell_size

from recency_tabs.config import HIGHLIGHT_UNFOCUSED

RESET_GROUP = HIGHLIGHT_UNFOCUSED

_TOKEN = re.compile(r"%%|%#([^#]*)#")


@dataclass(frozen=True, slots=True)
class Segment:
    group: str
    text: str


def escape(text: str) -> str:
    return text.replace("%", "%%")


def highlight(text: str, group: str) -> str:
    """Wrap ``text`` in ``group`` and switch back to the reset group after it."""

    return f"%#{group}#{escape(text)}%#{RESET_GROUP}#"


def center(text: str, width: int) -> str:
    """Centre ``text`` in ``width`` cells, cropping it when it does not fit."""

    if width <= 0:
        return ""
    size = cell_len(text)
    if size >= width:
        return set_cell_size(text, width)
    left = (width - size) // 2
    return " " * left + text + " " * (width - size - left)


def parse_segments(markup: str, *, default_group: str = RESET_GROUP) -> List[Segment]:
    """Split markup into non-empty ``Segment`` runs, merging adjacent same-group text."""

    segments: List[Segment] = []
    group = default_group
    position = 0

    def push(text: str) -> None:
        if not text:
            return
        if segments and segments[-1].group == group:
            segments[-1] = Segment(group, segments[-1].text + text)
        else:
            segments.append(Segment(group, text))

    for match in _TOKEN.finditer(markup):
        push(markup[position : match.start()])
        if match.group(0) == "%%":
            push("%")
        else:
            group = match.group(1) or default_group
        position = match.end()
    push(markup[position:])
    return segments


def plain_text(markup: str) -> str:
    return "".join(segment.text for segment in parse_segments(markup))


__all__ = [
    "RESET_GROUP",
    "Segment",
    "center",
    "escape",
    "highlight",
    "parse_segments",
    "plain_text",
]
