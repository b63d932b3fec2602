"""Tab line rendering."""

from .markup import (
    RESET_GROUP,
    Segment,
    center,
    escape,
    highlight,
    parse_segments,
    plain_text,
)
from .renderer import SEPARATOR, TablineRenderer, tab_group

__all__ = [
    "RESET_GROUP",
    "SEPARATOR",
    "Segment",
    "TablineRenderer",
    "center",
    "escape",
    "highlight",
    "parse_segments",
    "plain_text",
    "tab_group",
]
