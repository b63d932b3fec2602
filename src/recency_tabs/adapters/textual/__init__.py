"""Textual host for the tab strip."""

from .controller import (
    TextualTablineAdapter,
    TextualTablineHooks,
    highlight_style,
    markup_to_text,
)

__all__ = [
    "TextualTablineAdapter",
    "TextualTablineHooks",
    "highlight_style",
    "markup_to_text",
]
