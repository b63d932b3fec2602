"""Viewport computation for the tab strip."""

from .state import ViewState
from .viewport import ICON_WIDTH, SEPARATOR_WIDTH, TAB_PADDING, ViewportEngine

__all__ = [
    "ICON_WIDTH",
    "SEPARATOR_WIDTH",
    "TAB_PADDING",
    "ViewState",
    "ViewportEngine",
]
