"""Turns the visible slice of the recency list into tab line markup."""

from __future__ import annotations

from typing import List, Sequence

from recency_tabs.config import (
    HIGHLIGHT_FOCUSED,
    HIGHLIGHT_OFFSET,
    HIGHLIGHT_SELECTED,
    HIGHLIGHT_SEPARATOR,
    HIGHLIGHT_UNFOCUSED,
)
from recency_tabs.host import HostBridge
from recency_tabs.layout import ViewportEngine, ViewState
from recency_tabs.recency import BufferRecord, base_name, resolve_name
from recency_tabs.runtime.telemetry import span

from .markup import center, highlight

SEPARATOR = "│"


def tab_group(index: int, state: ViewState) -> str:
    """Highlight group for the tab at ``index``.

    The selection marker wins over the current-buffer marker, so the tab that
    ``open`` would switch to is always the one drawn as selected.
    """

    if index == state.selected_index:
        return HIGHLIGHT_SELECTED
    if index == 0:
        return HIGHLIGHT_FOCUSED
    return HIGHLIGHT_UNFOCUSED


class TablineRenderer:
    def __init__(self, host: HostBridge, viewport: ViewportEngine) -> None:
        self._host = host
        self._viewport = viewport

    def render(self, records: Sequence[BufferRecord], state: ViewState) -> str:
        with span(
            "render::tabline",
            logger_name="recency_tabs.render",
            metadata={"tabs": len(records), "view_start": state.view_start},
        ):
            parts: List[str] = self._offset_parts()
            view_end = self._viewport.compute_view_end(records, state.view_start)
            for index in range(state.view_start, view_end + 1):
                parts.extend(self._tab_parts(records[index], index, state))
            parts.append(highlight("", HIGHLIGHT_FOCUSED))
            return "".join(parts)

    def _offset_parts(self) -> List[str]:
        return [
            highlight(
                center(offset.render_title(), self._host.window_width(window)),
                HIGHLIGHT_OFFSET,
            )
            for offset, window in self._viewport.offset_windows()
        ]

    def _tab_parts(
        self, record: BufferRecord, index: int, state: ViewState
    ) -> List[str]:
        name = resolve_name(self._host, record.handle)
        if name is None:
            # Stale handle: the slot stays, the tab is simply not drawn.
            return []

        group = tab_group(index, state)
        parts: List[str] = []
        if index != state.view_start:
            parts.append(highlight(SEPARATOR, HIGHLIGHT_SEPARATOR))
        parts.append(highlight(" ", group))
        if record.icon is not None:
            parts.append(highlight(f"{record.icon} ", record.icon_style or group))
        parts.append(highlight(base_name(name), group))
        parts.append(highlight(" ", group))
        return parts


__all__ = ["SEPARATOR", "TablineRenderer", "tab_group"]
