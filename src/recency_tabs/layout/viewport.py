"""Width bookkeeping that decides which tabs fit on the strip.

Nothing here is cached: every query re-reads the host, so a terminal resize or
a sidebar toggle between two renders is picked up without any invalidation.
The scans are linear in the number of tabs, which stays in the tens.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from rich.cells import cell_len

from recency_tabs.config import OffsetSpec, TabsConfig
from recency_tabs.host import HostBridge, InvalidBufferError
from recency_tabs.recency import BufferRecord, base_name, resolve_name

from .state import ViewState

TAB_PADDING = 2
ICON_WIDTH = 2
SEPARATOR_WIDTH = 1


class ViewportEngine:
    def __init__(self, host: HostBridge, config: TabsConfig) -> None:
        self._host = host
        self._config = config

    def tab_width(self, record: BufferRecord) -> int:
        title = base_name(resolve_name(self._host, record.handle))
        width = cell_len(title) + TAB_PADDING
        if record.has_icon:
            width += ICON_WIDTH
        return width

    def offset_windows(self) -> Iterator[Tuple[OffsetSpec, int]]:
        """Yield ``(offset, window)`` for every visible window an offset claims."""

        host = self._host
        for offset in self._config.offsets:
            for window in host.list_windows():
                try:
                    filetype = host.buffer_filetype(host.window_buffer(window))
                except InvalidBufferError:
                    continue
                if filetype == offset.filetype:
                    yield offset, window

    def reserved_width(self) -> int:
        return sum(
            self._host.window_width(window) for _, window in self.offset_windows()
        )

    def available_width(self) -> int:
        return self._host.columns() - self.reserved_width()

    def compute_view_end(self, records: Sequence[BufferRecord], view_start: int) -> int:
        """Index of the last tab that fits when the strip starts at ``view_start``.

        The tab at ``view_start`` is always included, however wide it is. An
        empty list yields ``view_start - 1``, i.e. an empty range.
        """

        available = self.available_width()
        last = min(view_start + self._config.max_tabs - 1, len(records) - 1)
        total = 0
        for index in range(view_start, last + 1):
            width = self.tab_width(records[index])
            if index > view_start:
                width += SEPARATOR_WIDTH
                if total + width > available:
                    return index - 1
            total += width
        return last

    def ensure_selected_visible(
        self, records: Sequence[BufferRecord], state: ViewState
    ) -> None:
        if state.selected_index < state.view_start:
            state.view_start = state.selected_index
        while (
            self.compute_view_end(records, state.view_start) < state.selected_index
            and state.view_start < state.selected_index
        ):
            state.view_start += 1

    def clamp(self, records: Sequence[BufferRecord], state: ViewState) -> None:
        """Pull the state back into range after the list changed size."""

        if not records:
            state.reset()
            return
        state.selected_index = max(0, min(state.selected_index, len(records) - 1))
        state.view_start = max(0, min(state.view_start, state.selected_index))
        self.ensure_selected_visible(records, state)


__all__ = [
    "ICON_WIDTH",
    "SEPARATOR_WIDTH",
    "TAB_PADDING",
    "ViewportEngine",
]
