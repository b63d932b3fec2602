"""Tab strip controller tying the recency list, viewport and renderer together."""

from __future__ import annotations

from typing import Optional, Sequence

from recency_tabs.config import TabsConfig
from recency_tabs.host import HostBridge
from recency_tabs.icons import IconProvider
from recency_tabs.layout import ViewportEngine, ViewState
from recency_tabs.recency import BufferRecord, RecencyList
from recency_tabs.render import TablineRenderer
from recency_tabs.runtime import telemetry

from .commands import register_commands

LOGGER_NAME = "recency_tabs.tabline"


class TablineManager:
    """Owns the recency list and view state for one host.

    Host callbacks (buffer entered, buffer deleted, session restored) and the
    navigation commands all land here. Each mutation leaves the selection in
    range and on screen, then asks the host for a redraw; ``render`` itself
    never mutates anything, so a host may coalesce or repeat draws freely.
    """

    def __init__(
        self,
        host: HostBridge,
        config: Optional[TabsConfig] = None,
        *,
        icons: Optional[IconProvider] = None,
    ) -> None:
        self.host = host
        self.config = config or TabsConfig()
        self.recency = RecencyList(host, icons=icons, ignored=self.config.ignored)
        self.state = ViewState()
        self.viewport = ViewportEngine(host, self.config)
        self.renderer = TablineRenderer(host, self.viewport)

    @property
    def records(self) -> Sequence[BufferRecord]:
        return self.recency.records

    @property
    def selected(self) -> Optional[BufferRecord]:
        if not len(self.recency):
            return None
        return self.recency[self.state.selected_index]

    def setup(self) -> None:
        for name, style in self.config.highlights.items():
            self.host.set_highlight(name, style)
        register_commands(self.host, self)
        self.host.set_tabline_visible(not self.config.autohide)
        telemetry.record_event(
            "tabline.setup",
            data={"max_tabs": self.config.max_tabs, "autohide": self.config.autohide},
            logger_name=LOGGER_NAME,
        )

    # -- host lifecycle ------------------------------------------------------

    def on_buffer_entered(self, handle: int) -> None:
        with telemetry.span(
            "tabline::buffer_entered",
            logger_name=LOGGER_NAME,
            component="tabline",
            metadata={"handle": handle},
        ):
            if not self.recency.visit(handle):
                return
            self._settle()

    def on_buffer_deleted(self, handle: int) -> None:
        with telemetry.span(
            "tabline::buffer_deleted",
            logger_name=LOGGER_NAME,
            component="tabline",
            metadata={"handle": handle},
        ):
            index = self.recency.remove(handle)
            if index is not None and index < self.state.selected_index:
                self.state.selected_index -= 1
            self._settle()

    def on_session_restored(self) -> None:
        with telemetry.span(
            "tabline::session_restored", logger_name=LOGGER_NAME, component="tabline"
        ):
            self.recency.clear()
            host = self.host
            for handle in host.list_buffers():
                if (
                    host.buffer_valid(handle)
                    and host.buffer_listed(handle)
                    and host.buffer_type(handle) == ""
                ):
                    self.recency.visit(handle)
            self.state.reset()
            self._settle()
            telemetry.record_event(
                "tabline.session_restored",
                data={"tabs": len(self.recency)},
                logger_name=LOGGER_NAME,
            )

    # -- rendering -----------------------------------------------------------

    def render(self) -> str:
        return self.renderer.render(self.recency.records, self.state)

    tabline = render

    # -- navigation ----------------------------------------------------------

    def next(self) -> None:
        if not len(self.recency):
            return
        self.state.selected_index = min(
            self.state.selected_index + 1, len(self.recency) - 1
        )
        self._settle()

    def previous(self) -> None:
        if not len(self.recency):
            return
        self.state.selected_index = max(self.state.selected_index - 1, 0)
        self._settle()

    def open(self) -> None:
        record = self.selected
        if record is None:
            return
        if not self.host.buffer_valid(record.handle):
            # Wiped without a delete callback; drop it instead of switching.
            dropped = self.recency.prune()
            telemetry.record_event(
                "tabline.open_stale",
                level="warning",
                data={"handle": record.handle, "dropped": dropped},
                logger_name=LOGGER_NAME,
            )
            self._settle()
            return
        telemetry.record_event(
            "tabline.open",
            data={"handle": record.handle, "index": self.state.selected_index},
            logger_name=LOGGER_NAME,
        )
        self.host.set_current_buffer(record.handle)
        self.state.reset()
        self._settle()
        if self.config.autohide:
            self.host.set_tabline_visible(False)

    # -- session persistence ---------------------------------------------------

    def ordered_paths(self) -> list[str]:
        return self.recency.ordered_paths()

    def restore_order(self, paths: Sequence[str]) -> None:
        self.recency.restore_order(paths)
        self.state.reset()
        self._settle()

    def _settle(self) -> None:
        self.viewport.clamp(self.recency.records, self.state)
        self.host.request_redraw()


__all__ = ["TablineManager"]
