"""In-memory editor host used by the test-suite and the Textual demo."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from .protocol import Highlight, InvalidBufferError


@dataclass(slots=True)
class HostBuffer:
    handle: int
    name: str = ""
    filetype: str = ""
    buftype: str = ""
    listed: bool = True
    lines: List[str] = field(default_factory=list)


@dataclass(slots=True)
class HostWindow:
    handle: int
    buffer: int
    width: int


class InMemoryHost:
    """Small editor model implementing ``HostBridge``.

    Buffers and windows get monotonically increasing handles, so a deleted
    buffer's handle is never reused and lookups through it fail like a stale
    handle would in a real editor.
    """

    def __init__(self, *, columns: int = 80) -> None:
        self._columns = columns
        self._buffers: Dict[int, HostBuffer] = {}
        self._windows: Dict[int, HostWindow] = {}
        self._next_buffer = 1
        self._next_window = 1000
        self.current_buffer: Optional[int] = None
        self.highlights: Dict[str, Dict[str, object]] = {}
        self.commands: Dict[str, Callable[[], None]] = {}
        self.tabline_visible = False
        self.redraw_count = 0
        self.on_redraw: Optional[Callable[[], None]] = None
        self.on_buffer_entered: Optional[Callable[[int], None]] = None
        self.on_buffer_deleted: Optional[Callable[[int], None]] = None

    # -- editor-side helpers -------------------------------------------------

    def add_buffer(
        self,
        name: str = "",
        *,
        filetype: str = "",
        buftype: str = "",
        listed: bool = True,
        lines: Sequence[str] = (),
    ) -> int:
        handle = self._next_buffer
        self._next_buffer += 1
        self._buffers[handle] = HostBuffer(
            handle=handle,
            name=name,
            filetype=filetype,
            buftype=buftype,
            listed=listed,
            lines=list(lines),
        )
        return handle

    def enter_buffer(self, handle: int) -> None:
        """Make ``handle`` current and fire the buffer-entered callback."""

        self._require(handle)
        self.current_buffer = handle
        if self.on_buffer_entered is not None:
            self.on_buffer_entered(handle)

    def delete_buffer(self, handle: int) -> None:
        """Fire the buffer-deleted callback, then forget the buffer."""

        self._require(handle)
        if self.on_buffer_deleted is not None:
            self.on_buffer_deleted(handle)
        del self._buffers[handle]
        for window in [w for w in self._windows.values() if w.buffer == handle]:
            del self._windows[window.handle]
        if self.current_buffer == handle:
            self.current_buffer = None

    def wipe_buffer(self, handle: int) -> None:
        """Forget a buffer without firing any callback, leaving handles stale."""

        self._buffers.pop(handle, None)

    def rename_buffer(self, handle: int, name: str) -> None:
        self._require(handle).name = name

    def set_listed(self, handle: int, listed: bool) -> None:
        self._require(handle).listed = listed

    def buffer(self, handle: int) -> HostBuffer:
        return self._require(handle)

    def open_window(self, buffer: int, width: int) -> int:
        self._require(buffer)
        handle = self._next_window
        self._next_window += 1
        self._windows[handle] = HostWindow(handle=handle, buffer=buffer, width=width)
        return handle

    def close_window(self, window: int) -> None:
        self._windows.pop(window, None)

    def resize(self, columns: int) -> None:
        self._columns = columns

    def run_command(self, name: str) -> None:
        self.commands[name]()

    # -- HostBridge ------------------------------------------------------------

    def list_windows(self) -> Sequence[int]:
        return tuple(self._windows)

    def window_buffer(self, window: int) -> int:
        return self._windows[window].buffer

    def window_width(self, window: int) -> int:
        return self._windows[window].width

    def list_buffers(self) -> Sequence[int]:
        return tuple(self._buffers)

    def buffer_name(self, handle: int) -> str:
        return self._require(handle).name

    def buffer_valid(self, handle: int) -> bool:
        return handle in self._buffers

    def buffer_listed(self, handle: int) -> bool:
        return self._require(handle).listed

    def buffer_type(self, handle: int) -> str:
        return self._require(handle).buftype

    def buffer_filetype(self, handle: int) -> str:
        return self._require(handle).filetype

    def columns(self) -> int:
        return self._columns

    def set_current_buffer(self, handle: int) -> None:
        self.enter_buffer(handle)

    def request_redraw(self) -> None:
        self.redraw_count += 1
        if self.on_redraw is not None:
            self.on_redraw()

    def set_highlight(self, name: str, style: Highlight) -> None:
        self.highlights[name] = dict(style)

    def get_highlight(self, name: str) -> Highlight:
        return dict(self.highlights.get(name, {}))

    def set_tabline_visible(self, visible: bool) -> None:
        self.tabline_visible = visible

    def register_command(self, name: str, handler: Callable[[], None]) -> None:
        self.commands[name] = handler

    def _require(self, handle: int) -> HostBuffer:
        try:
            return self._buffers[handle]
        except KeyError as exc:
            raise InvalidBufferError(handle) from exc


__all__ = ["HostBuffer", "HostWindow", "InMemoryHost"]
