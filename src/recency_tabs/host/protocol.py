"""Capability boundary between the tab strip and the editor that hosts it."""

from __future__ import annotations

from typing import Callable, Mapping, Protocol, Sequence

Highlight = Mapping[str, object]


class InvalidBufferError(LookupError):
    """Raised by hosts when a buffer handle no longer refers to a live buffer."""

    def __init__(self, handle: int) -> None:
        super().__init__(f"Buffer {handle} is not valid")
        self.handle = handle


class HostBridge(Protocol):
    """Everything the tab strip asks of, or requests from, the editor."""

    def list_windows(self) -> Sequence[int]:
        """Return the handles of every visible window."""
        ...

    def window_buffer(self, window: int) -> int:
        """Return the buffer displayed in ``window``."""
        ...

    def window_width(self, window: int) -> int:
        ...

    def list_buffers(self) -> Sequence[int]:
        """Return every buffer handle in the host's own enumeration order."""
        ...

    def buffer_name(self, handle: int) -> str:
        """Return the buffer's full path, ``""`` when unnamed.

        Raises ``InvalidBufferError`` for a stale handle.
        """
        ...

    def buffer_valid(self, handle: int) -> bool:
        ...

    def buffer_listed(self, handle: int) -> bool:
        ...

    def buffer_type(self, handle: int) -> str:
        """Return the buffer type, ``""`` for a normal file buffer."""
        ...

    def buffer_filetype(self, handle: int) -> str:
        ...

    def columns(self) -> int:
        """Total width of the display, in cells."""
        ...

    def set_current_buffer(self, handle: int) -> None:
        ...

    def request_redraw(self) -> None:
        """Ask the host to redraw the tab strip at its convenience."""
        ...

    def set_highlight(self, name: str, style: Highlight) -> None:
        ...

    def get_highlight(self, name: str) -> Highlight:
        """Return the definition of ``name``, empty when undefined."""
        ...

    def set_tabline_visible(self, visible: bool) -> None:
        ...

    def register_command(self, name: str, handler: Callable[[], None]) -> None:
        ...


__all__ = ["Highlight", "HostBridge", "InvalidBufferError"]
