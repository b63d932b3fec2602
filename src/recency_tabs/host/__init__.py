"""Host editor capability protocol and an in-memory implementation."""

from .memory import HostBuffer, HostWindow, InMemoryHost
from .protocol import Highlight, HostBridge, InvalidBufferError

__all__ = [
    "Highlight",
    "HostBridge",
    "InvalidBufferError",
    "HostBuffer",
    "HostWindow",
    "InMemoryHost",
]
