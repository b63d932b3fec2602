"""Visited-buffer records and name resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from recency_tabs.host import HostBridge, InvalidBufferError


@dataclass(frozen=True, slots=True)
class BufferRecord:
    """One visited buffer. The title is always looked up, never stored."""

    handle: int
    icon: Optional[str] = None
    icon_style: Optional[str] = None

    @property
    def has_icon(self) -> bool:
        return self.icon is not None


def resolve_name(host: HostBridge, handle: int) -> Optional[str]:
    """Return the buffer's path, or ``None`` when the handle has gone stale."""

    try:
        return host.buffer_name(handle)
    except InvalidBufferError:
        return None


def base_name(path: Optional[str]) -> str:
    if not path:
        return ""
    separators = "/" + (os.sep if os.sep != "/" else "")
    cut = max(path.rfind(sep) for sep in separators)
    return path[cut + 1 :]


__all__ = ["BufferRecord", "base_name", "resolve_name"]
