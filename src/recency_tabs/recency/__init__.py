"""Recency-ordered list of visited buffers."""

from .recency_list import RecencyList
from .records import BufferRecord, base_name, resolve_name

__all__ = ["BufferRecord", "RecencyList", "base_name", "resolve_name"]
