"""Recency-ordered, width-aware tab strip for text editors."""

__all__ = [
    "adapters",
    "config",
    "host",
    "icons",
    "layout",
    "recency",
    "render",
    "runtime",
    "tabline",
]

__version__ = "0.1.0"
