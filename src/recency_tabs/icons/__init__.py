"""Optional filetype icons for tab labels."""

from .provider import (
    DEFAULT_ICONS,
    IconProvider,
    IconSpec,
    NullIconProvider,
    TableIconProvider,
)

__all__ = [
    "DEFAULT_ICONS",
    "IconProvider",
    "IconSpec",
    "NullIconProvider",
    "TableIconProvider",
]
