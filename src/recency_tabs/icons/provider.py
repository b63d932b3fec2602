"""Filetype icon lookup."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Protocol


@dataclass(frozen=True, slots=True)
class IconSpec:
    """Glyph plus the highlight group that colours it."""

    glyph: str
    group: str
    fg: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.glyph:
            raise ValueError("glyph cannot be empty")
        if not self.group:
            raise ValueError("group cannot be empty")


class IconProvider(Protocol):
    def lookup(self, filetype: str) -> Optional[IconSpec]:
        ...


class NullIconProvider:
    """Provider used when no icon set is available."""

    def lookup(self, filetype: str) -> Optional[IconSpec]:
        del filetype
        return None


DEFAULT_ICONS: Mapping[str, IconSpec] = MappingProxyType(
    {
        "python": IconSpec("\ue606", "DevIconPy", "#ffbc03"),
        "lua": IconSpec("\ue620", "DevIconLua", "#51a0cf"),
        "rust": IconSpec("\ue7a8", "DevIconRs", "#dea584"),
        "go": IconSpec("\ue627", "DevIconGo", "#00add8"),
        "javascript": IconSpec("\ue60c", "DevIconJs", "#cbcb41"),
        "typescript": IconSpec("\ue628", "DevIconTs", "#519aba"),
        "c": IconSpec("\ue61e", "DevIconC", "#599eff"),
        "cpp": IconSpec("\ue61d", "DevIconCpp", "#519aba"),
        "markdown": IconSpec("\ue609", "DevIconMd", "#dddddd"),
        "json": IconSpec("\ue60b", "DevIconJson", "#cbcb41"),
        "toml": IconSpec("\ue615", "DevIconToml", "#9c4221"),
        "yaml": IconSpec("\ue6a8", "DevIconYaml", "#6d8086"),
        "html": IconSpec("\ue736", "DevIconHtml", "#e44d26"),
        "css": IconSpec("\ue749", "DevIconCss", "#42a5f5"),
        "sh": IconSpec("\ue795", "DevIconSh", "#4d5a5e"),
        "text": IconSpec("\uf15c", "DevIconTxt", "#89e051"),
    }
)


class TableIconProvider:
    """Serves icons from ``DEFAULT_ICONS`` with optional per-filetype overrides."""

    def __init__(
        self,
        overrides: Optional[Mapping[str, IconSpec]] = None,
        *,
        include_defaults: bool = True,
    ) -> None:
        table: dict[str, IconSpec] = dict(DEFAULT_ICONS) if include_defaults else {}
        table.update(overrides or {})
        self._table = table

    def lookup(self, filetype: str) -> Optional[IconSpec]:
        if not filetype:
            return None
        return self._table.get(filetype)


__all__ = [
    "DEFAULT_ICONS",
    "IconProvider",
    "IconSpec",
    "NullIconProvider",
    "TableIconProvider",
]
