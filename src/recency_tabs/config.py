"""User-facing options for the tab strip."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

HIGHLIGHT_FOCUSED = "TabsFocused"
HIGHLIGHT_UNFOCUSED = "TabsUnfocused"
HIGHLIGHT_SELECTED = "TabsSelected"
HIGHLIGHT_SEPARATOR = "TabsSeparator"
HIGHLIGHT_OFFSET = "TabsOffset"

DEFAULT_HIGHLIGHTS: Mapping[str, Mapping[str, object]] = MappingProxyType(
    {
        HIGHLIGHT_FOCUSED: {"fg": "#cdd6f4", "bg": "#1e1e2e", "bold": True},
        HIGHLIGHT_UNFOCUSED: {"fg": "#7f849c", "bg": "#181825"},
        HIGHLIGHT_SELECTED: {"fg": "#1e1e2e", "bg": "#89b4fa", "bold": True},
        HIGHLIGHT_SEPARATOR: {"fg": "#45475a", "bg": "#181825"},
        HIGHLIGHT_OFFSET: {"fg": "#a6adc8", "bg": "#11111b"},
    }
)

TitleSource = Union[str, Callable[[], str]]


class ConfigError(ValueError):
    """Raised when user options cannot be turned into a ``TabsConfig``."""

    def __init__(self, message: str, *, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


@dataclass(frozen=True, slots=True)
class OffsetSpec:
    """Fixed panel (e.g. a file explorer) the strip must leave room for."""

    filetype: str
    title: TitleSource = ""

    def __post_init__(self) -> None:
        if not self.filetype:
            raise ConfigError("offset filetype cannot be empty", option="offsets")

    def render_title(self) -> str:
        if callable(self.title):
            return str(self.title())
        return self.title


@dataclass(frozen=True, slots=True)
class TabsConfig:
    max_tabs: int = 10
    offsets: tuple[OffsetSpec, ...] = ()
    ignored: tuple[str, ...] = ()
    autohide: bool = False
    highlights: Mapping[str, Mapping[str, object]] = field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_HIGHLIGHTS.items()}
    )

    def __post_init__(self) -> None:
        if isinstance(self.max_tabs, bool) or not isinstance(self.max_tabs, int):
            raise ConfigError("max_tabs must be an integer", option="max_tabs")
        if self.max_tabs < 1:
            raise ConfigError("max_tabs must be positive", option="max_tabs")

    def is_ignored(self, filetype: str) -> bool:
        return filetype in self.ignored

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "TabsConfig":
        """Merge user ``options`` over the defaults.

        Highlight groups are merged one level deep, so overriding ``fg`` on
        ``TabsSelected`` keeps its default ``bg``.
        """

        opts = dict(options or {})
        unknown = set(opts) - {"max_tabs", "offsets", "ignored", "autohide", "highlights"}
        if unknown:
            raise ConfigError(f"Unknown option(s): {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        if "max_tabs" in opts:
            kwargs["max_tabs"] = opts["max_tabs"]
        if "offsets" in opts:
            kwargs["offsets"] = tuple(_parse_offset(item) for item in opts["offsets"])
        if "ignored" in opts:
            kwargs["ignored"] = _parse_ignored(opts["ignored"])
        if "autohide" in opts:
            if not isinstance(opts["autohide"], bool):
                raise ConfigError("autohide must be a boolean", option="autohide")
            kwargs["autohide"] = opts["autohide"]
        kwargs["highlights"] = _merge_highlights(opts.get("highlights") or {})
        return cls(**kwargs)


def _parse_offset(item: Any) -> OffsetSpec:
    if isinstance(item, OffsetSpec):
        return item
    if not isinstance(item, Mapping):
        raise ConfigError("each offset must be a mapping", option="offsets")
    filetype = item.get("filetype")
    if not isinstance(filetype, str):
        raise ConfigError("offset filetype must be a string", option="offsets")
    title = item.get("title", "")
    if not (isinstance(title, str) or callable(title)):
        raise ConfigError(
            "offset title must be a string or a callable", option="offsets"
        )
    return OffsetSpec(filetype=filetype, title=title)


def _parse_ignored(value: Any) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigError("ignored must be a list of filetypes", option="ignored")
    if not all(isinstance(item, str) for item in value):
        raise ConfigError("ignored filetypes must be strings", option="ignored")
    return tuple(value)


def _merge_highlights(
    overrides: Mapping[str, Any],
) -> Dict[str, Dict[str, object]]:
    if not isinstance(overrides, Mapping):
        raise ConfigError("highlights must be a mapping", option="highlights")
    merged = {name: dict(style) for name, style in DEFAULT_HIGHLIGHTS.items()}
    for name, style in overrides.items():
        if not isinstance(style, Mapping):
            raise ConfigError(
                f"highlight '{name}' must be a mapping", option="highlights"
            )
        merged.setdefault(name, {}).update(style)
    return merged


__all__ = [
    "ConfigError",
    "DEFAULT_HIGHLIGHTS",
    "HIGHLIGHT_FOCUSED",
    "HIGHLIGHT_OFFSET",
    "HIGHLIGHT_SELECTED",
    "HIGHLIGHT_SEPARATOR",
    "HIGHLIGHT_UNFOCUSED",
    "OffsetSpec",
    "TabsConfig",
]
