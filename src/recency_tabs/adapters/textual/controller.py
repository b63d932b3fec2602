"""Minimal Textual adapter that turns tab line markup into rich ``Text``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Mapping

from rich.style import Style
from rich.text import Text

from recency_tabs.host import InMemoryHost
from recency_tabs.recency import resolve_name
from recency_tabs.render import parse_segments
from recency_tabs.tabline import TablineManager

NAVIGATION_COMMANDS = ("TabsNext", "TabsPrevious")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def highlight_style(definition: Mapping[str, object]) -> Style:
    """Translate an editor highlight definition into a rich ``Style``."""

    def flag(name: str) -> bool | None:
        value = definition.get(name)
        return None if value is None else bool(value)

    fg = definition.get("fg")
    bg = definition.get("bg")
    return Style(
        color=str(fg) if fg is not None else None,
        bgcolor=str(bg) if bg is not None else None,
        bold=flag("bold"),
        italic=flag("italic"),
        underline=flag("underline"),
    )


def markup_to_text(markup: str, highlights: Mapping[str, Mapping[str, object]]) -> Text:
    styles: Dict[str, Style] = {}
    text = Text(no_wrap=True, overflow="crop")
    for segment in parse_segments(markup):
        style = styles.get(segment.group)
        if style is None:
            style = styles[segment.group] = highlight_style(
                highlights.get(segment.group, {})
            )
        text.append(segment.text, style=style)
    return text


@dataclass(slots=True)
class TextualTablineHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_tabline: Callable[[Text], None]
    update_status: Callable[[str], None] = _noop
    set_visible: Callable[[bool], None] = _noop
    log: Callable[[str], None] = _noop


class TextualTablineAdapter:
    """Wires an ``InMemoryHost`` and its ``TablineManager`` to Textual hooks."""

    def __init__(
        self, manager: TablineManager, host: InMemoryHost, hooks: TextualTablineHooks
    ) -> None:
        self.manager = manager
        self.host = host
        self.hooks = hooks
        host.on_redraw = self.refresh
        host.on_buffer_entered = manager.on_buffer_entered
        host.on_buffer_deleted = manager.on_buffer_deleted
        manager.setup()
        self.refresh()

    def refresh(self) -> None:
        markup = self.manager.render()
        self.hooks.update_tabline(markup_to_text(markup, self.host.highlights))
        self.hooks.set_visible(self.host.tabline_visible)
        self._log_state("render ->")

    def run_command(self, name: str) -> None:
        """Run a registered user command, revealing an auto-hidden strip first."""

        if name in NAVIGATION_COMMANDS and not self.host.tabline_visible:
            self.host.set_tabline_visible(True)
        self._log_state("command ->", command=name)
        self.host.run_command(name)
        selected = self.manager.selected
        if selected is not None:
            title = resolve_name(self.host, selected.handle) or "[No Name]"
            self.hooks.update_status(f"{self.manager.state.selected_index + 1}: {title}")
        else:
            self.hooks.update_status("no buffers")
        self.refresh()

    def resize(self, columns: int) -> None:
        self.host.resize(columns)
        self.refresh()

    def _log_state(self, prefix: str, **fields: object) -> None:
        state = self.manager.state
        snapshot: Dict[str, object] = {
            "tabs": len(self.manager.recency),
            "selected": state.selected_index,
            "view_start": state.view_start,
            "columns": self.host.columns(),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = [
    "TextualTablineAdapter",
    "TextualTablineHooks",
    "highlight_style",
    "markup_to_text",
]
