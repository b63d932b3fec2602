from __future__ import annotations

from typing import Any, List

from rich.color import Color
from rich.text import Text

from recency_tabs.adapters.textual import (
    TextualTablineAdapter,
    TextualTablineHooks,
    highlight_style,
    markup_to_text,
)
from recency_tabs.config import TabsConfig
from recency_tabs.host import InMemoryHost
from recency_tabs.render import highlight
from recency_tabs.tabline import TablineManager


def make_adapter(
    *names: str, columns: int = 80, **options: Any
) -> tuple[InMemoryHost, TablineManager, TextualTablineAdapter, dict[str, list]]:
    host = InMemoryHost(columns=columns)
    manager = TablineManager(host, TabsConfig.from_options(options))
    captured: dict[str, list] = {"tabline": [], "status": [], "visible": [], "log": []}
    hooks = TextualTablineHooks(
        update_tabline=captured["tabline"].append,
        update_status=captured["status"].append,
        set_visible=captured["visible"].append,
        log=captured["log"].append,
    )
    adapter = TextualTablineAdapter(manager, host, hooks)
    for name in names:
        host.enter_buffer(host.add_buffer(name))
    return host, manager, adapter, captured


def test_adapter_renders_on_setup_and_redraw() -> None:
    _, _, _, captured = make_adapter("/w/foo.txt", "/w/bar.txt")

    tabline: List[Text] = captured["tabline"]
    assert len(tabline) >= 3
    assert tabline[-1].plain == " bar.txt │ foo.txt "
    assert captured["visible"][-1] is True


def test_adapter_run_command_updates_status() -> None:
    _, manager, adapter, captured = make_adapter("/w/foo.txt", "/w/bar.txt")

    adapter.run_command("TabsNext")

    assert manager.state.selected_index == 1
    assert captured["status"][-1] == "2: /w/foo.txt"
    assert any(line.startswith("command ->") for line in captured["log"])


def test_adapter_reveals_hidden_strip_on_navigation() -> None:
    host, _, adapter, captured = make_adapter("/w/foo", "/w/bar", autohide=True)
    assert host.tabline_visible is False

    adapter.run_command("TabsNext")
    assert captured["visible"][-1] is True

    adapter.run_command("TabsOpen")
    assert captured["visible"][-1] is False
    assert host.current_buffer is not None


def test_adapter_resize_rerenders_with_new_width() -> None:
    _, _, adapter, captured = make_adapter("/w/foo.txt", "/w/bar.txt", "/w/baz.txt")

    adapter.resize(20)

    assert captured["tabline"][-1].plain == " baz.txt │ bar.txt "


def test_highlight_style_translation() -> None:
    style = highlight_style({"fg": "#ffffff", "bg": "#000000", "bold": True})

    assert style.color == Color.parse("#ffffff")
    assert style.bgcolor == Color.parse("#000000")
    assert style.bold is True
    assert style.italic is None


def test_markup_to_text_applies_group_styles() -> None:
    markup = highlight("one", "A") + highlight("two", "Unknown")
    text = markup_to_text(markup, {"A": {"fg": "#ff0000"}})

    assert text.plain == "onetwo"
    first = text.spans[0]
    assert (first.start, first.end) == (0, 3)
    assert first.style.color == Color.parse("#ff0000")
