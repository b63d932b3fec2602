from __future__ import annotations

import logging
from typing import Any

import pytest

from recency_tabs.config import TabsConfig
from recency_tabs.host import InMemoryHost
from recency_tabs.render import highlight, plain_text
from recency_tabs.tabline import COMMANDS, TablineManager


def make_manager(
    *names: str, columns: int = 80, **options: Any
) -> tuple[InMemoryHost, TablineManager, list[int]]:
    host = InMemoryHost(columns=columns)
    manager = TablineManager(host, TabsConfig.from_options(options))
    host.on_buffer_entered = manager.on_buffer_entered
    host.on_buffer_deleted = manager.on_buffer_deleted
    manager.setup()
    handles = []
    for name in names:
        handle = host.add_buffer(name, filetype="text")
        host.enter_buffer(handle)
        handles.append(handle)
    return host, manager, handles


def selection(manager: TablineManager) -> tuple[int, int]:
    return manager.state.selected_index, manager.state.view_start


def test_setup_pushes_highlights_and_commands() -> None:
    host, manager, _ = make_manager(highlights={"TabsSelected": {"fg": "#ffffff"}})

    assert host.highlights["TabsSelected"]["fg"] == "#ffffff"
    assert "bg" in host.highlights["TabsSelected"]
    assert set(host.commands) == set(COMMANDS)
    assert host.tabline_visible is True


def test_setup_with_autohide_keeps_strip_hidden() -> None:
    host, _, _ = make_manager(autohide=True)

    assert host.tabline_visible is False


def test_scenario_navigation_scrolls_through_narrow_strip() -> None:
    host, manager, (foo, bar, baz) = make_manager(
        "/w/foo.txt", "/w/bar.txt", "/w/baz.txt", columns=20
    )
    assert [r.handle for r in manager.records] == [baz, bar, foo]
    assert plain_text(manager.render()) == " baz.txt │ bar.txt "

    host.run_command("TabsNext")
    assert selection(manager) == (1, 0)

    host.run_command("TabsNext")
    assert selection(manager) == (2, 1)
    assert plain_text(manager.render()) == " bar.txt │ foo.txt "

    host.run_command("TabsNext")
    assert selection(manager) == (2, 1)

    host.run_command("TabsPrevious")
    host.run_command("TabsPrevious")
    host.run_command("TabsPrevious")
    assert selection(manager) == (0, 0)


def test_open_switches_buffer_and_resets_view() -> None:
    host, manager, (foo, bar, baz) = make_manager(
        "/w/foo.txt", "/w/bar.txt", "/w/baz.txt"
    )
    manager.next()
    manager.next()
    redraws = host.redraw_count

    manager.open()

    assert host.current_buffer == foo
    assert [r.handle for r in manager.records] == [foo, baz, bar]
    assert selection(manager) == (0, 0)
    assert host.redraw_count > redraws
    assert host.tabline_visible is True


def test_open_with_autohide_hides_strip() -> None:
    host, manager, (foo, bar) = make_manager("/w/foo", "/w/bar", autohide=True)
    host.set_tabline_visible(True)
    manager.next()

    manager.open()

    assert host.current_buffer == foo
    assert host.tabline_visible is False


def test_open_on_wiped_buffer_drops_it_without_switching() -> None:
    host, manager, (foo, bar, baz) = make_manager("/w/foo", "/w/bar", "/w/baz")
    manager.next()
    assert manager.selected.handle == bar
    host.wipe_buffer(bar)
    redraws = host.redraw_count

    manager.open()

    assert host.current_buffer == baz
    assert [r.handle for r in manager.records] == [baz, foo]
    assert manager.selected.handle == foo
    assert host.redraw_count > redraws
    assert plain_text(manager.render()) == " baz │ foo "


def test_buffer_events_are_traced(caplog: pytest.LogCaptureFixture) -> None:
    host, manager, _ = make_manager("/w/foo")
    bar = host.add_buffer("/w/bar", filetype="text")

    with caplog.at_level(logging.DEBUG, logger="recency_tabs"):
        host.enter_buffer(bar)
        manager.next()
        manager.open()

    messages = [record.getMessage() for record in caplog.records]
    assert any(
        m.startswith("span::done tabline::buffer_entered")
        and f"handle={bar}" in m
        and "component=tabline" in m
        for m in messages
    )
    assert any(m.startswith("span::done recency::visit") for m in messages)
    assert any(m.startswith("event::tabline.open handle=") for m in messages)


def test_empty_list_commands_are_noops() -> None:
    host, manager, _ = make_manager()
    redraws = host.redraw_count

    manager.next()
    manager.previous()
    manager.open()

    assert selection(manager) == (0, 0)
    assert host.current_buffer is None
    assert host.redraw_count == redraws
    assert manager.render() == highlight("", "TabsFocused")


def test_deleting_selected_last_buffer_reclamps() -> None:
    host, manager, (foo, bar, baz) = make_manager("/w/foo", "/w/bar", "/w/baz")
    manager.next()
    manager.next()
    assert manager.selected.handle == foo

    host.delete_buffer(foo)

    assert [r.handle for r in manager.records] == [baz, bar]
    assert selection(manager) == (1, 0)


def test_deleting_before_selection_keeps_selected_record() -> None:
    host, manager, (foo, bar, baz) = make_manager("/w/foo", "/w/bar", "/w/baz")
    manager.next()
    manager.next()

    host.delete_buffer(baz)

    assert manager.selected.handle == foo
    assert selection(manager) == (1, 0)


def test_deleting_every_buffer_resets_state() -> None:
    host, manager, handles = make_manager("/w/foo", "/w/bar")
    manager.next()

    for handle in handles:
        host.delete_buffer(handle)

    assert len(manager.recency) == 0
    assert selection(manager) == (0, 0)
    assert manager.selected is None


def test_ignored_filetype_does_not_touch_strip() -> None:
    host, manager, (foo,) = make_manager("/w/foo", ignored=["explorer"])
    tree = host.add_buffer("tree", filetype="explorer")
    redraws = host.redraw_count

    host.enter_buffer(tree)

    assert [r.handle for r in manager.records] == [foo]
    assert host.redraw_count == redraws


def test_entering_prompt_buffer_is_pruned() -> None:
    host, manager, (foo,) = make_manager("/w/foo")
    prompt = host.add_buffer("", buftype="prompt")

    host.enter_buffer(prompt)

    assert [r.handle for r in manager.records] == [foo]


def test_session_restore_repopulates_from_host() -> None:
    host, manager, _ = make_manager()
    a = host.add_buffer("/w/a")
    b = host.add_buffer("/w/b")
    host.add_buffer("", buftype="nofile")
    hidden = host.add_buffer("/w/hidden")
    host.set_listed(hidden, False)
    manager.next()

    manager.on_session_restored()

    assert [r.handle for r in manager.records] == [b, a]
    assert selection(manager) == (0, 0)


def test_ordered_paths_and_restore_order_round_trip() -> None:
    host, manager, (a, b, c) = make_manager("/w/a", "/w/b", "/w/c")
    saved = manager.ordered_paths()
    assert saved == ["/w/c", "/w/b", "/w/a"]

    host.enter_buffer(a)
    manager.next()
    manager.restore_order(saved)

    assert [r.handle for r in manager.records] == [c, b, a]
    assert selection(manager) == (0, 0)
    assert manager.ordered_paths() == saved


def test_tabline_alias_matches_render() -> None:
    _, manager, _ = make_manager("/w/foo", "/w/bar")

    assert manager.tabline() == manager.render()
