"""Executable Textual app that hosts the tab strip over an in-memory editor."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use recency_tabs.adapters.textual.app"
    ) from exc

from recency_tabs.config import TabsConfig
from recency_tabs.host import InMemoryHost
from recency_tabs.icons import TableIconProvider
from recency_tabs.recency import resolve_name
from recency_tabs.runtime import telemetry
from recency_tabs.tabline import TablineManager

from .controller import TextualTablineAdapter, TextualTablineHooks

SIDEBAR_FILETYPE = "explorer"
SIDEBAR_WIDTH = 24

FILETYPES = {
    ".py": "python",
    ".lua": "lua",
    ".rs": "rust",
    ".go": "go",
    ".js": "javascript",
    ".ts": "typescript",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".md": "markdown",
    ".json": "json",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".html": "html",
    ".css": "css",
    ".sh": "sh",
    ".txt": "text",
}


def guess_filetype(path: str) -> str:
    return FILETYPES.get(Path(path).suffix.lower(), "")


def load_host(paths: Sequence[str], *, columns: int = 80) -> InMemoryHost:
    """Create a host with one listed buffer per path plus an unlisted sidebar."""

    host = InMemoryHost(columns=columns)
    for raw in paths:
        path = Path(raw).expanduser().resolve()
        lines: list[str] = []
        if path.is_file():
            lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
        host.add_buffer(str(path), filetype=guess_filetype(str(path)), lines=lines)
    return host


@dataclass
class UIState:
    sidebar_buffer: int | None = None
    sidebar_window: int | None = None


class TablineDemoApp(App[None]):
    """Tab strip on top, current buffer below, key bindings for the commands."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#tabline {
		height: 1;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
        ("l", "tabs_next", "Next"),
        ("h", "tabs_previous", "Previous"),
        ("enter", "tabs_open", "Open"),
        ("e", "edit_next", "Edit next"),
        ("x", "close_buffer", "Close"),
        ("b", "toggle_sidebar", "Sidebar"),
    ]

    def __init__(
        self,
        paths: Sequence[str],
        *,
        config: Optional[TabsConfig] = None,
        restore: Sequence[str] = (),
    ) -> None:
        super().__init__()
        self.host = load_host(paths)
        self.config = config or TabsConfig.from_options(
            {
                "offsets": [{"filetype": SIDEBAR_FILETYPE, "title": "Explorer"}],
                "ignored": [SIDEBAR_FILETYPE],
            }
        )
        self.manager = TablineManager(
            self.host, self.config, icons=TableIconProvider()
        )
        self.adapter: TextualTablineAdapter | None = None
        self._restore = tuple(restore)
        self._ui = UIState()
        self._tabline_widget: Static | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._tabline_widget = Static("", id="tabline")
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._tabline_widget
        yield self._buffer_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualTablineHooks(
            update_tabline=self._update_tabline,
            update_status=self._update_status,
            set_visible=self._set_tabline_visible,
            log=self.log.info,
        )
        self.adapter = TextualTablineAdapter(self.manager, self.host, hooks)
        self.adapter.resize(self.size.width)
        for handle in self.host.list_buffers():
            self.host.enter_buffer(handle)
        if self._restore:
            self.manager.restore_order(self._restore)
        self._show_current_buffer()

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width)

    def action_tabs_next(self) -> None:
        self._run("TabsNext")

    def action_tabs_previous(self) -> None:
        self._run("TabsPrevious")

    def action_tabs_open(self) -> None:
        self._run("TabsOpen")
        self._show_current_buffer()

    def action_edit_next(self) -> None:
        """Enter the next listed buffer in host order, like ``:bnext``."""

        handles = [
            h
            for h in self.host.list_buffers()
            if self.host.buffer_listed(h) and self.host.buffer_type(h) == ""
        ]
        if not handles:
            return
        current = self.host.current_buffer
        position = handles.index(current) + 1 if current in handles else 0
        self.host.enter_buffer(handles[position % len(handles)])
        self._show_current_buffer()

    def action_close_buffer(self) -> None:
        current = self.host.current_buffer
        if current is None:
            return
        self.host.delete_buffer(current)
        self._show_current_buffer()

    def action_toggle_sidebar(self) -> None:
        if self._ui.sidebar_window is not None:
            self.host.close_window(self._ui.sidebar_window)
            self._ui.sidebar_window = None
        else:
            if self._ui.sidebar_buffer is None:
                self._ui.sidebar_buffer = self.host.add_buffer(
                    "explorer://", filetype=SIDEBAR_FILETYPE, listed=False
                )
            self._ui.sidebar_window = self.host.open_window(
                self._ui.sidebar_buffer, SIDEBAR_WIDTH
            )
        self.host.request_redraw()

    def _run(self, command: str) -> None:
        if self.adapter:
            self.adapter.run_command(command)

    def _update_tabline(self, text: Text) -> None:
        if self._tabline_widget:
            self._tabline_widget.update(text)

    def _set_tabline_visible(self, visible: bool) -> None:
        if self._tabline_widget:
            self._tabline_widget.display = visible

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _show_current_buffer(self) -> None:
        if not self._buffer_widget:
            return
        current = self.host.current_buffer
        if current is None:
            self._buffer_widget.update("")
            self._update_status("no buffer")
            return
        buffer = self.host.buffer(current)
        self._buffer_widget.update(Text("\n".join(buffer.lines)))
        self._update_status(resolve_name(self.host, current) or "[No Name]")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the recency tab strip demo.")
    parser.add_argument("paths", nargs="*", help="Files to open as buffers")
    parser.add_argument(
        "--max-tabs",
        type=int,
        default=int(os.environ.get("RECENCY_TABS_MAX_TABS", "10")),
        help="Maximum number of tabs shown at once (default: 10)",
    )
    parser.add_argument(
        "--autohide",
        action="store_true",
        help="Hide the strip after opening a tab",
    )
    parser.add_argument(
        "--restore",
        metavar="FILE",
        help="Restore tab order from a file with one path per line",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.lower() for level in telemetry.LEVELS],
        help="Override RECENCY_TABS_LOG_LEVEL for this run",
    )
    parser.add_argument(
        "--log-file",
        metavar="FILE",
        help="Write logs to FILE (console logging stays off while the app runs)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(level=args.log_level, log_file=args.log_file, console=False)
    config = TabsConfig.from_options(
        {
            "max_tabs": args.max_tabs,
            "autohide": args.autohide,
            "offsets": [{"filetype": SIDEBAR_FILETYPE, "title": "Explorer"}],
            "ignored": [SIDEBAR_FILETYPE],
        }
    )
    restore: list[str] = []
    if args.restore:
        restore = Path(args.restore).read_text(encoding="utf-8").splitlines()
    app = TablineDemoApp(args.paths or ["untitled.txt"], config=config, restore=restore)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
