"""User commands exposed to the host editor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from recency_tabs.host import HostBridge

if TYPE_CHECKING:
    from .manager import TablineManager

CommandFactory = Callable[["TablineManager"], Callable[[], None]]

COMMANDS: Dict[str, CommandFactory] = {
    "TabsNext": lambda manager: manager.next,
    "TabsPrevious": lambda manager: manager.previous,
    "TabsOpen": lambda manager: manager.open,
}


def register_commands(host: HostBridge, manager: "TablineManager") -> None:
    for name, factory in COMMANDS.items():
        host.register_command(name, factory(manager))


__all__ = ["COMMANDS", "register_commands"]
