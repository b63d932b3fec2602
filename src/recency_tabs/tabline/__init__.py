"""Tab strip controller and its user commands."""

from .commands import COMMANDS, register_commands
from .manager import TablineManager

__all__ = ["COMMANDS", "TablineManager", "register_commands"]
