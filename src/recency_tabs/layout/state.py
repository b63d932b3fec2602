"""Selection and scroll position of the tab strip."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ViewState:
    """Mutable selection + scroll state; ``view_start <= selected_index``."""

    selected_index: int = 0
    view_start: int = 0

    def reset(self) -> None:
        self.selected_index = 0
        self.view_start = 0
