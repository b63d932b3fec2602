"""Most-recently-visited ordering of buffers."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, Sequence, Set

from recency_tabs.host import HostBridge, InvalidBufferError
from recency_tabs.icons import IconProvider, NullIconProvider
from recency_tabs.runtime.telemetry import record_event, span

from .records import BufferRecord, resolve_name

LOGGER_NAME = "recency_tabs.recency"


class RecencyList:
    """Visited buffers, unique by handle; index 0 is the current buffer."""

    def __init__(
        self,
        host: HostBridge,
        *,
        icons: Optional[IconProvider] = None,
        ignored: Iterable[str] = (),
    ) -> None:
        self._host = host
        self._icons: IconProvider = icons or NullIconProvider()
        self._ignored = frozenset(ignored)
        self._records: List[BufferRecord] = []
        self._seen_styles: Set[str] = set()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BufferRecord]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> BufferRecord:
        return self._records[index]

    @property
    def records(self) -> Sequence[BufferRecord]:
        return tuple(self._records)

    def handles(self) -> tuple[int, ...]:
        return tuple(record.handle for record in self._records)

    def index_of(self, handle: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.handle == handle:
                return index
        return None

    def visit(self, handle: int) -> bool:
        """Move ``handle`` to the front; ``False`` when it is ignored or stale."""

        with span(
            "recency::visit",
            logger_name=LOGGER_NAME,
            component="recency",
            metadata={"handle": handle},
        ) as trace:
            try:
                filetype = self._host.buffer_filetype(handle)
            except InvalidBufferError:
                trace.add_metadata("status", "invalid")
                return False
            if filetype in self._ignored:
                trace.add_metadata("status", "ignored")
                return False

            self._records = [r for r in self._records if r.handle != handle]
            self._records.insert(0, self._make_record(handle, filetype))
            self.prune()
            return True

    def remove(self, handle: int) -> Optional[int]:
        index = self.index_of(handle)
        if index is not None:
            del self._records[index]
        return index

    def clear(self) -> None:
        self._records = []

    def prune(self) -> int:
        """Drop records for invalid, unlisted, or special buffers."""

        kept = [r for r in self._records if self._is_real_buffer(r.handle)]
        dropped = len(self._records) - len(kept)
        self._records = kept
        if dropped:
            record_event(
                "recency.prune",
                level="info",
                data={"dropped": dropped},
                logger_name=LOGGER_NAME,
            )
        return dropped

    def ordered_paths(self) -> list[str]:
        paths: list[str] = []
        for record in self._records:
            name = resolve_name(self._host, record.handle)
            if name:
                paths.append(name)
        return paths

    def restore_order(self, paths: Sequence[str]) -> None:
        """Stable-sort records by their position in ``paths``; unknowns go last.

        A path listed more than once ranks at its last occurrence.
        """

        rank: dict[str, int] = {path: index for index, path in enumerate(paths)}

        def sort_key(record: BufferRecord) -> float:
            name = resolve_name(self._host, record.handle)
            if name is None:
                return math.inf
            return rank.get(name, math.inf)

        self._records.sort(key=sort_key)

    def _is_real_buffer(self, handle: int) -> bool:
        host = self._host
        try:
            return (
                host.buffer_valid(handle)
                and host.buffer_listed(handle)
                and host.buffer_type(handle) == ""
            )
        except InvalidBufferError:
            return False

    def _make_record(self, handle: int, filetype: str) -> BufferRecord:
        spec = self._icons.lookup(filetype)
        if spec is None:
            return BufferRecord(handle=handle)

        style = f"Tabs{spec.group}"
        if style not in self._seen_styles:
            source = self._host.get_highlight(spec.group)
            fg = source.get("fg", spec.fg)
            highlight = {"fg": fg} if fg is not None else {}
            if "ctermfg" in source:
                highlight["ctermfg"] = source["ctermfg"]
            self._host.set_highlight(style, highlight)
            self._seen_styles.add(style)
        return BufferRecord(handle=handle, icon=spec.glyph, icon_style=style)


__all__ = ["RecencyList"]
