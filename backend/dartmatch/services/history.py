"""Append-only sinks for accepted throws."""

from __future__ import annotations

from typing import List, Protocol, Tuple

from ..models import ThrowRecord


class ThrowHistory(Protocol):
    def record(self, entry: ThrowRecord) -> None:
        ...


class InMemoryThrowHistory:
    """Keep every recorded throw in arrival order."""

    def __init__(self) -> None:
        self._entries: List[ThrowRecord] = []

    def record(self, entry: ThrowRecord) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> Tuple[ThrowRecord, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class NullThrowHistory:
    def record(self, entry: ThrowRecord) -> None:
        return None
