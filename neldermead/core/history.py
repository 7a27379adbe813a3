"""Append-only record of the simplexes visited by a search."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

from neldermead.core.simplex import Simplex


class SimplexHistory:
    """Ordered snapshots: the initial simplex followed by one per iteration.

    Snapshots are never replaced or removed. ``Simplex`` is immutable, so an
    appended entry stays exactly as recorded.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[Simplex] = []

    def append(self, simplex: Simplex) -> None:
        if not isinstance(simplex, Simplex):
            msg = f"Only Simplex snapshots can be recorded, got {type(simplex).__name__}"
            raise TypeError(msg)
        if self._entries and simplex.dimension != self._entries[0].dimension:
            msg = "All snapshots in a history must share one dimension"
            raise ValueError(msg)
        self._entries.append(simplex)

    def get_vector_history(self) -> list[Simplex]:
        return list(self._entries)

    @property
    def initial(self) -> Simplex:
        if not self._entries:
            raise IndexError("history is empty")
        return self._entries[0]

    @property
    def final(self) -> Simplex:
        if not self._entries:
            raise IndexError("history is empty")
        return self._entries[-1]

    def to_dict(self) -> dict[str, object]:
        return {
            "iterations": max(len(self._entries) - 1, 0),
            "simplexes": [simplex.to_dict() for simplex in self._entries],
        }

    def export_json(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return target

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Simplex]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> Simplex:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"SimplexHistory(entries={len(self._entries)})"
