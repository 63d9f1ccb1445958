"""Utilities for deduplicating roster events and exported rows."""

from __future__ import annotations

from typing import Hashable, Iterable, List, Sequence, Set, Tuple


class DedupSet:
    """Keys of events already emitted during one run. Never evicts."""

    def __init__(self) -> None:
        self._seen: Set[Hashable] = set()

    def contains(self, key: Hashable) -> bool:
        return key in self._seen

    def insert(self, key: Hashable) -> None:
        self._seen.add(key)

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._seen)


def dedupe_by_key(
    rows: Iterable[dict],
    keys: Sequence[str],
) -> List[dict]:
    """Deduplicate rows by the composite key given by `keys`."""
    seen: set[Tuple] = set()
    unique_rows: List[dict] = []
    for row in rows:
        key = tuple(row.get(k) for k in keys)
        if key in seen:
            continue
        seen.add(key)
        unique_rows.append(row)
    return unique_rows
