"""
Client-local set of bookmarked job ids.
"""
from __future__ import annotations

import json
import logging
from typing import FrozenSet

from client.storage import BOOKMARKS_KEY, KeyValueStore

log = logging.getLogger("client")


def _parse(raw: str | None) -> FrozenSet[int]:
    if not raw:
        return frozenset()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        log.warning("Ignoring malformed bookmarks", extra={"raw": raw[:100]})
        return frozenset()
    if not isinstance(data, list):
        return frozenset()
    ids = set()
    for item in data:
        if isinstance(item, bool):
            continue
        if isinstance(item, int):
            ids.add(item)
        elif isinstance(item, str) and item.strip().lstrip("-").isdigit():
            ids.add(int(item))
    return frozenset(ids)


class BookmarkStore:
    """
    Bookmarks survive restarts through the key-value store. Ids are never
    reconciled with the server; a bookmark for a deleted job just stays.
    """

    def __init__(self, kv: KeyValueStore):
        self._kv = kv
        self._ids: FrozenSet[int] = _parse(kv.get(BOOKMARKS_KEY))

    def all(self) -> FrozenSet[int]:
        return self._ids

    def is_bookmarked(self, job_id: int) -> bool:
        return int(job_id) in self._ids

    def toggle(self, job_id: int) -> bool:
        """Flip membership; returns True when the job is now bookmarked."""
        job_id = int(job_id)
        if job_id in self._ids:
            updated = self._ids - {job_id}
        else:
            updated = self._ids | {job_id}

        # Persist before the snapshot moves; a failed write raises and nothing changes.
        self._kv.set(BOOKMARKS_KEY, json.dumps(sorted(updated)))
        self._ids = frozenset(updated)
        return job_id in self._ids


__all__ = ["BookmarkStore"]
