"""
String key-value storage for client-side state (bookmarks, watermark, flags).
"""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

# Keys shared by the bookmark store and the notification watcher.
BOOKMARKS_KEY = "bookmarkedJobs"
LAST_JOB_ID_KEY = "lastJobId"
LAST_CHECK_KEY = "lastJobCheck"
PROMPT_DISMISSED_KEY = "notificationPromptDismissed"
NOTIFICATIONS_ENABLED_KEY = "notificationsEnabled"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store; state lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """
    Store backed by one JSON object on disk.

    Every write replaces the file atomically (temp file + os.replace), so a
    crash mid-write leaves the previous contents intact. A missing or
    unreadable file reads as empty.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self._dump(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)


__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "BOOKMARKS_KEY",
    "LAST_JOB_ID_KEY",
    "LAST_CHECK_KEY",
    "PROMPT_DISMISSED_KEY",
    "NOTIFICATIONS_ENABLED_KEY",
]
