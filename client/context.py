"""
One object carrying the client's collaborators, passed to pages and the watcher
instead of module-level globals.
"""
from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from client.api_client import API_BASE_URL, ListingClient
from client.bookmarks import BookmarkStore
from client.notifier import LogNotifier, Notifier
from client.push import PushChannel
from client.storage import JsonFileStore, KeyValueStore

CLIENT_STATE_PATH = os.getenv("CLIENT_STATE_PATH", ".sarkarijob-client.json")


@dataclass
class ClientContext:
    kv: KeyValueStore
    api: ListingClient
    notifier: Notifier
    push: Optional[PushChannel] = None
    origin: str = API_BASE_URL
    clock: Callable[[], float] = time.time
    bookmarks: BookmarkStore = field(init=False)

    def __post_init__(self):
        self.bookmarks = BookmarkStore(self.kv)
        self.origin = self.origin.rstrip("/")

    def now_ms(self) -> int:
        return int(self.clock() * 1000)

    @classmethod
    def from_env(cls) -> "ClientContext":
        api = ListingClient(API_BASE_URL)
        return cls(
            kv=JsonFileStore(CLIENT_STATE_PATH),
            api=api,
            notifier=LogNotifier(),
            push=PushChannel(None, api),
            origin=API_BASE_URL,
        )

    async def aclose(self) -> None:
        await self.api.aclose()


__all__ = ["CLIENT_STATE_PATH", "ClientContext"]
