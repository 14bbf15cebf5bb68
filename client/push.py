"""
Push-subscription registration.

A PushManager is whatever platform piece can mint a push subscription for an
application server key. When none is available push is simply skipped.
"""
from __future__ import annotations

import asyncio
import base64
import logging
import os
from typing import Dict, Optional, Protocol, Set

log = logging.getLogger("client")

VAPID_PUBLIC_KEY = os.getenv(
    "VAPID_PUBLIC_KEY",
    "BFxmPYG4aOzK6O3lA5XVY9vJkR2kLOQX3F7d1Z8Y5XpJ2QwE3rT9bH6mF8pK4qS2",
)


def url_base64_to_bytes(value: str) -> bytes:
    """Decode unpadded URL-safe base64 (the VAPID key format)."""
    padding = "=" * ((4 - len(value) % 4) % 4)
    return base64.urlsafe_b64decode(value + padding)


class PushManager(Protocol):
    async def subscribe(self, application_server_key: bytes) -> Dict: ...

    async def get_subscription(self) -> Optional[Dict]: ...

    async def unsubscribe(self) -> None: ...


class PushChannel:
    """
    Mints a subscription through the PushManager and posts it to
    /api/subscribe. Failures are logged, never raised.
    """

    def __init__(self, manager: Optional[PushManager], api, vapid_public_key: str = VAPID_PUBLIC_KEY):
        self.manager = manager
        self.api = api
        self.vapid_public_key = vapid_public_key
        self._tasks: Set[asyncio.Task] = set()

    async def subscribe(self) -> bool:
        if self.manager is None:
            log.info("Push messaging is not supported")
            return False
        try:
            subscription = await self.manager.subscribe(url_base64_to_bytes(self.vapid_public_key))
            await self.api.subscribe(subscription)
        except Exception as e:
            log.error("Push subscription failed", extra={"error": str(e)})
            return False
        log.info("Push subscription successful")
        return True

    def subscribe_in_background(self) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self.subscribe())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def unsubscribe(self) -> None:
        if self.manager is None:
            return
        try:
            subscription = await self.manager.get_subscription()
            if subscription:
                await self.manager.unsubscribe()
        except Exception as e:
            log.error("Push unsubscribe failed", extra={"error": str(e)})


__all__ = ["VAPID_PUBLIC_KEY", "url_base64_to_bytes", "PushManager", "PushChannel"]
