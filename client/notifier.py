"""
Desktop notification sink.

The watcher only needs three things from the platform: the current permission
("default", "granted" or "denied"), a way to ask for it, and a way to show a
notification. LogNotifier covers headless runs by writing notifications to the
log.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol

log = logging.getLogger("client")

NOTIFICATION_ICON = "/images/notification-icon.png"
NOTIFICATION_BADGE = "/images/notification-badge.png"

PERMISSION_DEFAULT = "default"
PERMISSION_GRANTED = "granted"
PERMISSION_DENIED = "denied"

# Where a notification button leads when the notification carries no url of its own.
ACTION_TARGETS = {"view": "/jobs", "explore": "/jobs", "download": "/admit-cards"}
CLOSE_ACTIONS = frozenset({"close", "dismiss"})

PUSH_TITLE = "SarkariJob Update"
PUSH_BODY = "New government jobs are available!"


@dataclass(frozen=True)
class Notification:
    title: str
    body: str
    tag: str
    url: Optional[str] = None
    icon: str = NOTIFICATION_ICON
    badge: str = NOTIFICATION_BADGE
    require_interaction: bool = False
    actions: tuple = ()


def click_target(notification: Notification, action: str = "") -> Optional[str]:
    """
    Return the path a click on `notification` opens, or None when the click only
    closes it. `action` is the button id; "" means the notification body itself.
    """
    if action in CLOSE_ACTIONS:
        return None
    if action in ACTION_TARGETS:
        return notification.url or ACTION_TARGETS[action]
    return notification.url or "/"


def notification_from_push(payload: Any) -> Notification:
    """Build the notification for an incoming push message. The payload body wins when present."""
    data = payload if isinstance(payload, dict) else {}
    return Notification(
        title=PUSH_TITLE,
        body=data.get("body") or PUSH_BODY,
        tag=data.get("tag") or "push",
        url=data.get("url"),
        actions=(("explore", "View Jobs"), ("close", "Close")),
    )


class Notifier(Protocol):
    permission: str

    async def request_permission(self) -> str: ...

    def show(self, notification: Notification) -> None: ...


@dataclass
class LogNotifier:
    """
    Writes notifications to the "client" logger and keeps them in `shown`.

    `grant_on_request` is the answer request_permission() gives when the
    permission is still "default".
    """

    permission: str = field(default_factory=lambda: os.getenv("NOTIFICATION_PERMISSION", PERMISSION_DEFAULT))
    grant_on_request: bool = True
    shown: List[Notification] = field(default_factory=list)

    async def request_permission(self) -> str:
        if self.permission == PERMISSION_DEFAULT:
            self.permission = PERMISSION_GRANTED if self.grant_on_request else PERMISSION_DENIED
        return self.permission

    def show(self, notification: Notification) -> None:
        self.shown.append(notification)
        log.info(
            "%s - %s",
            notification.title,
            notification.body,
            extra={"tag": notification.tag, "url": notification.url},
        )


__all__ = [
    "Notification",
    "click_target",
    "notification_from_push",
    "Notifier",
    "LogNotifier",
    "PERMISSION_DEFAULT",
    "PERMISSION_GRANTED",
    "PERMISSION_DENIED",
]
