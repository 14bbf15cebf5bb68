"""
New-job notification watcher.

Polls the newest jobs on a timer and raises one desktop notification per batch
of jobs it has not seen. "Seen" is a high-water mark on job ids kept in the
client key-value store (`lastJobId`), so a restart does not re-announce old
jobs. The watcher is gated on notification permission and on the user's
`notificationsEnabled` flag; while gated, every check is a no-op.
"""
from __future__ import annotations

import asyncio
import enum
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from client.api_client import NetworkFailure
from client.context import ClientContext
from client.notifier import (
    PERMISSION_DEFAULT,
    PERMISSION_GRANTED,
    Notification,
    click_target,
    notification_from_push,
)
from client.storage import (
    LAST_CHECK_KEY,
    LAST_JOB_ID_KEY,
    NOTIFICATIONS_ENABLED_KEY,
    PROMPT_DISMISSED_KEY,
)
from core.errors import StoreFailure

log = logging.getLogger("watcher")

# -------- CONFIG --------
CHECK_INTERVAL = 30 * 60  # seconds between scheduled checks
MIN_CHECK_SPACING = 10 * 60  # a check closer than this to the last one is skipped
INITIAL_DELAY = 5  # seconds before the first check
FETCH_SIZE = 5  # newest jobs fetched per check
PROMPT_TIMEOUT = 10  # seconds before the permission prompt hides itself
PROMPT_SNOOZE_DAYS = 7
# ------------------------

DAY_MS = 24 * 60 * 60 * 1000

WELCOME_TITLE = "SarkariJob Notifications Enabled! 🎉"
WELCOME_BODY = "You'll now receive updates about new government jobs and exam results."


class WatcherState(enum.Enum):
    IDLE = "idle"
    CHECKING = "checking"
    NOTIFYING = "notifying"


class PromptChoice(enum.Enum):
    ENABLE = "enable"
    DISMISS = "dismiss"


def _read_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def compute_delta(jobs: List[Dict], watermark: Optional[int]) -> Tuple[List[Dict], Optional[int]]:
    """
    Return (new_jobs, new_watermark).

    new_jobs keeps the fetch order (newest first). Without a watermark nothing
    counts as new; the watermark is just established from what was fetched.
    """
    ids = [int(j["id"]) for j in jobs]
    if not ids:
        return [], watermark
    highest = max(ids)
    if watermark is None:
        return [], highest
    delta = [j for j in jobs if int(j["id"]) > watermark]
    return delta, max(watermark, highest)


def new_jobs_notification(delta: List[Dict]) -> Notification:
    count = len(delta)
    latest = delta[0].get("title") or ""
    if count == 1:
        title = "🆕 New Government Job Available!"
        body = latest
    else:
        title = f"🆕 {count} New Government Jobs Available!"
        body = f"Latest: {latest} and {count - 1} more"
    return Notification(
        title=title,
        body=body,
        tag="new-jobs",
        url="/jobs",
        require_interaction=True,
        actions=(("view", "View Jobs"), ("dismiss", "Dismiss")),
    )


class NotificationWatcher:
    def __init__(
        self,
        ctx: ClientContext,
        *,
        check_interval: float = CHECK_INTERVAL,
        initial_delay: float = INITIAL_DELAY,
        min_spacing: float = MIN_CHECK_SPACING,
        fetch_size: int = FETCH_SIZE,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.ctx = ctx
        self.check_interval = check_interval
        self.initial_delay = initial_delay
        self.min_spacing = min_spacing
        self.fetch_size = fetch_size
        self._sleep = sleep
        self.state = WatcherState.IDLE

    @property
    def watermark(self) -> Optional[int]:
        return _read_int(self.ctx.kv.get(LAST_JOB_ID_KEY))

    def is_enabled(self) -> bool:
        return (
            self.ctx.notifier.permission == PERMISSION_GRANTED
            and self.ctx.kv.get(NOTIFICATIONS_ENABLED_KEY) != "false"
        )

    def _too_soon(self, now_ms: int) -> bool:
        last = _read_int(self.ctx.kv.get(LAST_CHECK_KEY))
        return last is not None and now_ms - last < self.min_spacing * 1000

    async def check_once(self) -> Optional[Notification]:
        """
        Run one check. Returns the notification shown, if any.
        Fetch failures leave the watermark and last-check time untouched.
        """
        if not self.is_enabled():
            return None
        now_ms = self.ctx.now_ms()
        if self._too_soon(now_ms):
            log.info("Skipping check, last one was too recent")
            return None

        self.state = WatcherState.CHECKING
        try:
            try:
                jobs = await self.ctx.api.list_jobs(limit=self.fetch_size)
            except (NetworkFailure, StoreFailure) as e:
                log.error("Error checking for new jobs", extra={"error": str(e)})
                return None

            current = self.watermark
            delta, watermark = compute_delta(jobs, current)

            notification = None
            if delta:
                self.state = WatcherState.NOTIFYING
                notification = new_jobs_notification(delta)
                self.ctx.notifier.show(notification)
                log.info("New jobs found", extra={"count": len(delta), "watermark": watermark})

            if watermark is not None and watermark != current:
                self.ctx.kv.set(LAST_JOB_ID_KEY, str(watermark))
            self.ctx.kv.set(LAST_CHECK_KEY, str(now_ms))
            return notification
        finally:
            self.state = WatcherState.IDLE

    async def run(self) -> None:
        """Check after the initial delay, then on every interval, until cancelled."""
        await self._sleep(self.initial_delay)
        while True:
            try:
                await self.check_once()
            except Exception as e:
                log.exception("Error during check", extra={"error": str(e)})
            await self._sleep(self.check_interval)

    async def disable(self) -> None:
        """Turn notifications off; the timer keeps running but checks become no-ops."""
        self.ctx.kv.set(NOTIFICATIONS_ENABLED_KEY, "false")
        if self.ctx.push is not None:
            await self.ctx.push.unsubscribe()

    def _show_if_granted(self, notification: Notification) -> bool:
        if self.ctx.notifier.permission != PERMISSION_GRANTED:
            return False
        self.ctx.notifier.show(notification)
        return True

    def notify_result(self, result_title: str) -> bool:
        return self._show_if_granted(
            Notification(
                title="📊 New Exam Result Published!",
                body=result_title,
                tag="new-result",
                url="/results",
                actions=(("view", "View Result"),),
            )
        )

    def notify_admit_card(self, exam_title: str) -> bool:
        return self._show_if_granted(
            Notification(
                title="🎫 New Admit Card Available!",
                body=f"Admit card for {exam_title} is now available for download",
                tag="new-admit-card",
                url="/admit-cards",
                actions=(("download", "Download"),),
            )
        )

    def send_custom(self, title: str, body: str, tag: str = "custom") -> bool:
        return self._show_if_granted(Notification(title=title, body=body, tag=tag))

    def on_push(self, payload) -> bool:
        return self._show_if_granted(notification_from_push(payload))

    def on_click(self, notification: Notification, action: str = "") -> Optional[str]:
        """Return the absolute URL a click opens, or None when the click only closes the notification."""
        target = click_target(notification, action)
        if target is None:
            return None
        log.info("Opening notification target", extra={"tag": notification.tag, "action": action, "target": target})
        return f"{self.ctx.origin}{target}"


class NotificationPrompt:
    """
    The "Stay Updated!" prompt. Shown while permission is undecided and the
    user hasn't clicked "Maybe later" in the last week.
    """

    def __init__(self, ctx: ClientContext, *, timeout: float = PROMPT_TIMEOUT, snooze_days: int = PROMPT_SNOOZE_DAYS):
        self.ctx = ctx
        self.timeout = timeout
        self.snooze_days = snooze_days

    def should_show(self) -> bool:
        if self.ctx.notifier.permission != PERMISSION_DEFAULT:
            return False
        dismissed = _read_int(self.ctx.kv.get(PROMPT_DISMISSED_KEY))
        if dismissed is None:
            return True
        return self.ctx.now_ms() - dismissed > self.snooze_days * DAY_MS

    async def run(self, ask: Callable[[], Awaitable[PromptChoice]]) -> Optional[PromptChoice]:
        """
        Show the prompt through `ask` and act on the answer. No answer within
        the timeout hides the prompt without recording a dismissal.
        """
        if not self.should_show():
            return None
        try:
            choice = await asyncio.wait_for(ask(), self.timeout)
        except asyncio.TimeoutError:
            log.info("Notification prompt hidden after timeout")
            return None

        if choice is PromptChoice.ENABLE:
            await self.enable()
        elif choice is PromptChoice.DISMISS:
            self.dismiss()
        return choice

    async def enable(self) -> bool:
        permission = await self.ctx.notifier.request_permission()
        if permission != PERMISSION_GRANTED:
            log.info("Notification permission not granted", extra={"permission": permission})
            return False
        self.ctx.kv.set(NOTIFICATIONS_ENABLED_KEY, "true")
        self.ctx.notifier.show(Notification(title=WELCOME_TITLE, body=WELCOME_BODY, tag="welcome"))
        if self.ctx.push is not None:
            self.ctx.push.subscribe_in_background()
        return True

    def dismiss(self) -> None:
        self.ctx.kv.set(PROMPT_DISMISSED_KEY, str(self.ctx.now_ms()))


__all__ = [
    "CHECK_INTERVAL",
    "MIN_CHECK_SPACING",
    "INITIAL_DELAY",
    "FETCH_SIZE",
    "WatcherState",
    "PromptChoice",
    "compute_delta",
    "new_jobs_notification",
    "NotificationWatcher",
    "NotificationPrompt",
]
