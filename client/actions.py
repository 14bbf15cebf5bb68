"""
Click routing for job cards.

The router is created once per page and reads `data-action` / `data-job-id`
from the event, so re-rendering a panel never needs a rebind. Events from
detached panels, or naming a job the panel no longer shows, are ignored.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger("client")

BOOKMARK = "bookmark"
SHARE = "share"

BOOKMARK_UPDATED = "Bookmark updated successfully!"
BOOKMARK_FAILED = "Failed to update bookmark."
LINK_COPIED = "Job link copied to clipboard!"


@dataclass(frozen=True)
class ShareData:
    title: str
    text: str
    url: str


@dataclass(frozen=True)
class ActionOutcome:
    action: str
    job_id: int
    message: Optional[str] = None
    bookmarked: Optional[bool] = None
    share: Optional[ShareData] = None


class ActionRouter:
    def __init__(self, ctx, root):
        self.ctx = ctx
        self.root = root

    def dispatch(self, panel_name: str, action: str, job_id) -> Optional[ActionOutcome]:
        panel = self.root.panels.get(panel_name)
        if panel is None or not panel.attached:
            return None
        try:
            job_id = int(job_id)
        except (TypeError, ValueError):
            return None
        job = panel.find_job(job_id)
        if job is None:
            return None

        if action == BOOKMARK:
            return self._bookmark(job_id)
        if action == SHARE:
            return self._share(job)
        return None

    def _bookmark(self, job_id: int) -> ActionOutcome:
        try:
            now_bookmarked = self.ctx.bookmarks.toggle(job_id)
        except OSError as e:
            log.error("Failed to save bookmark", extra={"job_id": job_id, "error": str(e)})
            return ActionOutcome(BOOKMARK, job_id, message=BOOKMARK_FAILED)

        self.root.refresh_bookmarks()
        return ActionOutcome(BOOKMARK, job_id, message=BOOKMARK_UPDATED, bookmarked=now_bookmarked)

    def _share(self, job) -> ActionOutcome:
        job_id = int(job["id"])
        title = job.get("title") or ""
        data = ShareData(
            title=title,
            text=f"Check out this government job: {title}",
            url=f"{self.ctx.origin}/jobs/{job_id}",
        )
        return ActionOutcome(SHARE, job_id, message=LINK_COPIED, share=data)


__all__ = ["ActionRouter", "ActionOutcome", "ShareData", "BOOKMARK", "SHARE"]
