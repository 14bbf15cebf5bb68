"""
Page widgets: fetch from the listing API, render, write into panels.

Each widget catches its own failures so one broken panel never blanks the
others. Panels are the containers the results land in; once a page is torn
down its panels are detached and late writes from in-flight fetches are
dropped.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional

from client.actions import ActionRouter
from client.api_client import NetworkFailure
from client.context import ClientContext
from core.db.listings.query import FIRST_CLASS_CATEGORIES
from core.errors import StoreFailure
from core.render import NO_DATA, render_error, render_jobs, render_results

log = logging.getLogger("client")

LATEST_JOBS_LIMIT = 6
RECENT_RESULTS_LIMIT = 5
JOBS_PAGE_SIZE = 20
SEARCH_DEBOUNCE_SECONDS = 0.3
SEARCH_MIN_LENGTH = 2

LOAD_ERRORS = (NetworkFailure, StoreFailure)


class Panel:
    def __init__(self, name: str, empty_message: str = NO_DATA["jobs"]):
        self.name = name
        self.empty_message = empty_message
        self.html = ""
        self.jobs: List[Dict] = []
        self.attached = True

    def write(self, html: str) -> bool:
        if not self.attached:
            log.debug("Dropping write to detached panel", extra={"panel": self.name})
            return False
        self.html = html
        return True

    def show_jobs(self, jobs: List[Dict], bookmarked) -> bool:
        if not self.attached:
            log.debug("Dropping write to detached panel", extra={"panel": self.name})
            return False
        self.jobs = list(jobs)
        self.html = render_jobs(self.jobs, bookmarked, empty_message=self.empty_message)
        return True

    def find_job(self, job_id: int) -> Optional[Dict]:
        for job in self.jobs:
            if int(job["id"]) == job_id:
                return job
        return None

    def detach(self) -> None:
        self.attached = False


def count_panel_name(category: str) -> str:
    return f"count:{category}"


class Page:
    """A set of panels plus one action router bound at the page root."""

    def __init__(self, ctx: ClientContext):
        self.ctx = ctx
        self.panels: Dict[str, Panel] = {}
        self.actions = ActionRouter(ctx, self)

    def add_panel(self, name: str, **kwargs) -> Panel:
        panel = Panel(name, **kwargs)
        self.panels[name] = panel
        return panel

    def refresh_bookmarks(self) -> None:
        bookmarked = self.ctx.bookmarks.all()
        for panel in self.panels.values():
            if panel.attached and panel.jobs:
                panel.show_jobs(panel.jobs, bookmarked)

    def teardown(self) -> None:
        for panel in self.panels.values():
            panel.detach()

    async def _load_jobs_into(self, panel: Panel, error_message: str, **params) -> None:
        try:
            jobs = await self.ctx.api.list_jobs(**params)
        except LOAD_ERRORS as e:
            log.error("Error loading jobs", extra={"panel": panel.name, "error": str(e)})
            panel.write(render_error(error_message))
            return
        panel.show_jobs(jobs, self.ctx.bookmarks.all())


class HomePage(Page):
    def __init__(self, ctx: ClientContext):
        super().__init__(ctx)
        self.add_panel("latest_jobs", empty_message=NO_DATA["latest_jobs"])
        self.add_panel("recent_results")
        for category in FIRST_CLASS_CATEGORIES:
            self.add_panel(count_panel_name(category))

    async def load(self) -> None:
        await asyncio.gather(
            self.load_latest_jobs(),
            self.load_recent_results(),
            self.load_job_counts(),
        )

    async def load_latest_jobs(self) -> None:
        await self._load_jobs_into(self.panels["latest_jobs"], "Failed to load jobs.", limit=LATEST_JOBS_LIMIT)

    async def load_recent_results(self) -> None:
        panel = self.panels["recent_results"]
        try:
            results = await self.ctx.api.list_results(limit=RECENT_RESULTS_LIMIT)
        except LOAD_ERRORS as e:
            log.error("Error loading results", extra={"error": str(e)})
            panel.write(render_error("Failed to load results."))
            return
        panel.write(render_results(results))

    async def load_job_counts(self) -> None:
        await asyncio.gather(*(self._load_count(c) for c in FIRST_CLASS_CATEGORIES))

    async def _load_count(self, category: str) -> None:
        try:
            count = await self.ctx.api.count_jobs(category=category)
        except LOAD_ERRORS as e:
            log.error("Error loading job count", extra={"category": category, "error": str(e)})
            return
        self.panels[count_panel_name(category)].write(f"{count} Jobs")


class JobsPage(Page):
    def __init__(
        self,
        ctx: ClientContext,
        *,
        category: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
    ):
        super().__init__(ctx)
        self.category = category
        self.search = search
        self.page = page
        self._pending_search: Optional[asyncio.Task] = None
        self.add_panel("jobs")

    async def load(self) -> None:
        await self._load_jobs_into(
            self.panels["jobs"],
            "Failed to load jobs. Please try again.",
            category=self.category,
            search=self.search,
            limit=JOBS_PAGE_SIZE,
            page=self.page,
        )

    def on_search_input(self, query: str) -> asyncio.Task:
        """Debounced live search; only the last keystroke within the window fetches."""
        if self._pending_search and not self._pending_search.done():
            self._pending_search.cancel()
        self._pending_search = asyncio.get_running_loop().create_task(self._debounced_search(query))
        return self._pending_search

    async def _debounced_search(self, query: str) -> None:
        await asyncio.sleep(SEARCH_DEBOUNCE_SECONDS)
        query = query.strip()
        if len(query) < SEARCH_MIN_LENGTH:
            return
        self.search = query
        self.page = 1
        await self.load()

    def teardown(self) -> None:
        if self._pending_search and not self._pending_search.done():
            self._pending_search.cancel()
        super().teardown()


__all__ = ["Panel", "Page", "HomePage", "JobsPage", "count_panel_name"]
