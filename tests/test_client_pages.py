import asyncio

import pytest

import client.pages as pages_module
from client.actions import ShareData
from client.api_client import NetworkFailure
from client.context import ClientContext
from client.notifier import LogNotifier
from client.pages import HomePage, JobsPage, count_panel_name
from client.storage import MemoryStore
from core.errors import StoreFailure


def _jobs(*ids):
    return [
        {"id": i, "title": f"Job {i}", "department": "SSC", "category": "Central Government"}
        for i in ids
    ]


class FakeApi:
    def __init__(self, jobs=(), results=(), counts=None, jobs_error=None, results_error=None, failing_counts=()):
        self.jobs = list(jobs)
        self.results = list(results)
        self.counts = counts or {}
        self.jobs_error = jobs_error
        self.results_error = results_error
        self.failing_counts = set(failing_counts)
        self.job_calls = []
        self.on_list_jobs = None

    async def list_jobs(self, **params):
        self.job_calls.append(params)
        if self.on_list_jobs:
            self.on_list_jobs()
        if self.jobs_error:
            raise self.jobs_error
        return list(self.jobs)

    async def list_results(self, **params):
        if self.results_error:
            raise self.results_error
        return list(self.results)

    async def count_jobs(self, *, category=None, search=None):
        if category in self.failing_counts:
            raise NetworkFailure("timed out")
        return self.counts.get(category, 0)

    async def aclose(self):
        pass


class FailingStore(MemoryStore):
    def set(self, key, value):
        raise OSError("read-only")


def _ctx(api, kv=None):
    return ClientContext(
        kv=kv if kv is not None else MemoryStore(),
        api=api,
        notifier=LogNotifier(permission="granted"),
        origin="https://sarkari.example/",
    )


def test_home_page_panels_fail_independently():
    api = FakeApi(
        jobs=_jobs(2, 1),
        results_error=StoreFailure("Failed to load results"),
        counts={"Banking": 3},
        failing_counts={"Railway"},
    )
    page = HomePage(_ctx(api))
    asyncio.run(page.load())

    assert "Job 2" in page.panels["latest_jobs"].html
    assert "Failed to load results." in page.panels["recent_results"].html
    assert page.panels[count_panel_name("Banking")].html == "3 Jobs"
    assert page.panels[count_panel_name("Teaching")].html == "0 Jobs"
    assert page.panels[count_panel_name("Railway")].html == ""
    assert api.job_calls == [{"limit": 6}]


def test_home_page_without_jobs():
    page = HomePage(_ctx(FakeApi()))
    asyncio.run(page.load())
    assert "No jobs available at the moment." in page.panels["latest_jobs"].html
    assert "No recent results available." in page.panels["recent_results"].html


def test_jobs_page_passes_filters():
    api = FakeApi(jobs=_jobs(1))
    page = JobsPage(_ctx(api), category="Banking", search="po", page=2)
    asyncio.run(page.load())
    assert api.job_calls == [{"category": "Banking", "search": "po", "limit": 20, "page": 2}]


def test_jobs_page_network_failure():
    page = JobsPage(_ctx(FakeApi(jobs_error=NetworkFailure("refused"))))
    asyncio.run(page.load())
    assert "Failed to load jobs. Please try again." in page.panels["jobs"].html


def test_writes_after_teardown_are_dropped():
    api = FakeApi(jobs=_jobs(1))
    page = JobsPage(_ctx(api))
    api.on_list_jobs = page.teardown

    asyncio.run(page.load())

    assert page.panels["jobs"].html == ""
    assert page.panels["jobs"].jobs == []


def test_search_input_is_debounced(monkeypatch):
    monkeypatch.setattr(pages_module, "SEARCH_DEBOUNCE_SECONDS", 0)
    api = FakeApi(jobs=_jobs(1))
    page = JobsPage(_ctx(api))

    async def scenario():
        page.on_search_input("s")
        page.on_search_input("ss")
        await page.on_search_input("ssc")

    asyncio.run(scenario())
    assert api.job_calls == [{"category": None, "search": "ssc", "limit": 20, "page": 1}]


def test_short_search_input_does_not_fetch(monkeypatch):
    monkeypatch.setattr(pages_module, "SEARCH_DEBOUNCE_SECONDS", 0)
    api = FakeApi(jobs=_jobs(1))
    page = JobsPage(_ctx(api))

    async def scenario():
        await page.on_search_input(" s ")

    asyncio.run(scenario())
    assert api.job_calls == []


@pytest.fixture
def loaded_page():
    ctx = _ctx(FakeApi(jobs=_jobs(4, 3)))
    page = JobsPage(ctx)
    asyncio.run(page.load())
    return page


def test_bookmark_action_toggles_and_rerenders(loaded_page):
    page = loaded_page

    outcome = page.actions.dispatch("jobs", "bookmark", "4")
    assert outcome.message == "Bookmark updated successfully!"
    assert outcome.bookmarked is True
    assert page.ctx.bookmarks.is_bookmarked(4)
    assert 'class="bookmark-btn bookmarked"' in page.panels["jobs"].html

    # Same router keeps working after the panel was re-rendered.
    outcome = page.actions.dispatch("jobs", "bookmark", 4)
    assert outcome.bookmarked is False
    assert 'class="bookmark-btn bookmarked"' not in page.panels["jobs"].html


def test_share_action(loaded_page):
    outcome = loaded_page.actions.dispatch("jobs", "share", 3)
    assert outcome.share == ShareData(
        title="Job 3",
        text="Check out this government job: Job 3",
        url="https://sarkari.example/jobs/3",
    )
    assert outcome.message == "Job link copied to clipboard!"


def test_stray_events_are_ignored(loaded_page):
    page = loaded_page
    assert page.actions.dispatch("jobs", "bookmark", 99) is None
    assert page.actions.dispatch("nope", "bookmark", 4) is None
    assert page.actions.dispatch("jobs", "bookmark", "abc") is None
    assert page.actions.dispatch("jobs", "explode", 4) is None

    page.teardown()
    assert page.actions.dispatch("jobs", "bookmark", 4) is None
    assert page.ctx.bookmarks.all() == frozenset()


def test_bookmark_write_failure_keeps_visible_state():
    ctx = _ctx(FakeApi(jobs=_jobs(4)), kv=FailingStore())
    page = JobsPage(ctx)
    asyncio.run(page.load())
    before = page.panels["jobs"].html

    outcome = page.actions.dispatch("jobs", "bookmark", 4)

    assert outcome.message == "Failed to update bookmark."
    assert not ctx.bookmarks.is_bookmarked(4)
    assert page.panels["jobs"].html == before
