from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from app.layout import render_page
from core.database import (
    ADMIT_CARD,
    ANSWER_KEY,
    FIRST_CLASS_CATEGORIES,
    JOB,
    RESULT,
    ListingFilters,
    category_counts,
    get_record,
    list_records,
)
from core.errors import NotFound, StoreFailure
from core.render import (
    NO_DATA,
    escape,
    render_admit_cards,
    render_answer_keys,
    render_error,
    render_job_card,
    render_jobs,
    render_results,
)

router = APIRouter()

HOME_LATEST_JOBS = 6
HOME_RECENT_RESULTS = 5
JOBS_PAGE_SIZE = 20


def _panel(kind, filters, renderer, what: str, **render_kwargs) -> str:
    """Fetch and render one panel; a store failure only affects this panel."""
    try:
        records = list_records(kind, filters)
    except StoreFailure:
        return render_error(f"Failed to load {what}. Please try again.")
    return renderer(records, **render_kwargs)


def _category_panel() -> str:
    try:
        counts = category_counts()
    except StoreFailure:
        return render_error("Failed to load categories.")

    cards = []
    for name in FIRST_CLASS_CATEGORIES:
        cards.append(
            f"""
            <a class="category-card" href="/jobs?category={quote(name)}">
              <div>{escape(name)}</div>
              <div class="count">{counts.get(name, 0)} Jobs</div>
            </a>
            """
        )
    return f'<div class="categories">{"".join(cards)}</div>'


def render_not_found(message: str = "The page you are looking for does not exist.") -> HTMLResponse:
    body = f"""
    <section>
      <h2>404 - Page not found</h2>
      <p class="muted">{escape(message)}</p>
      <p><a href="/">Back to home</a></p>
    </section>
    """
    return render_page("Not found", body, status_code=404)


@router.get("/", response_class=HTMLResponse)
def index():
    latest = _panel(
        JOB,
        ListingFilters(limit=HOME_LATEST_JOBS),
        render_jobs,
        "jobs",
        empty_message=NO_DATA["latest_jobs"],
    )
    results = _panel(RESULT, ListingFilters(limit=HOME_RECENT_RESULTS), render_results, "results")

    body = f"""
    <section>
      <h2>Browse by category</h2>
      <div id="category-counts">{_category_panel()}</div>
    </section>
    <section>
      <h2>Latest Jobs</h2>
      <div id="latest-jobs">{latest}</div>
      <p><a href="/jobs">View all jobs</a></p>
    </section>
    <section>
      <h2>Recent Results</h2>
      <div id="recent-results">{results}</div>
    </section>
    """
    return render_page("Home", body, active="/")


@router.get("/jobs", response_class=HTMLResponse)
def jobs_page(category: Optional[str] = None, search: Optional[str] = None, page: Optional[str] = None):
    filters = ListingFilters.from_params(category=category, search=search, limit=JOBS_PAGE_SIZE, page=page)
    listing = _panel(JOB, filters, render_jobs, "jobs")

    options = ['<option value="">All categories</option>']
    for name in FIRST_CLASS_CATEGORIES:
        selected = " selected" if name == filters.category else ""
        options.append(f'<option value="{escape(name)}"{selected}>{escape(name)}</option>')

    body = f"""
    <form class="search" method="get" action="/jobs">
      <input type="text" name="search" placeholder="Search by title or department" value="{escape(filters.search or '')}" />
      <select name="category">{"".join(options)}</select>
      <button type="submit">Search</button>
    </form>
    <div id="jobs-container">{listing}</div>
    """
    return render_page("Jobs", body, active="/jobs")


@router.get("/jobs/{job_id}", response_class=HTMLResponse)
def job_detail(job_id: str):
    try:
        job = get_record(JOB, job_id)
    except NotFound as exc:
        return render_not_found(str(exc))
    except StoreFailure:
        return render_page("Job", render_error("Failed to load job. Please try again."), active="/jobs")

    return render_page(job["title"], render_job_card(job), active="/jobs")


@router.get("/results", response_class=HTMLResponse)
def results_page():
    body = f'<div id="results-container">{_panel(RESULT, None, render_results, "results")}</div>'
    return render_page("Results", body, active="/results")


@router.get("/admit-cards", response_class=HTMLResponse)
def admit_cards_page():
    body = f'<div id="admit-cards-container">{_panel(ADMIT_CARD, None, render_admit_cards, "admit cards")}</div>'
    return render_page("Admit Cards", body, active="/admit-cards")


@router.get("/answer-keys", response_class=HTMLResponse)
def answer_keys_page():
    body = f'<div id="answer-keys-container">{_panel(ANSWER_KEY, None, render_answer_keys, "answer keys")}</div>'
    return render_page("Answer Keys", body, active="/answer-keys")


@router.get("/health")
def health():
    """
    Basic health check for the app.
    """
    try:
        return {"status": "ok", "jobs": category_counts()}
    except StoreFailure as e:
        return {"status": "error", "detail": str(e)}


@router.get("/favicon.ico")
def favicon():
    # Return empty 204 to avoid log noise for missing favicon
    return Response(status_code=204)
