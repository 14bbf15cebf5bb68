"""
Pure record-to-markup renderers.

Every function here takes plain record dicts (the JSON shape served by the
listing endpoints) plus, for jobs, a snapshot of bookmarked ids, and returns an
HTML fragment string. Nothing is bound to the fragment; clicks are routed by the
`data-action` attributes through client.actions.
"""
from __future__ import annotations

import html
from datetime import date
from typing import AbstractSet, Callable, Dict, Iterable
from urllib.parse import urlparse

NOT_SPECIFIED = "Not specified"

NO_DATA = {
    "jobs": "No jobs found matching your criteria.",
    "latest_jobs": "No jobs available at the moment.",
    "results": "No recent results available.",
    "admit_cards": "No admit cards available.",
    "answer_keys": "No answer keys available.",
}

DateFormatter = Callable[[date], str]


def escape(value) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def safe_link(url) -> str:
    """Only http(s) links make it into an href; anything else becomes '#'."""
    if not url:
        return "#"
    scheme = urlparse(str(url).strip()).scheme.lower()
    if scheme not in ("http", "https"):
        return "#"
    return escape(str(url).strip())


def locale_date(value: date) -> str:
    # %x follows the active LC_TIME locale, i.e. the viewer's conventions.
    return value.strftime("%x")


def format_date(raw, formatter: DateFormatter = locale_date) -> str:
    if not raw:
        return NOT_SPECIFIED
    try:
        parsed = date.fromisoformat(str(raw)[:10])
    except ValueError:
        return escape(raw)
    return escape(formatter(parsed))


def render_message(message: str, css_class: str = "no-data") -> str:
    return f'<p class="{css_class}">{escape(message)}</p>'


def render_error(message: str) -> str:
    return render_message(message, "error")


def render_job_card(
    job: Dict,
    bookmarked: AbstractSet[int] = frozenset(),
    *,
    date_formatter: DateFormatter = locale_date,
) -> str:
    job_id = int(job["id"])
    is_bookmarked = job_id in bookmarked
    posts = job.get("posts")
    posts_text = f"{escape(posts)} Posts" if posts else NOT_SPECIFIED
    department = job.get("department")
    department_tag = f'<span class="job-tag">{escape(department)}</span>' if department else ""

    return f"""
    <div class="job-card" data-job-id="{job_id}">
      <div class="job-header">
        <h3 class="job-title">{escape(job.get("title"))}</h3>
        <div class="job-department">{escape(department)}</div>
      </div>
      <div class="job-details">
        <div class="job-detail"><span>📍</span><span>{escape(job.get("location") or NOT_SPECIFIED)}</span></div>
        <div class="job-detail"><span>🎓</span><span>{escape(job.get("qualification") or NOT_SPECIFIED)}</span></div>
        <div class="job-detail"><span>👥</span><span>{posts_text}</span></div>
        <div class="job-detail"><span>📅</span><span>Last Date: {format_date(job.get("last_date"), date_formatter)}</span></div>
      </div>
      <div class="job-tags">
        <span class="job-tag">{escape(job.get("category"))}</span>
        {department_tag}
      </div>
      <div class="job-actions">
        <a href="{safe_link(job.get("application_link"))}" class="apply-btn" target="_blank" rel="noopener">Apply Now</a>
        <button class="bookmark-btn{' bookmarked' if is_bookmarked else ''}"
                data-action="bookmark" data-job-id="{job_id}"
                title="{'Remove from bookmarks' if is_bookmarked else 'Add to bookmarks'}">{'❤️' if is_bookmarked else '🤍'}</button>
        <button class="share-btn" data-action="share" data-job-id="{job_id}" title="Share job">📤</button>
      </div>
    </div>
    """


def render_jobs(
    jobs: Iterable[Dict],
    bookmarked: AbstractSet[int] = frozenset(),
    *,
    empty_message: str = NO_DATA["jobs"],
    date_formatter: DateFormatter = locale_date,
) -> str:
    jobs = list(jobs)
    if not jobs:
        return render_message(empty_message)
    return "".join(render_job_card(j, bookmarked, date_formatter=date_formatter) for j in jobs)


def render_result_item(result: Dict, *, date_formatter: DateFormatter = locale_date) -> str:
    return f"""
    <div class="result-item">
      <h3 class="result-title">{escape(result.get("title"))}</h3>
      <div class="result-exam">{escape(result.get("exam_name"))}</div>
      <div class="result-actions">
        <div class="result-date">Published: {format_date(result.get("published_date"), date_formatter)}</div>
        <a href="{safe_link(result.get("result_link"))}" class="download-btn" target="_blank" rel="noopener">View Result</a>
      </div>
    </div>
    """


def _render_download_item(record: Dict, date_label: str, date_value, link_text: str, formatter) -> str:
    return f"""
    <div class="result-item">
      <h3 class="result-title">{escape(record.get("title"))}</h3>
      <div class="result-exam">{escape(record.get("exam_name"))}</div>
      <div class="result-actions">
        <div class="result-date">{date_label}: {format_date(date_value, formatter)}</div>
        <a href="{safe_link(record.get("download_link"))}" class="download-btn" target="_blank" rel="noopener">{link_text}</a>
      </div>
    </div>
    """


def render_admit_card_item(card: Dict, *, date_formatter: DateFormatter = locale_date) -> str:
    return _render_download_item(card, "Exam Date", card.get("exam_date"), "Download Admit Card", date_formatter)


def render_answer_key_item(key: Dict, *, date_formatter: DateFormatter = locale_date) -> str:
    return _render_download_item(key, "Published", key.get("published_date"), "Download Answer Key", date_formatter)


def _render_list(records, item_renderer, empty_message, date_formatter) -> str:
    records = list(records)
    if not records:
        return render_message(empty_message)
    return "".join(item_renderer(r, date_formatter=date_formatter) for r in records)


def render_results(results: Iterable[Dict], *, date_formatter: DateFormatter = locale_date) -> str:
    return _render_list(results, render_result_item, NO_DATA["results"], date_formatter)


def render_admit_cards(cards: Iterable[Dict], *, date_formatter: DateFormatter = locale_date) -> str:
    return _render_list(cards, render_admit_card_item, NO_DATA["admit_cards"], date_formatter)


def render_answer_keys(keys: Iterable[Dict], *, date_formatter: DateFormatter = locale_date) -> str:
    return _render_list(keys, render_answer_key_item, NO_DATA["answer_keys"], date_formatter)
