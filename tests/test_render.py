from core.render import (
    render_admit_cards,
    render_answer_keys,
    render_job_card,
    render_jobs,
    render_results,
)

JOB = {
    "id": 7,
    "title": "SSC <CGL>",
    "department": "SSC",
    "category": "Central Government",
    "location": None,
    "qualification": None,
    "posts": None,
    "last_date": None,
    "application_link": "javascript:alert(1)",
}


def test_job_card_escapes_text_and_neutralises_links():
    html = render_job_card(JOB)
    assert "SSC &lt;CGL&gt;" in html
    assert "<CGL>" not in html
    assert 'href="#"' in html
    assert "javascript:" not in html


def test_missing_fields_render_placeholder():
    html = render_job_card(JOB)
    # location, qualification, posts and last date
    assert html.count("Not specified") == 4


def test_posts_and_http_links_render():
    job = dict(JOB, posts=1867, application_link="https://ibps.in/?a=1&b=2")
    html = render_job_card(job)
    assert "1867 Posts" in html
    assert 'href="https://ibps.in/?a=1&amp;b=2"' in html


def test_bookmark_state_comes_from_snapshot():
    assert 'class="bookmark-btn bookmarked"' in render_job_card(JOB, frozenset({7}))
    html = render_job_card(JOB, frozenset())
    assert 'class="bookmark-btn"' in html
    assert 'data-action="bookmark" data-job-id="7"' in html
    assert 'data-action="share" data-job-id="7"' in html


def test_dates_use_injected_formatter():
    job = dict(JOB, last_date="2024-08-15")
    html = render_job_card(job, date_formatter=lambda d: d.strftime("%d/%m/%Y"))
    assert "Last Date: 15/08/2024" in html


def test_unparseable_date_is_shown_escaped():
    html = render_job_card(dict(JOB, last_date="<soon>"))
    assert "Last Date: &lt;soon&gt;" in html


def test_rendering_is_pure():
    assert render_jobs([JOB], frozenset({7})) == render_jobs([JOB], frozenset({7}))


def test_empty_inputs_render_no_data_messages():
    assert "No jobs found matching your criteria." in render_jobs([])
    assert "No jobs available at the moment." in render_jobs([], empty_message="No jobs available at the moment.")
    assert "No recent results available." in render_results([])
    assert "No admit cards available." in render_admit_cards([])
    assert "No answer keys available." in render_answer_keys([])


def test_other_kinds_render_links_and_dates():
    iso = lambda d: d.isoformat()  # noqa: E731
    results = render_results(
        [{"id": 1, "title": "CHSL", "exam_name": "SSC", "result_link": "https://ssc.nic.in/r", "published_date": "2024-07-10"}],
        date_formatter=iso,
    )
    assert "Published: 2024-07-10" in results
    assert "View Result" in results

    cards = render_admit_cards(
        [{"id": 1, "title": "CGL", "exam_name": "SSC", "download_link": "ftp://x", "exam_date": "2024-08-15"}],
        date_formatter=iso,
    )
    assert "Exam Date: 2024-08-15" in cards
    assert 'href="#"' in cards

    keys = render_answer_keys([{"id": 1, "title": "Group D", "exam_name": "RRB", "download_link": None}])
    assert "Download Answer Key" in keys
    assert "Published: Not specified" in keys
