import pytest
from fastapi.testclient import TestClient

import app.api as api_module
from app.routes import pages
from core.database import ADMIT_CARD, ANSWER_KEY, JOB, RESULT, add_record
from core.errors import StoreFailure


@pytest.fixture
def client():
    return TestClient(api_module.app)


def test_home_renders_each_panel(client):
    add_record(JOB, title="IBPS PO <Recruitment>", department="Banking", category="Banking")

    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "IBPS PO &lt;Recruitment&gt;" in resp.text
    assert "<Recruitment>" not in resp.text
    assert "No recent results available." in resp.text
    assert "1 Jobs" in resp.text


def test_home_without_jobs(client):
    resp = client.get("/")
    assert "No jobs available at the moment." in resp.text


def test_one_failing_panel_does_not_blank_the_page(client, monkeypatch):
    add_record(JOB, title="SSC CGL", department="SSC", category="Central Government")
    real_list_records = pages.list_records

    def flaky_list_records(kind, filters=None):
        if kind is RESULT:
            raise StoreFailure("Failed to load results")
        return real_list_records(kind, filters)

    monkeypatch.setattr(pages, "list_records", flaky_list_records)

    resp = client.get("/")
    assert resp.status_code == 200
    assert "Failed to load results. Please try again." in resp.text
    assert "SSC CGL" in resp.text


def test_jobs_page_applies_filters(client):
    add_record(JOB, title="IBPS PO", department="Banking", category="Banking")
    add_record(JOB, title="RRB JE", department="Railway", category="Railway")

    resp = client.get("/jobs", params={"category": "Banking"})
    assert "IBPS PO" in resp.text
    assert "RRB JE" not in resp.text
    assert '<option value="Banking" selected>' in resp.text

    resp = client.get("/jobs", params={"search": "zzz"})
    assert "No jobs found matching your criteria." in resp.text


def test_job_detail_and_missing_job(client):
    job_id = add_record(JOB, title="UPSC CSE", department="UPSC", category="Central Government")

    resp = client.get(f"/jobs/{job_id}")
    assert resp.status_code == 200
    assert "UPSC CSE" in resp.text

    resp = client.get("/jobs/9999")
    assert resp.status_code == 404
    assert "Job not found" in resp.text

    assert client.get("/jobs/99999999999999999999").status_code == 404


def test_listing_pages(client):
    add_record(RESULT, title="CHSL Result", exam_name="CHSL")
    add_record(ADMIT_CARD, title="CGL Admit Card", exam_name="CGL")
    add_record(ANSWER_KEY, title="Group D Key", exam_name="Group D")

    assert "CHSL Result" in client.get("/results").text
    assert "CGL Admit Card" in client.get("/admit-cards").text
    assert "Group D Key" in client.get("/answer-keys").text


def test_unknown_path_serves_html_404(client):
    resp = client.get("/definitely-not-here")
    assert resp.status_code == 404
    assert "text/html" in resp.headers["content-type"]
    assert "Page not found" in resp.text


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
