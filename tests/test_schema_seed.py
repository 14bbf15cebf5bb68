from fastapi.testclient import TestClient

import app.api as api_module
from core.database import ADMIT_CARD, ANSWER_KEY, JOB, RESULT, count_records, init_db, seed_sample_data


def _counts():
    return {kind.table: count_records(kind) for kind in (JOB, RESULT, ADMIT_CARD, ANSWER_KEY)}


def test_seed_fills_empty_tables_once():
    seed_sample_data()
    expected = {"jobs": 5, "results": 3, "admit_cards": 2, "answer_keys": 2}
    assert _counts() == expected

    seed_sample_data()
    assert _counts() == expected


def test_init_db_seed_flag(monkeypatch):
    init_db(seed=False)
    assert count_records(JOB) == 0

    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    init_db()
    assert count_records(JOB) == 0

    monkeypatch.setenv("SEED_SAMPLE_DATA", "true")
    init_db()
    assert count_records(JOB) == 5


def test_sample_banking_listing_end_to_end():
    seed_sample_data()
    client = TestClient(api_module.app)

    resp = client.get("/api/jobs", params={"category": "Banking", "limit": "5"})

    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 1
    assert body[0]["title"] == "IBPS PO Recruitment"
