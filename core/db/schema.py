"""
Schema and seed helpers for SQLite and Postgres.
"""
from __future__ import annotations

import os

from core.db.base import get_conn
from core.db.listings import ADMIT_CARD, ANSWER_KEY, JOB, RESULT, add_record

# --- Sample records inserted into an empty database ---
SAMPLE_JOBS = [
    {
        "title": "Railway Recruitment Board - Junior Engineer",
        "department": "Railway",
        "category": "Central Government",
        "location": "All India",
        "qualification": "Diploma/B.Tech",
        "posts": 13487,
        "last_date": "2024-08-15",
        "application_link": "https://rrbcdg.gov.in",
    },
    {
        "title": "SSC Combined Graduate Level Examination",
        "department": "SSC",
        "category": "Central Government",
        "location": "All India",
        "qualification": "Graduate",
        "posts": 1867,
        "last_date": "2024-08-20",
        "application_link": "https://ssc.nic.in",
    },
    {
        "title": "IBPS PO Recruitment",
        "department": "Banking",
        "category": "Banking",
        "location": "All India",
        "qualification": "Graduate",
        "posts": 4135,
        "last_date": "2024-08-25",
        "application_link": "https://ibps.in",
    },
    {
        "title": "UPSC Civil Services Examination",
        "department": "UPSC",
        "category": "Central Government",
        "location": "All India",
        "qualification": "Graduate",
        "posts": 712,
        "last_date": "2024-08-30",
        "application_link": "https://upsc.gov.in",
    },
    {
        "title": "Delhi Police Constable Recruitment",
        "department": "Police",
        "category": "State Government",
        "location": "Delhi",
        "qualification": "12th Pass",
        "posts": 5846,
        "last_date": "2024-09-05",
        "application_link": "https://delhipolice.nic.in",
    },
]

SAMPLE_RESULTS = [
    {
        "title": "SSC CHSL Result 2024",
        "exam_name": "Staff Selection Commission CHSL",
        "result_link": "https://ssc.nic.in/result",
        "published_date": "2024-07-10",
    },
    {
        "title": "Railway Group D Result 2024",
        "exam_name": "Railway Recruitment Board Group D",
        "result_link": "https://rrbcdg.gov.in/result",
        "published_date": "2024-07-08",
    },
    {
        "title": "IBPS Clerk Prelims Result",
        "exam_name": "IBPS Clerk Preliminary Examination",
        "result_link": "https://ibps.in/result",
        "published_date": "2024-07-05",
    },
]

SAMPLE_ADMIT_CARDS = [
    {
        "title": "SSC CGL Admit Card 2024",
        "exam_name": "Staff Selection Commission CGL",
        "download_link": "https://ssc.nic.in/admit-card",
        "exam_date": "2024-08-15",
    },
    {
        "title": "UPSC Prelims Admit Card",
        "exam_name": "Civil Services Preliminary Examination",
        "download_link": "https://upsc.gov.in/admit-card",
        "exam_date": "2024-08-20",
    },
]

SAMPLE_ANSWER_KEYS = [
    {
        "title": "Railway Group D Answer Key",
        "exam_name": "Railway Recruitment Board Group D",
        "download_link": "https://rrbcdg.gov.in/answer-key",
        "published_date": "2024-07-01",
    },
    {
        "title": "SSC CHSL Answer Key 2024",
        "exam_name": "Staff Selection Commission CHSL",
        "download_link": "https://ssc.nic.in/answer-key",
        "published_date": "2024-06-28",
    },
]

SAMPLES = [
    (JOB, SAMPLE_JOBS),
    (RESULT, SAMPLE_RESULTS),
    (ADMIT_CARD, SAMPLE_ADMIT_CARDS),
    (ANSWER_KEY, SAMPLE_ANSWER_KEYS),
]


def _pk(dialect: str) -> str:
    if dialect == "postgres":
        return "id SERIAL PRIMARY KEY"
    return "id INTEGER PRIMARY KEY AUTOINCREMENT"


def init_db(seed: bool | None = None) -> None:
    """Create the listing and push-subscription tables if they don't exist."""
    conn = get_conn()
    cur = conn.cursor()
    pk = _pk(conn.dialect)

    cur.execute(
        f"""
        CREATE TABLE IF NOT EXISTS jobs(
            {pk},
            title TEXT NOT NULL,
            department TEXT NOT NULL,
            category TEXT NOT NULL,
            location TEXT,
            qualification TEXT,
            posts INTEGER,
            last_date TEXT,
            application_link TEXT,
            created_at TEXT NOT NULL,
            updated_at TEXT
        )
        """
    )
    cur.execute(
        f"""
        CREATE TABLE IF NOT EXISTS results(
            {pk},
            title TEXT NOT NULL,
            exam_name TEXT NOT NULL,
            result_link TEXT,
            published_date TEXT,
            created_at TEXT NOT NULL
        )
        """
    )
    cur.execute(
        f"""
        CREATE TABLE IF NOT EXISTS admit_cards(
            {pk},
            title TEXT NOT NULL,
            exam_name TEXT NOT NULL,
            download_link TEXT,
            exam_date TEXT,
            created_at TEXT NOT NULL
        )
        """
    )
    cur.execute(
        f"""
        CREATE TABLE IF NOT EXISTS answer_keys(
            {pk},
            title TEXT NOT NULL,
            exam_name TEXT NOT NULL,
            download_link TEXT,
            published_date TEXT,
            created_at TEXT NOT NULL
        )
        """
    )
    cur.execute(
        f"""
        CREATE TABLE IF NOT EXISTS push_subscriptions(
            {pk},
            endpoint TEXT NOT NULL UNIQUE,
            p256dh TEXT,
            auth TEXT,
            expiration_time BIGINT,
            created_at TEXT NOT NULL
        )
        """
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_jobs_category ON jobs(category)")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_jobs_created_at ON jobs(created_at)")

    conn.commit()
    conn.close()

    if seed is None:
        seed = os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true"
    if seed:
        seed_sample_data()


def seed_sample_data() -> None:
    """Insert the sample records into any listing table that is still empty (idempotent)."""
    for kind, rows in SAMPLES:
        conn = get_conn()
        cur = conn.cursor()
        cur.execute(f"SELECT COUNT(*) AS count FROM {kind.table}")
        row = cur.fetchone()
        count = row["count"] if row else 0
        conn.close()

        if count:
            continue

        for data in rows:
            add_record(kind, **data)
        print(f"[db] Seeded {len(rows)} sample row(s) into {kind.table}")


__all__ = [
    "SAMPLE_JOBS",
    "SAMPLE_RESULTS",
    "SAMPLE_ADMIT_CARDS",
    "SAMPLE_ANSWER_KEYS",
    "init_db",
    "seed_sample_data",
]
