"""
Append a job to the configured database, e.g. to see the notification watcher fire.

Usage:
  python scripts/add_job.py "SSC MTS Recruitment" --department SSC --category "Central Government"
"""
from __future__ import annotations

import argparse

from dotenv import load_dotenv

load_dotenv(override=True)

from core.database import FIRST_CLASS_CATEGORIES, JOB, add_record, init_db  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Add a job listing")
    parser.add_argument("title")
    parser.add_argument("--department", required=True)
    parser.add_argument("--category", default=FIRST_CLASS_CATEGORIES[0])
    parser.add_argument("--location")
    parser.add_argument("--qualification")
    parser.add_argument("--posts", type=int)
    parser.add_argument("--last-date", help="YYYY-MM-DD")
    parser.add_argument("--link", help="application link")
    args = parser.parse_args()

    init_db(seed=False)
    job_id = add_record(
        JOB,
        title=args.title,
        department=args.department,
        category=args.category,
        location=args.location,
        qualification=args.qualification,
        posts=args.posts,
        last_date=args.last_date,
        application_link=args.link,
    )
    print(f"[db] Added job {job_id}: {args.title}")


if __name__ == "__main__":
    main()
