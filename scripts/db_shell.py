"""
Quick helper to run a query against the configured database (DATABASE_URL, SQLite by default).

Usage:
  python scripts/db_shell.py                            # list tables
  python scripts/db_shell.py "SELECT * FROM jobs"       # run a custom query
"""
from __future__ import annotations

import sys

from dotenv import load_dotenv

load_dotenv(override=True)

from core.db.base import DRIVER_ERRORS, database_url, dialect_for, get_conn  # noqa: E402

LIST_TABLES = {
    "postgres": "SELECT tablename AS name FROM pg_tables WHERE schemaname='public' ORDER BY tablename",
    "sqlite": "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name",
}


def main() -> None:
    dialect = dialect_for(database_url)
    query = " ".join(sys.argv[1:]).strip() or LIST_TABLES[dialect]

    print(f"Using DB: {dialect} (DATABASE_URL)", file=sys.stderr)

    conn = get_conn()
    try:
        cur = conn.cursor()
        cur.execute(query)
        if cur.description is not None:
            for row in cur.fetchall():
                print(dict(row))
        else:
            conn.commit()
            print(f"OK ({cur.rowcount} row(s) affected)")
    except DRIVER_ERRORS as exc:
        raise SystemExit(f"Error running query: {exc}") from exc
    finally:
        conn.close()


if __name__ == "__main__":
    main()
