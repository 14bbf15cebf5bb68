"""
Read-side storage helpers for jobs, results, admit cards and answer keys.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from core.db.base import DRIVER_ERRORS, get_conn
from core.db.listings.kinds import JOB, RecordKind
from core.db.listings.query import (
    FIRST_CLASS_CATEGORIES,
    ListingFilters,
    build_count_query,
    build_get_query,
    build_list_query,
)
from core.errors import NotFound, StoreFailure

log = logging.getLogger("store")

# Ids are stored as signed 64-bit integers on both dialects.
MAX_ID = 2**63 - 1


def _run(sql: str, params: List[Any], *, what: str, one: bool = False):
    conn = None
    try:
        conn = get_conn()
        cur = conn.cursor()
        cur.execute(sql, params)
        if one:
            return cur.fetchone()
        return cur.fetchall()
    except DRIVER_ERRORS as exc:
        log.error("Store query failed", extra={"what": what, "error": str(exc)})
        raise StoreFailure(f"Failed to load {what}") from exc
    finally:
        if conn is not None:
            conn.close()


def list_records(kind: RecordKind, filters: ListingFilters | None = None) -> List[Dict]:
    """Return records of one kind, newest first. An empty list is a normal answer."""
    filters = filters or ListingFilters()
    sql, params = build_list_query(kind, filters)
    rows = _run(sql, params, what=kind.table)
    return [dict(r) for r in rows]


def get_record(kind: RecordKind, record_id: Any) -> Dict:
    """Return a single record or raise NotFound."""
    try:
        rid = int(record_id)
    except (TypeError, ValueError):
        raise NotFound(kind.not_found_message) from None
    if not -MAX_ID <= rid <= MAX_ID:
        raise NotFound(kind.not_found_message)

    row = _run(build_get_query(kind), [rid], what=kind.table, one=True)
    if row is None:
        raise NotFound(kind.not_found_message)
    return dict(row)


def count_records(kind: RecordKind, filters: ListingFilters | None = None) -> int:
    filters = filters or ListingFilters()
    sql, params = build_count_query(kind, filters)
    row = _run(sql, params, what=kind.table, one=True)
    return int(row["count"]) if row else 0


def category_counts() -> Dict[str, int]:
    """Job counts for each first-class category, in display order."""
    sql = f"""
        SELECT category, COUNT(*) AS count
        FROM jobs
        WHERE category IN ({", ".join("?" for _ in FIRST_CLASS_CATEGORIES)})
        GROUP BY category
    """
    rows = _run(sql, list(FIRST_CLASS_CATEGORIES), what="job counts")
    found = {r["category"]: int(r["count"]) for r in rows}
    return {c: found.get(c, 0) for c in FIRST_CLASS_CATEGORIES}


def add_record(kind: RecordKind, **fields: Any) -> int:
    """
    Append one record and return its new id.

    Used by seeding and scripts only; the HTTP surface is read-only.
    """
    now = datetime.now(timezone.utc).isoformat(timespec="seconds")
    data = {k: v for k, v in fields.items() if k in kind.columns and k != "id"}
    data.setdefault("created_at", now)
    if kind is JOB:
        data.setdefault("updated_at", data["created_at"])

    cols = list(data)
    sql = f"""
        INSERT INTO {kind.table} ({", ".join(cols)})
        VALUES ({", ".join("?" for _ in cols)})
        RETURNING id
    """
    conn = None
    try:
        conn = get_conn()
        cur = conn.cursor()
        cur.execute(sql, [data[c] for c in cols])
        new_id = int(cur.fetchone()["id"])
        conn.commit()
        return new_id
    except DRIVER_ERRORS as exc:
        raise StoreFailure(f"Failed to insert into {kind.table}") from exc
    finally:
        if conn is not None:
            conn.close()


__all__ = [
    "list_records",
    "get_record",
    "count_records",
    "category_counts",
    "add_record",
]
