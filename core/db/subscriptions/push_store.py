"""
Push subscription storage helpers (data-level only).
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List

from core.db.base import DRIVER_ERRORS, get_conn
from core.errors import StoreFailure


def add_push_subscription(
    endpoint: str,
    p256dh: str | None = None,
    auth: str | None = None,
    expiration_time: int | None = None,
) -> int:
    """
    Store a browser push subscription, keyed by endpoint.

    Re-subscribing with the same endpoint refreshes its keys instead of adding a row.
    Returns the subscription id.
    """
    now = datetime.now(timezone.utc).isoformat(timespec="seconds")
    conn = None
    try:
        conn = get_conn()
        cur = conn.cursor()
        cur.execute(
            """
            INSERT INTO push_subscriptions (endpoint, p256dh, auth, expiration_time, created_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT (endpoint) DO UPDATE
              SET p256dh = excluded.p256dh,
                  auth = excluded.auth,
                  expiration_time = excluded.expiration_time
            RETURNING id
            """,
            (endpoint.strip(), p256dh, auth, expiration_time, now),
        )
        sub_id = int(cur.fetchone()["id"])
        conn.commit()
        return sub_id
    except DRIVER_ERRORS as exc:
        raise StoreFailure("Failed to save push subscription") from exc
    finally:
        if conn is not None:
            conn.close()


def get_push_subscriptions() -> List[Dict]:
    """Return all stored push subscriptions, oldest first."""
    conn = None
    try:
        conn = get_conn()
        cur = conn.cursor()
        cur.execute(
            """
            SELECT id, endpoint, p256dh, auth, expiration_time, created_at
            FROM push_subscriptions
            ORDER BY id
            """
        )
        rows = cur.fetchall()
    except DRIVER_ERRORS as exc:
        raise StoreFailure("Failed to load push subscriptions") from exc
    finally:
        if conn is not None:
            conn.close()
    return [dict(r) for r in rows]


__all__ = [
    "add_push_subscription",
    "get_push_subscriptions",
]
