"""
Query builder for the listing endpoints.

Turns the small set of optional filters the API accepts (category, search,
limit, page) into one parameterized statement. Placeholders are written as `?`
and converted for Postgres by the connection wrapper in core.db.base.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Tuple

from core.db.listings.kinds import RecordKind

DEFAULT_LIMIT = 10
MAX_LIMIT = 1000

# Categories the home page shows counts for. Jobs with any other category string
# are still listed, they just don't land in a bucket.
FIRST_CLASS_CATEGORIES = (
    "Central Government",
    "State Government",
    "Railway",
    "Banking",
    "Defence",
    "Teaching",
)

LIKE_ESCAPE = "\\"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(raw: Any) -> int | None:
    """parseInt-style: take the leading integer of the value, or None."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    m = _LEADING_INT.match(str(raw))
    if not m:
        return None
    return int(m.group(1))


def coerce_limit(raw: Any) -> int:
    value = _parse_int(raw)
    if value is None or value < 1:
        return DEFAULT_LIMIT
    return min(value, MAX_LIMIT)


def coerce_page(raw: Any) -> int:
    value = _parse_int(raw)
    if value is None or value < 1:
        return 1
    return value


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches as a literal substring."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


@dataclass(frozen=True)
class ListingFilters:
    category: str | None = None
    search: str | None = None
    limit: int = DEFAULT_LIMIT
    # Accepted for compatibility with existing clients; does not move the window.
    page: int = 1

    @classmethod
    def from_params(
        cls,
        category: str | None = None,
        search: str | None = None,
        limit: Any = None,
        page: Any = None,
    ) -> "ListingFilters":
        return cls(
            category=category or None,
            search=search or None,
            limit=coerce_limit(limit),
            page=coerce_page(page),
        )


def build_predicate(kind: RecordKind, filters: ListingFilters) -> Tuple[str, List[Any]]:
    """
    Return (where_sql, params). where_sql is "" when nothing filters.

    Search is case-insensitive: both the columns and the term are lowered.
    """
    clauses: List[str] = []
    params: List[Any] = []

    if filters.category and kind.category_field:
        clauses.append(f"{kind.category_field} = ?")
        params.append(filters.category)

    if filters.search and kind.search_fields:
        pattern = f"%{escape_like(filters.search.lower())}%"
        ors = [f"lower({field}) LIKE ? ESCAPE '{LIKE_ESCAPE}'" for field in kind.search_fields]
        clauses.append("(" + " OR ".join(ors) + ")")
        params.extend(pattern for _ in kind.search_fields)

    if not clauses:
        return "", params
    return "WHERE " + " AND ".join(clauses), params


def build_list_query(kind: RecordKind, filters: ListingFilters) -> Tuple[str, List[Any]]:
    where_sql, params = build_predicate(kind, filters)
    sql = f"""
        SELECT {", ".join(kind.columns)}
        FROM {kind.table}
        {where_sql}
        ORDER BY {kind.order_field} DESC NULLS LAST, id DESC
        LIMIT ?
    """
    params.append(filters.limit)
    return sql, params


def build_count_query(kind: RecordKind, filters: ListingFilters) -> Tuple[str, List[Any]]:
    where_sql, params = build_predicate(kind, filters)
    sql = f"SELECT COUNT(*) AS count FROM {kind.table} {where_sql}"
    return sql, params


def build_get_query(kind: RecordKind) -> str:
    return f"SELECT {', '.join(kind.columns)} FROM {kind.table} WHERE id = ?"


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "FIRST_CLASS_CATEGORIES",
    "ListingFilters",
    "coerce_limit",
    "coerce_page",
    "escape_like",
    "build_predicate",
    "build_list_query",
    "build_count_query",
    "build_get_query",
]
