"""
Listing storage re-exports: record kinds, query builder and read helpers.
"""
from core.db.listings.kinds import ADMIT_CARD, ANSWER_KEY, JOB, KINDS, RESULT, RecordKind, get_kind
from core.db.listings.listings_store import (
    add_record,
    category_counts,
    count_records,
    get_record,
    list_records,
)
from core.db.listings.query import (
    DEFAULT_LIMIT,
    FIRST_CLASS_CATEGORIES,
    MAX_LIMIT,
    ListingFilters,
)

__all__ = [
    "RecordKind",
    "JOB",
    "RESULT",
    "ADMIT_CARD",
    "ANSWER_KEY",
    "KINDS",
    "get_kind",
    "ListingFilters",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "FIRST_CLASS_CATEGORIES",
    "list_records",
    "get_record",
    "count_records",
    "category_counts",
    "add_record",
]
