"""
Facade over the storage helpers; routes and the client import from here.
"""
from core.db.base import database_url, get_conn
from core.db.listings import (
    ADMIT_CARD,
    ANSWER_KEY,
    FIRST_CLASS_CATEGORIES,
    JOB,
    KINDS,
    RESULT,
    ListingFilters,
    RecordKind,
    add_record,
    category_counts,
    count_records,
    get_kind,
    get_record,
    list_records,
)
from core.db.schema import init_db, seed_sample_data
from core.db.subscriptions import add_push_subscription, get_push_subscriptions

__all__ = [
    "database_url",
    "get_conn",
    "init_db",
    "seed_sample_data",
    "RecordKind",
    "JOB",
    "RESULT",
    "ADMIT_CARD",
    "ANSWER_KEY",
    "KINDS",
    "get_kind",
    "FIRST_CLASS_CATEGORIES",
    "ListingFilters",
    "list_records",
    "get_record",
    "count_records",
    "category_counts",
    "add_record",
    "add_push_subscription",
    "get_push_subscriptions",
]
