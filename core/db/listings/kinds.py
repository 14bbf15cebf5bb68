"""
The four record kinds served by the listing endpoints.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class RecordKind:
    name: str
    table: str
    columns: Tuple[str, ...]
    order_field: str
    not_found_message: str
    # Only jobs honour category/search; the other kinds take a limit and nothing else.
    search_fields: Tuple[str, ...] = ()
    category_field: str | None = None


JOB = RecordKind(
    name="job",
    table="jobs",
    columns=(
        "id",
        "title",
        "department",
        "category",
        "location",
        "qualification",
        "posts",
        "last_date",
        "application_link",
        "created_at",
        "updated_at",
    ),
    order_field="created_at",
    not_found_message="Job not found",
    search_fields=("title", "department"),
    category_field="category",
)

RESULT = RecordKind(
    name="result",
    table="results",
    columns=("id", "title", "exam_name", "result_link", "published_date", "created_at"),
    order_field="published_date",
    not_found_message="Result not found",
)

ADMIT_CARD = RecordKind(
    name="admit_card",
    table="admit_cards",
    columns=("id", "title", "exam_name", "download_link", "exam_date", "created_at"),
    order_field="created_at",
    not_found_message="Admit card not found",
)

ANSWER_KEY = RecordKind(
    name="answer_key",
    table="answer_keys",
    columns=("id", "title", "exam_name", "download_link", "published_date", "created_at"),
    order_field="published_date",
    not_found_message="Answer key not found",
)

KINDS: Dict[str, RecordKind] = {k.name: k for k in (JOB, RESULT, ADMIT_CARD, ANSWER_KEY)}


def get_kind(name: str) -> RecordKind:
    try:
        return KINDS[name]
    except KeyError:
        raise ValueError(f"unknown record kind: {name!r}") from None


__all__ = ["RecordKind", "JOB", "RESULT", "ADMIT_CARD", "ANSWER_KEY", "KINDS", "get_kind"]
