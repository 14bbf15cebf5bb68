"""
Read-only JSON endpoints for jobs, results, admit cards and answer keys.
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Query

from app.schemas import AdmitCardOut, AnswerKeyOut, CountOut, JobOut, ResultOut
from core.database import (
    ADMIT_CARD,
    ANSWER_KEY,
    JOB,
    RESULT,
    ListingFilters,
    category_counts,
    count_records,
    get_record,
    list_records,
)

router = APIRouter(prefix="/api")


@router.get("/jobs", response_model=List[JobOut])
def api_jobs(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None, description="substring of title or department"),
    limit: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
):
    filters = ListingFilters.from_params(category=category, search=search, limit=limit, page=page)
    return list_records(JOB, filters)


@router.get("/jobs/counts", response_model=Dict[str, int])
def api_job_counts():
    """Counts for the first-class categories, replacing one `limit=1000` call per category."""
    return category_counts()


@router.get("/jobs/count", response_model=CountOut)
def api_job_count(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
):
    filters = ListingFilters.from_params(category=category, search=search)
    return {"count": count_records(JOB, filters)}


@router.get("/jobs/{job_id}", response_model=JobOut)
def api_job(job_id: str):
    return get_record(JOB, job_id)


@router.get("/results", response_model=List[ResultOut])
def api_results(limit: Optional[str] = Query(None)):
    return list_records(RESULT, ListingFilters.from_params(limit=limit))


@router.get("/results/{result_id}", response_model=ResultOut)
def api_result(result_id: str):
    return get_record(RESULT, result_id)


@router.get("/admit-cards", response_model=List[AdmitCardOut])
def api_admit_cards(limit: Optional[str] = Query(None)):
    return list_records(ADMIT_CARD, ListingFilters.from_params(limit=limit))


@router.get("/admit-cards/{card_id}", response_model=AdmitCardOut)
def api_admit_card(card_id: str):
    return get_record(ADMIT_CARD, card_id)


@router.get("/answer-keys", response_model=List[AnswerKeyOut])
def api_answer_keys(limit: Optional[str] = Query(None)):
    return list_records(ANSWER_KEY, ListingFilters.from_params(limit=limit))


@router.get("/answer-keys/{key_id}", response_model=AnswerKeyOut)
def api_answer_key(key_id: str):
    return get_record(ANSWER_KEY, key_id)
