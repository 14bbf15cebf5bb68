"""
Async HTTP client for the listing API.

HTTP outcomes are mapped onto the shared error taxonomy so callers only deal
with StoreFailure (server said 500), NotFound (404) and NetworkFailure
(anything that kept a well-formed answer from arriving).
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from core.errors import NotFound, StoreFailure

log = logging.getLogger("client")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
REQUEST_TIMEOUT = 10.0


class NetworkFailure(Exception):
    """The request never produced a usable response (connect error, timeout, bad body)."""


class ListingClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "ListingClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            r = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise NetworkFailure(f"{method} {path} failed: {e}") from e

        if r.status_code in (404, 500):
            try:
                message = r.json().get("error") or ""
            except (ValueError, AttributeError):
                message = ""
            if r.status_code == 404:
                raise NotFound(message or "Not found")
            raise StoreFailure(message or "Server error")

        if r.status_code >= 400:
            raise NetworkFailure(f"{method} {path} returned HTTP {r.status_code}")

        try:
            return r.json()
        except ValueError as e:
            raise NetworkFailure(f"{method} {path} returned a non-JSON body") from e

    @staticmethod
    def _params(**params) -> Dict[str, Any]:
        return {k: v for k, v in params.items() if v not in (None, "")}

    async def list_jobs(
        self,
        *,
        category: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
    ) -> List[Dict]:
        params = self._params(category=category, search=search, limit=limit, page=page)
        return await self._request("GET", "/api/jobs", params=params)

    async def get_job(self, job_id: int) -> Dict:
        return await self._request("GET", f"/api/jobs/{job_id}")

    async def count_jobs(self, *, category: Optional[str] = None, search: Optional[str] = None) -> int:
        data = await self._request("GET", "/api/jobs/count", params=self._params(category=category, search=search))
        return int(data["count"])

    async def job_counts(self) -> Dict[str, int]:
        return await self._request("GET", "/api/jobs/counts")

    async def list_results(self, *, limit: Optional[int] = None) -> List[Dict]:
        return await self._request("GET", "/api/results", params=self._params(limit=limit))

    async def list_admit_cards(self, *, limit: Optional[int] = None) -> List[Dict]:
        return await self._request("GET", "/api/admit-cards", params=self._params(limit=limit))

    async def list_answer_keys(self, *, limit: Optional[int] = None) -> List[Dict]:
        return await self._request("GET", "/api/answer-keys", params=self._params(limit=limit))

    async def subscribe(self, subscription: Dict) -> Dict:
        return await self._request("POST", "/api/subscribe", json=subscription)


__all__ = ["API_BASE_URL", "ListingClient", "NetworkFailure"]
