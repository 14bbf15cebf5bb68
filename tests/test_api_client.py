import asyncio
import json

import httpx
import pytest

from client.api_client import ListingClient, NetworkFailure
from core.errors import NotFound, StoreFailure


def _call(handler, method, *args, **kwargs):
    async def scenario():
        async with ListingClient("http://api.test", transport=httpx.MockTransport(handler)) as client:
            return await getattr(client, method)(*args, **kwargs)

    return asyncio.run(scenario())


def test_list_jobs_sends_only_given_filters():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(200, json=[{"id": 1}])

    assert _call(handler, "list_jobs", category="Banking", search="", limit=5) == [{"id": 1}]
    assert seen["url"].path == "/api/jobs"
    assert dict(seen["url"].params) == {"category": "Banking", "limit": "5"}


def test_server_errors_map_to_store_failure():
    def handler(request):
        return httpx.Response(500, json={"error": "Failed to load jobs"})

    with pytest.raises(StoreFailure, match="Failed to load jobs"):
        _call(handler, "list_jobs")


def test_missing_record_maps_to_not_found():
    def handler(request):
        return httpx.Response(404, json={"error": "Job not found"})

    with pytest.raises(NotFound, match="Job not found"):
        _call(handler, "get_job", 42)


def _refused(request):
    raise httpx.ConnectError("refused")


def _rate_limited(request):
    return httpx.Response(429, json={"error": "Too many requests"})


def _html_body(request):
    return httpx.Response(200, text="<html>oops</html>")


@pytest.mark.parametrize("handler", [_refused, _rate_limited, _html_body])
def test_transport_problems_map_to_network_failure(handler):
    with pytest.raises(NetworkFailure):
        _call(handler, "list_results")


def test_count_and_subscribe():
    posted = []

    def handler(request):
        if request.url.path == "/api/jobs/count":
            assert request.url.params["category"] == "Railway"
            return httpx.Response(200, json={"count": 4})
        posted.append(json.loads(request.content))
        return httpx.Response(201, json={"status": "subscribed"})

    assert _call(handler, "count_jobs", category="Railway") == 4
    assert _call(handler, "subscribe", {"endpoint": "https://push.example/1"}) == {"status": "subscribed"}
    assert posted == [{"endpoint": "https://push.example/1"}]
