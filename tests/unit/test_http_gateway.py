"""Unit tests for the HttpResourceGateway."""

import json

import httpx
import pytest

from exportdesk.domain.entities import RequestContext
from exportdesk.domain.exceptions import ApiError, ApiTransportError
from exportdesk.infrastructure.api import HttpResourceGateway

CONTEXT = RequestContext(base_url="http://backend.test/api/", token="secret-token", user_id=7)


# ── Helpers ──


def _recording_transport(
    status_code: int = 200,
    json_body=None,
    text: str | None = None,
) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    """Mock transport that records requests and returns a fixed response."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        if json_body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=json_body)

    return httpx.MockTransport(handler), seen


def _gateway(transport: httpx.MockTransport) -> HttpResourceGateway:
    return HttpResourceGateway(CONTEXT, http_client=httpx.AsyncClient(transport=transport))


# ── Tests ──


@pytest.mark.asyncio
async def test_list_all_sends_bearer_token():
    transport, seen = _recording_transport(json_body=[{"id": 1}, {"id": 2}])

    records = await _gateway(transport).list_all("branches")

    assert records == [{"id": 1}, {"id": 2}]
    assert str(seen[0].url) == "http://backend.test/api/branches"
    assert seen[0].headers["Authorization"] == "Bearer secret-token"
    assert seen[0].headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_search_drops_none_but_keeps_blank_params():
    transport, seen = _recording_transport(json_body=[])

    await _gateway(transport).search(
        "agreements", {"branchId": "1", "searchTerm": "", "status": None}
    )

    assert seen[0].url.path == "/api/agreements/search"
    assert dict(seen[0].url.params) == {"branchId": "1", "searchTerm": ""}


@pytest.mark.asyncio
async def test_create_posts_json_without_id():
    transport, seen = _recording_transport(status_code=201, json_body={"id": 9, "name": "Jaffna"})

    record = await _gateway(transport).create("branches", {"id": None, "name": "Jaffna"})

    assert record == {"id": 9, "name": "Jaffna"}
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"name": "Jaffna"}


@pytest.mark.asyncio
async def test_action_uses_method_and_query():
    transport, seen = _recording_transport(json_body={"id": 3, "status": "APPROVED"})

    await _gateway(transport).perform_action(
        "supplies", 3, "status", "put", params={"status": "APPROVED"}
    )

    assert seen[0].method == "PUT"
    assert seen[0].url.path == "/api/supplies/3/status"
    assert seen[0].url.params["status"] == "APPROVED"


@pytest.mark.asyncio
async def test_delete_with_empty_body_returns_none():
    transport, seen = _recording_transport(status_code=204)

    assert await _gateway(transport).delete("branches", 1) is None
    assert seen[0].method == "DELETE"


@pytest.mark.asyncio
async def test_plain_text_error_body_is_kept_verbatim():
    transport, _ = _recording_transport(status_code=400, text="Cannot delete: referenced by orders")

    with pytest.raises(ApiError) as exc_info:
        await _gateway(transport).delete("branches", 1)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Cannot delete: referenced by orders"


@pytest.mark.asyncio
async def test_json_error_body_message_is_extracted():
    transport, _ = _recording_transport(status_code=409, json_body={"error": "Email already in use"})

    with pytest.raises(ApiError) as exc_info:
        await _gateway(transport).create("users", {"email": "a@b.co"})

    assert exc_info.value.message == "Email already in use"


@pytest.mark.asyncio
async def test_transport_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = _gateway(httpx.MockTransport(handler))

    with pytest.raises(ApiTransportError) as exc_info:
        await gateway.list_all("orders")

    assert exc_info.value.method == "GET"
    assert "connection refused" in exc_info.value.reason


@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    transport, _ = _recording_transport(json_body={"totalOrders": 3})
    client = httpx.AsyncClient(transport=transport)
    gateway = HttpResourceGateway(CONTEXT, http_client=client)

    assert await gateway.fetch_document("orders/statistics") == {"totalOrders": 3}
    assert client.is_closed is False
    await client.aclose()
