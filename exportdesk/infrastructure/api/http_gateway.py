"""HTTP gateway: implements the ResourceGateway port over httpx.

Talks to the operations backend's REST API. Every request carries the
session's bearer token; each call is a single attempt with the configured
timeout and no retry.
"""

import json
import logging
from typing import Any

import httpx

from exportdesk.application.interfaces import ResourceGateway
from exportdesk.domain.entities import RequestContext
from exportdesk.domain.exceptions import ApiError, ApiTransportError

logger = logging.getLogger(__name__)


class HttpResourceGateway(ResourceGateway):
    """Infrastructure adapter: connects to the operations backend.

    An injected ``httpx.AsyncClient`` is reused across calls and left open;
    without one a short-lived client is created and closed per call.
    """

    def __init__(
        self,
        context: RequestContext,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._context = context
        self._base_url = context.base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.strip('/')}"

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request and decode the body of a 2xx response."""
        client = self._get_client()
        should_close = self._http_client is None
        url = self._url(path)

        try:
            response = await client.request(
                method,
                url,
                headers=self._context.auth_headers(),
                params=params,
                json=body,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s /%s did not complete: %s", method, path, exc)
            raise ApiTransportError(method, path, str(exc) or type(exc).__name__) from exc
        finally:
            if should_close:
                await client.aclose()

        logger.debug("%s /%s → %d", method, path, response.status_code)
        if not response.is_success:
            self._raise_api_error(method, path, response)
        return self._decode(response)

    # ── ResourceGateway ──────────────────────────────────────────────

    async def list_all(self, path: str) -> list[dict[str, Any]]:
        return self._as_list(await self._request("GET", path), path)

    async def search(self, path: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        cleaned = {k: v for k, v in params.items() if v is not None}
        data = await self._request("GET", f"{path}/search", params=cleaned)
        return self._as_list(data, path)

    async def create(self, path: str, payload: dict[str, Any]) -> dict[str, Any] | None:
        payload = {k: v for k, v in payload.items() if k != "id"}
        return self._as_record(await self._request("POST", path, body=payload))

    async def update(
        self, path: str, record_id: int, payload: dict[str, Any]
    ) -> dict[str, Any] | None:
        data = await self._request("PUT", f"{path}/{record_id}", body=payload)
        return self._as_record(data)

    async def delete(self, path: str, record_id: int) -> None:
        await self._request("DELETE", f"{path}/{record_id}")

    async def perform_action(
        self,
        path: str,
        record_id: int,
        action_path: str,
        method: str = "PUT",
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        data = await self._request(
            method.upper(),
            f"{path}/{record_id}/{action_path.strip('/')}",
            params=params,
            body=body,
        )
        return self._as_record(data)

    async def fetch_document(
        self, path: str, params: dict[str, Any] | None = None
    ) -> Any:
        return await self._request("GET", path, params=params)

    # ── Decoding ─────────────────────────────────────────────────────

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """JSON body if there is one; plain text otherwise; None when empty."""
        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return response.text

    @staticmethod
    def _as_list(data: Any, path: str) -> list[dict[str, Any]]:
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Expected a JSON array from /%s, got %s", path, type(data).__name__)
            return []
        return [item for item in data if isinstance(item, dict)]

    @staticmethod
    def _as_record(data: Any) -> dict[str, Any] | None:
        return data if isinstance(data, dict) else None

    def _raise_api_error(self, method: str, path: str, response: httpx.Response) -> None:
        """Raise ApiError from a non-2xx response, keeping the server's text."""
        message = response.text
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            data = None

        if isinstance(data, dict):
            for key in ("error", "message", "detail"):
                value = data.get(key)
                if isinstance(value, str) and value:
                    message = value
                    break
                if isinstance(value, dict) and value.get("message"):
                    message = str(value["message"])
                    break
        elif isinstance(data, str):
            message = data

        logger.warning("%s /%s → %d: %s", method, path, response.status_code, message)
        raise ApiError(
            status_code=response.status_code,
            message=message,
            method=method,
            path=path,
        )
