"""Abstract gateway interface (port) for the operations backend REST API."""

from abc import ABC, abstractmethod
from typing import Any


class ResourceGateway(ABC):
    """Port for collection endpoints: implemented in the infrastructure layer.

    Paths are relative to the API base URL (``branches``, ``orders/statistics``).
    Implementations raise ``ApiError`` on a non-2xx status and
    ``ApiTransportError`` when the request never completed.
    """

    @abstractmethod
    async def list_all(self, path: str) -> list[dict[str, Any]]:
        """GET the full collection."""
        ...

    @abstractmethod
    async def search(self, path: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        """GET ``{path}/search`` with the given query parameters."""
        ...

    @abstractmethod
    async def create(self, path: str, payload: dict[str, Any]) -> dict[str, Any] | None:
        """POST a new record; the server assigns its id."""
        ...

    @abstractmethod
    async def update(
        self, path: str, record_id: int, payload: dict[str, Any]
    ) -> dict[str, Any] | None:
        """PUT a full record."""
        ...

    @abstractmethod
    async def delete(self, path: str, record_id: int) -> None:
        """DELETE a record."""
        ...

    @abstractmethod
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
        """Invoke a single-field sub-resource mutation (status, release, ...)."""
        ...

    @abstractmethod
    async def fetch_document(
        self, path: str, params: dict[str, Any] | None = None
    ) -> Any:
        """GET a read-only aggregate document (reports, statistics)."""
        ...
