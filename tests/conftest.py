"""Shared fixtures: an in-memory operations backend behind the gateway port."""

import asyncio
import copy
from typing import Any

import pytest

from exportdesk.application.interfaces import ResourceGateway
from exportdesk.application.services import ResourceCatalog
from exportdesk.application.services.record_filter import value_at
from exportdesk.domain.exceptions import ApiError
from exportdesk.infrastructure.notifier import RecordingNotifier


class FakeResourceGateway(ResourceGateway):
    """In-memory fake backend for unit testing.

    Collections are keyed by path. ``fail_next`` queues an error for the next
    call of one operation; ``delays`` holds a GET for a number of seconds so
    tests can let a later request overtake it. ``/search`` compares each
    parameter with the record field named in ``param_fields`` (default: the
    same key), or substring-matches the fields listed in ``text_params``.
    """

    def __init__(self, collections: dict[str, list[dict[str, Any]]] | None = None):
        self.collections: dict[str, list[dict[str, Any]]] = {
            path: [dict(r) for r in records] for path, records in (collections or {}).items()
        }
        self.documents: dict[str, Any] = {}
        self.calls: list[tuple[str, str, Any]] = []
        self.fail_next: dict[str, Exception] = {}
        self.delays: list[float] = []
        self.param_fields: dict[str, str] = {
            "branchId": "branch.id",
            "departmentId": "department.id",
            "assignedToId": "assignedTo.id",
        }
        self.text_params: dict[str, list[str]] = {}
        self._next_id = 1000

    def _maybe_fail(self, operation: str) -> None:
        error = self.fail_next.pop(operation, None)
        if error is not None:
            raise error

    async def list_all(self, path: str) -> list[dict[str, Any]]:
        self.calls.append(("list_all", path, None))
        delay = self.delays.pop(0) if self.delays else 0
        snapshot = copy.deepcopy(self.collections.get(path, []))
        if delay:
            await asyncio.sleep(delay)
        self._maybe_fail("list_all")
        return snapshot

    async def search(self, path: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        self.calls.append(("search", path, dict(params)))
        self._maybe_fail("search")
        records = self.collections.get(path, [])
        return [
            copy.deepcopy(r)
            for r in records
            if all(self._param_matches(r, k, v) for k, v in params.items())
        ]

    def _param_matches(self, record: dict[str, Any], param: str, value: Any) -> bool:
        # Blank parameters match everything, like the backend's optional LIKE clauses
        if value in (None, ""):
            return True
        needle = str(value).lower()
        if param in self.text_params:
            return any(
                needle in str(value_at(record, f) or "").lower()
                for f in self.text_params[param]
            )
        actual = value_at(record, self.param_fields.get(param, param))
        return str(actual).lower() == needle

    async def create(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("create", path, dict(payload)))
        self._maybe_fail("create")
        record = {**payload, "id": self._next_id}
        self._next_id += 1
        self.collections.setdefault(path, []).append(record)
        return copy.deepcopy(record)

    async def update(
        self, path: str, record_id: int, payload: dict[str, Any]
    ) -> dict[str, Any]:
        self.calls.append(("update", path, (record_id, dict(payload))))
        self._maybe_fail("update")
        record = self._find(path, record_id)
        record.update(payload)
        return copy.deepcopy(record)

    async def delete(self, path: str, record_id: int) -> None:
        self.calls.append(("delete", path, record_id))
        self._maybe_fail("delete")
        record = self._find(path, record_id)
        self.collections[path].remove(record)

    async def perform_action(
        self,
        path: str,
        record_id: int,
        action_path: str,
        method: str = "PUT",
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        self.calls.append(("action", path, (record_id, action_path, method, params, body)))
        self._maybe_fail("action")
        record = self._find(path, record_id)
        if action_path == "toggle-status":
            record["isActive"] = not record.get("isActive", False)
        elif action_path == "release":
            record["releaseDate"] = "2024-06-01T00:00:00"
        else:
            record.update(params or {})
            record.update(body or {})
        return copy.deepcopy(record)

    async def fetch_document(self, path: str, params: dict[str, Any] | None = None) -> Any:
        self.calls.append(("document", path, params))
        self._maybe_fail("document")
        if path not in self.documents:
            raise ApiError(404, "Not found", "GET", path)
        return copy.deepcopy(self.documents[path])

    def _find(self, path: str, record_id: int) -> dict[str, Any]:
        for record in self.collections.get(path, []):
            if record.get("id") == record_id:
                return record
        raise ApiError(404, f"Record {record_id} not found", "PUT", path)

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)


BRANCHES = [
    {"id": 1, "name": "Colombo", "address": "12 Main St", "manager": "Nimal", "isActive": True},
    {"id": 2, "name": "Kandy", "address": "4 Hill Rd", "manager": "Sunil", "isActive": False},
    {"id": 3, "name": "Galle", "address": "9 Fort Rd", "manager": "Kamala", "isActive": True},
]


@pytest.fixture
def catalog() -> ResourceCatalog:
    return ResourceCatalog.from_yaml()


@pytest.fixture
def gateway() -> FakeResourceGateway:
    return FakeResourceGateway({"branches": BRANCHES})


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_gateway():
    """Factory for a fake backend seeded with the given collections."""
    return FakeResourceGateway
