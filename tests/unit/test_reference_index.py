"""Unit tests for reference lists and foreign-key display joins."""

import pytest

from exportdesk.application.services import ReferenceIndex
from exportdesk.application.services.reference_index import display_label
from exportdesk.domain.exceptions import ApiTransportError

USERS = [
    {"id": 1, "firstName": "Ann", "lastName": "Perera", "role": "MANAGER"},
    {"id": 2, "firstName": "Ben", "lastName": "Silva", "role": "BUYER"},
    {"id": 3, "firstName": "Chamari", "lastName": "Fernando", "role": "OWNER"},
]


def test_display_label_uses_template_and_tolerates_missing_keys():
    assert display_label(USERS[0], "{firstName} {lastName}") == "Ann Perera"
    assert display_label({"id": 8}, "{name}") == "8"


@pytest.mark.asyncio
async def test_references_joined_by_id(catalog, make_gateway):
    gateway = make_gateway({"branches": [{"id": 1, "name": "Colombo"}], "users": USERS})
    index = ReferenceIndex(gateway, catalog)

    await index.load(catalog.get("agreements").references)

    assert index.label("branches", 1) == "Colombo"
    assert index.label("branches", "1") == "Colombo"
    assert index.label("branches", 42) == "N/A"
    assert index.label("managers", None) == "N/A"


@pytest.mark.asyncio
async def test_manager_list_only_contains_managers_and_owners(catalog, make_gateway):
    index = ReferenceIndex(make_gateway({"users": USERS}), catalog)

    await index.load(catalog.get("agreements").references)

    assert index.options("managers") == [
        {"id": 1, "label": "Ann Perera"},
        {"id": 3, "label": "Chamari Fernando"},
    ]


@pytest.mark.asyncio
async def test_failed_reference_load_leaves_list_empty(catalog, make_gateway, notifier):
    gateway = make_gateway({"branches": [{"id": 1, "name": "Colombo"}]})
    gateway.fail_next["list_all"] = ApiTransportError("GET", "branches", "timeout")
    index = ReferenceIndex(gateway, catalog)

    await index.load(catalog.get("orders").references)

    assert index.records("branches") == []
    assert index.label("branches", 1) == "N/A"
    assert notifier.notifications == []
