"""Unit tests for client-side search and discrete filtering."""

import pytest

from exportdesk.application.services import filter_records, matches_filter, matches_search, to_query_params
from exportdesk.application.services.record_filter import value_at
from exportdesk.domain.entities import FilterDefinition, FilterKind, FilterState

ORDERS = [
    {"id": 1, "orderNumber": "ORD-1", "customerName": "Acme", "status": "PENDING",
     "priority": "HIGH", "branch": {"id": 1, "name": "Colombo"}},
    {"id": 2, "orderNumber": "ORD-2", "customerName": "Globex", "status": "DELIVERED",
     "priority": "HIGH", "branch": {"id": 2, "name": "Kandy"}},
    {"id": 3, "orderNumber": "ORD-3", "customerName": "Acme Ltd", "status": "PENDING",
     "priority": "LOW", "branch": None},
]


@pytest.fixture
def orders(catalog):
    return catalog.get("orders")


def test_value_at_follows_dotted_paths():
    assert value_at(ORDERS[0], "branch.name") == "Colombo"
    assert value_at(ORDERS[2], "branch.name") is None
    assert value_at(ORDERS[0], "missing.field") is None


def test_blank_search_matches_every_record():
    assert all(matches_search(r, "", ["customerName"]) for r in ORDERS)
    assert all(matches_search(r, "  ", ["customerName"]) for r in ORDERS)


def test_search_ignores_missing_fields():
    record = {"id": 9, "customerName": None}
    assert matches_search(record, "acme", ["customerName", "productName"]) is False


def test_equals_compares_ids_as_strings():
    branch = FilterDefinition(name="branch", field="branch.id")
    assert matches_filter(ORDERS[0], branch, "1")
    assert not matches_filter(ORDERS[1], branch, "1")
    assert not matches_filter(ORDERS[2], branch, "1")


def test_flag_filter_uses_truthiness():
    released = FilterDefinition(
        name="release", field="releaseDate", kind=FilterKind.FLAG,
        true_value="RELEASED", false_value="UNRELEASED",
    )
    assert matches_filter({"releaseDate": "2024-01-01"}, released, "RELEASED")
    assert matches_filter({"releaseDate": None}, released, "UNRELEASED")
    assert not matches_filter({}, released, "RELEASED")


def test_in_filter_accepts_any_listed_value():
    roles = FilterDefinition(name="role", field="role", kind=FilterKind.IN)
    assert matches_filter({"role": "OWNER"}, roles, "MANAGER,OWNER")
    assert not matches_filter({"role": "BUYER"}, roles, "MANAGER,OWNER")


def test_filters_compose_as_and(orders):
    both = FilterState(selections={"status": "PENDING", "priority": "HIGH"})
    status_only = filter_records(ORDERS, FilterState(selections={"status": "PENDING"}), orders)
    then_priority = filter_records(
        status_only, FilterState(selections={"priority": "HIGH"}), orders
    )

    assert then_priority == filter_records(ORDERS, both, orders)
    assert [r["id"] for r in then_priority] == [1]


def test_search_and_filter_compose(orders):
    state = FilterState(search_term="acme", selections={"priority": "LOW"})
    assert [r["id"] for r in filter_records(ORDERS, state, orders)] == [3]


def test_all_sentinel_disables_a_filter(orders):
    state = FilterState(selections={"status": "ALL", "priority": ""})
    assert filter_records(ORDERS, state, orders) == ORDERS


def test_query_params_for_server_search(catalog):
    branches = catalog.get("branches")
    state = FilterState(search_term=" colombo ", selections={"status": "INACTIVE"})
    assert to_query_params(state, branches) == {"searchTerm": "colombo", "isActive": "false"}

    commands = catalog.get("commands")
    state = FilterState(search_term="fabric", selections={"status": "PENDING"})
    assert to_query_params(state, commands) == {"status": "PENDING"}


def test_agreement_search_always_carries_required_term(catalog):
    agreements = catalog.get("agreements")

    params = to_query_params(FilterState(selections={"branch": "1"}), agreements)

    assert params == {"branchId": "1", "searchTerm": ""}


def test_narrow_text_parameter_keeps_term_client_side(orders):
    # customerName alone would miss matches on orderNumber/productName
    state = FilterState(search_term="ORD-77", selections={"status": "PENDING"})

    assert to_query_params(state, orders) == {"status": "PENDING"}
    assert to_query_params(FilterState(search_term="ORD-77"), orders) == {}


def test_no_request_params_without_server_expressible_state(catalog):
    agreements = catalog.get("agreements")
    state = FilterState(selections={"status": "Active"})

    assert to_query_params(state, agreements) == {}
