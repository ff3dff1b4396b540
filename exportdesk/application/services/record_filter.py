"""Client-side search and discrete filtering over an in-memory collection.

Everything here is a pure function of (records, filter state, definition):
nothing is indexed and the visible subset is recomputed from the full
collection on every change. Collections are tens to low hundreds of records,
so a linear scan is all that is needed.
"""

from typing import Any

from exportdesk.domain.entities import (
    FilterDefinition,
    FilterKind,
    FilterState,
    ResourceDefinition,
)

Record = dict[str, Any]


def value_at(record: Record, path: str) -> Any:
    """Resolve a dotted field path (``branch.id``) against a record."""
    current: Any = record
    for part in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def matches_search(record: Record, term: str, fields: list[str]) -> bool:
    """Case-insensitive substring match against any of ``fields``.

    A blank term matches every record.
    """
    needle = term.strip().lower()
    if not needle:
        return True
    for path in fields:
        value = value_at(record, path)
        if value is not None and needle in str(value).lower():
            return True
    return False


def matches_filter(record: Record, definition: FilterDefinition, selection: str) -> bool:
    """Test one discrete filter selection against a record."""
    value = value_at(record, definition.field)

    if definition.kind == FilterKind.FLAG:
        if selection == definition.true_value:
            return bool(value)
        if selection == definition.false_value:
            return not value
        return True

    if definition.kind == FilterKind.CONTAINS:
        return value is not None and selection.lower() in str(value).lower()

    if definition.kind == FilterKind.IN:
        accepted = [part.strip() for part in selection.split(",") if part.strip()]
        return value is not None and str(value) in accepted

    # equals: ids compare as strings
    return value is not None and str(value) == str(selection)


def build_predicate(state: FilterState, definition: ResourceDefinition):
    """Compose search + every active selection into one record predicate (AND)."""
    active = [
        (definition.filter(name), selection)
        for name, selection in state.active_selections().items()
    ]

    def predicate(record: Record) -> bool:
        if not matches_search(record, state.search_term, definition.search_fields):
            return False
        return all(matches_filter(record, f, s) for f, s in active)

    return predicate


def filter_records(
    records: list[Record], state: FilterState, definition: ResourceDefinition
) -> list[Record]:
    """Visible subset of ``records`` for the given filter state."""
    if state.is_empty():
        return list(records)
    predicate = build_predicate(state, definition)
    return [record for record in records if predicate(record)]


def to_query_params(state: FilterState, definition: ResourceDefinition) -> dict[str, str]:
    """Query parameters for the server-side ``/search`` endpoint.

    Flag filters are sent as booleans and filters without a ``param`` are not
    sent. The free-text term is sent only when the server's text parameter
    matches every search field; otherwise it stays a client-side filter.
    Parameters the endpoint requires (``search_required``) are always present.
    """
    params: dict[str, str] = {}
    for name, selection in state.active_selections().items():
        filter_definition = definition.filter(name)
        if not filter_definition.param:
            continue
        if filter_definition.kind == FilterKind.FLAG:
            if selection == filter_definition.true_value:
                params[filter_definition.param] = "true"
            elif selection == filter_definition.false_value:
                params[filter_definition.param] = "false"
        else:
            params[filter_definition.param] = selection
    term = state.search_term.strip()
    if term and definition.server_covers_search:
        params[definition.search_param] = term
    if not params:
        return params
    for name, default in definition.search_required.items():
        params.setdefault(name, default)
    return params
