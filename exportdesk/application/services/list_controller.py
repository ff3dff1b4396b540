"""Entity list controller: one generic CRUD list, parameterised by a resource definition.

Holds the in-memory copy of one collection plus its search/filter/page state,
and runs every mutation through the same cycle: call the backend, report the
outcome as one notification, then re-fetch the whole collection. There is no
optimistic update; the list is only ever replaced by a fresh fetch.

Loads are sequenced: each fetch takes a ticket from a monotonically increasing
counter and a response is applied only if its ticket is still the newest one
issued. A slow response that settles after a newer request is dropped instead
of overwriting the newer data. In-flight requests are not cancelled.
"""

import logging
from typing import Any

from exportdesk.application.interfaces import Notifier, ResourceGateway
from exportdesk.application.schemas import EntityFormModel
from exportdesk.application.services.paginator import page_count, paginate
from exportdesk.application.services.record_filter import filter_records, to_query_params
from exportdesk.domain.entities import (
    FilterState,
    FormMode,
    OperationResult,
    Page,
    RequestContext,
    ResourceDefinition,
    ValuePlacement,
)
from exportdesk.domain.exceptions import (
    ApiError,
    ApiTransportError,
    EntityNotFoundError,
    InvalidActionValueError,
    UnknownActionError,
)

logger = logging.getLogger(__name__)

CLIENT_STRATEGY = "client"
SERVER_STRATEGY = "server"
SUPERSEDED = "Superseded by a newer request"


class EntityListController:
    """Owns the authoritative-for-this-render copy of one entity collection."""

    def __init__(
        self,
        definition: ResourceDefinition,
        gateway: ResourceGateway,
        notifier: Notifier,
        *,
        page_size: int = 10,
        filter_strategy: str = CLIENT_STRATEGY,
        context: RequestContext | None = None,
    ):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._definition = definition
        self._gateway = gateway
        self._notifier = notifier
        self._page_size = definition.page_size or page_size
        self._filter_strategy = filter_strategy
        self._context = context

        self._records: list[dict[str, Any]] = []
        self.filter_state = FilterState()
        self.page_number = 1
        self.loading = False
        self.loaded = False
        self.error: str | None = None
        self.summary: Any = None

        self._issued = 0

    # ── Properties ───────────────────────────────────────────────────

    @property
    def definition(self) -> ResourceDefinition:
        return self._definition

    @property
    def records(self) -> list[dict[str, Any]]:
        return list(self._records)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def uses_server_search(self) -> bool:
        return (
            self._filter_strategy == SERVER_STRATEGY and self._definition.server_search
        )

    # ── Loading ──────────────────────────────────────────────────────

    async def load(self) -> OperationResult:
        """Fetch the collection (or the server-side search result).

        A single attempt. On failure the collection degrades to empty and one
        notification is raised.
        """
        ticket = self._next_ticket()
        self.loading = True
        try:
            records = await self._fetch_records()
        except (ApiError, ApiTransportError) as exc:
            if self._is_stale(ticket):
                logger.debug("Dropping stale %s failure (ticket %d)", self._definition.name, ticket)
                return OperationResult(ok=False, message=SUPERSEDED)
            message = f"Failed to load {self._definition.plural}"
            logger.warning("%s: %s", message, exc)
            self._records = []
            self.error = message
            self.loading = False
            self.loaded = True
            self._notifier.error(message)
            return OperationResult(ok=False, message=message, status_code=_status_of(exc))

        summary = await self._fetch_summary()

        if self._is_stale(ticket):
            logger.debug(
                "Discarding stale %s response (ticket %d, newest %d)",
                self._definition.name,
                ticket,
                self._issued,
            )
            return OperationResult(ok=False, message=SUPERSEDED)

        self._records = records
        self.summary = summary
        self.error = None
        self.loading = False
        self.loaded = True
        self._reset_page_if_out_of_range()
        logger.info("Loaded %d %s", len(records), self._definition.plural)
        return OperationResult(ok=True)

    async def reload(self) -> OperationResult:
        """Full re-fetch; runs after every successful mutation."""
        return await self.load()

    async def _fetch_records(self) -> list[dict[str, Any]]:
        path = self._definition.path
        if self.uses_server_search and not self.filter_state.is_empty():
            params = to_query_params(self.filter_state, self._definition)
            if params:
                return await self._gateway.search(path, params)
        return await self._gateway.list_all(path)

    async def _fetch_summary(self) -> Any:
        if not self._definition.summary_path:
            return None
        try:
            return await self._gateway.fetch_document(self._definition.summary_path)
        except (ApiError, ApiTransportError) as exc:
            logger.warning("Could not load %s summary: %s", self._definition.name, exc)
            return None

    def _next_ticket(self) -> int:
        self._issued += 1
        return self._issued

    def _is_stale(self, ticket: int) -> bool:
        return ticket != self._issued

    # ── Search / filter / pagination ─────────────────────────────────

    async def set_search(self, term: str) -> None:
        self.filter_state.search_term = term or ""
        await self._filters_changed()

    async def set_filter(self, name: str, value: str | None) -> None:
        """Select a value for a discrete filter; ``""``/``ALL`` clears it."""
        self._definition.filter(name)
        self.filter_state.selections[name] = "" if value is None else str(value)
        await self._filters_changed()

    async def apply_filters(
        self, search_term: str, selections: dict[str, str | None]
    ) -> None:
        """Replace the whole filter state at once; a no-op when nothing changed."""
        for name in selections:
            self._definition.filter(name)
        state = FilterState(
            search_term=search_term or "",
            selections={k: "" if v is None else str(v) for k, v in selections.items()},
        )
        if state.search_term == self.filter_state.search_term and (
            state.active_selections() == self.filter_state.active_selections()
        ):
            return
        self.filter_state = state
        await self._filters_changed()

    async def clear_filters(self) -> None:
        self.filter_state = FilterState()
        self.page_number = 1
        await self._filters_changed()

    async def _filters_changed(self) -> None:
        if self.uses_server_search:
            await self.load()
        self._reset_page_if_out_of_range()

    def visible(self) -> list[dict[str, Any]]:
        """Records that pass the current search and filters."""
        return filter_records(self._records, self._client_state(), self._definition)

    def page(self, number: int | None = None) -> Page:
        return paginate(
            self.visible(),
            self.page_number if number is None else number,
            self._page_size,
        )

    def go_to_page(self, number: int) -> Page:
        current = self.page(number)
        self.page_number = current.number
        return current

    def _client_state(self) -> FilterState:
        """Filter state still to apply in memory.

        With server search, filters without a ``param`` are left for the
        client. The search term is always re-applied over ``search_fields`` so
        both strategies show the same records.
        """
        if not self.uses_server_search:
            return self.filter_state
        residual = FilterState(search_term=self.filter_state.search_term)
        for name, value in self.filter_state.active_selections().items():
            if not self._definition.filter(name).param:
                residual.selections[name] = value
        return residual

    def _reset_page_if_out_of_range(self) -> None:
        count = page_count(len(self.visible()), self._page_size)
        if self.page_number > max(count, 1):
            self.page_number = 1

    # ── Lookup ───────────────────────────────────────────────────────

    def find(self, record_id: int | str) -> dict[str, Any] | None:
        for record in self._records:
            if str(record.get("id")) == str(record_id):
                return record
        return None

    def get(self, record_id: int | str) -> dict[str, Any]:
        record = self.find(record_id)
        if record is None:
            raise EntityNotFoundError(self._definition.label, record_id)
        return record

    # ── Mutations ────────────────────────────────────────────────────

    async def create(self, form: EntityFormModel) -> OperationResult:
        payload = self._stamp_issuer(form.to_payload(FormMode.CREATE))
        try:
            record = await self._gateway.create(self._definition.path, payload)
        except (ApiError, ApiTransportError) as exc:
            return self._failed(exc, f"Failed to save {self._label_lower}")
        return await self._succeeded(f"{self._definition.label} created successfully", record)

    async def update(self, record_id: int, form: EntityFormModel) -> OperationResult:
        self.get(record_id)
        payload = self._stamp_issuer(form.to_payload(FormMode.EDIT))
        try:
            record = await self._gateway.update(self._definition.path, record_id, payload)
        except (ApiError, ApiTransportError) as exc:
            return self._failed(exc, f"Failed to save {self._label_lower}")
        return await self._succeeded(f"{self._definition.label} updated successfully", record)

    async def delete(self, record_id: int, *, confirmed: bool = False) -> OperationResult:
        """Delete a record; nothing happens until the caller confirms."""
        self.get(record_id)
        if not confirmed:
            return OperationResult(ok=False, message=self._definition.delete_prompt)
        try:
            await self._gateway.delete(self._definition.path, record_id)
        except (ApiError, ApiTransportError) as exc:
            return self._failed(exc, f"Failed to delete {self._label_lower}")
        return await self._succeeded(f"{self._definition.label} deleted successfully")

    async def perform_action(
        self, record_id: int, action_name: str, value: str | None = None
    ) -> OperationResult:
        """Quick status change through a sub-resource endpoint.

        The value must be one of the action's options; whether the transition
        itself makes sense is left to the backend.
        """
        action = self._definition.action(action_name)
        if action is None:
            raise UnknownActionError(self._definition.name, action_name)
        self.get(record_id)

        params: dict[str, Any] | None = None
        body: dict[str, Any] | None = None
        if action.placement != ValuePlacement.NONE:
            if value is None or (action.options and value not in action.options):
                raise InvalidActionValueError(self._definition.name, action_name, value)
            key = action.value_field or action.name
            if action.placement == ValuePlacement.QUERY:
                params = {key: value}
            else:
                body = {key: value}

        try:
            record = await self._gateway.perform_action(
                self._definition.path,
                record_id,
                action.path,
                action.method,
                params=params,
                body=body,
            )
        except (ApiError, ApiTransportError) as exc:
            return self._failed(exc, f"Failed to update {self._label_lower} {action.name}")
        return await self._succeeded(action.success_message, record)

    # ── Helpers ──────────────────────────────────────────────────────

    @property
    def _label_lower(self) -> str:
        return self._definition.label.lower()

    def _stamp_issuer(self, payload: dict[str, Any]) -> dict[str, Any]:
        field = self._definition.issuer_field
        if field and self._context is not None and self._context.user_id is not None:
            payload[field] = {"id": self._context.user_id}
        return payload

    async def _succeeded(
        self, message: str, record: dict[str, Any] | None = None
    ) -> OperationResult:
        self._notifier.success(message)
        await self.reload()
        return OperationResult(
            ok=True, message=message, record=record if isinstance(record, dict) else None
        )

    def _failed(self, exc: ApiError | ApiTransportError, fallback: str) -> OperationResult:
        message = fallback
        if isinstance(exc, ApiError) and exc.message.strip():
            message = exc.message
        logger.warning("%s: %s", fallback, exc)
        self._notifier.error(message)
        return OperationResult(ok=False, message=message, status_code=_status_of(exc))


def _status_of(exc: Exception) -> int | None:
    return exc.status_code if isinstance(exc, ApiError) else None
