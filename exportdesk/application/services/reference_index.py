"""Reference lists for dropdowns, and client-side joins by foreign-key id."""

import logging
from typing import Any

from exportdesk.application.interfaces import ResourceGateway
from exportdesk.application.services.record_filter import value_at
from exportdesk.application.services.resource_catalog import ResourceCatalog
from exportdesk.domain.entities import ReferenceDefinition
from exportdesk.domain.exceptions import ApiError, ApiTransportError

logger = logging.getLogger(__name__)

MISSING_LABEL = "N/A"


class _SafeRecord(dict):
    """Format mapping that renders missing keys as empty strings."""

    def __missing__(self, key: str) -> str:
        return ""


def display_label(record: dict[str, Any], template: str) -> str:
    """Render a catalog ``display`` template (``"{firstName} {lastName}"``)."""
    label = template.format_map(_SafeRecord(record)).strip()
    return label or str(record.get("id", MISSING_LABEL))


class ReferenceIndex:
    """Reference lists loaded alongside one screen, keyed by reference name.

    Each list is fetched independently; a failed fetch leaves that list empty
    and is only logged, the screen itself keeps working.
    """

    def __init__(self, gateway: ResourceGateway, catalog: ResourceCatalog):
        self._gateway = gateway
        self._catalog = catalog
        self._lists: dict[str, list[dict[str, Any]]] = {}
        self._resources: dict[str, str] = {}

    async def load(self, references: list[ReferenceDefinition]) -> None:
        for reference in references:
            self._lists[reference.name] = await self._load_one(reference)
            self._resources[reference.name] = reference.resource

    async def _load_one(self, reference: ReferenceDefinition) -> list[dict[str, Any]]:
        definition = self._catalog.get(reference.resource)
        try:
            records = await self._gateway.list_all(definition.path)
        except (ApiError, ApiTransportError) as exc:
            logger.warning("Could not load reference list '%s': %s", reference.name, exc)
            return []
        if reference.filter_field and reference.filter_values:
            records = [
                r
                for r in records
                if str(value_at(r, reference.filter_field)) in reference.filter_values
            ]
        return records

    def records(self, name: str) -> list[dict[str, Any]]:
        return list(self._lists.get(name, []))

    def options(self, name: str) -> list[dict[str, Any]]:
        """``[{"id": ..., "label": ...}]`` for a dropdown."""
        template = self._template(name)
        return [
            {"id": record.get("id"), "label": display_label(record, template)}
            for record in self._lists.get(name, [])
        ]

    def label(self, name: str, record_id: Any) -> str:
        """Display label of the referenced record, or ``N/A``."""
        if record_id in (None, ""):
            return MISSING_LABEL
        template = self._template(name)
        for record in self._lists.get(name, []):
            if str(record.get("id")) == str(record_id):
                return display_label(record, template)
        return MISSING_LABEL

    def _template(self, name: str) -> str:
        resource = self._resources.get(name, name)
        if resource in self._catalog:
            return self._catalog.get(resource).display
        return "{id}"
