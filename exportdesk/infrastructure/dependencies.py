"""FastAPI dependency injection: wires infrastructure to application layer.

The screen API keeps one ``ScreenRegistry`` per process on ``app.state``:
one list controller per catalog resource, sharing the session's gateway and
notifier, so each screen's loaded collection and filter state survive across
requests the way they survive across renders in a browser tab.
"""

import logging

import httpx
from fastapi import Request

from exportdesk.application.interfaces import Notifier, ResourceGateway
from exportdesk.application.schemas import FORM_MODELS, EntityFormModel
from exportdesk.application.services import (
    EntityForm,
    EntityListController,
    ReferenceIndex,
    ReportService,
    ResourceCatalog,
)
from exportdesk.config import Settings
from exportdesk.domain.entities import RequestContext
from exportdesk.domain.exceptions import UnknownResourceError
from exportdesk.infrastructure.api import HttpResourceGateway
from exportdesk.infrastructure.notifier import LoggingNotifier, RecordingNotifier

logger = logging.getLogger(__name__)


class ScreenRegistry:
    """Controllers, forms, reference lists and reports for every screen."""

    def __init__(
        self,
        catalog: ResourceCatalog,
        gateway: ResourceGateway,
        notifier: RecordingNotifier,
        *,
        page_size: int = 10,
        filter_strategy: str = "client",
        context: RequestContext | None = None,
    ):
        self.catalog = catalog
        self.gateway = gateway
        self.notifier = notifier
        self.reports = ReportService(gateway, notifier)
        self._controllers = {
            definition.name: EntityListController(
                definition,
                gateway,
                notifier,
                page_size=page_size,
                filter_strategy=filter_strategy,
                context=context,
            )
            for definition in catalog
        }

    def controller(self, name: str) -> EntityListController:
        try:
            return self._controllers[name]
        except KeyError:
            raise UnknownResourceError(name) from None

    async def loaded_controller(self, name: str) -> EntityListController:
        """The screen's controller, loading its collection on first use."""
        controller = self.controller(name)
        if not controller.loaded:
            await controller.load()
        return controller

    def form_model(self, name: str) -> type[EntityFormModel]:
        self.controller(name)
        try:
            return FORM_MODELS[name]
        except KeyError:
            raise UnknownResourceError(name) from None

    def form(self, name: str, record: dict | None = None) -> EntityForm:
        return EntityForm(self.form_model(name), record=record)

    async def references(self, name: str) -> ReferenceIndex:
        """Fresh reference lists for one screen's dropdowns."""
        definition = self.controller(name).definition
        index = ReferenceIndex(self.gateway, self.catalog)
        await index.load(definition.references)
        return index


def build_screen_registry(
    settings: Settings,
    context: RequestContext,
    http_client: httpx.AsyncClient | None = None,
    notifier: Notifier | None = None,
) -> ScreenRegistry:
    """Wire catalog, gateway and notifier into a registry."""
    catalog = ResourceCatalog.from_yaml(settings.catalog_file or None)
    gateway = HttpResourceGateway(
        context,
        timeout=settings.request_timeout,
        http_client=http_client,
    )
    recording = RecordingNotifier(forward_to=notifier or LoggingNotifier())
    logger.info(
        "Screen registry ready: %d screens, %s-side filtering",
        len(catalog),
        settings.filter_strategy,
    )
    return ScreenRegistry(
        catalog,
        gateway,
        recording,
        page_size=settings.page_size,
        filter_strategy=settings.filter_strategy,
        context=context,
    )


def get_screen_registry(request: Request) -> ScreenRegistry:
    """Provides the process-wide ScreenRegistry built in the lifespan."""
    return request.app.state.screens


def get_notifier(request: Request) -> RecordingNotifier:
    return request.app.state.screens.notifier
