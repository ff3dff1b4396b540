"""Report service: read-only aggregate reports from the backend."""

import logging

from exportdesk.application.interfaces import Notifier, ResourceGateway
from exportdesk.domain.entities import ReportDocument, ReportType
from exportdesk.domain.exceptions import ApiError, ApiTransportError

logger = logging.getLogger(__name__)

REPORTS_PATH = "reports"


class ReportService:
    """Fetches ``/reports/{type}`` documents for display."""

    def __init__(self, gateway: ResourceGateway, notifier: Notifier):
        self._gateway = gateway
        self._notifier = notifier

    async def fetch(self, report_type: ReportType | str) -> ReportDocument | None:
        report_type = ReportType(report_type)
        try:
            data = await self._gateway.fetch_document(
                f"{REPORTS_PATH}/{report_type.value}"
            )
        except (ApiError, ApiTransportError) as exc:
            logger.warning("Report %s failed: %s", report_type.value, exc)
            self._notifier.error("Failed to fetch report")
            return None

        if not isinstance(data, dict):
            data = {"value": data}
        return ReportDocument(report_type=report_type, data=data)
