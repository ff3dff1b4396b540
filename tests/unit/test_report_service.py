"""Unit tests for the ReportService."""

import pytest

from exportdesk.application.services import ReportService
from exportdesk.domain.entities import ReportType
from exportdesk.domain.exceptions import ApiError


@pytest.mark.asyncio
async def test_fetch_returns_document(make_gateway, notifier):
    gateway = make_gateway()
    gateway.documents["reports/system-overview"] = {"totalUsers": 12, "totalBranches": 3}

    document = await ReportService(gateway, notifier).fetch(ReportType.SYSTEM_OVERVIEW)

    assert document.report_type == ReportType.SYSTEM_OVERVIEW
    assert document.data["totalUsers"] == 12
    assert notifier.notifications == []


@pytest.mark.asyncio
async def test_fetch_accepts_type_names(make_gateway, notifier):
    gateway = make_gateway()
    gateway.documents["reports/available-reports"] = ["system-overview"]

    document = await ReportService(gateway, notifier).fetch("available-reports")

    assert document.data == {"value": ["system-overview"]}


@pytest.mark.asyncio
async def test_fetch_failure_notifies_and_returns_none(make_gateway, notifier):
    gateway = make_gateway()
    gateway.fail_next["document"] = ApiError(500, "boom", "GET", "reports/user-analytics")

    document = await ReportService(gateway, notifier).fetch(ReportType.USER_ANALYTICS)

    assert document is None
    assert notifier.messages() == ["Failed to fetch report"]
