"""Read-only aggregate report endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from exportdesk.application.schemas.screens import ReportResponse
from exportdesk.domain.entities import ReportType
from exportdesk.infrastructure.dependencies import ScreenRegistry, get_screen_registry

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("", response_model=list[str])
async def list_report_types() -> list[str]:
    return [report_type.value for report_type in ReportType]


@router.get("/{report_type}", response_model=ReportResponse)
async def get_report(
    report_type: str,
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> ReportResponse:
    """Fetch one report document from the backend."""
    try:
        kind = ReportType(report_type)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown report type '{report_type}'",
        )

    document = await registry.reports.fetch(kind)
    if document is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch report",
        )
    return ReportResponse(
        report_type=document.report_type.value,
        data=document.data,
        fetched_at=document.fetched_at,
    )
