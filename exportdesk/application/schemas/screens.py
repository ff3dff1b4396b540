"""Pydantic DTOs for the screen API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class FilterInfo(BaseModel):
    """One discrete filter as offered by a screen."""

    name: str
    kind: str
    options: list[str] = Field(default_factory=list)
    selected: str = ""


class ActionInfo(BaseModel):
    name: str
    method: str
    options: list[str] = Field(default_factory=list)


class ScreenSummary(BaseModel):
    """Catalog entry of one entity screen."""

    name: str
    label: str
    plural: str
    path: str
    filters: list[FilterInfo] = Field(default_factory=list)
    actions: list[ActionInfo] = Field(default_factory=list)
    page_size: int


class ScreenPageResponse(BaseModel):
    """Filtered, paginated view of one screen's collection."""

    resource: str
    items: list[dict[str, Any]]
    page: int
    page_size: int
    total: int
    page_count: int
    search: str = ""
    filters: dict[str, str] = Field(default_factory=dict)
    loading: bool = False
    error: str | None = None
    summary: Any = None


class FormSubmission(BaseModel):
    """Raw form values, keyed by the backend's field names."""

    values: dict[str, Any] = Field(
        default_factory=dict,
        examples=[{"name": "Colombo", "address": "12 Main St", "isActive": True}],
    )


class ActionRequest(BaseModel):
    value: str | None = Field(None, examples=["SHIPPED"])


class OperationResponse(BaseModel):
    ok: bool
    message: str = ""
    record: dict[str, Any] | None = None


class ReferenceOption(BaseModel):
    id: Any
    label: str


class NotificationResponse(BaseModel):
    level: str
    message: str
    created_at: datetime


class ReportResponse(BaseModel):
    report_type: str
    data: dict[str, Any]
    fetched_at: datetime
