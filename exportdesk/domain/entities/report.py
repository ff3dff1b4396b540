"""Domain entities for read-only aggregate reports."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ReportType(str, Enum):
    """Reports published under ``/reports/{type}``."""

    SYSTEM_OVERVIEW = "system-overview"
    USER_ANALYTICS = "user-analytics"
    EMPLOYEE_DEMOGRAPHICS = "employee-demographics"
    AVAILABLE_REPORTS = "available-reports"


@dataclass
class ReportDocument:
    """An aggregate JSON document as returned by the backend."""

    report_type: ReportType
    data: dict[str, Any]
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
