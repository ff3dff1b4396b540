from .session import RequestContext
from .resource import (
    ActionDefinition,
    FilterDefinition,
    FilterKind,
    ReferenceDefinition,
    ResourceDefinition,
    ValuePlacement,
)
from .list_state import ALL, FilterState, FormMode, OperationResult, Page
from .notification import Notification, NotificationLevel
from .report import ReportDocument, ReportType

__all__ = [
    "RequestContext",
    "ActionDefinition",
    "FilterDefinition",
    "FilterKind",
    "ReferenceDefinition",
    "ResourceDefinition",
    "ValuePlacement",
    "ALL",
    "FilterState",
    "FormMode",
    "OperationResult",
    "Page",
    "Notification",
    "NotificationLevel",
    "ReportDocument",
    "ReportType",
]
