"""Domain entity for transient user notifications (toasts)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class Notification:
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
