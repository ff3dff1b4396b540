"""Domain entity for the authenticated session context."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RequestContext:
    """Credential and backend location for one session.

    Built once at session start and handed to the gateway, so no call site
    reads the token from shared storage on its own.
    """

    base_url: str
    token: str
    user_id: int | None = None
    user: dict[str, Any] = field(default_factory=dict)

    def auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }
