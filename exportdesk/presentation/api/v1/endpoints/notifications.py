"""Recent user notifications (the toasts a browser screen would show)."""

from fastapi import APIRouter, Depends, Query, status

from exportdesk.application.schemas.screens import NotificationResponse
from exportdesk.infrastructure.dependencies import get_notifier
from exportdesk.infrastructure.notifier import RecordingNotifier

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    limit: int = Query(20, ge=1, le=50),
    notifier: RecordingNotifier = Depends(get_notifier),
) -> list[NotificationResponse]:
    """Most recent notifications, newest last."""
    return [
        NotificationResponse(
            level=item.level.value,
            message=item.message,
            created_at=item.created_at,
        )
        for item in notifier.notifications[-limit:]
    ]


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notifications(
    notifier: RecordingNotifier = Depends(get_notifier),
) -> None:
    """Dismiss every notification."""
    notifier.clear()
