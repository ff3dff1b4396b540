"""Notifier adapters: console output and an in-memory recent list."""

from collections import deque

from exportdesk.application.interfaces import Notifier
from exportdesk.domain.entities import Notification, NotificationLevel
from exportdesk.infrastructure.logging.colored_logger import NotificationLogger


class LoggingNotifier(Notifier):
    """Prints each notification through the colored console logger."""

    def __init__(self, log: NotificationLogger | None = None):
        self._log = log or NotificationLogger()

    def success(self, message: str) -> None:
        self._log.success(message)

    def error(self, message: str) -> None:
        self._log.error(message)

    def info(self, message: str) -> None:
        self._log.info(message)


class RecordingNotifier(Notifier):
    """Keeps the most recent notifications, newest last.

    Optionally forwards every notification to another notifier so the screen
    API can both return and print them.
    """

    def __init__(self, limit: int = 50, forward_to: Notifier | None = None):
        self._items: deque[Notification] = deque(maxlen=limit)
        self._forward_to = forward_to

    def _record(self, level: NotificationLevel, message: str) -> None:
        self._items.append(Notification(level=level, message=message))

    def success(self, message: str) -> None:
        self._record(NotificationLevel.SUCCESS, message)
        if self._forward_to is not None:
            self._forward_to.success(message)

    def error(self, message: str) -> None:
        self._record(NotificationLevel.ERROR, message)
        if self._forward_to is not None:
            self._forward_to.error(message)

    def info(self, message: str) -> None:
        self._record(NotificationLevel.INFO, message)
        if self._forward_to is not None:
            self._forward_to.info(message)

    @property
    def notifications(self) -> list[Notification]:
        return list(self._items)

    @property
    def last(self) -> Notification | None:
        return self._items[-1] if self._items else None

    def messages(self) -> list[str]:
        return [item.message for item in self._items]

    def clear(self) -> None:
        self._items.clear()
