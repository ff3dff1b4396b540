"""Colored notification logger: ANSI-colored console output for user notifications.

Every finished screen operation produces exactly one notification; this
logger prints them so they stand out from request logging in the terminal.

Color scheme:
    🟢 Green: success
    🔴 Red  : error
    🔵 Cyan : info
"""

import logging


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Notification kinds ───────────────────────────────────────────────

class NotificationStyle:
    """Label, color and icon per notification level."""

    SUCCESS = ("SUCCESS", _Colors.GREEN, "✅")
    ERROR = ("ERROR", _Colors.RED, "❌")
    INFO = ("INFO", _Colors.CYAN, "ℹ️")


# ── NotificationLogger ───────────────────────────────────────────────

class NotificationLogger:
    """Color-coded logger for toast-style notifications.

    Usage:
        log = NotificationLogger("Notifications")
        log.success("Order created successfully", screen="orders")
        log.error("Cannot delete: referenced by orders")
    """

    def __init__(self, component_name: str = "Notifications"):
        self._logger = logging.getLogger(component_name)

    def _emit(
        self, level: int, style: tuple[str, str, str], message: str, **kwargs: object
    ) -> None:
        label, color, icon = style
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.log(level, formatted)

    def success(self, message: str, **kwargs: object) -> None:
        self._emit(logging.INFO, NotificationStyle.SUCCESS, message, **kwargs)

    def error(self, message: str, **kwargs: object) -> None:
        self._emit(logging.ERROR, NotificationStyle.ERROR, message, **kwargs)

    def info(self, message: str, **kwargs: object) -> None:
        self._emit(logging.INFO, NotificationStyle.INFO, message, **kwargs)
