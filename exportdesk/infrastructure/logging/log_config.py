"""Per-category log levels for the screen service.

Each category is driven by a ``log_level_<category>`` setting, so the
outbound request lines of httpx can stay quiet while controller and
notification logging is turned up.
"""

import logging
import sys

from exportdesk.config import Settings, get_settings

_CATEGORY_MAP: dict[str, list[str]] = {
    "http": ["httpx", "httpcore"],
    "uvicorn": ["uvicorn", "uvicorn.access", "uvicorn.error"],
    "gateway": ["exportdesk.infrastructure.api", "exportdesk.infrastructure.session"],
    "screens": ["exportdesk.application.services", "Notifications"],
}

_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the level set per category."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for category, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, f"log_level_{category}", "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
        applied[category] = level

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{c}={logging.getLevelName(lvl)}" for c, lvl in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names become INFO."""
    numeric = getattr(logging, str(raw).upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
