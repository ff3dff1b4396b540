"""Session loading: builds the RequestContext once at startup.

The token comes from ``API_TOKEN`` when set, otherwise from the JSON session
file written at login (``{"token": "...", "user": {"id": 1, ...}}``).
"""

import json
import logging
from pathlib import Path
from typing import Any

from exportdesk.config import Settings
from exportdesk.domain.entities import RequestContext
from exportdesk.domain.exceptions import MissingCredentialsError

logger = logging.getLogger(__name__)


def _read_session_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read session file %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_request_context(settings: Settings) -> RequestContext:
    """Resolve the bearer token and signed-in user for this process.

    Raises:
        MissingCredentialsError: neither the setting nor the session file
            provides a token.
    """
    session = _read_session_file(Path(settings.token_file)) if settings.token_file else {}
    token = settings.api_token.strip() or str(session.get("token") or "").strip()
    if not token:
        raise MissingCredentialsError(
            f"No API token configured (set API_TOKEN or write {settings.token_file})"
        )

    user = session.get("user")
    if not isinstance(user, dict):
        user = {}
    user_id = user.get("id")
    try:
        user_id = int(user_id) if user_id is not None else None
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric user id in session file: %r", user_id)
        user_id = None

    logger.info(
        "Session ready for %s (user id %s)", settings.api_base_url, user_id or "unknown"
    )
    return RequestContext(
        base_url=settings.api_base_url,
        token=token,
        user_id=user_id,
        user=user,
    )
