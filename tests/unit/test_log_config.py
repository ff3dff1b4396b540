"""Unit tests for per-category log levels."""

import logging

from exportdesk.config import Settings
from exportdesk.infrastructure.logging.log_config import setup_logging


def test_category_levels_come_from_settings():
    settings = Settings(
        log_level_http="ERROR", log_level_screens="DEBUG", _env_file=None
    )

    applied = setup_logging(settings)

    assert applied["http"] == logging.ERROR
    assert applied["screens"] == logging.DEBUG
    assert logging.getLogger("httpcore").level == logging.ERROR
    assert logging.getLogger("exportdesk.application.services").level == logging.DEBUG
    assert logging.getLogger("Notifications").level == logging.DEBUG


def test_unknown_level_name_falls_back_to_info():
    settings = Settings(log_level_gateway="chatty", _env_file=None)

    applied = setup_logging(settings)

    assert applied["gateway"] == logging.INFO
    assert logging.getLogger("exportdesk.infrastructure.session").level == logging.INFO
