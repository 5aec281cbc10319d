from __future__ import annotations

from collections.abc import Generator

import pytest
import structlog
from structlog.testing import capture_logs

from watson_core import settings as settings_module
from watson_core.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_logging_state() -> Generator[None, None, None]:
    structlog.reset_defaults()
    settings_module.get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    settings_module.get_settings.cache_clear()


def test_configure_logging_drops_events_below_level() -> None:
    configure_logging("ERROR")
    logger = get_logger("level-filter")

    with capture_logs() as captured:
        logger.warning("service_error_response", status_code=500)
        logger.error("service_transport_error", url="https://example.com")

    assert [entry["event"] for entry in captured] == ["service_transport_error"]


def test_get_logger_takes_level_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert not structlog.is_configured()

    logger = get_logger("settings-level")

    assert structlog.is_configured()
    with capture_logs() as captured:
        logger.warning("dropped_event")
        logger.error("kept_event")

    assert [entry["event"] for entry in captured] == ["kept_event"]


def test_configure_logging_unknown_level_falls_back_to_info() -> None:
    configure_logging("chatty")
    logger = get_logger("unknown-level")

    with capture_logs() as captured:
        logger.debug("debug_event")
        logger.info("info_event")

    assert [entry["event"] for entry in captured] == ["info_event"]
