"""Tests for logging configuration."""

import logging

import pytest

from nutrition_planner.api.app import create_app
from nutrition_planner.app_logging import configure_logging


@pytest.fixture
def planner_logger():
    logger = logging.getLogger("nutrition_planner")
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_configure_logging_idempotent(planner_logger) -> None:
    configure_logging()
    first_count = len(planner_logger.handlers)

    configure_logging()
    second_count = len(planner_logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_accepts_level_names(planner_logger) -> None:
    configure_logging("debug")
    assert planner_logger.level == logging.DEBUG

    configure_logging(logging.WARNING)
    assert planner_logger.level == logging.WARNING
    assert len(planner_logger.handlers) == 1


def test_configure_logging_quiets_http_client_logs(planner_logger) -> None:
    configure_logging()

    assert logging.getLogger("httpx").level == logging.WARNING


def test_create_app_uses_configured_level(planner_logger, container) -> None:
    container.settings = container.settings.model_copy(update={"log_level": "DEBUG"})

    create_app(container)

    assert planner_logger.level == logging.DEBUG
