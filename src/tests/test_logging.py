import logging
import pytest
from unittest.mock import MagicMock

from sales_reports.core.logging_config import NamespaceFilter, configure_logging

pytestmark = pytest.mark.no_db


@pytest.fixture
def logging_env():
    """
    Sets up a controlled logging environment for a test.

    Yields a mock handler that applies its filters and keeps the records it
    accepted, and resets the managed loggers before and after the test.
    """
    test_handler = MagicMock()
    test_handler.level = logging.NOTSET
    test_handler.filters = []

    accepted_records = []

    def handle(record):
        for f in test_handler.filters:
            if not f.filter(record):
                return False
        accepted_records.append(record)
        return True

    test_handler.addFilter = MagicMock(side_effect=test_handler.filters.append)
    test_handler.handle = MagicMock(side_effect=handle)
    test_handler.accepted_records = accepted_records

    loggers_to_manage = [
        "sales_reports", "sales_reports.features.reports", "sales_reports.features.stored_procedures",
        "sales_reports.features.reports.service", "sales_reports.features.stored_procedures.service",
        "sales_reports.main",
    ]

    def reset():
        for logger_name in loggers_to_manage:
            logger = logging.getLogger(logger_name)
            logger.handlers = []
            logger.filters = []
            logger.setLevel(logging.NOTSET)

    reset()
    yield test_handler
    reset()
    # Restore the application's own handler for the tests that follow
    configure_logging()


def _setup_logger(name, level, handler_to_add):
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = [handler_to_add]
    logger.propagate = True
    return logger


def get_handled_messages(test_handler: MagicMock) -> list[str]:
    return [f"{record.name}:{record.levelname}:{record.getMessage()}" for record in test_handler.accepted_records]


def test_default_level_propagation(logging_env):
    """
    Child loggers inherit the level of the 'sales_reports' logger.
    """
    _setup_logger("sales_reports", logging.INFO, logging_env)

    reports_logger = logging.getLogger("sales_reports.features.reports")
    queries_logger = logging.getLogger("sales_reports.features.stored_procedures")

    reports_logger.debug("Report debug message")
    reports_logger.info("Report info message")
    queries_logger.warning("Query warning message")

    handled_messages = get_handled_messages(logging_env)
    assert "sales_reports.features.reports:DEBUG:Report debug message" not in handled_messages
    assert "sales_reports.features.reports:INFO:Report info message" in handled_messages
    assert "sales_reports.features.stored_procedures:WARNING:Query warning message" in handled_messages


def test_namespace_specific_level(logging_env):
    _setup_logger("sales_reports", logging.INFO, logging_env)
    logging.getLogger("sales_reports.features.stored_procedures").setLevel(logging.DEBUG)

    logging.getLogger("sales_reports.features.stored_procedures.service").debug("Query timing")
    logging.getLogger("sales_reports.features.reports.service").debug("Report detail")

    handled_messages = get_handled_messages(logging_env)
    assert "sales_reports.features.stored_procedures.service:DEBUG:Query timing" in handled_messages
    assert "sales_reports.features.reports.service:DEBUG:Report detail" not in handled_messages


def test_namespace_filter_allow(logging_env):
    """
    The NamespaceFilter only lets records through from the listed namespaces.
    """
    _setup_logger("sales_reports", logging.DEBUG, logging_env)
    logging_env.addFilter(NamespaceFilter(allowed_namespaces=["sales_reports.features.reports"]))

    logging.getLogger("sales_reports.features.reports.service").info("Report message (allowed by filter)")
    logging.getLogger("sales_reports.features.stored_procedures.service").info("Query message (filtered out)")
    logging.getLogger("sales_reports.main").info("Main app message (filtered out)")

    handled_messages = get_handled_messages(logging_env)
    assert "sales_reports.features.reports.service:INFO:Report message (allowed by filter)" in handled_messages
    assert "sales_reports.features.stored_procedures.service:INFO:Query message (filtered out)" not in handled_messages
    assert "sales_reports.main:INFO:Main app message (filtered out)" not in handled_messages


def test_namespace_filter_allow_all_if_empty(logging_env):
    _setup_logger("sales_reports", logging.DEBUG, logging_env)
    logging_env.addFilter(NamespaceFilter(allowed_namespaces=[]))

    logging.getLogger("sales_reports.features.reports").info("Report message (filter empty)")
    logging.getLogger("sales_reports.main").info("Main message (filter empty)")

    handled_messages = get_handled_messages(logging_env)
    assert "sales_reports.features.reports:INFO:Report message (filter empty)" in handled_messages
    assert "sales_reports.main:INFO:Main message (filter empty)" in handled_messages


def test_configure_logging_replaces_its_handler(logging_env):
    app_logger = configure_logging("DEBUG", namespaces=["sales_reports.features"])
    configure_logging("DEBUG", namespaces=["sales_reports.features"])

    assert app_logger.name == "sales_reports"
    assert app_logger.level == logging.DEBUG
    assert len(app_logger.handlers) == 1
    namespace_filter = app_logger.handlers[0].filters[0]
    assert isinstance(namespace_filter, NamespaceFilter)
    assert namespace_filter.allowed_namespaces == ["sales_reports.features"]
