"""Tests for the logger module."""

import logging
from unittest.mock import patch

import pytest

import aisearchvector.logger as logger_module
from aisearchvector.logger import LOGGER_NAMESPACE, Logger, get_logger, resolve_level, setup_global_logging
from aisearchvector.settings import settings


@pytest.fixture(autouse=True)
def package_logger():
    """Reset one-time configuration and restore the namespace logger afterwards."""
    package = logging.getLogger(LOGGER_NAMESPACE)
    saved_handlers, saved_level = list(package.handlers), package.level
    package.handlers = []
    logger_module._configured = False
    yield package
    package.handlers = saved_handlers
    package.setLevel(saved_level)
    logger_module._configured = False


class TestResolveLevel:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("CRITICAL", logging.CRITICAL),
            ("", logging.INFO),
            (None, logging.INFO),
            ("VERBOSE", logging.INFO),
        ],
    )
    def test_levels(self, name, expected):
        assert resolve_level(name) == expected


class TestSetupGlobalLogging:
    def test_configures_namespace_logger(self, package_logger):
        setup_global_logging("DEBUG")
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0], logging.StreamHandler)

    def test_root_logger_untouched(self):
        with patch("logging.basicConfig") as mock_basicconfig:
            setup_global_logging("INFO")
        mock_basicconfig.assert_not_called()

    def test_configures_once(self, package_logger):
        setup_global_logging("DEBUG")
        setup_global_logging("ERROR")
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_existing_handler_is_kept(self, package_logger):
        existing = logging.NullHandler()
        package_logger.addHandler(existing)
        setup_global_logging("INFO")
        assert package_logger.handlers == [existing]


class TestGetLogger:
    def test_name_is_namespaced(self):
        assert get_logger("AzureAISearchAdapter").name == "aisearchvector.AzureAISearchAdapter"

    def test_namespaced_name_kept(self):
        assert get_logger("aisearchvector.dbs").name == "aisearchvector.dbs"

    @pytest.mark.parametrize("name", [None, "", "aisearchvector"])
    def test_default_is_namespace(self, name):
        assert get_logger(name).name == LOGGER_NAMESPACE

    def test_first_logger_configures_logging(self):
        with patch("aisearchvector.logger.setup_global_logging") as mock_setup:
            get_logger("x")
        mock_setup.assert_called_once_with(settings.LOG_LEVEL)


class TestLogger:
    @pytest.fixture
    def logger(self):
        return get_logger("test")

    def test_passthrough_methods(self, logger):
        for name in ("debug", "warning", "error"):
            with patch.object(logger._logger, name) as mock_method:
                getattr(logger, name)("Index %s", "products", exc_info=True)
                mock_method.assert_called_once_with("Index %s", "products", exc_info=True)

    @pytest.mark.parametrize(
        "level,expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("", logging.INFO), ("ERROR", logging.ERROR)],
    )
    def test_message_logs_at_configured_level(self, logger, level, expected):
        with patch.object(settings, "LOG_LEVEL", level):
            with patch.object(logger._logger, "log") as mock_log:
                logger.message("Index %s created", "products")
        mock_log.assert_called_once_with(expected, "Index %s created", "products")

    def test_message_is_emitted(self, logger, caplog):
        with patch.object(settings, "LOG_LEVEL", "INFO"):
            with caplog.at_level(logging.INFO, logger=LOGGER_NAMESPACE):
                logger.message("Upserted 2 documents")
        assert ("aisearchvector.test", logging.INFO, "Upserted 2 documents") in caplog.record_tuples

    def test_direct_construction(self):
        assert Logger().name == LOGGER_NAMESPACE
