"""Tests for catalog_core/common/log_config.py"""

import logging
import sys

from catalog_core.common.log_config import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger("catalog_core")
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_default_level_is_info(self):
        setup_logging()
        logger = logging.getLogger("catalog_core")
        assert logger.level == logging.INFO

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        logger = logging.getLogger("catalog_core")
        assert logger.level == logging.DEBUG

    def test_quiet_sets_warning(self):
        setup_logging(quiet=True)
        logger = logging.getLogger("catalog_core")
        assert logger.level == logging.WARNING

    def test_handler_outputs_to_stderr(self):
        setup_logging()
        logger = logging.getLogger("catalog_core")
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert handler.stream is sys.stderr

    def test_repeat_calls_keep_one_handler(self):
        setup_logging()
        setup_logging(verbose=True)
        logger = logging.getLogger("catalog_core")
        assert len(logger.handlers) == 1

    def test_module_loggers_propagate_to_package_logger(self, caplog):
        setup_logging(verbose=True)
        with caplog.at_level(logging.DEBUG, logger="catalog_core"):
            logging.getLogger("catalog_core.validation.row_normalizers").debug("dropped")
        assert "dropped" in caplog.text
