"""
Test logger setup
"""
import logging
from logging.handlers import RotatingFileHandler

from rbm_engine.utils.logging_utils import setup_logger


def test_console_and_file_handlers(tmp_path):
    logger = setup_logger(name="rbm_engine_test_file", log_dir=str(tmp_path), filename="run.log")
    try:
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in (tmp_path / "run.log").read_text()
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_handlers_added_once():
    first = setup_logger(name="rbm_engine_test_console", log_dir=None, level="info")
    second = setup_logger(name="rbm_engine_test_console", log_dir=None)
    assert first is second
    assert len(second.handlers) == 1
    assert first.level == logging.DEBUG
