import logging

import pytest

from facetcube.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("facetcube")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_repeated_setup_does_not_stack_handlers(package_logger):
    setup_logging()
    setup_logging(level=logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_log_file_receives_package_records(package_logger, tmp_path):
    log_file = tmp_path / "facetcube.log"
    setup_logging(log_file=str(log_file))
    logging.getLogger("facetcube.controller.generator").info("Generated cube config")

    for handler in package_logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "facetcube.controller.generator - INFO - Generated cube config" in text
