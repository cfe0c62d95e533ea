import logging

import pytest

from gallery.log_level import LogLevel
from gallery.utils import COLLECTION, EXHIBITION, LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_gallery_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize("log_level, expected", [
    (LogLevel.ERRORS_ONLY, logging.ERROR),
    (LogLevel.COLLECTION, COLLECTION),
    (LogLevel.EXHIBITION, EXHIBITION),
    (LogLevel.DEBUG, logging.DEBUG),
])
def test_level_mapping(tmp_path, log_level, expected):
    logger = setup_logging(tmp_path, log_level)
    assert logger.level == expected


def test_none_attaches_no_handlers(tmp_path):
    logger = setup_logging(tmp_path, LogLevel.NONE)
    assert logger.handlers == []
    assert not logger.isEnabledFor(logging.CRITICAL)


def test_module_loggers_write_to_log_file(tmp_path):
    setup_logging(tmp_path / "logs", LogLevel.EXHIBITION)

    child = logging.getLogger("gallery.storage.store")
    child.collection("Saved 3 exhibitions")
    child.exhibition("Added Painting 'Starry Night'")
    child.debug("hidden")

    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()
    text = (tmp_path / "logs" / "gallery.log").read_text(encoding="utf-8")

    assert "COLLECTION - Saved 3 exhibitions" in text
    assert "EXHIBITION - Added Painting 'Starry Night'" in text
    assert "hidden" not in text


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging(tmp_path, LogLevel.DEBUG)
    logger = setup_logging(tmp_path, LogLevel.DEBUG)
    assert len(logger.handlers) == 2
