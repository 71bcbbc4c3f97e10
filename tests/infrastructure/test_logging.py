"""Tests for logging setup."""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from pattern_gallery.config.schemas import LoggingConfig
from pattern_gallery.infrastructure.logging.logger import DetailedFormatter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_stderr_destination(restore_root_logger):
    setup_logging(LoggingConfig(level="info", destination="stderr"))

    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, DetailedFormatter)


def test_none_destination_discards_records(restore_root_logger):
    setup_logging(LoggingConfig(destination="none"))

    assert isinstance(restore_root_logger.handlers[0], logging.NullHandler)


def test_file_destination_writes_records(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "gallery.log"

    setup_logging(LoggingConfig(level="DEBUG", destination="both", file_path=str(log_file)))
    get_logger("pattern_gallery.tests").info("example finished", slug="pizza")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in restore_root_logger.handlers)
    content = log_file.read_text()
    assert "example finished" in content
    assert "pattern_gallery.tests" in content


def test_stdlib_records_render_once_with_caller():
    record = logging.LogRecord("pattern_gallery.catalog", logging.WARNING, __file__, 42,
                               "example %s missing", ("pizza",), None, func="load_examples")

    line = DetailedFormatter().format(record)

    assert "example pizza missing" in line
    assert line.count("warning") == 1
    assert "WARNING" not in line
    assert "func_name=load_examples" in line
    assert "lineno=42" in line
