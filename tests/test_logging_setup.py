"""Tests for cosinepanel.logging."""

import logging

import pytest

from cosinepanel.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    logger = logging.getLogger('cosinepanel')
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_get_logger_is_namespaced():
    assert get_logger('cosinepanel.gui.app').name == 'cosinepanel.gui.app'
    assert get_logger('tests.helper').name == 'cosinepanel.tests.helper'


def test_warning_level_uses_null_handler(tmp_path):
    setup_logging(level='WARNING', log_file=str(tmp_path / 'x.log'))
    handlers = logging.getLogger('cosinepanel').handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    assert not (tmp_path / 'x.log').exists()


def test_debug_level_writes_file(tmp_path):
    log_file = tmp_path / 'debug.log'
    setup_logging(level='DEBUG', log_file=str(log_file))
    get_logger('probe').debug('hello from test')
    for handler in logging.getLogger('cosinepanel').handlers:
        handler.flush()
    assert 'hello from test' in log_file.read_text()


def test_console_handler(tmp_path):
    setup_logging(level='INFO', console=True)
    handlers = logging.getLogger('cosinepanel').handlers
    assert any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in handlers)


def test_unknown_level_falls_back_to_warning():
    setup_logging(level='chatty')
    assert logging.getLogger('cosinepanel').level == logging.WARNING
