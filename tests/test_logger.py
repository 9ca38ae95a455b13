"""Tests for logging setup."""

import logging

import pytest

from logger import LOGGER_NAME, log_document_summary, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    for handler in list(logging.getLogger(LOGGER_NAME).handlers):
        logging.getLogger(LOGGER_NAME).removeHandler(handler)
        handler.close()


@pytest.mark.parametrize('verbosity,level,expected', [
    (0, None, logging.WARNING),
    (1, None, logging.INFO),
    (3, None, logging.DEBUG),
    (0, 'error', logging.ERROR),
    (2, 'WARNING', logging.WARNING),
])
def test_resolve_level(verbosity, level, expected):
    assert resolve_level(verbosity, level) == expected


def test_invalid_level():
    with pytest.raises(ValueError):
        setup_logging(level='LOUD')


def test_setup_replaces_handlers():
    setup_logging(verbosity=1)
    logger = setup_logging(verbosity=2)

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / 'export.log'
    setup_logging(verbosity=1, log_file=str(log_file))

    logging.getLogger('news_format_exporter.exporter').info('pass finished')

    assert 'pass finished' in log_file.read_text(encoding='utf-8')


def test_document_summary(tmp_path):
    log_file = tmp_path / 'export.log'
    setup_logging(verbosity=1, log_file=str(log_file))

    log_document_summary(
        {'components': [{'role': 'body'}, {'role': 'photo'}, {'role': 'body'}]},
        ['a.png']
    )

    text = log_file.read_text(encoding='utf-8')
    assert 'body: 2' in text
    assert 'Bundle: a.png' in text
