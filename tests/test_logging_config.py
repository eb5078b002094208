"""Tests for the logging setup."""

import logging

import pytest

from logging_config import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_single_stderr_handler(root_logger):
    handler = setup_logging(logging.DEBUG)
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.DEBUG


def test_repeated_setup_does_not_duplicate_handlers(root_logger):
    setup_logging()
    handler = setup_logging(logging.INFO)
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.INFO
