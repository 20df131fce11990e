# -*- coding: utf-8 -*-
"""Tests for the logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from utils.logger import APP_LOGGER_NAME, get_logger, setup_logger


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "logs" / "app.log"
    yield path
    setup_logger()


def test_setup_writes_to_rotating_file(log_file):
    logger = setup_logger(log_file, console_level=logging.WARNING)
    logger.getChild("tests").info("batch created")

    for handler in logger.handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    assert "batch created" in log_file.read_text(encoding="utf-8")
    assert "| INFO     | procdash.tests |" in log_file.read_text(encoding="utf-8")


def test_setup_twice_does_not_stack_handlers(log_file):
    setup_logger(log_file)
    logger = setup_logger(log_file)

    assert len(logger.handlers) == 2
    assert logger.propagate is False


def test_module_loggers_are_children():
    assert get_logger("services.api_client").name == f"{APP_LOGGER_NAME}.services.api_client"
