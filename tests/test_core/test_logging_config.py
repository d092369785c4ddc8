"""Tests for the settings-driven logging setup."""

import logging
from dataclasses import replace

import pytest

from booking_api.app.core import logging_config
from booking_api.app.core.config import settings
from booking_api.app.core.logging_config import setup_logging


@pytest.fixture
def root_level(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_handlers_use_configured_format(tmp_path):
    configured = replace(
        settings,
        log_format="%(levelname)s|%(message)s",
        log_date_format="%H:%M",
        log_file=str(tmp_path / "service.log"),
    )
    handlers = logging_config._build_handlers(configured)
    try:
        assert len(handlers) == 2
        assert isinstance(handlers[1], logging.FileHandler)
        for handler in handlers:
            assert handler.formatter._fmt == "%(levelname)s|%(message)s"
            assert handler.formatter.datefmt == "%H:%M"
    finally:
        for handler in handlers:
            handler.close()


def test_console_only_without_log_file():
    handlers = logging_config._build_handlers(replace(settings, log_file=""))
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)


def test_level_names():
    assert logging_config._level_of("debug") == logging.DEBUG
    assert logging_config._level_of("WARNING") == logging.WARNING
    assert logging_config._level_of("chatty") == logging.INFO


def test_existing_handlers_are_kept(root_level):
    existing = logging.NullHandler()
    root_level.addHandler(existing)
    try:
        before = list(root_level.handlers)
        setup_logging(replace(settings, log_level="WARNING", log_file=""))
        assert root_level.handlers == before
        assert root_level.level == logging.WARNING
    finally:
        root_level.removeHandler(existing)


def test_quiet_loggers_are_raised_to_warning(root_level, monkeypatch):
    access = logging.getLogger("uvicorn.access")
    monkeypatch.setattr(access, "level", logging.NOTSET)
    existing = logging.NullHandler()
    root_level.addHandler(existing)
    try:
        setup_logging(replace(settings, log_file="", quiet_loggers=" uvicorn.access, "))
    finally:
        root_level.removeHandler(existing)
    assert access.level == logging.WARNING
