"""
Tests for settings and logging setup.
"""
import logging
from logging.handlers import RotatingFileHandler

import pytest
from pydantic import ValidationError

from openai_images.core.config import Settings, get_settings
from openai_images.core.log_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("IMAGES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("IMAGES_LOG_FILE", raising=False)
    settings = get_settings()
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("IMAGES_LOG_LEVEL", " debug ")
    monkeypatch.setenv("IMAGES_LOG_FILE", str(tmp_path / "images.log"))
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_file == str(tmp_path / "images.log")


def test_console_only_by_default(monkeypatch, restore_root_logger):
    monkeypatch.delenv("IMAGES_LOG_FILE", raising=False)
    root = setup_logging(level="warning")
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_file_handler_writes_log(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.delenv("IMAGES_LOG_LEVEL", raising=False)
    log_file = tmp_path / "images.log"
    root = setup_logging(log_file=str(log_file))
    assert len(root.handlers) == 2

    logging.getLogger("openai_images.test").info("payload ready")
    for handler in root.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "openai_images.test - INFO - payload ready" in content


def test_log_file_from_environment(monkeypatch, tmp_path, restore_root_logger):
    log_file = tmp_path / "env.log"
    monkeypatch.setenv("IMAGES_LOG_FILE", str(log_file))
    setup_logging()
    assert log_file.exists()


def test_settings_accepts_logging_level_names():
    assert Settings(log_level="warn").log_level == "WARN"
    assert Settings(log_level="critical").log_level == "CRITICAL"


def test_unknown_level_from_environment_rejected(monkeypatch):
    monkeypatch.setenv("IMAGES_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError) as exc_info:
        get_settings()
    assert "verbose" in str(exc_info.value)


def test_setup_logging_rejects_unknown_level(monkeypatch, restore_root_logger):
    monkeypatch.delenv("IMAGES_LOG_LEVEL", raising=False)
    handlers = restore_root_logger.handlers[:]
    with pytest.raises(ValidationError):
        setup_logging(level="verbose")
    assert restore_root_logger.handlers == handlers
