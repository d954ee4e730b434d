# src/game_reviews/tests/test_logging/test_builder_setup.py
import logging

from game_reviews.core.logging.builder import make_dict_config, setup_logging


# Minimal Settings-like object: the builder only reads these attributes
class DummySettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = False
    LOG_DIR = None  # set per test
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "development"
    ENABLE_SQL_LOGGING = False


def test_make_dict_config_with_log_dir_uses_file_handlers(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert cfg["formatters"]["json"]["service"] == "game-reviews-api"


def test_make_dict_config_stdout_uses_error_console(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    settings.LOG_TO_STDOUT = True

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["loggers"][""]["handlers"] == ["console", "error_console"]


def test_sql_logging_toggle(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path

    assert make_dict_config(settings)["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"

    settings.ENABLE_SQL_LOGGING = True
    assert make_dict_config(settings)["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_every_handler_redacts_and_stamps_request_id(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path

    for handler in make_dict_config(settings)["handlers"].values():
        assert handler["filters"] == ["request_id", "redact"]


def test_setup_logging_creates_log_dir(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path / "logs"
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    assert logging.getLogger().handlers
