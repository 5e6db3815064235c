import logging

from schema_checker.config import CheckerConfig


def test_defaults(monkeypatch):
    for name in ("MAX_DEPTH", "LOG_LEVEL", "PRINT_LEVEL", "CACHE_ENABLED"):
        monkeypatch.delenv(f"SCHEMA_CHECKER_{name}", raising=False)

    config = CheckerConfig.from_env()

    assert config == CheckerConfig()
    assert config.max_depth == 100
    assert config.cache_enabled is True


def test_from_env(monkeypatch):
    monkeypatch.setenv("SCHEMA_CHECKER_MAX_DEPTH", "7")
    monkeypatch.setenv("SCHEMA_CHECKER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SCHEMA_CHECKER_PRINT_LEVEL", "WARNING")
    monkeypatch.setenv("SCHEMA_CHECKER_CACHE_ENABLED", "False")

    config = CheckerConfig.from_env()

    assert config.max_depth == 7
    assert config.log_level == "DEBUG"
    assert config.print_level == "WARNING"
    assert config.cache_enabled is False


def test_set_logging_splits_streams():
    logger = CheckerConfig(log_level="DEBUG", print_level="WARNING").set_logging()
    root = logging.getLogger()

    assert logger.name == "schema_checker"
    assert root.level == logging.DEBUG
    assert [h.level for h in root.handlers] == [logging.DEBUG, logging.WARNING]
