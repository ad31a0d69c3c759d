import logging

from status_api.core.logging import configure_logging


def _restore_logging():
    for name in ("status_api", "sqlalchemy.engine", "sqlalchemy.pool", "asyncpg"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    configure_logging()


def test_service_logger_has_its_own_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("STATUS_LOG_LEVEL", "debug")
    monkeypatch.delenv("DB_LOG_LEVEL", raising=False)
    try:
        configure_logging()
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("status_api").level == logging.DEBUG
        assert logging.getLogger("status_api.api.status").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        monkeypatch.undo()
        _restore_logging()


def test_service_level_follows_log_level_by_default(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.delenv("STATUS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("DB_LOG_LEVEL", "info")
    try:
        configure_logging()
        assert logging.getLogger("status_api").level == logging.ERROR
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
        assert logging.getLogger("asyncpg").level == logging.INFO
    finally:
        monkeypatch.undo()
        _restore_logging()
