from pitchside.core import database
from pitchside.core.config import settings


def test_sqlite_engine_shares_connections_across_threads():
    assert database._engine_options("sqlite://") == {
        "connect_args": {"check_same_thread": False}
    }


def test_server_engine_pool_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "DB_POOL_TIMEOUT", 5)
    monkeypatch.setattr(settings, "DB_POOL_SIZE", 3)

    options = database._engine_options("postgresql://user:pw@db/pitchside")

    assert options["pool_timeout"] == 5
    assert options["pool_size"] == 3
    assert options["max_overflow"] == settings.DB_MAX_OVERFLOW
    assert options["pool_recycle"] == settings.DB_POOL_RECYCLE
    assert options["pool_pre_ping"] is True
