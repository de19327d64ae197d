from fastapi.testclient import TestClient
from loguru import logger
from sqlalchemy.exc import OperationalError

from garage_rental.core import config
from garage_rental.core.security import warn_if_default_secret
from garage_rental.db.base import get_db
from garage_rental.main import app


def _client_with_failing_db(exc):
    def failing_db():
        raise exc
        yield

    app.dependency_overrides[get_db] = failing_db
    return TestClient(app, raise_server_exceptions=False)


def test_unexpected_error_returns_json_500():
    try:
        client = _client_with_failing_db(RuntimeError("boom"))
        res = client.get("/garages")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.headers["content-type"].startswith("application/json")
    assert res.json() == {"error": "Internal Server Error"}


def test_database_error_hides_details():
    try:
        client = _client_with_failing_db(OperationalError("SELECT 1", {}, Exception("disk I/O error")))
        res = client.get("/amenities")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert "disk" not in res.text


def test_default_secret_key_logs_warning(monkeypatch):
    messages = []
    sink = logger.add(messages.append, level="WARNING")
    try:
        monkeypatch.setattr(config, "SECRET_KEY", config.DEFAULT_SECRET_KEY)
        assert warn_if_default_secret() is True
        monkeypatch.setattr(config, "SECRET_KEY", "a-configured-production-secret-of-length")
        assert warn_if_default_secret() is False
    finally:
        logger.remove(sink)

    assert len(messages) == 1
    assert "SECRET_KEY" in messages[0]
