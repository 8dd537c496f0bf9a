import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.factory import create_app


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_allowed_origins_from_comma_separated_env(monkeypatch, fresh_settings):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, http://b.example")

    assert get_settings().allowed_origins == ["http://a.example", "http://b.example"]


def test_allowed_origins_from_json_env(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", '["http://a.example"]')

    assert Settings(_env_file=None).allowed_origins == ["http://a.example"]


def test_allowed_origins_default_is_wildcard(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    assert Settings(_env_file=None).allowed_origins == ["*"]


def test_cors_wildcard_origin():
    client = TestClient(create_app(Settings(_env_file=None, allowed_origins=["*"])))

    response = client.get("/jobs", headers={"Origin": "http://anywhere.example"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_whitelist_with_credentials(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example,http://b.example")
    settings = Settings(_env_file=None, allow_credentials=True)
    client = TestClient(create_app(settings))

    response = client.get("/jobs", headers={"Origin": "http://b.example"})
    assert response.headers["access-control-allow-origin"] == "http://b.example"
    assert response.headers["access-control-allow-credentials"] == "true"

    response = client.get("/jobs", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in response.headers
