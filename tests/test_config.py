"""
Tests for settings loading from the environment.
"""

import pytest
from pydantic import ValidationError

from destination_service.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "DB_HOST", "DB_PASSWORD", "CORS_ORIGINS", "ENVIRONMENT", "PORT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 3001
    assert settings.countries_api_base_url == "https://restcountries.com/v3.1"
    assert settings.countries_api_timeout_seconds is None
    assert settings.cors_origins == ["*"]


def test_database_url_built_from_parts(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PASSWORD", "s3cret")

    url = Settings(_env_file=None).sqlalchemy_database_url

    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db.internal"
    assert url.port == 5432
    assert url.password == "s3cret"


def test_database_url_override_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@elsewhere/dest")
    monkeypatch.setenv("DB_HOST", "ignored")

    assert Settings(_env_file=None).sqlalchemy_database_url == "postgresql+asyncpg://u:p@elsewhere/dest"


@pytest.mark.parametrize("raw, expected", [
    ("https://a.example, https://b.example", ["https://a.example", "https://b.example"]),
    ('["https://a.example"]', ["https://a.example"]),
])
def test_cors_origins_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("CORS_ORIGINS", raw)

    assert Settings(_env_file=None).cors_origins == expected


def test_unknown_environment_rejected(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "qa")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
