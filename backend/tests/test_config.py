import pytest

from social_api.config import DEFAULT_DB_URL, Settings


def test_dev_defaults(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    s = Settings()
    assert s.ENV == "dev"
    assert s.DATABASE_URL == DEFAULT_DB_URL
    assert s.PORT == 8080


def test_non_dev_requires_database_url(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        Settings()
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/social")
    assert Settings().DATABASE_URL == "postgresql://db/social"
