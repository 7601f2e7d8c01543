from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.config.settings import Settings


def test_missing_jwt_secret_fails_startup(monkeypatch):
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    with pytest.raises(ValidationError) as excinfo:
        Settings(_env_file=None)
    assert "jwt_secret_key" in str(excinfo.value)


def test_postgres_url_uses_asyncpg():
    settings = Settings(
        _env_file=None,
        database_url="postgres://farm:pw@db/goats",
        jwt_secret_key="s3cret",
    )
    assert settings.database_url == "postgresql+asyncpg://farm:pw@db/goats"
    assert settings.jwt_secret_key.get_secret_value() == "s3cret"
