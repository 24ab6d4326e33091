# tests/core/test_config.py

"""애플리케이션 설정(Settings) 로딩에 대한 테스트 모듈입니다."""

import pytest
from pydantic import ValidationError

from labsvc.core.config import Settings


def test_settings_read_from_environment(monkeypatch):
    """(성공) 환경 변수 값이 설정에 반영됨"""
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/lab")
    monkeypatch.setenv("RECORD_STORE_BACKEND", "memory")
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL.get_secret_value() == "postgresql+asyncpg://u:p@db:5432/lab"
    assert settings.RECORD_STORE_BACKEND == "memory"
    assert settings.DB_POOL_SIZE == 3
    assert settings.CORS_ORIGINS == ["http://localhost:3000"]


def test_debug_mode_lowers_log_level_in_development(monkeypatch):
    """(성공) 개발 환경에서 DEBUG_MODE를 켜면 로그 레벨이 DEBUG"""
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("DEBUG_MODE", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


def test_database_url_is_not_exposed_in_repr(monkeypatch):
    """(성공) DB 접속 정보는 repr 에 노출되지 않음"""
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:secret@db/lab")
    assert "secret" not in repr(Settings(_env_file=None))


def test_invalid_store_backend(monkeypatch):
    """(실패) 지원하지 않는 저장소 백엔드 값은 ValidationError"""
    monkeypatch.setenv("RECORD_STORE_BACKEND", "redis")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
