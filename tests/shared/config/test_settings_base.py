# -*- coding: utf-8 -*-
import pytest

from app.shared.config.settings_base import BaseAppSettings

def test_database_url_builds_from_parts(monkeypatch):
    monkeypatch.setenv("DB_USER", "alice")
    monkeypatch.setenv("DB_PASSWORD", "s3cr3t!")
    monkeypatch.setenv("DB_HOST", "db.local")
    monkeypatch.setenv("DB_PORT", "5433")
    monkeypatch.setenv("DB_NAME", "userhub_db")
    s = BaseAppSettings()
    assert s.database_url.startswith("postgresql+asyncpg://alice:s3cr3t%21@")
    assert s.database_url.endswith("db.local:5433/userhub_db")

@pytest.mark.parametrize(
    "raw",
    ["postgres://u:p@h:5432/db", "postgresql://u:p@h:5432/db"],
)
def test_database_url_uses_DB_URL_and_normalizes(monkeypatch, raw):
    monkeypatch.setenv("DB_URL", raw)
    s = BaseAppSettings()
    assert s.database_url == "postgresql+asyncpg://u:p@h:5432/db"

def test_database_url_keeps_other_drivers(monkeypatch):
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///:memory:")
    assert BaseAppSettings().database_url == "sqlite+aiosqlite:///:memory:"

def test_cors_origins_parsing_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.com, https://b.com , 'http://localhost:8080'")
    s = BaseAppSettings()
    assert s.get_cors_origins() == ["https://a.com", "https://b.com", "http://localhost:8080"]

def test_cors_origins_wildcard(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "*")
    s = BaseAppSettings()
    assert s.get_cors_origins() == ["*"]

@pytest.mark.parametrize(
    "prefix,expected",
    [("/api/v1", "/api/v1"), ("api/v2/", "/api/v2"), ("/", ""), ("", "")],
)
def test_api_prefix_normalized(monkeypatch, prefix, expected):
    monkeypatch.setenv("API_PREFIX", prefix)
    assert BaseAppSettings().api_prefix_normalized == expected

def test_profile_pic_allowed_types(monkeypatch):
    monkeypatch.setenv("PROFILE_PIC_ALLOWED_TYPES", "image/PNG, image/jpeg ,")
    assert BaseAppSettings().get_profile_pic_allowed_types() == {"image/png", "image/jpeg"}

def test_storage_configured_requires_url_and_key(monkeypatch):
    assert BaseAppSettings().storage_configured is False
    monkeypatch.setenv("SUPABASE_URL", "https://xyz.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-key")
    assert BaseAppSettings().storage_configured is True
# Fin del archivo backend/tests/shared/config/test_settings_base.py
