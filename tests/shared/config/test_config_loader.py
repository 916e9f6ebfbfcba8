# -*- coding: utf-8 -*-
import pytest

from app.shared.config import settings
from app.shared.config.config_loader import get_settings

def _reset_loader_cache():
    get_settings.cache_clear()

def test_loader_returns_dev_by_default(monkeypatch):
    monkeypatch.delenv("PYTHON_ENV", raising=False)
    _reset_loader_cache()
    s = get_settings()
    assert s.is_dev is True
    assert s.python_env == "development"

def test_loader_selects_test(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    _reset_loader_cache()
    s = get_settings()
    assert s.is_test is True
    assert s.python_env == "test"

def test_loader_selects_prod(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    # Mínimos para pasar validaciones severas de prod
    monkeypatch.setenv("DB_SSLMODE", "require")
    monkeypatch.setenv("JWT_SECRET_KEY", "X"*40)
    _reset_loader_cache()
    s = get_settings()
    assert s.is_prod is True
    assert s.python_env == "production"

def test_loader_caches_singleton(monkeypatch):
    # Con cache: misma instancia entre llamadas.
    _reset_loader_cache()
    a = get_settings()
    b = get_settings()
    assert a is b

def test_proxy_delegates_to_active_settings(monkeypatch):
    monkeypatch.setenv("APP_NAME", "ProxyCheck")
    _reset_loader_cache()
    assert settings.app_name == "ProxyCheck"

def test_prod_rejects_weak_jwt_secret(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "short")
    _reset_loader_cache()
    with pytest.raises(ValueError) as ei:
        get_settings()
    assert "jwt_secret_key" in str(ei.value).lower()

def test_prod_requires_ssl(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("JWT_SECRET_KEY", "X"*40)
    monkeypatch.setenv("DB_SSLMODE", "disable")
    _reset_loader_cache()
    with pytest.raises(ValueError) as ei:
        get_settings()
    assert "db_sslmode" in str(ei.value).lower()

def test_non_positive_picture_limit_is_rejected(monkeypatch):
    monkeypatch.setenv("PROFILE_PIC_MAX_BYTES", "0")
    _reset_loader_cache()
    with pytest.raises(ValueError):
        get_settings()
# Fin del archivo backend/tests/shared/config/test_config_loader.py
