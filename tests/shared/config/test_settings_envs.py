# -*- coding: utf-8 -*-
from app.shared.config.settings_dev import DevSettings
from app.shared.config.settings_testing import EnvTestingSettings
from app.shared.config.settings_prod import ProdSettings

def test_dev_overrides_defaults():
    s = DevSettings()
    assert s.is_dev
    assert s.log_level.upper() == "DEBUG"
    assert s.log_format in ("plain", "pretty")  # plain por defecto
    assert s.db_sslmode == "disable"
    assert "http://localhost:3000" in s.get_cors_origins()

def test_dev_reads_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://front.example.com")
    assert DevSettings().get_cors_origins() == ["https://front.example.com"]

def test_test_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    s = EnvTestingSettings()
    assert s.is_test
    assert s.db_name.endswith("_test")
    assert s.storage_configured is True
    assert len(s.jwt_secret_key.get_secret_value()) >= 32

def test_prod_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    # Satisface mínimos duros para que inicialice
    monkeypatch.setenv("JWT_SECRET_KEY", "X"*40)

    s = ProdSettings()
    assert s.is_prod
    assert s.log_level.upper() == "INFO"
    assert s.log_format == "json"
    assert s.db_sslmode == "require"
# Fin del archivo backend/tests/shared/config/test_settings_envs.py
