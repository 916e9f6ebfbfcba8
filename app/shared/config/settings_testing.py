# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, base de datos aislada y
storage apuntando a un host ficticio (las pruebas lo mockean).

Autor: UserHub
Fecha: 2026-09-02
"""

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings, LogFormat, LogLevel


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: LogLevel = "WARNING"
    log_format: LogFormat = "pretty"

    # --- Base de datos: usar DB separada para pruebas ---
    db_name: str = "userhub_test"
    db_sslmode: str = "disable"

    # --- Auth: secreto determinista para firmar tokens en pruebas ---
    jwt_secret_key: SecretStr = SecretStr("test-secret-for-userhub-suite-please-change")

    # --- Storage ficticio ---
    supabase_url: str = "https://storage.test.local"
    supabase_service_role_key: SecretStr = SecretStr("service-role-test-key")

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend/app/shared/config/settings_testing.py
