# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_prod.py

Overrides para entorno de PRODUCCIÓN usando Pydantic v2.
Forza lectura solo desde variables de entorno / secret stores,
activa logging estable (INFO en JSON) y defaults seguros.

Autor: UserHub
Fecha: 2026-09-02
"""

from typing import Literal
from .settings_base import BaseAppSettings, LogFormat, LogLevel
from pydantic_settings import SettingsConfigDict


class ProdSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "production"

    # --- Logging en prod: nivel estable y formato estructurado ---
    log_level: LogLevel = "INFO"
    log_format: LogFormat = "json"

    # --- Base de datos ---
    db_sslmode: str = "require"

    # Nota: _security_checks exigirá JWT_SECRET_KEY fuerte y SSL en la BD.

    model_config = SettingsConfigDict(
        env_file=None,  # No leemos .env en producción
        extra="ignore",
    )


__all__ = ["ProdSettings"]
# Fin del archivo backend/app/shared/config/settings_prod.py
