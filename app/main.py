# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend UserHub.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging centralizado (texto o JSON) vía app.core.logging
- Montaje de observabilidad Prometheus (/metrics) vía app.observability.prom
- Errores como sobre JSON {status, status_code, message}
- Ciclo de vida con limpieza segura en shutdown (pool HTTP + engine DB)
- Health principal /health delegado al paquete app.routes (health_routes.py)

Autor: UserHub
Fecha: 2026-09-02
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de instanciar settings
# En DEV: override=True para que .env mande sobre variables del entorno
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
_override_env = _PYTHON_ENV not in ("production", "test")
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.logging import setup_logging
from app.core.settings import get_settings
from app.core.db import engine
from app.observability.prom import setup_observability
from app.shared.middleware import (
    JSONExceptionMiddleware,
    RequestLoggingMiddleware,
    register_exception_handlers,
)
from app.shared.utils.connection_pool import close_connection_pool
from app.shared.utils.json_response import UTF8JSONResponse

setup_logging()
logger = logging.getLogger(__name__)

logger.info("[dotenv] Loaded %s (override=%s, PYTHON_ENV=%s)", _ENV_PATH, _override_env, _PYTHON_ENV)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    logger.info("🟢 Backend de %s %s iniciado (%s).", settings.app_name, settings.app_version, settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("🔴 Iniciando shutdown ordenado...")
        with anyio.CancelScope(shield=True):
            try:
                await close_connection_pool()
                logger.info("🌐 Pool HTTP cerrado")
            except Exception as e:
                logger.warning("⚠️ Error cerrando pool HTTP: %s", e)
            try:
                await engine.dispose()
                logger.info("🗄️ Engine de base de datos liberado")
            except Exception as e:
                logger.error("❌ Error liberando engine: %s", e)
        logger.info("🔴 Backend apagado.")


openapi_tags = [
    {"name": "User", "description": "Perfil del usuario autenticado y edición de perfil"},
    {"name": "Health", "description": "Estado del servicio"},
]


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS middleware a partir de CORS_ORIGINS.

    Returns:
        dict con la configuración aplicada para logging.
    """
    settings = get_settings()
    origins_list = settings.get_cors_origins()

    if settings.is_prod and not origins_list:
        logger.error("❌ CORS DISABLED: No CORS_ORIGINS en producción; se bloquean orígenes cruzados.")
        return {"cors_disabled": True, "allow_origins": []}

    # "*" con allow_credentials=True es inválido en navegadores
    is_wildcard_only = origins_list == ["*"]
    if "*" in origins_list and not is_wildcard_only:
        logger.warning("⚠️ CORS: Filtrando '*' de origins porque hay otros origins explícitos.")
        origins_list = [o for o in origins_list if o != "*"]

    cors_config = {
        "allow_origins": origins_list,
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["*"] if is_wildcard_only else ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        "allow_headers": ["*"],
        "expose_headers": ["X-Request-ID"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("✅ CORS ENABLED for %d origin(s): %s", len(origins_list), origins_list)
    return cors_config


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="API de usuarios y perfiles",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )

    # IMPORTANTE: el orden real de ejecución de middlewares en Starlette es inverso al registro.
    # JSONExceptionMiddleware queda dentro de métricas/logging para que los 500 se cuenten;
    # CORS se registra AL FINAL para ejecutarse PRIMERO (outermost).
    app.add_middleware(JSONExceptionMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    setup_observability(app)
    _configure_cors(app)

    register_exception_handlers(app)

    from app.routes import router as main_router
    app.include_router(main_router)

    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.app_host,
        port=_settings.app_port,
        reload=_settings.is_dev,
        log_config=None,
    )

# Fin del archivo backend/app/main.py
