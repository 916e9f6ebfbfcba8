# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro de la API versionada.

Monta los routers de cada módulo bajo el prefijo configurado
(API_PREFIX, por defecto /api/v1) y deja trazabilidad en logs.

Autor: UserHub
Fecha: 2026-09-02
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from app.modules.users.routes import router as users_router
from app.shared.config import settings

logger = logging.getLogger(__name__)

api = APIRouter(prefix=settings.api_prefix_normalized)

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.info(
        "✅ Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


# ─────────────────────────────────────────
# USERS (GET /users/me, PUT /user/{id})
# ─────────────────────────────────────────
_include(api, users_router, "users")


def loaded_routers() -> list[str]:
    return list(_loaded)


__all__ = ["api", "loaded_routers"]

# Fin del archivo backend/app/routes/master_routes.py
