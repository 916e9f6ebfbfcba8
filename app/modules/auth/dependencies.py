# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/dependencies.py

Dependencias de autenticación JWT para FastAPI.

Provee:
- validate_jwt_token: core logic para validar token (única fuente de verdad)
- get_current_user: dependencia FastAPI que adjunta AuthenticatedUser

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials

from app.shared.utils.http_exceptions import Unauthorized

from .schemas import AuthenticatedUser
from .security import TokenDecodeError, bearer_scheme, decode_access_token

logger = logging.getLogger(__name__)


def validate_jwt_token(token: str) -> AuthenticatedUser:
    """
    Valida un JWT y devuelve la identidad que transporta.

    Raises:
        Unauthorized: si el token es inválido o expiró.
    """
    try:
        claims = decode_access_token(token)
    except TokenDecodeError as e:
        logger.info("Token rechazado: %s", e)
        raise Unauthorized("Invalid token") from e
    return AuthenticatedUser.from_claims(claims)


async def get_current_user(
    request: Request,
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """
    Dependencia de autenticación para endpoints protegidos.

    Extrae el JWT del header Authorization: Bearer <token>, lo valida y
    deja la identidad también en request.state.user.
    """
    if creds is None or not creds.credentials:
        raise Unauthorized("Access token is missing")

    user = validate_jwt_token(creds.credentials)
    request.state.user = user
    return user


__all__ = [
    "get_current_user",
    "validate_jwt_token",
]
