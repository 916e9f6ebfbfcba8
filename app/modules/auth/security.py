# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/security.py

Módulo de seguridad para Auth en UserHub:
- Esquema Bearer (Authorization: Bearer <token>)
- Creación / decodificación de JWT (python-jose)

La emisión de tokens (login, refresh) vive fuera de este servicio;
`create_access_token` existe para scripts y pruebas.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi.security import HTTPBearer
from jose import JWTError, jwt  # pip install "python-jose[cryptography]"

from app.shared.config import settings

# -----------------------------------------------------------------------------
# Esquema Bearer; auto_error=False para responder 401 con nuestro sobre JSON
# -----------------------------------------------------------------------------
bearer_scheme = HTTPBearer(auto_error=False, bearerFormat="JWT")


def _secret_key() -> str:
    return settings.jwt_secret_key.get_secret_value()


# -----------------------------------------------------------------------------
# Manejo de JWT
# -----------------------------------------------------------------------------
class TokenDecodeError(Exception):
    """Error al decodificar/validar un token JWT."""


def create_access_token(
    user_id: str,
    email: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
    **extra: Any,
) -> str:
    """
    Crea un JWT con claims 'sub' y 'user_id' (mismo valor) y metadatos en `extra`.
    """
    now = datetime.now(tz=timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode: Dict[str, Any] = {
        "sub": str(user_id),
        "user_id": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    if email:
        to_encode["email"] = email
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, _secret_key(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decodifica y valida firma/expiración de un JWT.
    Lanza TokenDecodeError si es inválido o expiró.

    No valida el formato del identificador de usuario: eso corresponde
    al handler que lo consume.
    """
    try:
        return jwt.decode(token, _secret_key(), algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise TokenDecodeError("Token inválido o expirado") from e


__all__ = [
    "bearer_scheme",
    "TokenDecodeError",
    "create_access_token",
    "decode_access_token",
]
# Fin del archivo
