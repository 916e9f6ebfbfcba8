# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes: modelos base, errores HTTP,
sobres JSON y validadores.

Autor: UserHub
Fecha: 2026-09-02
"""

from .base_models import UTF8SafeModel, EmailStr, Field
from .http_exceptions import (
    HttpError,
    BadRequest,
    Unauthorized,
    Forbidden,
    ResourceNotFound,
    Conflict,
    InvalidInput,
    ServerError,
)
from .json_response import (
    UTF8JSONResponse,
    send_json_response,
    error_json_response,
    STATUS_SUCCESS,
    STATUS_UNSUCCESSFUL,
)
from .validators import is_valid_uuid, validate_phone, validate_username

__all__ = [
    # Base models
    "UTF8SafeModel",
    "EmailStr",
    "Field",

    # HTTP Exceptions
    "HttpError",
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "ResourceNotFound",
    "Conflict",
    "InvalidInput",
    "ServerError",

    # Respuestas
    "UTF8JSONResponse",
    "send_json_response",
    "error_json_response",
    "STATUS_SUCCESS",
    "STATUS_UNSUCCESSFUL",

    # Validators
    "is_valid_uuid",
    "validate_phone",
    "validate_username",
]
