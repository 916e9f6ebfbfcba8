# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/http_exceptions.py

Excepciones HTTP de la API de UserHub.

Los handlers y servicios lanzan estas excepciones; el manejador central
(`app.shared.middleware.exception_handler`) las convierte al sobre JSON
estándar `{status, status_code, message}`.

Autor: UserHub
Fecha: 2026-09-02
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class HttpError(HTTPException):
    """Base de la taxonomía: mensaje legible en `detail` y status fijo por subclase."""

    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message_default: str = "Internal Server Error"

    def __init__(
        self,
        message: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=self.status_code_default,
            detail=message or self.message_default,
            headers=headers,
        )

    @property
    def message(self) -> str:
        return str(self.detail)


class BadRequest(HttpError):
    """400 - Solicitud mal formada o parámetros inválidos"""
    status_code_default = status.HTTP_400_BAD_REQUEST
    message_default = "Bad Request"


class Unauthorized(HttpError):
    """401 - Autenticación requerida o credenciales inválidas"""
    status_code_default = status.HTTP_401_UNAUTHORIZED
    message_default = "Unauthorized"

    def __init__(
        self,
        message: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        if headers is None:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(message, headers)


class Forbidden(HttpError):
    """403 - Usuario autenticado pero sin permisos"""
    status_code_default = status.HTTP_403_FORBIDDEN
    message_default = "Forbidden"


class ResourceNotFound(HttpError):
    """404 - Recurso no encontrado (o soft-deleted)"""
    status_code_default = status.HTTP_404_NOT_FOUND
    message_default = "Resource not found"


class Conflict(HttpError):
    """409 - Conflicto con el estado actual del recurso"""
    status_code_default = status.HTTP_409_CONFLICT
    message_default = "Conflict"


class InvalidInput(HttpError):
    """422 - La sintaxis es correcta pero la semántica es errónea"""
    status_code_default = 422
    message_default = "Invalid input"


class ServerError(HttpError):
    """500 - Error interno del servidor"""
    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR
    message_default = "Internal Server Error"


__all__ = [
    "HttpError",
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "ResourceNotFound",
    "Conflict",
    "InvalidInput",
    "ServerError",
]
