# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/exception_handler.py

Manejo centralizado de errores de la API.

- JSONExceptionMiddleware: captura excepciones no manejadas y responde 500
  con el sobre JSON estándar (nunca text/plain), incluyendo request_id.
- register_exception_handlers: convierte HTTPException (BadRequest,
  ResourceNotFound, ...) y errores de validación al mismo sobre.

Los handlers de rutas no capturan errores: los lanzan y este módulo
los traduce a respuestas.

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.shared.utils.json_response import error_json_response

logger = logging.getLogger(__name__)

# Header para request ID (proxies, load balancers, etc.)
REQUEST_ID_HEADERS = ["x-request-id", "x-correlation-id"]


def get_request_id(request: Request) -> str:
    """Extrae request_id de headers o genera uno nuevo."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware que captura excepciones no manejadas y devuelve JSON.

    Garantiza:
    - Content-Type: application/json
    - sobre {status, status_code, message} con request_id para correlación
    - stack trace en el log
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = getattr(request.state, "request_id", None) or get_request_id(request)

        # Inyectar request_id en state para uso downstream
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s error=%r",
                request_id,
                request.method,
                request.url.path,
                e,
            )
            return error_json_response(
                status_code=500,
                message="Internal Server Error",
                headers={"X-Request-ID": request_id},
                request_id=request_id,
            )
        response.headers["X-Request-ID"] = request_id
        return response


def _http_error_message(detail: object) -> str:
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict):
        return str(detail.get("message") or detail.get("detail") or detail)
    return str(detail)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los handlers que traducen excepciones al sobre JSON."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error("http_error status=%s path=%s detail=%s", exc.status_code, request.url.path, exc.detail)
        else:
            logger.info("http_error status=%s path=%s detail=%s", exc.status_code, request.url.path, exc.detail)
        return error_json_response(
            status_code=exc.status_code,
            message=_http_error_message(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_json_response(
            status_code=422,
            message="Validation error",
            errors=exc.errors(),
        )


__all__ = ["JSONExceptionMiddleware", "get_request_id", "register_exception_handlers"]
