# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito y sobre estándar de la API.

Este módulo proporciona:
1. UTF8JSONResponse: Clase para usar como default_response_class en FastAPI
2. send_json_response: sobre de éxito {status, status_code, message, data}
3. error_json_response: sobre de error {status, status_code, message, ...}

Uso típico en una ruta:

    return send_json_response(200, "User profile details retrieved successfully", data)

Autor: UserHub
Fecha: 2026-09-02
"""

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

STATUS_SUCCESS = "success"
STATUS_UNSUCCESSFUL = "unsuccessful"


class UTF8JSONResponse(JSONResponse):
    """
    JSONResponse con Content-Type: application/json; charset=utf-8.

    Usar como default_response_class en FastAPI para que TODAS las
    respuestas JSON incluyan charset UTF-8 automáticamente.
    """
    media_type = "application/json; charset=utf-8"


def send_json_response(
    status_code: int,
    message: str,
    data: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    """
    Construye la respuesta de éxito con el sobre estándar.

    `data` se serializa con jsonable_encoder (acepta modelos Pydantic,
    UUID, datetime, dicts anidados) sin alterar su contenido.
    """
    content = {
        "status": STATUS_SUCCESS,
        "status_code": status_code,
        "message": message,
        "data": jsonable_encoder(data),
    }
    return UTF8JSONResponse(content=content, status_code=status_code, headers=headers)


def error_json_response(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> UTF8JSONResponse:
    """
    Construye la respuesta de error con el sobre estándar.

    `extra` agrega campos opcionales (p. ej. errors, request_id).
    """
    content: Dict[str, Any] = {
        "status": STATUS_UNSUCCESSFUL,
        "status_code": status_code,
        "message": message,
    }
    content.update({k: jsonable_encoder(v) for k, v in extra.items() if v is not None})
    return UTF8JSONResponse(content=content, status_code=status_code, headers=headers)


__all__ = [
    "UTF8JSONResponse",
    "send_json_response",
    "error_json_response",
    "STATUS_SUCCESS",
    "STATUS_UNSUCCESSFUL",
]
