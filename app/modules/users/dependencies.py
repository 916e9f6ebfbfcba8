# -*- coding: utf-8 -*-
"""
backend/app/modules/users/dependencies.py

Dependencias FastAPI del módulo de usuarios.

Provee:
- get_user_service: UserService con sesión por request
- parse_user_update: cuerpo JSON o multipart -> (UserProfileUpdateRequest, archivo)

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from app.shared.database import get_db
from app.shared.utils.http_exceptions import BadRequest
from app.modules.users.schemas import UserProfileUpdateRequest
from app.modules.users.services import UserService

logger = logging.getLogger(__name__)

PROFILE_PIC_FIELD = "profile_pic_url"


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """Dependency provider para UserService."""
    return UserService(db=db)


@dataclass
class UserUpdateInput:
    payload: UserProfileUpdateRequest
    file: Optional[UploadFile] = None


def _first_error_message(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    msg = err.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


async def _read_form(request: Request) -> tuple[Dict[str, Any], Optional[UploadFile]]:
    form = await request.form()
    data: Dict[str, Any] = {}
    file: Optional[UploadFile] = None
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key == PROFILE_PIC_FIELD and value.filename:
                file = value
            continue
        data[key] = value
    return data, file


async def _read_json(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise BadRequest("Request body must be valid JSON") from e
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    return data


async def parse_user_update(request: Request) -> UserUpdateInput:
    """
    Acepta `application/json` o `multipart/form-data`.

    En multipart, el archivo viaja en el campo `profile_pic_url` y
    `social_links` / `timezones` como texto JSON.
    """
    content_type = request.headers.get("content-type", "").lower()
    file: Optional[UploadFile] = None

    if content_type.startswith("multipart/form-data") or content_type.startswith(
        "application/x-www-form-urlencoded"
    ):
        data, file = await _read_form(request)
    else:
        data = await _read_json(request)

    try:
        payload = UserProfileUpdateRequest.model_validate(data)
    except ValidationError as e:
        logger.info("Payload de actualización inválido: %s", e.errors())
        raise BadRequest(_first_error_message(e)) from e

    return UserUpdateInput(payload=payload, file=file)


__all__ = ["get_user_service", "parse_user_update", "UserUpdateInput", "PROFILE_PIC_FIELD"]
