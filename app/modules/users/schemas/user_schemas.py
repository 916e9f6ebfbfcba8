# -*- coding: utf-8 -*-
"""
backend/app/modules/users/schemas/user_schemas.py

Schemas Pydantic para el perfil de usuario en UserHub.

Incluye:
- Proyección pública del perfil (GET /users/me)
- Actualización parcial de usuario + perfil (PUT /user/{id})
- Respuesta del usuario actualizado

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from app.shared.utils.base_models import EmailStr, UTF8SafeModel
from app.shared.utils.validators import validate_phone, validate_username
from app.modules.users.enums import UserRole


# ========== REQUEST SCHEMAS ==========

class UserProfileUpdateRequest(UTF8SafeModel):
    """
    Request para actualización parcial de usuario y perfil.

    Solo se aplican los campos presentes en el payload
    (ver `model_dump(exclude_unset=True)`). `jobTitle` es el nombre
    público del campo; `job_title` también se acepta.
    """
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = None

    username: Optional[str] = None
    job_title: Optional[str] = Field(None, alias="jobTitle", max_length=150)
    pronouns: Optional[str] = Field(None, max_length=50)
    bio: Optional[str] = None
    department: Optional[str] = Field(None, max_length=150)
    language: Optional[str] = Field(None, max_length=50)
    region: Optional[str] = Field(None, max_length=100)
    timezones: Optional[List[Any]] = None
    social_links: Optional[Dict[str, str]] = None

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "first_name": "John",
                "last_name": "Doe",
                "phone": "08012345678",
                "username": "johndoe",
                "jobTitle": "Software Engineer",
                "pronouns": "He/Him",
                "social_links": {"twitter": "https://twitter.com/johndoe"},
            }
        },
    )

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return v
        if not validate_phone(v):
            raise ValueError("Invalid phone number")
        return v

    @field_validator("username")
    @classmethod
    def _check_username(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not validate_username(v):
            raise ValueError("Username must be 3-50 characters: letters, digits, '_', '.', '-'")
        return v

    @field_validator("social_links", "timezones", mode="before")
    @classmethod
    def _decode_json_string(cls, v: Any) -> Any:
        # En multipart/form-data estos campos llegan como texto JSON
        if isinstance(v, str):
            if not v.strip():
                return None
            try:
                return json.loads(v)
            except ValueError as e:
                raise ValueError("must be valid JSON") from e
        return v


# ========== RESPONSE SCHEMAS ==========

class UserProfileProjection(UTF8SafeModel):
    """Vista pública del usuario autenticado (GET /users/me)."""
    id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_id: Optional[UUID] = None
    username: Optional[str] = None
    bio: Optional[str] = None
    job_title: Optional[str] = None
    language: Optional[str] = None
    pronouns: Optional[str] = None
    department: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None
    timezones: Optional[List[Any]] = None

    @classmethod
    def from_user(cls, user: Any) -> "UserProfileProjection":
        """Perfil ausente (o campos ausentes) se proyectan como None."""
        profile = getattr(user, "profile", None)
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_id=getattr(profile, "id", None),
            username=getattr(profile, "username", None),
            bio=getattr(profile, "bio", None),
            job_title=getattr(profile, "job_title", None),
            language=getattr(profile, "language", None),
            pronouns=getattr(profile, "pronouns", None),
            department=getattr(profile, "department", None),
            social_links=getattr(profile, "social_links", None),
            timezones=getattr(profile, "timezones", None),
        )


class ProfileResponse(UTF8SafeModel):
    id: UUID
    username: Optional[str] = None
    bio: Optional[str] = None
    job_title: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    pronouns: Optional[str] = None
    department: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None
    timezones: Optional[List[Any]] = None
    profile_pic_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserResponse(UTF8SafeModel):
    """Usuario actualizado tal como lo devuelve PUT /user/{id}."""
    id: UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: EmailStr
    phone: Optional[str] = None
    is_verified: bool = False
    role: UserRole = UserRole.user
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    profile: Optional[ProfileResponse] = None


__all__ = [
    "UserProfileUpdateRequest",
    "UserProfileProjection",
    "ProfileResponse",
    "UserResponse",
]
# Fin del archivo
