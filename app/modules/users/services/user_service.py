# -*- coding: utf-8 -*-
"""
backend/app/modules/users/services/user_service.py

Servicio para gestión del usuario y su perfil en UserHub.

Funcionalidades:
1) Lectura
   - get_user_by_id: usuario + perfil, sin filtrar soft deletes
2) Edición
   - update_user_profile: actualización parcial de usuario/perfil
   - Subida opcional de foto de perfil a storage

Dependencias esperadas (inyectables):
- AsyncSession (SQLAlchemy)
- StorageService (opcional): upload(path, data, content_type) -> URL pública,
  delete(path) para limpiar la foto si el commit falla

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
import mimetypes
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.storage import StorageError, StorageService
from app.shared.utils.http_exceptions import BadRequest, Conflict, ResourceNotFound, ServerError
from app.shared.utils.validators import is_valid_uuid
from app.modules.users.models import Profile, User
from app.modules.users.repositories import UserRepository
from app.modules.users.schemas import UserProfileUpdateRequest, UserResponse

logger = logging.getLogger(__name__)

USER_FIELDS = ("first_name", "last_name", "phone")
PROFILE_FIELDS = (
    "username",
    "job_title",
    "pronouns",
    "bio",
    "department",
    "language",
    "region",
    "timezones",
    "social_links",
)


# ============================
# Protocolos
# ============================

class UploadedFile(Protocol):
    """Lo que el servicio necesita de un archivo subido (p. ej. UploadFile)."""
    filename: Optional[str]
    content_type: Optional[str]

    async def read(self, size: int = -1) -> bytes: ...


# ============================
# Servicio
# ============================

@dataclass
class UserService:
    db: AsyncSession
    storage: Optional[StorageService] = None
    max_picture_bytes: Optional[int] = None
    allowed_picture_types: Optional[set[str]] = None
    repository: UserRepository = field(init=False)

    def __post_init__(self) -> None:
        self.repository = UserRepository(self.db)
        if self.max_picture_bytes is None:
            self.max_picture_bytes = settings.profile_pic_max_bytes
        if self.allowed_picture_types is None:
            self.allowed_picture_types = settings.get_profile_pic_allowed_types()

    # ---------- Lectura ----------

    async def get_user_by_id(self, user_id: Any) -> Optional[User]:
        """
        Devuelve el usuario con su perfil, o None si no existe.
        Los usuarios soft-deleted SÍ se devuelven; el llamador decide.
        Un id que no es UUID se trata como inexistente.
        """
        if not is_valid_uuid(user_id):
            return None
        return await self.repository.get_by_id(uuid.UUID(str(user_id)))

    # ---------- Edición ----------

    async def update_user_profile(
        self,
        user_id: Any,
        payload: UserProfileUpdateRequest | Dict[str, Any] | None,
        file: Optional[UploadedFile] = None,
    ) -> UserResponse:
        """
        Aplica una actualización parcial al usuario y su perfil.

        Raises:
            BadRequest: id inválido, archivo no permitido
            ResourceNotFound: usuario inexistente o soft-deleted
            Conflict: username ya usado por otro perfil
            ServerError: fallo al subir la foto a storage
        """
        if not is_valid_uuid(user_id):
            raise BadRequest("Valid id must be provided")

        uid = uuid.UUID(str(user_id))
        user = await self.repository.get_by_id(uid)
        if user is None or user.is_soft_deleted:
            raise ResourceNotFound("User not found")

        if payload is None:
            payload = UserProfileUpdateRequest()
        elif isinstance(payload, dict):
            payload = UserProfileUpdateRequest.model_validate(payload)
        changes = payload.model_dump(exclude_unset=True)

        profile = user.profile
        if profile is None:
            profile = Profile(user_id=user.id)
            user.profile = profile
            self.repository.add(profile)

        if "username" in changes and changes["username"]:
            await self._ensure_username_available(changes["username"], user.id)

        uploaded_path: Optional[str] = None
        if file is not None:
            uploaded_path, profile.profile_pic_url = await self._upload_profile_picture(user.id, file)

        for name in USER_FIELDS:
            if name in changes:
                setattr(user, name, changes[name])
        for name in PROFILE_FIELDS:
            if name in changes:
                setattr(profile, name, changes[name])

        try:
            await self.repository.commit()
        except Exception as e:
            # La foto ya está en el bucket pero ninguna fila la referencia
            await self._discard_uploaded_picture(uploaded_path)
            if isinstance(e, IntegrityError) and "username" in changes:
                raise Conflict("Username already taken") from e
            raise

        logger.info("✅ Perfil actualizado: user_id=%s campos=%s", uid, sorted(changes))

        refreshed = await self.repository.get_by_id(uid, refresh=True)
        return UserResponse.model_validate(refreshed)

    # ---------- Helpers ----------

    async def _ensure_username_available(self, username: str, user_id: uuid.UUID) -> None:
        existing = await self.repository.get_profile_by_username(username)
        if existing is not None and existing.user_id != user_id:
            raise Conflict("Username already taken")

    async def _upload_profile_picture(self, user_id: uuid.UUID, file: UploadedFile) -> tuple[str, str]:
        """Valida y sube la foto. Devuelve (ruta en el bucket, URL pública)."""
        content_type = (file.content_type or "").lower()
        if not content_type.startswith("image/") or content_type not in self.allowed_picture_types:
            raise BadRequest("Profile picture must be an image (jpeg, png, webp or gif)")

        # Como máximo límite + 1 bytes
        data = await file.read(self.max_picture_bytes + 1)
        if not data:
            raise BadRequest("Profile picture is empty")
        if len(data) > self.max_picture_bytes:
            raise BadRequest(f"Profile picture exceeds {self.max_picture_bytes} bytes")

        if self.storage is None:
            self.storage = StorageService.from_settings()

        ext = mimetypes.guess_extension(content_type) or ""
        path = f"{user_id}/{uuid.uuid4().hex}{ext}"
        try:
            url = await self.storage.upload(path, data, content_type=content_type)
        except StorageError as e:
            logger.error("🔥 No se pudo subir la foto de perfil de %s: %s", user_id, e)
            raise ServerError("Failed to upload profile picture") from e
        return path, url

    async def _discard_uploaded_picture(self, path: Optional[str]) -> None:
        if path is None or self.storage is None:
            return
        try:
            await self.storage.delete(path)
            logger.info("🧹 Foto huérfana eliminada de storage: %s", path)
        except StorageError as e:
            logger.warning("⚠️ No se pudo eliminar la foto huérfana %s: %s", path, e)


__all__ = ["UserService", "UploadedFile"]
# Fin del archivo backend/app/modules/users/services/user_service.py
