# -*- coding: utf-8 -*-
"""
backend/app/shared/storage/storage_io.py

Servicio de I/O para Supabase Storage usando httpx directamente.

Se usa para las fotos de perfil: el servicio de usuarios valida el archivo
y delega aquí la subida; el resultado es la URL pública del objeto.

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from app.shared.utils.connection_pool import get_pooled_client

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Fallo al comunicarse con el backend de storage."""


class StorageService:
    """
    Cliente mínimo de Supabase Storage (REST /storage/v1).
    """

    def __init__(
        self,
        base_url: str,
        service_key: str,
        bucket_name: str,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: URL del proyecto Supabase (https://xyz.supabase.co)
            service_key: service role key usada como Bearer
            bucket_name: bucket destino
            client: cliente httpx inyectable (tests); si es None se usa el pool global
        """
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.bucket_name = bucket_name
        self._client = client

    @classmethod
    def from_settings(cls) -> "StorageService":
        from app.shared.config import settings

        key = settings.supabase_service_role_key
        return cls(
            base_url=str(settings.supabase_url or ""),
            service_key=key.get_secret_value() if key else "",
            bucket_name=settings.profile_pic_bucket,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await get_pooled_client()

    def object_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/{self.bucket_name}/{path.lstrip('/')}"

    def public_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket_name}/{path.lstrip('/')}"

    async def upload(
        self,
        path: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        overwrite: bool = True,
    ) -> str:
        """
        Sube un archivo al bucket y devuelve su URL pública.

        Raises:
            StorageError: si storage no está configurado o la subida falla
        """
        if not self.base_url or not self.service_key:
            raise StorageError("Storage no configurado (SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY)")

        headers = {
            "Authorization": f"Bearer {self.service_key}",
            "Content-Type": content_type,
        }
        if overwrite:
            headers["x-upsert"] = "true"

        client = await self._get_client()
        try:
            response = await client.post(self.object_url(path), headers=headers, content=data)
        except httpx.RequestError as e:
            logger.error("🔥 Error de conexión al subir archivo %s: %s", path, e)
            raise StorageError(f"Error de conexión con storage: {e}") from e

        if response.status_code not in (200, 201):
            logger.error("❌ Error al subir archivo: %s - %s", response.status_code, response.text)
            raise StorageError(f"Error al subir archivo a storage: {response.status_code}")

        logger.info("✅ Archivo subido correctamente: %s", path)
        return self.public_url(path)

    async def delete(self, path: str) -> bool:
        """
        Elimina un objeto del bucket. Devuelve False si no existía.
        """
        headers = {"Authorization": f"Bearer {self.service_key}"}
        client = await self._get_client()
        try:
            response = await client.delete(self.object_url(path), headers=headers)
        except httpx.RequestError as e:
            raise StorageError(f"Error de conexión con storage: {e}") from e

        if response.status_code == 404:
            return False
        if response.status_code not in (200, 204):
            raise StorageError(f"Error al eliminar archivo de storage: {response.status_code}")
        return True


__all__ = ["StorageService", "StorageError"]
