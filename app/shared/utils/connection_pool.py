# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/connection_pool.py

Pool de conexiones HTTP compartido para operaciones de storage
(subida de fotos de perfil a Supabase Storage).

- Reutilización de conexiones y keep-alive
- Límites y timeouts configurables
- Cierre explícito en el shutdown de la app

Autor: UserHub
Fecha: 2026-09-02
"""

import asyncio
import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class ConnectionPool:
    """
    Pool de conexiones HTTP singleton.
    """
    _instance: Optional["ConnectionPool"] = None
    _lock = asyncio.Lock()

    def __init__(
        self,
        max_connections: int = 50,
        max_keepalive_connections: int = 10,
        keepalive_expiry: float = 30.0,
        timeout: float = 30.0,
    ):
        self.max_connections = max_connections
        self.max_keepalive_connections = max_keepalive_connections
        self.keepalive_expiry = keepalive_expiry
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def get_client(self) -> httpx.AsyncClient:
        """
        Obtiene o crea el cliente HTTP con pooling.
        """
        if self._client is None or self._client.is_closed:
            limits = httpx.Limits(
                max_connections=self.max_connections,
                max_keepalive_connections=self.max_keepalive_connections,
                keepalive_expiry=self.keepalive_expiry,
            )
            self._client = httpx.AsyncClient(
                limits=limits,
                timeout=httpx.Timeout(self.timeout),
                http2=True,
                follow_redirects=True,
            )
            logger.info(
                "🔗 Connection pool initialized: max_connections=%s keepalive=%s",
                self.max_connections,
                self.max_keepalive_connections,
            )
        return self._client

    async def close(self) -> None:
        """Cierra el pool de conexiones."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.info("🔒 Connection pool closed")

    @classmethod
    async def get_instance(cls) -> "ConnectionPool":
        if cls._instance is None:
            async with cls._lock:
                if cls._instance is None:
                    from app.shared.config import settings

                    cls._instance = cls(timeout=float(settings.storage_timeout_sec))
        return cls._instance


async def get_pooled_client() -> httpx.AsyncClient:
    """Obtiene el cliente HTTP compartido del pool."""
    pool = await ConnectionPool.get_instance()
    return await pool.get_client()


async def close_connection_pool() -> None:
    """Cierra el pool de conexiones global."""
    if ConnectionPool._instance:
        await ConnectionPool._instance.close()
        ConnectionPool._instance = None


__all__ = ["ConnectionPool", "get_pooled_client", "close_connection_pool"]
