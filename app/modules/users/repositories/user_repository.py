# -*- coding: utf-8 -*-
"""
backend/app/modules/users/repositories/user_repository.py

Repositorio de acceso a datos para User / Profile.
Encapsula las consultas sobre `users` y `profiles`, dejando la lógica de
negocio (soft delete, validaciones) en los servicios superiores.

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.modules.users.models import Profile, User


class UserRepository:
    """Repositorio de usuarios y perfiles."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Inicializa el repositorio con una sesión asíncrona.

        Args:
            db: AsyncSession activa contra la base de datos.
        """
        self._db = db

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def get_by_id(self, user_id: UUID, *, refresh: bool = False) -> Optional[User]:
        """
        Obtiene un usuario (con su perfil) por PK. Devuelve None si no existe.

        No filtra soft deletes: quien llama decide qué hacer con ellos.
        `refresh=True` fuerza a recargar el estado desde la base.
        """
        stmt = (
            select(User)
            .options(selectinload(User.profile))
            .where(User.id == user_id)
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_profile_by_username(self, username: str) -> Optional[Profile]:
        """Busca un perfil por username (case-insensitive)."""
        norm = (username or "").strip().lower()
        if not norm:
            return None

        stmt = select(Profile).where(func.lower(Profile.username) == norm)
        result = await self._db.execute(stmt)
        return result.scalars().first()

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------
    def add(self, obj: User | Profile) -> None:
        self._db.add(obj)

    async def commit(self) -> None:
        """Confirma la transacción; hace rollback si falla."""
        try:
            await self._db.commit()
        except Exception:
            await self._db.rollback()
            raise


__all__ = ["UserRepository"]
