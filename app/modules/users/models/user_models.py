# -*- coding: utf-8 -*-
"""
backend/app/modules/users/models/user_models.py

Modelos de usuario (User) y perfil (Profile).

IMPORTANTE - SOFT DELETE:
Un usuario puede marcarse como eliminado de dos formas: `deleted_at`
(timestamp) o `is_deleted` (bool). Ambas marcas conviven en la tabla
heredada; `User.is_soft_deleted` es la única lectura válida y considera
eliminado al usuario si CUALQUIERA está activa.

Los tipos `Uuid` y `JSON` son portables (Postgres en producción,
SQLite en la suite de tests).

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, String, Text, Uuid, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import Base
from app.modules.users.enums import UserRole, as_sa_enum


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)

    role: Mapped[UserRole] = mapped_column(
        as_sa_enum(),
        default=UserRole.user,
        server_default=UserRole.user.value,
        nullable=False,
    )

    # --- Soft delete (dos marcas heredadas) ---
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )

    profile: Mapped[Optional["Profile"]] = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def is_soft_deleted(self) -> bool:
        return self.deleted_at is not None or bool(self.is_deleted)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} deleted={self.is_soft_deleted}>"


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    username: Mapped[Optional[str]] = mapped_column(String(50), unique=True, nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    job_title: Mapped[Optional[str]] = mapped_column(String(150), nullable=True)
    language: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    region: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    pronouns: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(String(150), nullable=True)
    # plataforma -> URL
    social_links: Mapped[Optional[Dict[str, str]]] = mapped_column(JSON, nullable=True)
    timezones: Mapped[Optional[List[Any]]] = mapped_column(JSON, nullable=True)
    profile_pic_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )

    user: Mapped["User"] = relationship("User", back_populates="profile")

    def __repr__(self) -> str:
        return f"<Profile id={self.id} user_id={self.user_id} username={self.username!r}>"


__all__ = ["User", "Profile"]
# Fin del archivo
