# -*- coding: utf-8 -*-
"""
backend/app/modules/users/enums/role_enum.py

Enum de roles de usuario.

Roles disponibles: user, admin, super_admin

Autor: UserHub
Fecha: 2026-09-02
"""
from enum import StrEnum

from sqlalchemy import Enum as SAEnum


class UserRole(StrEnum):
    user = "user"
    admin = "admin"
    super_admin = "super_admin"


def as_sa_enum(name: str = "user_role_enum"):
    """
    Devuelve el tipo SQLAlchemy para este enum.

    Se guarda como VARCHAR + CHECK (native_enum=False) para que el mismo
    modelo funcione en Postgres y en SQLite (tests).
    """
    return SAEnum(
        UserRole,
        name=name,
        native_enum=False,
        length=20,
        values_callable=lambda e: [m.value for m in e],
    )


__all__ = ["UserRole", "as_sa_enum"]

# Fin del archivo backend/app/modules/users/enums/role_enum.py
