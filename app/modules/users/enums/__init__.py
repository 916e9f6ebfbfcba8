# -*- coding: utf-8 -*-
"""
backend/app/modules/users/enums/__init__.py

Enums del módulo de usuarios.
"""

from .role_enum import UserRole, as_sa_enum

__all__ = ["UserRole", "as_sa_enum"]
