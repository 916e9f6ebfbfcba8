# -*- coding: utf-8 -*-
"""
backend/app/modules/users/models/__init__.py

Modelos ORM del módulo de usuarios.
"""

from .user_models import User, Profile

__all__ = ["User", "Profile"]
