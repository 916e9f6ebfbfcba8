# -*- coding: utf-8 -*-
"""
backend/app/modules/users/__init__.py

Módulo de usuarios: lectura y edición del perfil.

Expone:
- router (GET /users/me, PUT /user/{id})
- UserService
- modelos User / Profile
"""

from .models import User, Profile
from .services import UserService
from .routes import router

__all__ = ["User", "Profile", "UserService", "router"]
# Fin del archivo backend/app/modules/users/__init__.py
