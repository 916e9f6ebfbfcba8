# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/__init__.py

Schemas del módulo de autenticación.

Autor: UserHub
Fecha: 2026-09-02
"""

from .auth_context_dto import AuthenticatedUser

__all__ = ["AuthenticatedUser"]
