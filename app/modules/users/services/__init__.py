# -*- coding: utf-8 -*-
"""
backend/app/modules/users/services/__init__.py
"""

from .user_service import UserService

__all__ = ["UserService"]
