# -*- coding: utf-8 -*-
"""
backend/app/modules/users/routes/__init__.py
"""

from .user_routes import router

__all__ = ["router"]
