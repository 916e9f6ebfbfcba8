# -*- coding: utf-8 -*-
"""
backend/app/modules/users/schemas/__init__.py

Schemas del módulo de usuarios.
"""

from .user_schemas import (
    UserProfileUpdateRequest,
    UserProfileProjection,
    ProfileResponse,
    UserResponse,
)

__all__ = [
    "UserProfileUpdateRequest",
    "UserProfileProjection",
    "ProfileResponse",
    "UserResponse",
]
