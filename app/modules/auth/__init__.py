# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Auth package public API:

Expone:
- AuthenticatedUser (identidad del llamador)
- dependencias (get_current_user, validate_jwt_token)
- utilidades JWT (create_access_token, decode_access_token)
"""

from .schemas import AuthenticatedUser
from .dependencies import get_current_user, validate_jwt_token
from .security import create_access_token, decode_access_token, TokenDecodeError

__all__ = [
    "AuthenticatedUser",
    "get_current_user",
    "validate_jwt_token",
    "create_access_token",
    "decode_access_token",
    "TokenDecodeError",
]
# Fin del archivo backend/app/modules/auth/__init__.py
