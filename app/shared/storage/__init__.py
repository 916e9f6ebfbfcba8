# -*- coding: utf-8 -*-
"""
backend/app/shared/storage/__init__.py

Acceso a storage de objetos (fotos de perfil).
"""

from .storage_io import StorageService, StorageError

__all__ = ["StorageService", "StorageError"]
