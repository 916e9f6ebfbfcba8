# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base personalizado para Pydantic en el backend de UserHub.

Incluye:
- Eliminación automática de espacios en campos de texto (`str_strip_whitespace = True`)
- Modo de atributos activado para compatibilidad con ORM (`from_attributes = True`)
- Aliases poblables por nombre (`populate_by_name = True`)

Autor: UserHub
Fecha: 2026-09-02
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UTF8SafeModel(BaseModel):
    """
    Modelo base para schemas de request/response de la API.
    """
    model_config = ConfigDict(
        from_attributes=True,             # lectura directa desde modelos ORM
        populate_by_name=True,            # para que funcionen los aliases
        str_strip_whitespace=True,        # elimina espacios de strings
    )

__all__ = ["UTF8SafeModel", "EmailStr", "Field"]
# Fin del archivo base_models.py
