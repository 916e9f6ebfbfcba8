# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/validators.py

Validadores comunes para la aplicación UserHub.

Incluye validación de:
- UUIDs (identificadores de usuario)
- Teléfono
- Username

Autor: UserHub
Fecha: 2026-09-02
"""

import re
from typing import Any
from uuid import UUID

# Forma canónica 8-4-4-4-12 con versión 1-8 y variante RFC 4122 (8, 9, a, b);
# no aceptamos llaves ni formato "hex"
_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_NIL_UUID = "00000000-0000-0000-0000-000000000000"
_MAX_UUID = "ffffffff-ffff-ffff-ffff-ffffffffffff"
_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,50}$")


def is_valid_uuid(value: Any) -> bool:
    """
    Indica si `value` es un UUID sintácticamente válido.

    Acepta instancias de UUID y strings en forma canónica con guiones,
    versión 1-8 y variante RFC 4122. El UUID nil y el máximo también valen.
    Cualquier otro tipo (None, int, dict...) es inválido.
    """
    if isinstance(value, UUID):
        value = str(value)
    if not isinstance(value, str):
        return False
    candidate = value.strip()
    if candidate.lower() in (_NIL_UUID, _MAX_UUID):
        return True
    if not _UUID_PATTERN.match(candidate):
        return False
    try:
        UUID(candidate)
    except ValueError:
        return False
    return True


def validate_phone(phone: str) -> bool:
    """
    Valida formato de teléfono internacional básico.
    Permite: dígitos, +, (), espacios, guiones
    Longitud: 7-20 caracteres
    """
    if not phone or not isinstance(phone, str):
        return False

    pattern = r'^[0-9+() -]{7,20}$'
    return bool(re.match(pattern, phone.strip()))


def validate_username(username: str) -> bool:
    """Letras, dígitos, '_', '.', '-' entre 3 y 50 caracteres."""
    if not username or not isinstance(username, str):
        return False
    return bool(_USERNAME_PATTERN.match(username.strip()))


__all__ = ["is_valid_uuid", "validate_phone", "validate_username"]
