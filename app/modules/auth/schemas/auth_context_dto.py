# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/auth_context_dto.py

DTO mínimo para la identidad autenticada que las dependencias
adjuntan a cada request.

Autor: UserHub
Fecha: 2026-09-02
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    """
    Identidad del llamador tal como viene en el token.

    `id` se transporta sin validar (puede faltar o no ser UUID);
    los handlers deciden cómo responder.
    """
    id: Optional[str]
    email: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "AuthenticatedUser":
        """
        Construye la identidad desde los claims del JWT.

        `user_id` es el claim principal; `sub` es el fallback estándar.
        """
        raw_id = claims.get("user_id")
        if raw_id is None:
            raw_id = claims.get("sub")
        user_id = str(raw_id).strip() if raw_id is not None else None
        return cls(id=user_id or None, email=claims.get("email"))


__all__ = ["AuthenticatedUser"]
