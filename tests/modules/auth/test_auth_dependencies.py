# -*- coding: utf-8 -*-
"""
Tests para la dependencia de autenticación JWT.

Cubre:
- Sin header / token inválido / token expirado -> 401 con sobre JSON
- Claim user_id (o sub como fallback) -> AuthenticatedUser.id
- El id se transporta sin validar su formato
"""

from datetime import timedelta

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from jose import jwt

from app.modules.auth import AuthenticatedUser, create_access_token, decode_access_token, get_current_user
from app.modules.auth.security import TokenDecodeError
from app.shared.config import settings
from app.shared.middleware import register_exception_handlers


@pytest.fixture
def app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/whoami")
    async def whoami(user: AuthenticatedUser = Depends(get_current_user)):
        return {"id": user.id, "email": user.email}

    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def _raw_token(claims: dict) -> str:
    return jwt.encode(claims, settings.jwt_secret_key.get_secret_value(), algorithm=settings.jwt_algorithm)


# ==================== 401 ====================

def test_missing_token_is_401(client):
    response = client.get("/whoami")

    assert response.status_code == 401
    body = response.json()
    assert body["status"] == "unsuccessful"
    assert body["message"] == "Access token is missing"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_garbage_token_is_401(client):
    response = client.get("/whoami", headers={"Authorization": "Bearer not.a.jwt"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_expired_token_is_401(client):
    token = create_access_token("u-1", expires_delta=timedelta(seconds=-5))

    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_signed_with_other_key_is_401(client):
    token = jwt.encode({"user_id": "u-1"}, "another-secret", algorithm="HS256")

    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


# ==================== identidad ====================

def test_user_id_claim_becomes_identity(client):
    token = create_access_token("3f0c7c1e-0000-4000-8000-000000000001", email="jane@example.com")

    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == {"id": "3f0c7c1e-0000-4000-8000-000000000001", "email": "jane@example.com"}


def test_sub_is_used_when_user_id_is_absent(client):
    token = _raw_token({"sub": "from-sub"})

    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.json()["id"] == "from-sub"


def test_id_format_is_not_validated(client):
    token = _raw_token({"user_id": "not-a-uuid"})

    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["id"] == "not-a-uuid"


def test_token_without_id_yields_empty_identity(client):
    token = _raw_token({"email": "jane@example.com"})

    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["id"] is None


def test_decode_roundtrip_and_error():
    claims = decode_access_token(create_access_token("abc", role="admin"))

    assert claims["user_id"] == "abc"
    assert claims["sub"] == "abc"
    assert claims["role"] == "admin"

    with pytest.raises(TokenDecodeError):
        decode_access_token("nope")
