# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para UserHub.

- PYTHON_ENV=test y DB en memoria (sqlite+aiosqlite) ANTES de importar `app`
- Engine/sesión async por test con el esquema creado desde los modelos
- Fábricas de usuarios y tokens JWT
- App FastAPI y cliente httpx con ciclo de vida (asgi-lifespan)
"""

import os
import sys
import pathlib
import uuid
from collections.abc import AsyncIterator

# -----------------------------------------------------------------------------
# 0) Variables mínimas de entorno (antes de cualquier import de `app`)
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")

# -----------------------------------------------------------------------------
# 1) Asegura .../backend en sys.path
# -----------------------------------------------------------------------------
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.database.base import Base
from app.modules.users.models import Profile, User
from app.modules.auth import create_access_token


# -----------------------------------------------------------------------------
# 2) Base de datos (sqlite en memoria, esquema desde los modelos)
# -----------------------------------------------------------------------------
@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession, autoflush=False)


@pytest.fixture
async def db(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_user(session_factory):
    """
    Crea y persiste un User (con Profile opcional) en una sesión propia.
    Devuelve el id para que cada test lo lea con su propia sesión.
    """

    async def _make(*, profile: dict | None = None, **fields):
        data = {
            "first_name": "Jane",
            "last_name": "Doe",
            "email": f"jane.{uuid.uuid4().hex[:12]}@example.com",
        }
        data.update(fields)
        async with session_factory() as session:
            user = User(**data)
            if profile is not None:
                user.profile = Profile(**profile)
            session.add(user)
            await session.commit()
            return user.id

    return _make


# -----------------------------------------------------------------------------
# 3) Auth
# -----------------------------------------------------------------------------
@pytest.fixture
def auth_headers():
    def _headers(user_id, **extra) -> dict:
        token = create_access_token(str(user_id), **extra)
        return {"Authorization": f"Bearer {token}"}

    return _headers


# -----------------------------------------------------------------------------
# 4) App FastAPI y cliente httpx (con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture
def app(session_factory):
    """
    App principal con get_db apuntando a la base de pruebas.
    """
    from app.main import app as fastapi_app
    from app.shared.database import get_db

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _get_test_db
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport
    y gestión de startup/shutdown mediante asgi-lifespan.
    """
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
