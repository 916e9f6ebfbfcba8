# -*- coding: utf-8 -*-
import pytest

from app.shared.database import check_database_health, get_async_session
from app.shared.database.database import build_engine


@pytest.mark.asyncio
async def test_health_check_ok_on_sqlite():
    assert await check_database_health(timeout_s=2.0) is True


@pytest.mark.asyncio
async def test_health_check_reports_bad_sql():
    assert await check_database_health(timeout_s=2.0, sql="SELECT * FROM no_such_table") is False


@pytest.mark.asyncio
async def test_get_async_session_yields_session():
    gen = get_async_session()
    session = await gen.__anext__()
    try:
        assert session.is_active
    finally:
        await gen.aclose()


def test_build_engine_keeps_sqlite_defaults():
    engine = build_engine("sqlite+aiosqlite:///:memory:", echo=False)

    assert engine.url.drivername == "sqlite+aiosqlite"
    assert engine.echo is False
