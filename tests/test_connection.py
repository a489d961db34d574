"""
Connection pool lifecycle tests
"""

import pytest

from app import create_app
from config.settings import DatabaseSettings
from database import connection

SETTINGS = DatabaseSettings(
    user="app", database="credenciales", password="pw",
    host="db", port=5433, min_pool_size=1, max_pool_size=3
)


@pytest.fixture
def created_pools(monkeypatch, fake_pool):
    calls = []

    async def fake_create_pool(**kwargs):
        calls.append(kwargs)
        return fake_pool

    monkeypatch.setattr(connection, "db_pool", None)
    monkeypatch.setattr(connection.asyncpg, "create_pool", fake_create_pool)
    return calls


class TestPoolLifecycle:

    @pytest.mark.asyncio
    async def test_init_passes_settings_to_pool(self, created_pools, fake_pool):
        await connection.init_database(SETTINGS)

        assert created_pools == [{
            "host": "db", "port": 5433, "user": "app", "password": "pw",
            "database": "credenciales", "min_size": 1, "max_size": 3,
        }]
        assert connection.get_db_pool() is fake_pool
        assert fake_pool.statements == ["SELECT 1"]
        assert fake_pool.acquired == fake_pool.released == 1

    @pytest.mark.asyncio
    async def test_close_releases_pool(self, created_pools, fake_pool):
        await connection.init_database(SETTINGS)
        await connection.close_database()

        assert fake_pool.closed
        assert connection.get_db_pool() is None

    @pytest.mark.asyncio
    async def test_close_without_pool_is_noop(self, monkeypatch):
        monkeypatch.setattr(connection, "db_pool", None)

        await connection.close_database()

        assert connection.get_db_pool() is None

    @pytest.mark.asyncio
    async def test_app_lifespan_opens_and_closes_pool(self, created_pools, fake_pool):
        app = create_app(SETTINGS)

        async with app.router.lifespan_context(app):
            assert connection.get_db_pool() is fake_pool

        assert fake_pool.closed
        assert created_pools[0]["host"] == "db"
