"""
pytest configuration and fixtures for the credenciales API suite
In-memory stand-in for the asyncpg pool plus an in-process HTTP client
"""

import pytest
import pytest_asyncio
import httpx

from app import create_app
from database import connection
from services import credenciales_service as svc


class FakeConnection:
    """Connection that understands the statements issued by CredencialesService"""

    def __init__(self, pool):
        self.pool = pool

    def _check(self, query):
        self.pool.statements.append(query)
        if self.pool.fail_with is not None:
            raise self.pool.fail_with

    def _rows(self, field=None, value=None):
        rows = self.pool.rows
        if field is not None:
            rows = [row for row in rows if row[field] == value]
        return [dict(row) for row in rows]

    async def fetch(self, query, *params):
        self._check(query)
        if query == svc.SELECT_ALL_SQL:
            return self._rows()
        if query == svc.SELECT_BY_ID_SQL:
            return self._rows("id", params[0])
        if query == svc.SELECT_BY_CURP_SQL:
            return self._rows("curp", params[0])
        raise AssertionError(f"Unexpected query: {query}")

    async def fetchrow(self, query, *params):
        rows = await self.fetch(query, *params)
        return rows[0] if rows else None

    async def fetchval(self, query, *params):
        self._check(query)
        return 1

    async def execute(self, query, *params):
        self._check(query)
        if query == svc.INSERT_SQL:
            row_id, clave_ine, curp, id_persona = params
            if any(row["id"] == row_id for row in self.pool.rows):
                raise RuntimeError("duplicate key value violates unique constraint")
            self.pool.rows.append(
                {"id": row_id, "clave_ine": clave_ine, "curp": curp, "IDpersona": id_persona}
            )
            return "INSERT 0 1"
        if query == svc.UPDATE_SQL:
            clave_ine, curp, id_persona, row_id = params
            if self.pool.delete_before_update:
                # Concurrent delete landing between the SELECT and the UPDATE
                self.pool.rows[:] = [row for row in self.pool.rows if row["id"] != row_id]
            updated = 0
            for row in self.pool.rows:
                if row["id"] == row_id:
                    row.update(clave_ine=clave_ine, curp=curp, IDpersona=id_persona)
                    updated += 1
            return f"UPDATE {updated}"
        if query in (svc.DELETE_BY_ID_SQL, svc.DELETE_BY_CURP_SQL):
            field = "id" if query == svc.DELETE_BY_ID_SQL else "curp"
            before = len(self.pool.rows)
            self.pool.rows[:] = [row for row in self.pool.rows if row[field] != params[0]]
            return f"DELETE {before - len(self.pool.rows)}"
        raise AssertionError(f"Unexpected statement: {query}")


class _Acquire:
    def __init__(self, pool):
        self.pool = pool

    async def __aenter__(self):
        self.pool.acquired += 1
        return FakeConnection(self.pool)

    async def __aexit__(self, exc_type, exc, tb):
        self.pool.released += 1
        return False


class FakePool:
    """Tracks acquire/release pairs so tests can assert connections are returned"""

    def __init__(self):
        self.rows = []
        self.statements = []
        self.fail_with = None
        self.delete_before_update = False
        self.acquired = 0
        self.released = 0
        self.closed = False

    def acquire(self):
        return _Acquire(self)

    async def close(self):
        self.closed = True

    def seed(self, **row):
        self.rows.append(dict(row))


@pytest.fixture
def fake_pool(monkeypatch):
    pool = FakePool()
    monkeypatch.setattr(connection, "db_pool", pool)
    return pool


@pytest_asyncio.fixture
async def client(fake_pool):
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
