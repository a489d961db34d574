"""
Credenciales service - data access for identity-credential records
"""

import json
import logging
import uuid
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from database.connection import get_db_pool

logger = logging.getLogger(__name__)

COLUMNS = 'id, clave_ine, curp, "IDpersona"'

SELECT_ALL_SQL = f"SELECT {COLUMNS} FROM credenciales"
SELECT_BY_ID_SQL = f"SELECT {COLUMNS} FROM credenciales WHERE id = $1"
SELECT_BY_CURP_SQL = f"SELECT {COLUMNS} FROM credenciales WHERE curp = $1"
INSERT_SQL = 'INSERT INTO credenciales (id, clave_ine, curp, "IDpersona") VALUES ($1, $2, $3, $4)'
UPDATE_SQL = 'UPDATE credenciales SET clave_ine = $1, curp = $2, "IDpersona" = $3 WHERE id = $4'
DELETE_BY_ID_SQL = "DELETE FROM credenciales WHERE id = $1"
DELETE_BY_CURP_SQL = "DELETE FROM credenciales WHERE curp = $1"

NOT_FOUND = "NOT_FOUND"
DATABASE_ERROR = "DATABASE_ERROR"


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


def _affected_rows(status: str) -> int:
    # asyncpg returns "DELETE N" where N is the number of rows
    return int(status.split()[-1]) if status else 0


def _as_text(value: Any) -> str:
    # Non-string JSON values (numbers, booleans) are stored as their JSON text
    return value if isinstance(value, str) else json.dumps(value)


def _merge(value: Any, stored: str) -> str:
    return _as_text(value) if value else stored


class CredencialesService:
    """Service for credential record operations"""

    def _acquire(self):
        db_pool = get_db_pool()
        if not db_pool:
            raise RuntimeError("Database pool not initialized")
        return db_pool.acquire()

    async def _fetch(self, query: str, *params) -> ServiceResult:
        try:
            async with self._acquire() as conn:
                rows = await conn.fetch(query, *params)
        except Exception as e:
            logger.error(f"Read failed for credenciales: {e}")
            return ServiceResult(success=False, error=str(e), error_type=DATABASE_ERROR)

        data = [dict(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def _delete(self, query: str, value: str) -> ServiceResult:
        try:
            async with self._acquire() as conn:
                status = await conn.execute(query, value)
        except Exception as e:
            logger.error(f"Delete failed for credenciales: {e}")
            return ServiceResult(success=False, error=str(e), error_type=DATABASE_ERROR)

        deleted = _affected_rows(status)
        if deleted == 0:
            return ServiceResult(success=False, error_type=NOT_FOUND)
        return ServiceResult(success=True, count=deleted)

    async def list_credenciales(self) -> ServiceResult:
        """Get every credential record"""
        return await self._fetch(SELECT_ALL_SQL)

    async def get_by_id(self, credencial_id: str) -> ServiceResult:
        """Get the credential record with the given id (zero or one row)"""
        return await self._fetch(SELECT_BY_ID_SQL, credencial_id)

    async def get_by_curp(self, curp: str) -> ServiceResult:
        """Get all credential records sharing a CURP"""
        return await self._fetch(SELECT_BY_CURP_SQL, curp)

    async def create_credencial(
        self,
        clave_ine: Any,
        curp: Any,
        id_persona: Any
    ) -> ServiceResult:
        """
        Create a new credential record with a server-generated id

        Args:
            clave_ine: Voter credential key
            curp: National identity code
            id_persona: Reference to the external person entity

        Returns:
            ServiceResult with the created record
        """
        record = {
            "id": str(uuid.uuid4()),
            "clave_ine": _as_text(clave_ine),
            "curp": _as_text(curp),
            "IDpersona": _as_text(id_persona),
        }

        logger.info(f"Creating credencial {record['id']}")
        try:
            async with self._acquire() as conn:
                await conn.execute(
                    INSERT_SQL,
                    record["id"], record["clave_ine"], record["curp"], record["IDpersona"]
                )
        except Exception as e:
            logger.error(f"Create failed for credenciales: {e}")
            return ServiceResult(success=False, error=str(e), error_type=DATABASE_ERROR)

        return ServiceResult(success=True, data=[record], count=1)

    async def update_credencial(
        self,
        credencial_id: str,
        clave_ine: Any = None,
        curp: Any = None,
        id_persona: Any = None
    ) -> ServiceResult:
        """
        Merge new values into an existing credential record

        Any falsy value (None, "", 0) keeps the stored value. All three
        columns are written in a single UPDATE, whether they changed or not.

        Returns:
            ServiceResult with the merged record, or NOT_FOUND
        """
        try:
            async with self._acquire() as conn:
                existing = await conn.fetchrow(SELECT_BY_ID_SQL, credencial_id)
                if existing is None:
                    return ServiceResult(success=False, error_type=NOT_FOUND)

                merged = {
                    "id": credencial_id,
                    "clave_ine": _merge(clave_ine, existing["clave_ine"]),
                    "curp": _merge(curp, existing["curp"]),
                    "IDpersona": _merge(id_persona, existing["IDpersona"]),
                }

                logger.info(f"Updating credencial {credencial_id}")
                await conn.execute(
                    UPDATE_SQL,
                    merged["clave_ine"], merged["curp"], merged["IDpersona"], credencial_id
                )
        except Exception as e:
            logger.error(f"Update failed for credenciales: {e}")
            return ServiceResult(success=False, error=str(e), error_type=DATABASE_ERROR)

        return ServiceResult(success=True, data=[merged], count=1)

    async def delete_by_id(self, credencial_id: str) -> ServiceResult:
        """Delete the credential record with the given id"""
        logger.info(f"Deleting credencial {credencial_id}")
        return await self._delete(DELETE_BY_ID_SQL, credencial_id)

    async def delete_by_curp(self, curp: str) -> ServiceResult:
        """Delete every credential record sharing a CURP"""
        logger.info(f"Deleting credenciales for CURP {curp}")
        return await self._delete(DELETE_BY_CURP_SQL, curp)


# Global service instance
_credenciales_service = None

def get_credenciales_service() -> CredencialesService:
    """Get the global credenciales service instance"""
    global _credenciales_service
    if _credenciales_service is None:
        _credenciales_service = CredencialesService()
    return _credenciales_service
