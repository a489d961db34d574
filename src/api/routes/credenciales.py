"""
Credential record API routes
Each route performs one service call; all SQL lives in the service layer.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException

from models.credencial import (
    CredencialCreateRequest,
    CredencialUpdateRequest,
    CredencialResponse,
    MessageResponse,
)
from services.credenciales_service import get_credenciales_service, ServiceResult, NOT_FOUND

router = APIRouter()
logger = logging.getLogger(__name__)

ID_NOT_FOUND = "No se encontró la credencial con ese id"
CURP_NOT_FOUND = "No se encontró la credencial con esa CURP"
MISSING_FIELDS = "Faltan datos requeridos: clave_ine, curp, IDpersona"


def _raise_for_failure(result: ServiceResult, not_found_detail: Optional[str] = None):
    if result.success:
        return
    if result.error_type == NOT_FOUND and not_found_detail:
        raise HTTPException(status_code=404, detail=not_found_detail)
    raise HTTPException(status_code=500, detail=result.error)


@router.get("", response_model=List[CredencialResponse])
async def list_credenciales():
    """List every credential record"""
    result = await get_credenciales_service().list_credenciales()
    _raise_for_failure(result)
    return result.data


@router.get("/id/{credencial_id}", response_model=CredencialResponse)
async def get_credencial_by_id(credencial_id: str):
    """Get a single credential record by id"""
    result = await get_credenciales_service().get_by_id(credencial_id)
    _raise_for_failure(result, ID_NOT_FOUND)

    if not result.data:
        raise HTTPException(status_code=404, detail=ID_NOT_FOUND)
    return result.data[0]


@router.get("/curp/{curp}", response_model=List[CredencialResponse])
async def get_credenciales_by_curp(curp: str):
    """Get all credential records for a CURP, always as a list"""
    result = await get_credenciales_service().get_by_curp(curp)
    _raise_for_failure(result, CURP_NOT_FOUND)

    if not result.data:
        raise HTTPException(status_code=404, detail=CURP_NOT_FOUND)
    return result.data


@router.post("", response_model=CredencialResponse, status_code=201)
async def create_credencial(request: Optional[CredencialCreateRequest] = None):
    """Create a credential record"""
    request = request or CredencialCreateRequest()
    if not request.clave_ine or not request.curp or not request.IDpersona:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    result = await get_credenciales_service().create_credencial(
        clave_ine=request.clave_ine,
        curp=request.curp,
        id_persona=request.IDpersona
    )
    _raise_for_failure(result)
    return result.data[0]


@router.put("/{credencial_id}", response_model=CredencialResponse)
async def update_credencial(
    credencial_id: str,
    request: Optional[CredencialUpdateRequest] = None
):
    """Update a credential record, keeping stored values for omitted fields"""
    request = request or CredencialUpdateRequest()

    result = await get_credenciales_service().update_credencial(
        credencial_id,
        clave_ine=request.clave_ine,
        curp=request.curp,
        id_persona=request.IDpersona
    )
    _raise_for_failure(result, ID_NOT_FOUND)
    return result.data[0]


@router.delete("/curp/{curp}", response_model=MessageResponse)
async def delete_credenciales_by_curp(curp: str):
    """Delete every credential record for a CURP"""
    result = await get_credenciales_service().delete_by_curp(curp)
    _raise_for_failure(result, CURP_NOT_FOUND)
    return {"message": "Registro eliminado correctamente por CURP"}


@router.delete("/{credencial_id}", response_model=MessageResponse)
async def delete_credencial(credencial_id: str):
    """Delete a credential record by id"""
    result = await get_credenciales_service().delete_by_id(credencial_id)
    _raise_for_failure(result, ID_NOT_FOUND)
    return {"message": "Registro eliminado correctamente"}
