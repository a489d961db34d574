"""
Credential-related Pydantic models
"""

from typing import Any, Optional
from pydantic import BaseModel


class CredencialCreateRequest(BaseModel):
    # Any JSON value is accepted; the route only checks presence/truthiness
    clave_ine: Optional[Any] = None
    curp: Optional[Any] = None
    IDpersona: Optional[Any] = None


class CredencialUpdateRequest(BaseModel):
    clave_ine: Optional[Any] = None
    curp: Optional[Any] = None
    IDpersona: Optional[Any] = None


class CredencialResponse(BaseModel):
    id: str
    clave_ine: str
    curp: str
    IDpersona: str


class MessageResponse(BaseModel):
    message: str
