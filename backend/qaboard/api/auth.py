"""Auth API: signup and login against the users document."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Body, Depends, Response
from pydantic import BaseModel

from qaboard.api.common import mark_storage, raise_for_failure
from qaboard.application.auth_app_service import AuthAppService
from qaboard.container import get_auth_app_service

router = APIRouter(prefix="/auth", tags=["auth"])


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class CredentialsRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------
@router.post("/signup")
def signup(
    response: Response,
    body: Optional[CredentialsRequest] = Body(default=None),
    svc: AuthAppService = Depends(get_auth_app_service),
):
    body = body or CredentialsRequest()
    result = svc.signup(body.username or "", body.password or "")
    raise_for_failure(result)
    mark_storage(response, svc.served_by)
    return {"ok": True}


@router.post("/login")
def login(
    response: Response,
    body: Optional[CredentialsRequest] = Body(default=None),
    svc: AuthAppService = Depends(get_auth_app_service),
):
    body = body or CredentialsRequest()
    result = svc.login(body.username or "", body.password or "")
    raise_for_failure(result)
    mark_storage(response, svc.served_by)
    return {"ok": True, "user": result.value.username}
