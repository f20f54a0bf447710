"""Helpers shared by the routers: status mapping, caller identity, response headers."""
from __future__ import annotations
from typing import Iterable, List, Optional

from fastapi import Depends, Header, HTTPException, Response, status

from qaboard.application.auth_app_service import AuthAppService
from qaboard.container import get_auth_app_service, get_settings
from qaboard.core.config import Settings
from qaboard.domain.common.result import CONFLICT, INVALID, NOT_FOUND, UNAUTHORIZED, Result

STORAGE_HEADER = "X-Storage-Backend"

_STATUS_BY_KIND = {
    INVALID: status.HTTP_400_BAD_REQUEST,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CONFLICT: status.HTTP_409_CONFLICT,
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


def raise_for_failure(result: Result) -> None:
    if result.is_success:
        return
    code = _STATUS_BY_KIND.get(result.kind, status.HTTP_400_BAD_REQUEST)
    raise HTTPException(status_code=code, detail=result.error)


def no_store(response: Response) -> None:
    response.headers["Cache-Control"] = "no-store"


def mark_storage(response: Response, served_by: Iterable[str]) -> None:
    """Tell the caller which backend(s) served the request, e.g. 's3' or 's3,local'."""
    labels: List[str] = []
    for label in served_by:
        if label not in labels:
            labels.append(label)
    if labels:
        response.headers[STORAGE_HEADER] = ",".join(labels)


def caller_identity(
    x_user: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
    auth: AuthAppService = Depends(get_auth_app_service),
) -> Optional[str]:
    """
    The X-User header, trimmed. When REQUIRE_AUTH is on the header must name a
    registered user and the stored spelling of the username is returned.
    """
    caller = (x_user or "").strip()
    if not settings.require_auth:
        return caller or None
    if not caller:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="login required")
    user = auth.find_user(caller)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="login required")
    return user.username
