"""Liveness endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from qaboard.container import get_store
from qaboard.domain.common.ids import now_iso
from qaboard.persistence.interfaces.document_store import DocumentStore

router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz(store: DocumentStore = Depends(get_store)):
    # does not touch storage; reports the configured target only
    return {"ok": True, "time": now_iso(), "storage": store.describe()}
