"""Flat answer listing with an optional question filter."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from qaboard.api.common import mark_storage, no_store
from qaboard.api.questions import serialize_answer
from qaboard.application.forum_app_service import ForumAppService
from qaboard.container import get_forum_app_service

router = APIRouter(tags=["answers"], dependencies=[Depends(no_store)])


@router.get("/answers")
def list_answers(
    response: Response,
    questionId: Optional[str] = Query(default=None),
    qid: Optional[str] = Query(default=None),
    question_id: Optional[str] = Query(default=None),
    svc: ForumAppService = Depends(get_forum_app_service),
):
    """Accepts ?questionId=, ?qid= or ?question_id=; the first non-empty one wins."""
    wanted = next((v for v in (questionId, qid, question_id) if v and v.strip()), None)
    answers = svc.list_answers(wanted)
    mark_storage(response, svc.served_by)
    return [serialize_answer(a) for a in answers]
