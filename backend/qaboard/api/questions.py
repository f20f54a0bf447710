"""Question and per-question answer endpoints."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from pydantic import BaseModel

from qaboard.api.common import caller_identity, mark_storage, no_store, raise_for_failure
from qaboard.application.forum_app_service import ForumAppService
from qaboard.container import get_forum_app_service
from qaboard.domain.forum.models import Answer, Question, QuestionDetail, QuestionSummary

router = APIRouter(tags=["questions"], dependencies=[Depends(no_store)])


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class QuestionBody(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None


class AnswerBody(BaseModel):
    body: Optional[str] = None


# ------------------------------------------------------------------
# Serializers
# ------------------------------------------------------------------
def serialize_question(q: Question) -> dict:
    return {
        "questionId": q.question_id,
        "title": q.title,
        "body": q.body,
        "author": q.author,
        "createdAt": q.created_at,
        "topics": q.topics,
        "locations": q.locations,
    }


def serialize_summary(s: QuestionSummary) -> dict:
    data = serialize_question(s.question)
    data["answersCount"] = s.answers_count
    return data


def serialize_answer(a: Answer) -> dict:
    return {
        "answerId": a.answer_id,
        "questionId": a.question_id,
        "body": a.body,
        "author": a.author,
        "createdAt": a.created_at,
    }


def serialize_detail(d: QuestionDetail) -> dict:
    data = serialize_question(d.question)
    data["answers"] = [serialize_answer(a) for a in d.answers]
    return data


# ------------------------------------------------------------------
# Listing
# ------------------------------------------------------------------
@router.get("/questions")
def list_questions(response: Response, svc: ForumAppService = Depends(get_forum_app_service)):
    summaries = svc.list_questions()
    mark_storage(response, svc.served_by)
    return [serialize_summary(s) for s in summaries]


@router.get("/search")
def search_questions(
    response: Response,
    q: Optional[str] = Query(default=None),
    svc: ForumAppService = Depends(get_forum_app_service),
):
    summaries = svc.search_questions(q)
    mark_storage(response, svc.served_by)
    return [serialize_summary(s) for s in summaries]


# ------------------------------------------------------------------
# Create
# ------------------------------------------------------------------
@router.post("/questions")
def create_question(
    response: Response,
    payload: Optional[QuestionBody] = Body(default=None),
    author: Optional[str] = Depends(caller_identity),
    svc: ForumAppService = Depends(get_forum_app_service),
):
    data = payload.model_dump() if payload else {}
    result = svc.create_question(author, data)
    raise_for_failure(result)
    mark_storage(response, svc.served_by)
    return {"status": "ok", "questionId": result.value.question_id}


@router.post("/questions/{qid}/answers")
def create_answer(
    qid: str,
    response: Response,
    payload: Optional[AnswerBody] = Body(default=None),
    author: Optional[str] = Depends(caller_identity),
    svc: ForumAppService = Depends(get_forum_app_service),
):
    data = payload.model_dump() if payload else {}
    result = svc.create_answer(qid, author, data)
    raise_for_failure(result)
    mark_storage(response, svc.served_by)
    return {"answerId": result.value.answer_id}


# ------------------------------------------------------------------
# Detail
# ------------------------------------------------------------------
@router.get("/questions/{qid}")
def get_question(qid: str, response: Response, svc: ForumAppService = Depends(get_forum_app_service)):
    result = svc.get_question(qid)
    raise_for_failure(result)
    mark_storage(response, svc.served_by)
    return serialize_detail(result.value)


@router.get("/questions/{qid}/answers")
def list_question_answers(qid: str, response: Response, svc: ForumAppService = Depends(get_forum_app_service)):
    answers = svc.answers_for_question(qid)
    mark_storage(response, svc.served_by)
    return [serialize_answer(a) for a in answers]
